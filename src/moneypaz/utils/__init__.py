"""Utility functions for moneypaz."""

from moneypaz.utils.amount_parser import parse_amount

__all__ = ["parse_amount"]
