"""Main CLI entry point."""

import logging

import click
from moneypaz.domain.finance import FinanceService
from moneypaz.storage.factories import create_sqlite_store

# Import and register all commands at module level
from moneypaz.cli.commands import (
    setup,
    add,
    view,
    summary,
    recurring,
    suggest,
    category,
    export,
    reset,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides MONEYPAZ_DB_PATH environment variable)",
    envvar="MONEYPAZ_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Moneypaz - Personal finance tracking.

    Record income and expenses, mark recurring bills and see where the
    month's money is going.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None and "service" not in ctx.obj:
        store = create_sqlite_store(database_path=db_path)
        ctx.call_on_close(store.close)
        ctx.obj["service"] = FinanceService(store)


# Register all commands
setup.register_commands(cli)
add.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
recurring.register_commands(cli)
suggest.register_commands(cli)
category.register_commands(cli)
export.register_commands(cli)
reset.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
