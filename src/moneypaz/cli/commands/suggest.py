"""Concept suggestion command."""

import click

from moneypaz.domain.suggestions import filter_concepts


@click.command("suggest")
@click.argument("query", required=False, default="")
@click.option("--limit", type=int, default=5, show_default=True, help="Maximum suggestions")
@click.pass_context
def suggest(ctx, query: str, limit: int):
    """Suggest concepts, your most used first."""
    service = ctx.obj["service"]
    matches = filter_concepts(service.suggested_concepts(), query, limit=limit)

    if not matches:
        click.echo("No suggestions.")
        return
    for concept in matches:
        click.echo(concept[:1].upper() + concept[1:])


def register_commands(cli):
    """Register suggest command with main CLI."""
    cli.add_command(suggest)
