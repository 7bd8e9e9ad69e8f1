"""Export commands."""

from pathlib import Path

import click

from moneypaz.domain.export import default_export_filename, export_csv, export_json


def _write_export(ctx, kind: str, content: str, output: str | None) -> None:
    service = ctx.obj["service"]
    if output == "-":
        click.echo(content, nl=False)
        return

    path = Path(output or default_export_filename(kind, service.clock()))
    # Excel needs the BOM to read the CSV as UTF-8
    encoding = "utf-8-sig" if kind == "csv" else "utf-8"
    try:
        path.write_text(content, encoding=encoding)
    except OSError as e:
        click.echo(f"Error: Could not write {path}: {e}", err=True)
        ctx.exit(1)
    click.echo(f"Exported {len(service.movements)} movement(s) to {path}")


@click.group()
def export_group():
    """Export your data."""
    pass


@export_group.command("json")
@click.option("--output", "-o", help="Output file ('-' for stdout)")
@click.pass_context
def export_json_cmd(ctx, output: str | None):
    """Export a full JSON backup."""
    service = ctx.obj["service"]
    _write_export(ctx, "json", export_json(service.state, service.clock()), output)


@export_group.command("csv")
@click.option("--output", "-o", help="Output file ('-' for stdout)")
@click.pass_context
def export_csv_cmd(ctx, output: str | None):
    """Export movements as CSV."""
    service = ctx.obj["service"]
    _write_export(ctx, "csv", export_csv(service.state), output)


def register_commands(cli):
    """Register export commands with main CLI."""
    cli.add_command(export_group, name="export")
