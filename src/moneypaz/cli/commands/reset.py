"""Reset and maintenance commands."""

import click


@click.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def reset(ctx, yes: bool):
    """Delete every movement, category and setting."""
    service = ctx.obj["service"]
    if not yes and not click.confirm("This deletes all your data. Continue?"):
        click.echo("Reset cancelled.")
        return

    service.reset_all()
    click.echo("All data deleted. Run 'moneypaz setup AMOUNT' to start again.")


@click.command("migrate")
@click.pass_context
def migrate(ctx):
    """Rewrite the stored state with the current schema version."""
    service = ctx.obj["service"]
    if not service.container.save():
        click.echo("Error: Could not save migrated state", err=True)
        ctx.exit(1)
    click.echo(f"Stored state is up to date ({len(service.movements)} movement(s)).")


def register_commands(cli):
    """Register reset commands with main CLI."""
    cli.add_command(reset)
    cli.add_command(migrate)
