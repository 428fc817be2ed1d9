"""
Configuration management CLI commands.

Commands for storing the API token, default team and API URL used by every
other command.
"""

from typing import Optional

import click
from tabulate import tabulate

from vercel_cli.api.vercel_client import DEFAULT_BASE_URL
from vercel_cli.cli.commands.common import get_config_store
from vercel_cli.cli.display import mask_token
from vercel_cli.cli.formatters import OutputFormatter


@click.group(name="config")
def config_group():
    """Manage CLI configuration."""
    pass


@config_group.command("set")
@click.option("--token", help="Vercel API token")
@click.option("--team", help="Default team ID")
@click.option("--base-url", help="API base URL (for proxies or testing)")
@click.pass_context
def set_config(
    ctx: click.Context,
    token: Optional[str],
    team: Optional[str],
    base_url: Optional[str],
):
    """Set configuration values."""
    store = get_config_store(ctx)
    formatter = OutputFormatter(quiet=ctx.obj.get("quiet", False))

    if not (token or team or base_url):
        raise click.UsageError("No options provided. Use --token, --team or --base-url")

    try:
        if token:
            store.set("api_key", token)
            formatter.success("API token set")
        if team:
            store.set("team_id", team)
            formatter.success("Team ID set")
        if base_url:
            store.set("base_url", base_url)
            formatter.success("Base URL set")
    except Exception as e:
        raise click.ClickException(f"Error saving configuration: {e}") from e


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def show_config(ctx: click.Context, as_json: bool):
    """Show current configuration."""
    store = get_config_store(ctx)

    try:
        config = store.load()
    except Exception as e:
        raise click.ClickException(f"Error reading configuration: {e}") from e

    api_key = mask_token(config.api_key) if config.api_key else None

    if as_json:
        OutputFormatter("json").output_json(
            {
                "api_key": api_key,
                "team_id": config.team_id,
                "base_url": config.base_url or DEFAULT_BASE_URL,
                "config_path": str(store.path),
            }
        )
        return

    rows = [
        ["API Token:", api_key or "not set"],
        ["Team ID:", config.team_id or "not set (using personal account)"],
        ["Base URL:", config.base_url or DEFAULT_BASE_URL],
        ["Config File:", str(store.path)],
    ]
    formatter = OutputFormatter(quiet=ctx.obj.get("quiet", False))
    formatter.title("Vercel CLI Configuration")
    formatter.line(tabulate(rows, tablefmt="plain"))
    formatter.line()


@config_group.command("clear")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear_config(ctx: click.Context, yes: bool):
    """Remove all stored configuration."""
    store = get_config_store(ctx)

    if not yes and not click.confirm(f"Remove configuration file {store.path}?"):
        click.echo("Configuration left unchanged")
        return

    try:
        store.clear()
    except OSError as e:
        raise click.ClickException(f"Error removing configuration: {e}") from e

    OutputFormatter(quiet=ctx.obj.get("quiet", False)).success("Configuration cleared")
