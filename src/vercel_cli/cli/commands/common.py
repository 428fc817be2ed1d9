"""Shared helpers for CLI command modules."""

from typing import Any, Callable, Dict, Mapping, Optional

import click

from vercel_cli.api.vercel_client import VercelApiError, VercelRestClient
from vercel_cli.cli.formatters import OutputFormatter, create_progress
from vercel_cli.config.config import ConfigStore

TOKEN_URL = "https://vercel.com/account/tokens"


def get_config_store(ctx: click.Context) -> ConfigStore:
    return ConfigStore(ctx.obj.get("config_path"))


def get_formatter(ctx: click.Context, as_json: bool) -> OutputFormatter:
    return OutputFormatter("json" if as_json else "human", ctx.obj.get("quiet", False))


def require_auth(ctx: click.Context) -> None:
    """Exit with setup instructions unless credentials are configured."""
    store = get_config_store(ctx)
    try:
        configured = store.is_configured()
    except Exception as e:
        raise click.ClickException(f"Error loading configuration: {e}") from e

    if configured:
        return

    formatter = OutputFormatter()
    formatter.error("API token not configured.")
    click.echo("\nRun the following to configure:", err=True)
    click.echo("  vercel config set --token YOUR_TOKEN", err=True)
    click.echo(f"\nGet a token at: {TOKEN_URL}", err=True)
    ctx.exit(1)


def as_record(value: Any) -> Mapping[str, Any]:
    """``value`` when it is a JSON object, otherwise an empty record."""
    return value if isinstance(value, Mapping) else {}


def get_vercel_client(ctx: click.Context) -> VercelRestClient:
    """Get a Vercel client reading settings from the active configuration file."""
    return VercelRestClient(get_config_store(ctx))


def team_params(ctx: click.Context, team: Optional[str], **extra: Any) -> Dict[str, Any]:
    """Query parameters with ``teamId`` from ``--team`` or the configured team."""
    params: Dict[str, Any] = {"teamId": team or get_config_store(ctx).get("team_id")}
    params.update(extra)
    return {k: v for k, v in params.items() if v is not None}


def call_api(description: str, call: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run one API call behind a spinner, surfacing API failures as CLI errors."""
    with create_progress() as progress:
        task = progress.add_task(description, total=None)
        try:
            return call(*args, **kwargs)
        except VercelApiError as e:
            raise click.ClickException(e.message) from e
        finally:
            progress.remove_task(task)
