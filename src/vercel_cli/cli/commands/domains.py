"""Domain-related CLI commands."""

from typing import Optional

import click
from rich.text import Text

from vercel_cli.api.envelopes import unwrap
from vercel_cli.cli.commands.common import (
    call_api,
    get_formatter,
    get_vercel_client,
    require_auth,
    team_params,
)
from vercel_cli.cli.display import format_day, verified_mark
from vercel_cli.cli.formatters import Column

DOMAIN_COLUMNS = [
    Column("name", "Domain", lambda v, _: Text(v or "", style="cyan")),
    Column("verified", "Verified", lambda v, _: verified_mark(v)),
    Column("createdAt", "Created", lambda v, _: format_day(v)),
]


@click.group(name="domains")
def domains_group():
    """Manage domains."""
    pass


@domains_group.command("list")
@click.option("--limit", type=int, default=20, show_default=True, help="Number of results to return")
@click.option("--team", help="Team ID (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_domains(ctx: click.Context, limit: int, team: Optional[str], as_json: bool):
    """List domains."""
    require_auth(ctx)
    formatter = get_formatter(ctx, as_json)
    client = get_vercel_client(ctx)

    data = call_api(
        "Fetching domains...", client.list_domains, team_params(ctx, team, limit=limit)
    )

    if formatter.is_json:
        formatter.output_json(data)
        return

    formatter.title("Domains")
    formatter.table(unwrap(data, "domains").records, DOMAIN_COLUMNS)
