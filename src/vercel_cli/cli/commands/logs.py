"""
Deployment log CLI commands.

``--follow`` is forwarded to the API as a query flag; the command still performs
a single request and prints the events it returns.
"""

import json
from typing import Any, Mapping, Optional

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
from vercel_cli.cli.display import event_style, format_time

EVENT_TYPE_WIDTH = 20


def event_payload(event: Mapping[str, Any]) -> str:
    """Printable payload of an event; structured payloads show their text."""
    payload = event.get("payload") or event.get("text") or ""
    if isinstance(payload, dict):
        text = payload.get("text")
        return str(text) if text else json.dumps(payload, separators=(",", ":"))
    return str(payload)


def render_event(event: Mapping[str, Any]) -> Text:
    event_type = str(event.get("type") or event.get("name") or "unknown")
    return Text.assemble(
        (format_time(event.get("created")), "dim"),
        " ",
        (event_type.ljust(EVENT_TYPE_WIDTH), event_style(event_type)),
        " ",
        event_payload(event),
    )


@click.group(name="logs")
def logs_group():
    """Get deployment logs."""
    pass


@logs_group.command("get")
@click.argument("deployment_id", metavar="DEPLOYMENT_ID")
@click.option("--limit", type=int, default=100, show_default=True, help="Number of events to return")
@click.option("--follow", is_flag=True, help="Follow logs in real-time")
@click.option("--builds", is_flag=True, help="Include build events")
@click.option("--team", help="Team ID (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def get_logs(
    ctx: click.Context,
    deployment_id: str,
    limit: int,
    follow: bool,
    builds: bool,
    team: Optional[str],
    as_json: bool,
):
    """
    Get deployment logs and events.

    Examples:
        vercel logs get dpl_89qyp1cskzkLrVicDaZoDbjyHuDJ
        vercel logs get dpl_89qyp1cskzkLrVicDaZoDbjyHuDJ --builds --limit 500
    """
    require_auth(ctx)
    formatter = get_formatter(ctx, as_json)
    client = get_vercel_client(ctx)

    params = team_params(
        ctx,
        team,
        limit=limit,
        follow="1" if follow else None,
        builds="1" if builds else None,
    )
    data = call_api(
        f"Fetching logs for {deployment_id}...",
        client.get_deployment_events,
        deployment_id,
        params,
    )

    if formatter.is_json:
        formatter.output_json(data)
        return

    formatter.title(f"Deployment Logs: {deployment_id}")

    events = unwrap(data, "events").records
    if not events:
        formatter.notice("No events found.")
        return

    for event in events:
        formatter.line(render_event(event if isinstance(event, Mapping) else {"text": event}))

    formatter.line(Text(f"\n{len(events)} event(s)", style="dim"))
