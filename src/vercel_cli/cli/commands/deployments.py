"""
Deployment-related CLI commands.

Commands for listing and inspecting deployments.
"""

from typing import Optional

import click

from vercel_cli.api.envelopes import unwrap
from vercel_cli.cli.commands.common import (
    as_record,
    call_api,
    get_formatter,
    get_vercel_client,
    require_auth,
    team_params,
)
from vercel_cli.cli.display import (
    format_date,
    styled_state,
    styled_target,
    truncate,
)
from vercel_cli.cli.formatters import Column

DEPLOYMENT_STATES = ["BUILDING", "ERROR", "INITIALIZING", "QUEUED", "READY", "CANCELED"]
DEPLOYMENT_TARGETS = ["production", "staging", "preview"]

DEPLOYMENT_COLUMNS = [
    Column("uid", "ID", lambda v, _: truncate(v, 12)),
    Column("name", "Name", lambda v, _: truncate(v, 25)),
    Column("state", "State", lambda v, _: styled_state(v)),
    Column("target", "Target", lambda v, _: styled_target(v)),
    Column("created", "Created", lambda v, _: format_date(v)),
]


@click.group(name="deployments")
def deployments_group():
    """Manage deployments."""
    pass


@deployments_group.command("list")
@click.option("--limit", type=int, default=20, show_default=True, help="Number of results to return")
@click.option("--project", "project_id", help="Filter by project ID")
@click.option(
    "--state",
    type=click.Choice(DEPLOYMENT_STATES, case_sensitive=False),
    help="Filter by state",
)
@click.option(
    "--target",
    type=click.Choice(DEPLOYMENT_TARGETS, case_sensitive=False),
    help="Filter by target environment",
)
@click.option("--team", help="Team ID (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_deployments(
    ctx: click.Context,
    limit: int,
    project_id: Optional[str],
    state: Optional[str],
    target: Optional[str],
    team: Optional[str],
    as_json: bool,
):
    """
    List deployments.

    Examples:
        vercel deployments list                        # 20 most recent deployments
        vercel deployments list --state ERROR          # Only failed deployments
        vercel deployments list --target production    # Production deployments
        vercel deployments list --json                 # Raw API response
    """
    require_auth(ctx)
    formatter = get_formatter(ctx, as_json)
    client = get_vercel_client(ctx)

    params = team_params(
        ctx,
        team,
        limit=limit,
        projectId=project_id,
        state=state.upper() if state else None,
        target=target.lower() if target else None,
    )
    data = call_api("Fetching deployments...", client.list_deployments, params)

    if formatter.is_json:
        formatter.output_json(data)
        return

    formatter.title("Deployments")
    formatter.table(unwrap(data, "deployments").records, DEPLOYMENT_COLUMNS)


@deployments_group.command("get")
@click.argument("deployment_id", metavar="ID")
@click.option("--team", help="Team ID (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def get_deployment(ctx: click.Context, deployment_id: str, team: Optional[str], as_json: bool):
    """
    Show details of a deployment.

    Examples:
        vercel deployments get dpl_89qyp1cskzkLrVicDaZoDbjyHuDJ
        vercel deployments get my-app-abc123.vercel.app --json
    """
    require_auth(ctx)
    formatter = get_formatter(ctx, as_json)
    client = get_vercel_client(ctx)

    data = call_api(
        f"Fetching deployment {deployment_id}...",
        client.get_deployment,
        deployment_id,
        team_params(ctx, team),
    )

    if formatter.is_json:
        formatter.output_json(data)
        return

    data = as_record(data)
    url = data.get("url")
    creator = as_record(data.get("creator"))

    formatter.title("Deployment Details")
    formatter.field("ID", data.get("uid") or data.get("id"), style="cyan")
    formatter.field("Name", data.get("name"))
    formatter.field("URL", f"https://{url}" if url else None, style="underline")
    formatter.field("State", styled_state(data.get("state")) if data.get("state") else None)
    formatter.field("Target", data.get("target"))
    formatter.field("Project", data.get("projectId"))
    formatter.field("Created", format_date(data.get("created") or data.get("createdAt")))
    formatter.field("Created By", creator.get("username"))

    meta = data.get("meta")
    if meta is not None:
        meta = as_record(meta)
        formatter.section("Meta")
        formatter.field("Git Commit", meta.get("githubCommitSha"), indent=2)
        formatter.field("Git Branch", meta.get("githubCommitRef"), indent=2)
        formatter.field("Git Repo", meta.get("githubCommitRepo"), indent=2)

    aliases = data.get("alias")
    if not isinstance(aliases, list):
        aliases = []
    formatter.bullets(
        "Aliases",
        [f"https://{alias}" for alias in aliases],
        style="underline",
    )
    formatter.line()
