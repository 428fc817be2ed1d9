"""
Project-related CLI commands.

Commands for listing and inspecting projects.
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
from vercel_cli.cli.display import NOT_AVAILABLE, format_date, format_day, truncate
from vercel_cli.cli.formatters import Column

PROJECT_COLUMNS = [
    Column("id", "ID", lambda v, _: truncate(v, 20)),
    Column("name", "Name", lambda v, _: truncate(v, 30)),
    Column("framework", "Framework", lambda v, _: v or NOT_AVAILABLE),
    Column("updatedAt", "Updated", lambda v, _: format_day(v)),
]


@click.group(name="projects")
def projects_group():
    """Manage projects."""
    pass


@projects_group.command("list")
@click.option("--limit", type=int, default=20, show_default=True, help="Number of results to return")
@click.option("--search", help="Search projects by name")
@click.option("--team", help="Team ID (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_projects(
    ctx: click.Context,
    limit: int,
    search: Optional[str],
    team: Optional[str],
    as_json: bool,
):
    """
    List projects.

    Examples:
        vercel projects list
        vercel projects list --search blog --limit 5
    """
    require_auth(ctx)
    formatter = get_formatter(ctx, as_json)
    client = get_vercel_client(ctx)

    params = team_params(ctx, team, limit=limit, search=search)
    data = call_api("Fetching projects...", client.list_projects, params)

    if formatter.is_json:
        formatter.output_json(data)
        return

    formatter.title("Projects")
    formatter.table(unwrap(data, "projects").records, PROJECT_COLUMNS)


@projects_group.command("get")
@click.argument("project_id", metavar="ID")
@click.option("--team", help="Team ID (overrides config)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def get_project(ctx: click.Context, project_id: str, team: Optional[str], as_json: bool):
    """Show details of a project, by ID or name."""
    require_auth(ctx)
    formatter = get_formatter(ctx, as_json)
    client = get_vercel_client(ctx)

    data = call_api(
        f"Fetching project {project_id}...",
        client.get_project,
        project_id,
        team_params(ctx, team),
    )

    if formatter.is_json:
        formatter.output_json(data)
        return

    data = as_record(data)

    formatter.title("Project Details")
    formatter.field("ID", data.get("id"), style="cyan")
    formatter.field("Name", data.get("name"))
    formatter.field("Framework", data.get("framework"))
    formatter.field("Build Command", data.get("buildCommand"))
    formatter.field("Dev Command", data.get("devCommand"))
    formatter.field("Install Command", data.get("installCommand"))
    formatter.field("Output Dir", data.get("outputDirectory"))
    formatter.field("Root Dir", data.get("rootDirectory") or "/")
    formatter.field("Node Version", data.get("nodeVersion"))
    formatter.field("Created", format_date(data.get("createdAt")))
    formatter.field("Updated", format_date(data.get("updatedAt")))

    link = data.get("link")
    if link is not None:
        link = as_record(link)
        formatter.section("Git Repository")
        formatter.field("Type", link.get("type"), indent=2)
        formatter.field("Repo", link.get("repo"), indent=2)
        formatter.field("Production", link.get("productionBranch"), indent=2)

    formatter.line()
