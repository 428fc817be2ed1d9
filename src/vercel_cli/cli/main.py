"""
Vercel CLI - command line interface.

Provides command line access to Vercel deployments, projects, domains and
deployment logs, with human-readable or JSON output.
"""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from vercel_cli import __version__
from vercel_cli.config.config import DEFAULT_CONFIG_PATH

log_console = Console(stderr=True)


def setup_logging(debug: bool = False) -> None:
    """Set up logging with Rich handler."""
    level = logging.DEBUG if debug else logging.INFO

    # Log to stderr so JSON output on stdout stays parseable
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=log_console, show_time=False, show_path=False)],
    )

    logging.getLogger("vercel_cli").setLevel(level)

    # Suppress noisy third-party loggers unless in debug mode
    if not debug:
        logging.getLogger("requests").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Configuration file path (default: {DEFAULT_CONFIG_PATH})",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--quiet", is_flag=True, help="Suppress non-error output")
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], debug: bool, quiet: bool) -> None:
    """
    Vercel CLI - Manage your Vercel deployments from the terminal

    Examples:
        vercel config set --token YOUR_TOKEN    # Store your API token
        vercel deployments list                 # List recent deployments
        vercel deployments get <id>             # Get deployment details
        vercel projects list --search blog      # Find projects by name
        vercel logs get <deployment-id>         # Show deployment events
    """
    setup_logging(debug and not quiet)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config or DEFAULT_CONFIG_PATH
    ctx.obj["debug"] = debug
    ctx.obj["quiet"] = quiet

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Import and add command groups at module level to avoid circular imports
from vercel_cli.cli.commands.config import config_group  # noqa: E402
from vercel_cli.cli.commands.deployments import deployments_group  # noqa: E402
from vercel_cli.cli.commands.domains import domains_group  # noqa: E402
from vercel_cli.cli.commands.logs import logs_group  # noqa: E402
from vercel_cli.cli.commands.projects import projects_group  # noqa: E402

cli.add_command(config_group)
cli.add_command(deployments_group)
cli.add_command(projects_group)
cli.add_command(domains_group)
cli.add_command(logs_group)


if __name__ == "__main__":
    cli()
