"""
Command line access to the Asana API client.

Usage:
    asana-client workspaces
    asana-client projects 1234
    asana-client create-project "Roadmap" --workspace 1234 --team 5678

Credentials are read from ASANA_API_KEY (a .env file is honoured) unless
--api-key is given.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

import click
import requests
from dotenv import load_dotenv

from .errors import AsanaClientError
from .settings import AsanaSettings, create_client

load_dotenv()
logger = logging.getLogger(__name__)


def _print_result(ctx: click.Context, call: Callable[[], Any]) -> None:
    try:
        result = call()
    except (AsanaClientError, requests.exceptions.RequestException, json.JSONDecodeError) as e:
        logger.error(f"Asana request failed: {e}")
        ctx.exit(1)
    click.echo(json.dumps(result, indent=2))


@click.group()
@click.option("--api-url", help="Asana API base URL. Defaults to ASANA_API_URL")
@click.option("--api-key", help="Asana API key. Defaults to ASANA_API_KEY")
@click.option("--timeout", type=float, help="Request timeout in seconds")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    api_url: str | None,
    api_key: str | None,
    timeout: float | None,
    verbose: bool,
) -> None:
    """Query and update an Asana account."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=log_format)

    overrides = {"api_url": api_url, "api_key": api_key, "timeout": timeout}
    settings = AsanaSettings().model_copy(
        update={key: value for key, value in overrides.items() if value is not None}
    )
    ctx.obj = ctx.with_resource(create_client(settings))


@main.command()
@click.pass_context
def workspaces(ctx: click.Context) -> None:
    """List the workspaces visible to the API key."""
    _print_result(ctx, ctx.obj.get_workspaces)


@main.command()
@click.argument("workspace_id", type=int)
@click.pass_context
def projects(ctx: click.Context, workspace_id: int) -> None:
    """List the projects of a workspace."""
    _print_result(ctx, lambda: ctx.obj.get_workspace_projects(workspace_id))


@main.command()
@click.argument("project_id", type=int)
@click.pass_context
def tasks(ctx: click.Context, project_id: int) -> None:
    """List the tasks of a project."""
    _print_result(ctx, lambda: ctx.obj.get_project_tasks(project_id))


@main.command()
@click.argument("organization_id", type=int)
@click.pass_context
def teams(ctx: click.Context, organization_id: int) -> None:
    """List the teams of an organization."""
    _print_result(ctx, lambda: ctx.obj.get_teams(organization_id))


@main.command("create-project")
@click.argument("name")
@click.option("--workspace", "workspace_id", type=int, required=True, help="Workspace ID")
@click.option("--team", "team_id", type=int, required=True, help="Owning team ID")
@click.pass_context
def create_project(ctx: click.Context, name: str, workspace_id: int, team_id: int) -> None:
    """Create a project owned by a team."""
    _print_result(ctx, lambda: ctx.obj.create_project(name, workspace_id, team_id))


if __name__ == "__main__":
    main()
