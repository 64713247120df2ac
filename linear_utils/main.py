"""linear-utils CLI."""

import logging
import sys
from typing import Annotated

import httpx
import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from linear_utils.ci import CiContext, merge_arguments
from linear_utils.errors import LinearUtilsError
from linear_utils.providers.base import IssueTracker
from linear_utils.providers.linear import LinearClient
from linear_utils.settings import get_settings
from linear_utils.workflow import on_create_branch

logger = logging.getLogger(__name__)

app = typer.Typer(help="linear-utils: keep Linear issues in step with new git branches", no_args_is_help=False)


def _configure_logging(verbose: bool) -> None:
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    package_logger = logging.getLogger("linear_utils")
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    package_logger.propagate = False


def get_client() -> IssueTracker:
    return LinearClient(get_settings())


@app.callback()
def callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Linear helpers for CI pipelines."""
    _configure_logging(verbose)


@app.command("on-create-branch")
def on_create_branch_cmd(
    branch: Annotated[str, typer.Argument(help="The new PR branch name to use to update a Linear Issue")],
) -> None:
    """Set Linear Issue Assignee and Status for a branch."""
    try:
        tracker = get_client()
        viewer = tracker.viewer()
        logger.info("Authenticated to Linear as %s", viewer.name)
        issue = on_create_branch(tracker, branch)
    except (LinearUtilsError, httpx.HTTPError) as exc:
        rprint(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    state = issue.state.name if issue.state else "—"
    assignee = issue.assignee.display_name if issue.assignee else "Unassigned"
    rprint(f"[green]✓[/green] [bold]{issue.identifier}[/bold] {escape(state)} · {escape(assignee)}")


def run() -> None:
    """Console entry point: merge GitHub Actions inputs into argv, then dispatch."""
    args = merge_arguments(sys.argv[1:], CiContext())
    app(args=args, prog_name="linear-utils")
