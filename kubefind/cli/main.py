"""Main CLI interface using Typer."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..core.application import Application
from ..core.formatter import print_matches
from ..k8s.selector import WILDCARD
from ..model.search import DEFAULT_CONTEXT_RADIUS, ReportFormat
from ..utils.logger import configure_logging, get_logger

# Create CLI app
app = typer.Typer(
    name="kubefind",
    help="Search Kubernetes objects for a regular expression",
    add_completion=True,
)

console = Console()
logger = get_logger(__name__)


def _version_callback(value: bool):
    if value:
        console.print(f"[bold]kubefind[/bold] version {__version__}")
        raise typer.Exit()


@app.command()
def find(
    kubeconfig: Optional[str] = typer.Option(
        None,
        "--kubeconfig",
        envvar="KUBECONFIG",
        help="Path to the kubeconfig file to use for CLI requests.",
    ),
    where: str = typer.Option(
        WILDCARD,
        "--where",
        "-w",
        help="Comma-separated resource kinds to search (pods, configmaps, deployments, "
        "statefulsets, cronjobs) or * for all.",
    ),
    pattern: str = typer.Option("", "--find", help="Regular expression to search for."),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to search (default: all namespaces)"
    ),
    exclude: Optional[str] = typer.Option(
        None,
        "--except",
        help="Regular expression over <namespace>/<name> of objects to skip.",
    ),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    radius: int = typer.Option(
        DEFAULT_CONTEXT_RADIUS,
        "--radius",
        "-r",
        min=0,
        help="Characters of context to show around each match",
    ),
    format: ReportFormat = typer.Option(
        ReportFormat.LOG, "--format", "-f", help="How to present matches"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log skipped objects and kubectl calls"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
):
    """Find objects in a cluster whose content matches a pattern."""
    configure_logging(verbose)

    application = Application(
        kubeconfig=kubeconfig,
        where=where,
        find=pattern,
        namespace=namespace,
        exclude=exclude,
        context=context,
        context_radius=radius,
    )

    try:
        application.validate()
        application.init()
        matches = application.run()
    except Exception as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    print_matches(matches, format, console)


if __name__ == "__main__":
    app()
