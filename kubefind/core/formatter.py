"""Structured rendering of search matches."""

import json
from typing import List, Optional

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..model.search import ReportFormat, SearchMatch


def format_matches(matches: List[SearchMatch], output_format: ReportFormat) -> str:
    """Render matches as a JSON or YAML document."""
    data = [match.model_dump() for match in matches]

    if output_format == ReportFormat.JSON:
        return json.dumps(data, indent=2)
    elif output_format == ReportFormat.YAML:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

    raise ValueError(f"Cannot format matches as {output_format.value}")


def build_matches_table(matches: List[SearchMatch]) -> Table:
    table = Table(title="Matches", show_header=True, header_style="bold magenta")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Namespace", style="green")
    table.add_column("Name", style="green")
    table.add_column("Snippet", style="white")

    for match in matches:
        # Object text can contain [brackets] that rich would read as markup
        table.add_row(
            Text(match.kind), Text(match.namespace or "-"), Text(match.name), Text(match.snippet)
        )

    return table


def print_matches(
    matches: List[SearchMatch],
    output_format: ReportFormat,
    console: Optional[Console] = None,
) -> None:
    """Print matches in the requested format; the log format prints nothing."""
    if output_format == ReportFormat.LOG:
        return

    console = console or Console()

    if output_format == ReportFormat.TABLE:
        if not matches:
            console.print("[yellow]No matches found[/yellow]")
            return
        console.print(build_matches_table(matches))
    else:
        # Documents are written verbatim, without wrapping or highlighting
        console.out(format_matches(matches, output_format), highlight=False)
