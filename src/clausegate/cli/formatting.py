"""Rich formatting helpers for the ClauseGate CLI.

Provides functions that format validated results for terminal display.
Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from clausegate.contracts import TaskContract
    from clausegate.models.results import ComparisonResult, ReviewResult, ResultModel

_SEVERITY_STYLES = {
    "critical": "bold red",
    "major": "yellow",
    "minor": "blue",
    "info": "dim",
}


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


def _severity(value: str) -> str:
    style = _SEVERITY_STYLES.get(value, "")
    return f"[{style}]{value}[/{style}]" if style else value


def _score_style(score: float) -> str:
    if score >= 70:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"


def format_json(result: ResultModel, console: Console) -> None:
    """Print the validated payload as camelCase JSON."""
    console.out(json.dumps(result.to_payload(), indent=2), highlight=False)


def format_comparison(result: ComparisonResult, console: Console) -> None:
    """Display a benchmark result: score, summary, deviation table."""
    style = _score_style(result.alignment_score)
    console.print(
        f"[bold]{escape(result.playbook)}[/bold]  "
        f"alignment [{style}]{result.alignment_score:g}%[/{style}]  "
        f"({result.total_clauses} standard clauses)"
    )
    console.print(escape(result.summary))

    if not result.deviations:
        console.print("[dim]No deviations.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Severity", width=9)
    table.add_column("Type", style="cyan", width=9)
    table.add_column("Clause")
    table.add_column("Location", style="dim")

    for dev in result.deviations:
        table.add_row(
            _severity(dev.severity.value),
            dev.deviation_type.value,
            escape(dev.clause_title),
            escape(dev.location_hint),
        )

    console.print(table)


def format_review(result: ReviewResult, console: Console) -> None:
    """Display a risk review: score, summary, findings table."""
    style = _score_style(result.risk_score)
    console.print(
        f"[bold]Risk assessment -- {escape(result.document_type)}[/bold]  "
        f"[{style}]{result.risk_score:g}/100[/{style}]  "
        f"({result.total_findings} findings)"
    )
    console.print(escape(result.summary))

    if not result.findings:
        console.print("[dim]No findings.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Severity", width=9)
    table.add_column("Category", style="cyan")
    table.add_column("Finding")

    for finding in result.findings:
        table.add_row(
            _severity(finding.severity.value),
            finding.risk_category.value,
            escape(finding.title),
        )

    console.print(table)


def format_contracts(contracts: list[TaskContract], console: Console) -> None:
    """Display registered task contracts and their top-level fields."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Contract", style="yellow")
    table.add_column("Fields")
    table.add_column("Description", style="dim")

    for contract in contracts:
        table.add_row(
            contract.name,
            ", ".join(contract.field_names()),
            escape(contract.description),
        )

    console.print(table)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
