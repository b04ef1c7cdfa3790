# Rich console output: summarize findings on stderr, grouped by file.

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cargo_climate.findings.models import Finding
from cargo_climate.findings.severity import Severity

# Severity → Rich style
SEVERITY_STYLE = {
    Severity.BLOCKER: "bold white on red",
    Severity.CRITICAL: "bold red",
    Severity.MAJOR: "bold red",
    Severity.MINOR: "bold yellow",
    Severity.INFO: "bold blue",
}

DEFAULT_SEVERITY_STYLE = "bold white"


def _severity_style(severity: Severity) -> str:
    return SEVERITY_STYLE.get(severity, DEFAULT_SEVERITY_STYLE)


def print_summary(findings: Sequence[Finding], console: Optional[Console] = None) -> None:
    """
    Print findings as one table per file followed by a per-severity count.

    Writes to stderr by default so stdout can carry the JSON report.
    """
    if console is None:
        console = Console(stderr=True)

    if not findings:
        console.print(
            Panel(
                "[green]No findings.[/green]",
                title="cargo-climate",
                border_style="green",
                box=box.ROUNDED,
            )
        )
        return

    by_file: dict[str, list[Finding]] = {}
    for f in findings:
        by_file.setdefault(f.location.path, []).append(f)

    for path in sorted(by_file):
        file_findings = sorted(by_file[path], key=lambda x: x.location.lines.begin)

        console.print()
        console.print(Panel(
            f"[bold cyan]{path}[/bold cyan]",
            box=box.SIMPLE_HEAD,
            border_style="blue",
            padding=(0, 1),
        ))

        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE,
            padding=(0, 1),
            expand=False,
        )
        table.add_column("Line", justify="right", style="dim", width=5)
        table.add_column("Severity", width=9)
        table.add_column("Check", width=28)
        table.add_column("Description", style="white")

        for f in file_findings:
            table.add_row(
                str(f.location.lines.begin),
                Text(f.severity.value.upper(), style=_severity_style(f.severity)),
                Text(f.check_name, style="dim"),
                f.description,
            )

        console.print(table)

    _print_totals(findings, console)


def _print_totals(findings: Sequence[Finding], console: Console) -> None:
    """Print a compact footer with the number of findings per severity."""
    by_severity: dict[Severity, int] = {}
    for f in findings:
        by_severity[f.severity] = by_severity.get(f.severity, 0) + 1

    total = len(findings)
    parts = [f"[bold]{total} finding{'s' if total != 1 else ''}[/bold]"]
    for sev in reversed(list(Severity)):
        if sev in by_severity:
            parts.append(f"[{_severity_style(sev)}]{by_severity[sev]} {sev.value}[/]")

    console.print()
    console.print(
        Panel(
            " | ".join(parts),
            title="Summary",
            border_style="yellow",
            box=box.ROUNDED,
        )
    )
