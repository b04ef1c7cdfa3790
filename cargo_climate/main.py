"""
Typer CLI entry point: run cargo (or read a saved message stream) and print
a Code Climate report.

Pipeline:
- Obtain cargo's JSON message lines (run cargo, or read --input)
- Parse them into typed messages (messages.parse_stream)
- Keep compiler diagnostics and fan them out into findings (convert)
- Write the findings as a JSON array to stdout or --output
- Optionally print a Rich summary on stderr (--summary)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from cargo_climate.cargo import run_cargo
from cargo_climate.config import DEFAULT_SUBCOMMAND, Config
from cargo_climate.convert import collect_findings
from cargo_climate.errors import CargoClimateError, InputReadError
from cargo_climate.messages import parse_stream
from cargo_climate.reporting.codeclimate import write_report, write_report_file
from cargo_climate.reporting.console import print_summary

logger = logging.getLogger(__name__)

app = typer.Typer(help="cargo-climate - convert cargo diagnostics into a Code Climate report.")


def _read_input(source: Path) -> List[bytes]:
    """Read a saved cargo message stream; "-" reads stdin."""
    if str(source) == "-":
        return sys.stdin.buffer.read().splitlines()
    try:
        return source.read_bytes().splitlines()
    except OSError as e:
        raise InputReadError(f"cannot read input file {source}: {e}") from e


@app.command()
def convert(
    input_path: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="Read cargo JSON messages from this file ('-' for stdin) instead of running cargo.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to this file instead of stdout.",
    ),
    manifest_path: Optional[Path] = typer.Option(
        None,
        "--manifest-path",
        help="Path to Cargo.toml, forwarded to cargo.",
    ),
    subcommand: str = typer.Option(
        DEFAULT_SUBCOMMAND,
        "--subcommand",
        help="cargo subcommand producing diagnostics (e.g. check, clippy).",
    ),
    cargo_args: Optional[List[str]] = typer.Option(
        None,
        "--cargo-arg",
        help="Extra argument forwarded to cargo (repeatable).",
    ),
    pretty: bool = typer.Option(False, "--pretty", help="Indent the JSON report."),
    summary: bool = typer.Option(False, "--summary", help="Print a findings summary on stderr."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Convert cargo diagnostics into a Code Climate JSON report.

    Without --input, runs `cargo <subcommand> --message-format json` in the
    current directory.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = Config(
        subcommand=subcommand,
        extra_args=list(cargo_args or []),
        manifest_path=manifest_path,
        pretty=pretty,
    )

    try:
        lines = _read_input(input_path) if input_path is not None else run_cargo(config)
        findings = collect_findings(parse_stream(lines))

        if output is None:
            write_report(findings, sys.stdout, pretty=config.pretty)
        else:
            write_report_file(findings, output, pretty=config.pretty)
    except CargoClimateError as e:
        logger.error("%s", e)
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    if summary:
        print_summary(findings)


def main() -> None:
    """Entry point for `python -m cargo_climate.main` and the console script."""
    app()


if __name__ == "__main__":
    main()
