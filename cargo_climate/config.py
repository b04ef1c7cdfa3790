"""
Run configuration: which cargo to run, with which arguments, and how to
format the report.

The CLI in main.py builds a Config from its options; everything else takes
a Config so it can be driven without the CLI (e.g. from tests).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DEFAULT_PROGRAM = "cargo"
DEFAULT_SUBCOMMAND = "check"


def _default_program() -> str:
    # cargo exports CARGO to subcommands and build scripts
    return os.environ.get("CARGO") or DEFAULT_PROGRAM


@dataclass
class Config:
    """
    cargo-climate configuration.

    program/subcommand/extra_args/manifest_path describe the cargo
    invocation; pretty controls report indentation.
    """

    program: str = field(default_factory=_default_program)
    subcommand: str = DEFAULT_SUBCOMMAND
    extra_args: List[str] = field(default_factory=list)
    manifest_path: Optional[Path] = None
    pretty: bool = False


def get_default_config() -> Config:
    """Return the configuration used when no CLI options are given."""
    return Config()


def cargo_command(config: Config | None = None) -> List[str]:
    """
    Build the argv for the cargo invocation described by config.

    The JSON message format is always requested; extra_args come last so
    they may include a ``--`` separator for rustc/clippy flags.
    """
    if config is None:
        config = get_default_config()
    cmd = [config.program, config.subcommand, "--message-format", "json"]
    if config.manifest_path is not None:
        cmd += ["--manifest-path", str(config.manifest_path)]
    cmd += list(config.extra_args)
    return cmd
