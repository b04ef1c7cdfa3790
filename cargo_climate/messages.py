"""
Typed view of the messages cargo prints, one JSON object per line, when run
with ``--message-format json``.

Every message carries a ``reason`` tag. Only ``compiler-message`` carries a
diagnostic; the other kinds are modelled loosely so they can be recognised
and skipped. Lines that are not JSON objects (plain build output) become
``TextLine``; objects with a reason this module does not know become
``UnknownMessage``.

Typical usage:
    from cargo_climate.messages import parse_stream

    for message in parse_stream(stdout.splitlines()):
        ...
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Annotated, Iterable, Iterator, Literal, Optional, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)


class DiagnosticLevel(str, Enum):
    """Levels rustc attaches to a diagnostic. Newer compilers may add more."""

    ICE = "error: internal compiler error"
    ERROR = "error"
    WARNING = "warning"
    FAILURE_NOTE = "failure-note"
    NOTE = "note"
    HELP = "help"


class DiagnosticCode(BaseModel):
    """Lint or error code of a diagnostic (e.g. ``unused_variables``, ``E0308``)."""

    code: str
    explanation: Optional[str] = None


class DiagnosticSpan(BaseModel):
    """One source region a diagnostic points at. Lines and columns are 1-based."""

    file_name: str
    line_start: int
    line_end: Optional[int] = None
    column_start: Optional[int] = None
    column_end: Optional[int] = None
    is_primary: bool = True
    label: Optional[str] = None


class Diagnostic(BaseModel):
    message: str
    code: Optional[DiagnosticCode] = None
    # Kept as a plain string so unknown levels still parse.
    level: str
    spans: list[DiagnosticSpan] = Field(default_factory=list)
    children: list["Diagnostic"] = Field(default_factory=list)
    rendered: Optional[str] = None


class CompilerMessage(BaseModel):
    """A diagnostic emitted while compiling one target of a package."""

    reason: Literal["compiler-message"] = "compiler-message"
    package_id: str = ""
    manifest_path: Optional[str] = None
    message: Diagnostic


class CompilerArtifact(BaseModel):
    reason: Literal["compiler-artifact"] = "compiler-artifact"
    package_id: str = ""
    filenames: list[str] = Field(default_factory=list)
    fresh: bool = False


class BuildScriptExecuted(BaseModel):
    reason: Literal["build-script-executed"] = "build-script-executed"
    package_id: str = ""
    out_dir: Optional[str] = None


class BuildFinished(BaseModel):
    reason: Literal["build-finished"] = "build-finished"
    success: bool


class UnknownMessage(BaseModel):
    """A JSON message whose reason is not modelled here."""

    reason: str


class TextLine(BaseModel):
    """A line of output that is not a JSON message."""

    line: str


KnownMessage = Annotated[
    Union[CompilerMessage, CompilerArtifact, BuildScriptExecuted, BuildFinished],
    Field(discriminator="reason"),
]

Message = Union[
    CompilerMessage,
    CompilerArtifact,
    BuildScriptExecuted,
    BuildFinished,
    UnknownMessage,
    TextLine,
]

KNOWN_REASONS = frozenset(
    {"compiler-message", "compiler-artifact", "build-script-executed", "build-finished"}
)

_KNOWN_ADAPTER: TypeAdapter = TypeAdapter(KnownMessage)


def parse_message(line: str) -> Message:
    """
    Parse one line of cargo output into a typed message.

    Never raises: anything that is not a valid JSON object becomes a
    TextLine, and a known message with missing or mistyped fields also
    degrades to a TextLine.
    """
    text = line.rstrip("\r\n")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError:
        return TextLine(line=text)

    if not isinstance(raw, dict) or not isinstance(raw.get("reason"), str):
        return TextLine(line=text)

    reason = raw["reason"]
    if reason not in KNOWN_REASONS:
        return UnknownMessage(reason=reason)

    try:
        return _KNOWN_ADAPTER.validate_python(raw)
    except ValidationError as e:
        logger.debug("Malformed %s message treated as text: %s", reason, e)
        return TextLine(line=text)


def parse_stream(lines: Iterable[Union[str, bytes]]) -> Iterator[Optional[Message]]:
    """
    Parse cargo output line by line.

    Yields one entry per input line, in order. A bytes line that is not
    valid UTF-8 cannot be parsed and is yielded as None; callers are
    expected to skip those.
    """
    for lineno, line in enumerate(lines, start=1):
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as e:
                logger.debug("Dropping undecodable line %d: %s", lineno, e)
                yield None
                continue
        yield parse_message(line)
