# Code Climate severity taxonomy and the mapping from rustc diagnostic levels.

from __future__ import annotations

from enum import Enum
from typing import Union

from cargo_climate.messages import DiagnosticLevel


class Severity(str, Enum):
    """Severity levels accepted by the Code Climate report format."""

    INFO = "info"
    MINOR = "minor"
    MAJOR = "major"
    CRITICAL = "critical"
    BLOCKER = "blocker"


_SEVERITY_BY_LEVEL: dict[str, Severity] = {
    DiagnosticLevel.HELP.value: Severity.INFO,
    DiagnosticLevel.NOTE.value: Severity.INFO,
    DiagnosticLevel.WARNING.value: Severity.MINOR,
    DiagnosticLevel.ERROR.value: Severity.MAJOR,
}


def map_severity(level: Union[DiagnosticLevel, str]) -> Severity:
    """
    Map a rustc diagnostic level to a Code Climate severity.

    Levels without an entry (failure notes, ICEs, anything newer) map to
    INFO. CRITICAL and BLOCKER are never produced.
    """
    key = level.value if isinstance(level, DiagnosticLevel) else level
    return _SEVERITY_BY_LEVEL.get(key, Severity.INFO)
