# Pydantic data models for Code Climate findings: Finding, Location, Lines,
# plus the fingerprint and constructor used to build them from diagnostics.

from __future__ import annotations

import hashlib
from typing import Optional, Union

from pydantic import BaseModel

from cargo_climate.findings.severity import Severity, map_severity
from cargo_climate.messages import DiagnosticCode, DiagnosticLevel

# check_name used when a diagnostic carries no code
UNSET_CODE = "unset code"


class Lines(BaseModel):
    """Affected lines of a finding. Only the first line is reported."""

    begin: int

    model_config = {"frozen": True}


class Location(BaseModel):
    """Where in the source a finding was reported (file and first line)."""

    path: str
    lines: Lines

    model_config = {"frozen": True}


class Finding(BaseModel):
    """
    One Code Climate report item (the subset GitLab Code Quality reads).

    Field order is the serialization order.
    """

    check_name: str
    description: str
    fingerprint: str
    severity: Severity
    location: Location

    model_config = {"frozen": True}


def fingerprint(message: str, path: str, line: int) -> str:
    """
    Return the SHA-1 hex digest of ``"{message}-{path}-{line}"``.

    Consumers use this to track a finding across runs. Check name and
    severity are not part of it, so findings differing only in those collide.
    """
    return hashlib.sha1(f"{message}-{path}-{line}".encode("utf-8")).hexdigest()


def build_finding(
    code: Optional[Union[DiagnosticCode, str]],
    message: str,
    path: str,
    line: int,
    severity: Union[DiagnosticLevel, str],
) -> Finding:
    """Build the finding for one diagnostic at one span."""
    if isinstance(code, DiagnosticCode):
        code = code.code
    return Finding(
        check_name=code if code is not None else UNSET_CODE,
        description=message,
        fingerprint=fingerprint(message, path, line),
        severity=map_severity(severity),
        location=Location(path=path, lines=Lines(begin=line)),
    )
