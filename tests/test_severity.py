"""Tests for cargo_climate.findings.severity: level → Code Climate severity."""

import pytest

from cargo_climate.findings.severity import Severity, map_severity
from cargo_climate.messages import DiagnosticLevel


@pytest.mark.parametrize(
    "level, expected",
    [
        ("help", Severity.INFO),
        ("note", Severity.INFO),
        ("warning", Severity.MINOR),
        ("error", Severity.MAJOR),
    ],
)
def test_known_levels(level, expected):
    assert map_severity(level) is expected


def test_accepts_enum_members():
    assert map_severity(DiagnosticLevel.WARNING) is Severity.MINOR
    assert map_severity(DiagnosticLevel.ERROR) is Severity.MAJOR


@pytest.mark.parametrize(
    "level",
    ["failure-note", "error: internal compiler error", "fatal", "", "WARNING"],
)
def test_other_levels_degrade_to_info(level):
    """Unrecognized levels map to info instead of failing."""
    assert map_severity(level) is Severity.INFO


def test_never_critical_or_blocker():
    levels = [lvl.value for lvl in DiagnosticLevel] + ["something-new"]
    produced = {map_severity(lvl) for lvl in levels}
    assert Severity.CRITICAL not in produced
    assert Severity.BLOCKER not in produced


def test_severity_values_are_lowercase_tags():
    assert [s.value for s in Severity] == ["info", "minor", "major", "critical", "blocker"]
