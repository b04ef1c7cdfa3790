# Stream filter and fan-out: turn parsed cargo messages into Code Climate findings.

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from cargo_climate.findings.models import Finding, build_finding
from cargo_climate.messages import CompilerMessage, Diagnostic, Message

logger = logging.getLogger(__name__)


def findings_for_diagnostic(diagnostic: Diagnostic) -> List[Finding]:
    """
    Return one finding per span of the diagnostic, in span order.

    Child diagnostics (notes, help) are not expanded. A diagnostic without
    spans yields no findings.
    """
    return [
        build_finding(
            diagnostic.code,
            diagnostic.message,
            span.file_name,
            span.line_start,
            diagnostic.level,
        )
        for span in diagnostic.spans
    ]


def iter_findings(messages: Iterable[Optional[Message]]) -> Iterator[Finding]:
    """
    Lazily yield findings for every compiler diagnostic in the stream.

    Everything that is not a CompilerMessage is skipped, including None
    entries for lines the parser could not decode.
    """
    for message in messages:
        if not isinstance(message, CompilerMessage):
            continue
        yield from findings_for_diagnostic(message.message)


def collect_findings(messages: Iterable[Optional[Message]]) -> List[Finding]:
    """Return all findings for the stream as a list, in message then span order."""
    findings = list(iter_findings(messages))
    logger.debug("Collected %d finding(s)", len(findings))
    return findings
