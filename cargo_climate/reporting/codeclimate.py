# Code Climate JSON report: serialize findings and write them to a stream or file.

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence, TextIO

from cargo_climate.errors import ReportWriteError
from cargo_climate.findings.models import Finding

logger = logging.getLogger(__name__)


def render_report(findings: Sequence[Finding], pretty: bool = False) -> str:
    """
    Render findings as a Code Climate JSON array.

    Keys keep model field order (check_name, description, fingerprint,
    severity, location). Compact unless pretty is set.
    """
    items = [f.model_dump(mode="json") for f in findings]
    if pretty:
        return json.dumps(items, indent=2, ensure_ascii=False)
    return json.dumps(items, separators=(",", ":"), ensure_ascii=False)


def write_report(findings: Sequence[Finding], stream: TextIO, pretty: bool = False) -> None:
    """
    Write the rendered report to stream and flush it.

    Raises:
        ReportWriteError: the stream rejected the write.
    """
    report = render_report(findings, pretty=pretty)
    try:
        stream.write(report)
        if pretty:
            stream.write("\n")
        stream.flush()
    except OSError as e:
        logger.error("Failed to write report: %s", e)
        raise ReportWriteError(f"writing report failed: {e}") from e
    logger.debug("Wrote %d finding(s)", len(findings))


def write_report_file(findings: Sequence[Finding], path: Path, pretty: bool = False) -> None:
    """
    Write the report to path via a temp file in the same directory and os.replace().

    On failure the temp file is removed and an existing report at path is
    left untouched.

    Raises:
        ReportWriteError: the temp file could not be created, written or moved.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    except OSError as e:
        logger.error("Failed to create report file in %s: %s", path.parent, e)
        raise ReportWriteError(f"cannot create output file {path}: {e}") from e
    tmp_path = Path(tmp_name)

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as stream:
            write_report(findings, stream, pretty=pretty)
        os.replace(tmp_path, path)
    except ReportWriteError:
        tmp_path.unlink(missing_ok=True)
        raise
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        logger.error("Failed to write report to %s: %s", path, e)
        raise ReportWriteError(f"writing report to {path} failed: {e}") from e
