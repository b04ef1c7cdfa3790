# cargo invocation: run the configured subcommand and capture its JSON stdout.

import logging
import subprocess
from typing import List, Optional

from cargo_climate.config import Config, cargo_command
from cargo_climate.errors import CargoError

logger = logging.getLogger(__name__)


def run_cargo(config: Optional[Config] = None) -> List[bytes]:
    """
    Run cargo and return its stdout split into raw lines.

    stderr (progress, rendered diagnostics) is passed through to the
    terminal. A non-zero exit status is expected when the crate does not
    compile and is only logged; the diagnostics are still on stdout.

    Raises:
        CargoError: cargo could not be started.
    """
    cmd = cargo_command(config)
    logger.info("Running %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, stdout=subprocess.PIPE, check=False)
    except OSError as e:
        logger.error("Failed to run %s: %s", cmd[0], e)
        raise CargoError(f"running {' '.join(cmd)} failed: {e}") from e

    if result.returncode != 0:
        logger.info("%s exited with status %d", " ".join(cmd[:2]), result.returncode)
    lines = result.stdout.splitlines()
    logger.debug("cargo produced %d line(s) of output", len(lines))
    return lines
