"""
Runs the Go formatting pipeline on a generated file.

gofmt canonicalizes the source, then goimports prunes the imports the
template declares unconditionally. Both rewrite the file in place.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from genwith.errors import ExternalToolError
from genwith.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def format_commands(path: Path, settings: Settings) -> list[list[str]]:
    return [
        [settings.gofmt, "-w", "-s", str(path)],
        [settings.goimports, "-w", str(path)],
    ]


def run_tool(cmd: list[str]) -> None:
    """Run one formatter, raising ExternalToolError with its combined output."""
    logger.debug("running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except FileNotFoundError as e:
        logger.error("%s: executable not found", cmd[0])
        raise ExternalToolError(cmd[0], 127, f"{cmd[0]}: command not found") from e

    if proc.returncode != 0:
        output = (proc.stdout or "").strip()
        logger.error("%s exited with status %d", cmd[0], proc.returncode)
        raise ExternalToolError(cmd[0], proc.returncode, output)


def format_file(path: Path, settings: Settings | None = None) -> None:
    """Run gofmt then goimports on path; stop at the first failure."""
    settings = settings or get_settings()
    for cmd in format_commands(path, settings):
        run_tool(cmd)
