"""Subprocess helper shared by the concrete backends."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from ..errors import BackendError

logger = logging.getLogger(__name__)


def run_command(executable: str, repo_root: Path, args: list[str]) -> str:
    """Run ``executable`` with ``args`` inside ``repo_root`` and return stdout.

    Raises ``BackendError`` with the tool's own output when it exits non-zero
    or cannot be started at all.
    """
    command = [executable, *args]
    logger.debug("running %s in %s", command, repo_root)
    try:
        proc = subprocess.run(
            command,
            cwd=str(repo_root),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise BackendError(f"could not run {executable}: {exc}") from exc

    if proc.returncode != 0:
        logger.debug("%s exited with %d", command, proc.returncode)
        output = "\n".join(part.strip() for part in (proc.stdout, proc.stderr) if part.strip())
        raise BackendError(output or f"{executable} exited with status {proc.returncode}")
    return proc.stdout.rstrip("\n")


def join_outputs(*outputs: str) -> str:
    """Concatenate the non-empty outputs of a multi-step operation."""
    return "\n".join(output for output in outputs if output)
