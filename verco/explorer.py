"""OS file-browser launch helper.

Starts the browser detached and returns immediately. Launch failures raise
``ExplorerLaunchError``; they are local errors, not backend outcomes.
"""

from __future__ import annotations

import shlex
import subprocess
import sys
from pathlib import Path

from .errors import ExplorerLaunchError

_RUNNING: list[subprocess.Popen] = []


def default_explorer_command(platform: str | None = None) -> list[str]:
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return ["explorer"]
    if platform == "darwin":
        return ["open"]
    return ["xdg-open"]


def explorer_command(configured: str | None = None) -> list[str]:
    """Return the configured browser command, or the platform default."""
    if configured:
        cmd = shlex.split(configured)
        if cmd:
            return cmd
    return default_explorer_command()


def open_explorer(target: Path, configured: str | None = None) -> subprocess.Popen:
    cmd = [*explorer_command(configured), str(target)]
    # Polling reaps browsers that already exited so they never linger as zombies.
    _RUNNING[:] = [proc for proc in _RUNNING if proc.poll() is None]
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        raise ExplorerLaunchError(f"failed to open explorer: {exc}") from exc
    _RUNNING.append(proc)
    return proc
