"""Locate and spawn the gnuplot executable."""

import os
import shutil
import subprocess
from typing import Optional

from ._errors import LaunchError
from ._log import log

DEFAULT_EXECUTABLE = "gnuplot"


def resolve_executable(explicit: Optional[str] = None) -> str:
    """Resolve the gnuplot executable.

    1. Explicit path passed to Session(path=...)
    2. $GNUPLOT_PIPE_PATH environment variable
    3. ``gnuplot`` on the system PATH
    """
    if explicit:
        return explicit

    env_path = os.environ.get("GNUPLOT_PIPE_PATH")
    if env_path:
        return env_path

    found = shutil.which(DEFAULT_EXECUTABLE)
    if found is None:
        raise LaunchError(
            "gnuplot executable not found. "
            "Install gnuplot, set GNUPLOT_PIPE_PATH or pass path=."
        )
    return found


def spawn(executable: str) -> subprocess.Popen:
    """Start gnuplot with a text pipe on stdin.

    stdout and stderr are inherited, so gnuplot's own diagnostics show up
    on the caller's terminal and are never read back here.
    """
    log.debug("spawning %s", executable)
    try:
        proc = subprocess.Popen(
            [executable],
            stdin=subprocess.PIPE,
            text=True,
            encoding="utf-8",
        )
    except OSError as e:
        raise LaunchError(f"Failed to start {executable}: {e}") from e
    log.info("gnuplot started, pid=%s", proc.pid)
    return proc
