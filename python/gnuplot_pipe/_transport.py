"""Line-oriented writer over the gnuplot process's stdin."""

import subprocess
import sys
from typing import Iterable, Optional, TextIO

from ._errors import ChannelError
from ._log import log


class Pipe:
    """Owns one gnuplot process and writes newline-terminated commands to it."""

    __slots__ = ("_proc", "_echo")

    def __init__(self, proc: subprocess.Popen, echo: Optional[TextIO] = None) -> None:
        self._proc = proc
        self._echo = echo

    @property
    def is_open(self) -> bool:
        return self._proc is not None

    @property
    def pid(self) -> int:
        if self._proc is None:
            return -1
        return self._proc.pid

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write every line in order as one block, then flush once. Returns the line count.

        The block is encoded before anything reaches the pipe, so text the
        encoder rejects raises UnicodeEncodeError with nothing written and
        the session still open.
        """
        if self._proc is None:
            raise ChannelError("Session is closed")

        lines = list(lines)
        for line in lines:
            log.debug("-> %s", line)
            if self._echo is not None:
                print(line, file=self._echo)

        stdin = self._proc.stdin
        try:
            stdin.write("".join(line + "\n" for line in lines))
            stdin.flush()
        except UnicodeError:
            raise
        except (OSError, ValueError) as e:
            # ValueError here is a write to an already closed stdin
            self.close()
            raise ChannelError(f"Write to gnuplot failed: {e}") from e
        return len(lines)

    def close(self, timeout: float = 5.0) -> None:
        """Close stdin and reap the process. Writes nothing."""
        proc = self._proc
        if proc is None:
            return
        self._proc = None
        try:
            if proc.stdin is not None:
                proc.stdin.close()
        except OSError as e:
            log.debug("closing gnuplot stdin: %s", e)
        try:
            proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired:
            log.warning("gnuplot pid=%s did not exit within %.1fs, killing", proc.pid, timeout)
            proc.kill()
            proc.wait()
        log.info("gnuplot exited, pid=%s code=%s", proc.pid, proc.returncode)


def stdout_echo(verbose: bool) -> Optional[TextIO]:
    return sys.stdout if verbose else None
