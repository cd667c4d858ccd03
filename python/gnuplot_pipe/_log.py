"""gnuplot-pipe logger.

Usage from any module::

    from ._log import log

    log.debug("spawning %s", path)
    log.warning("gnuplot did not exit within %.1fs", timeout)

Enable via environment variable::

    GNUPLOT_PIPE_LOG=DEBUG python my_script.py   # every emitted command
    GNUPLOT_PIPE_LOG=INFO  python my_script.py   # process lifecycle only
    GNUPLOT_PIPE_LOG=1     python my_script.py   # alias for DEBUG

Or programmatically::

    import logging
    logging.getLogger("gnuplot_pipe").setLevel(logging.DEBUG)
"""

import logging
import os

log = logging.getLogger("gnuplot_pipe")

# ANSI color codes
_COLORS = {
    "DEBUG": "\033[36m",    # Cyan
    "INFO": "\033[32m",     # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",    # Red
    "RESET": "\033[0m",     # Reset
}


class ColoredFormatter(logging.Formatter):
    """Add colors to log levels when output is a TTY."""

    def __init__(self, fmt=None, handler=None):
        super().__init__(fmt)
        self.handler = handler

    def format(self, record):
        stream = getattr(self.handler, "stream", None)
        if stream is not None and hasattr(stream, "isatty") and stream.isatty():
            color = _COLORS.get(record.levelname, "")
            reset = _COLORS["RESET"]
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{reset}"
        return super().format(record)


def configure_from_env(value=None) -> bool:
    """Apply a GNUPLOT_PIPE_LOG style level string. Returns True if applied."""
    if value is None:
        value = os.environ.get("GNUPLOT_PIPE_LOG", "")
    level_str = value.strip().upper()
    if not level_str:
        return False
    aliases = {"1": "DEBUG", "0": "WARNING", "TRUE": "DEBUG", "FALSE": "WARNING"}
    level_str = aliases.get(level_str, level_str)
    level = getattr(logging, level_str, None)
    if not isinstance(level, int):
        return False
    log.setLevel(level)
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ColoredFormatter(
            "[gnuplot_pipe %(levelname)s] %(message)s (%(filename)s:%(lineno)d)",
            handler=handler,
        ))
        log.addHandler(handler)
    return True


configure_from_env()
