"""Session class — owns one gnuplot process and streams commands to it."""

from typing import Callable, Iterable, Optional, TypeVar

from . import _commands as cmd
from ._launcher import resolve_executable, spawn
from ._log import log
from ._series import Series, Splot
from ._transport import Pipe, stdout_echo
from ._types import Filling, Labels, Output, Range

T = TypeVar("T")


class Session:
    """A channel to a gnuplot process.

    Usage::

        gp = Session()                       # spawns `gnuplot` from PATH
        gp = Session(path="/opt/bin/gnuplot", verbose=True)
        gp.plot(Series.lines([1.0, 2.0, 3.0]), title="demo")
        gp.close()

        with Session() as gp:                # closed on exit, even on error
            gp.plot_func("sin(x)", range=Range.x(-10, 10))

    Each call writes its whole directive sequence and flushes once, so
    gnuplot has the complete command set before the next call starts. A
    session is not thread-safe; share it only behind your own lock.
    """

    def __init__(self, verbose: bool = False, path: Optional[str] = None,
                 close_timeout: float = 5.0) -> None:
        self._verbose = verbose
        self._executable = resolve_executable(path)
        self._close_timeout = close_timeout
        self._pipe = Pipe(spawn(self._executable), echo=stdout_echo(verbose))

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def verbose(self) -> bool:
        return self._verbose

    @property
    def closed(self) -> bool:
        return not self._pipe.is_open

    def send(self, lines: Iterable[str]) -> None:
        """Write raw gnuplot lines (no trailing newlines) and flush."""
        n = self._pipe.write_lines(lines)
        log.debug("sent %d lines", n)

    def set(
        self,
        output: Optional[Output] = None,
        title: Optional[str] = None,
        use_grid: bool = False,
        fill: Optional[Filling] = None,
        labels: Optional[Labels] = None,
        custom=None,
    ) -> None:
        """Set session parameters that stay in effect until unset.

        ``custom`` is a list of ``(option, value)`` pairs sent as
        ``set option value``.
        """
        self.send(cmd.set_commands(output=output, title=title, use_grid=use_grid,
                                   fill=fill, labels=labels, custom=custom))

    def unset(
        self,
        fill: Optional[Filling] = None,
        labels: Optional[Labels] = None,
        custom=None,
        use_grid: bool = False,
    ) -> None:
        """Reset parameters previously given to ``set``; ``use_grid=True`` turns the grid off."""
        self.send(cmd.unset_commands(fill=fill, labels=labels, custom=custom,
                                     use_grid=use_grid))

    def plot(self, series: Series, **options) -> None:
        """Plot a single series. See ``plot_many`` for the options."""
        self.plot_many([series], **options)

    def plot_many(
        self,
        series: Iterable[Series],
        output: Optional[Output] = None,
        title: Optional[str] = None,
        use_grid: bool = False,
        fill: Optional[Filling] = None,
        range: Optional[Range] = None,
        labels: Optional[Labels] = None,
        format: Optional[str] = None,
        logscale=None,
        custom=None,
    ) -> None:
        """Plot several series in one chart, in the given order.

        ``format`` sets the X tick format (``set format x``), ``logscale`` is
        an ``(axes, base)`` pair where a None base means 10.
        """
        series = list(series)
        for s in series:
            if not isinstance(s, Series):
                raise TypeError(f"plot takes Series, got {type(s).__name__}")
        self.send(cmd.plot_commands(
            series, "plot",
            output=output, title=title, use_grid=use_grid, fill=fill, range=range,
            labels=labels, format=format, logscale=logscale, custom=custom,
        ))

    def plot_func(
        self,
        expression: str,
        output: Optional[Output] = None,
        title: Optional[str] = None,
        use_grid: bool = False,
        fill: Optional[Filling] = None,
        range: Optional[Range] = None,
        labels: Optional[Labels] = None,
        logscale=None,
        custom=None,
    ) -> None:
        """Draw a gnuplot expression such as ``sin(x)`` over the given range."""
        self.plot_many(
            [Series.lines_func(expression)],
            output=output, title=title, use_grid=use_grid, fill=fill, range=range,
            labels=labels, logscale=logscale, custom=custom,
        )

    def splot(self, series: Splot, **options) -> None:
        """3-D plot of a single series. See ``splot_many`` for the options."""
        self.splot_many([series], **options)

    def splot_many(
        self,
        series: Iterable[Splot],
        output: Optional[Output] = None,
        title: Optional[str] = None,
        use_grid: bool = False,
        fill: Optional[Filling] = None,
        range: Optional[Range] = None,
        labels: Optional[Labels] = None,
        logscale=None,
        custom=None,
    ) -> None:
        series = list(series)
        for s in series:
            if not isinstance(s, Splot):
                raise TypeError(f"splot takes Splot, got {type(s).__name__}")
        self.send(cmd.plot_commands(
            series, "splot",
            output=output, title=title, use_grid=use_grid, fill=fill, range=range,
            labels=labels, logscale=logscale, custom=custom,
        ))

    def close(self) -> None:
        """Release the pipe and wait for gnuplot to exit."""
        self._pipe.close(timeout=self._close_timeout)

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"pid={self._pipe.pid}"
        return f"Session({self._executable!r}, {state})"


def with_session(fn: Callable[[Session], T], verbose: bool = False,
                 path: Optional[str] = None) -> T:
    """Create a Session, call ``fn`` with it and close it on every exit path."""
    session = Session(verbose=verbose, path=path)
    try:
        return fn(session)
    finally:
        session.close()
