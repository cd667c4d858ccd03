"""Command builder — assembles the gnuplot directives for one session call.

Every builder returns a list of lines, without trailing newlines, in the
order they must reach gnuplot. Nothing here talks to a process; the session
writes the lines. Parameter combinations are not cross-checked (a date
range with a plain XY series is passed through as-is); gnuplot reports such
mistakes on its own stderr.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ._series import Plottable
from ._types import Filling, Labels, Output, Range, quote

END_OF_DATA = "e"
DEFAULT_LOG_BASE = 10

CustomPairs = Sequence[Tuple[str, str]]
Logscale = Tuple[str, Optional[int]]


def set_commands(
    output: Optional[Output] = None,
    title: Optional[str] = None,
    use_grid: bool = False,
    fill: Optional[Filling] = None,
    labels: Optional[Labels] = None,
    custom: Optional[CustomPairs] = None,
) -> List[str]:
    """Directives for ``Session.set``: output, title, labels, fill, grid, custom pairs."""
    cmds: List[str] = []
    if output is not None:
        cmds.extend(output.to_commands())
    if title is not None:
        cmds.append("set title " + quote(title))
    if labels is not None:
        cmds.extend(labels.to_commands())
    if fill is not None:
        cmds.append(fill.to_set())
    if use_grid:
        cmds.append("set grid")
    for key, value in custom or ():
        cmds.append(f"set {key} {value}")
    return cmds


def unset_commands(
    fill: Optional[Filling] = None,
    labels: Optional[Labels] = None,
    custom: Optional[CustomPairs] = None,
    use_grid: bool = False,
) -> List[str]:
    """Directives that undo what ``set_commands`` did for the same arguments."""
    cmds: List[str] = []
    if fill is not None:
        cmds.append("set style fill empty")
    if labels is not None:
        cmds.extend(labels.to_unset())
    if use_grid:
        cmds.append("unset grid")
    for key, _ in custom or ():
        cmds.append(f"unset {key}")
    return cmds


def logscale_command(logscale: Logscale) -> str:
    axes, base = logscale
    return f"set logscale {axes} {DEFAULT_LOG_BASE if base is None else int(base)}"


def _timefmt(series: Sequence[Plottable], range: Optional[Range]) -> Optional[str]:
    # Series rows must parse, so their format wins over the range's.
    for s in series:
        if s.data.timefmt is not None:
            return s.data.timefmt
    if range is not None:
        return range.timefmt
    return None


def plot_statement(series: Sequence[Plottable], verb: str = "plot") -> List[str]:
    """The ``plot``/``splot`` line followed by each series' inline data block, in order."""
    if not series:
        raise ValueError(f"{verb} needs at least one series")
    cmds = [verb + " " + ", ".join(s.clause for s in series)]
    for s in series:
        if s.data.is_function:
            continue
        cmds.extend(s.data.rows())
        cmds.append(END_OF_DATA)
    return cmds


def plot_commands(
    series: Sequence[Plottable],
    verb: str = "plot",
    output: Optional[Output] = None,
    title: Optional[str] = None,
    use_grid: bool = False,
    fill: Optional[Filling] = None,
    range: Optional[Range] = None,
    labels: Optional[Labels] = None,
    format: Optional[str] = None,
    logscale: Optional[Logscale] = None,
    custom: Optional[CustomPairs] = None,
) -> List[str]:
    """Full directive sequence for one plot/splot call.

    Setup directives come first, then the statement and data blocks, then
    the resets that keep per-call options (fill, labels, grid, custom pairs,
    log scale, time axis, tick format) from leaking into the next call.
    Output, title and range stay in effect, as with ``Session.set``.
    """
    cmds = set_commands(output=output, title=title, use_grid=use_grid,
                        fill=fill, labels=labels, custom=custom)

    timefmt = _timefmt(series, range)
    if timefmt is not None:
        cmds.append("set xdata time")
        cmds.append(f'set timefmt "{timefmt}"')
    if range is not None:
        cmds.extend(range.to_commands())
    if format is not None:
        cmds.append(f'set format x "{format}"')
    if logscale is not None:
        cmds.append(logscale_command(logscale))

    cmds.extend(plot_statement(series, verb))

    cmds.extend(unset_commands(fill=fill, labels=labels, custom=custom, use_grid=use_grid))
    if logscale is not None:
        cmds.append(f"unset logscale {logscale[0]}")
    if format is not None:
        cmds.append("set format x")
    if timefmt is not None:
        cmds.append("set xdata")
    return cmds
