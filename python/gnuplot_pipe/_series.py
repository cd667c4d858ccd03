"""Series encoder — turns typed data plus styling into plot clauses and inline rows.

A series renders as two parts:

  - a clause for the ``plot``/``splot`` statement, e.g.
    ``'-' using 1:2 with lines title 'price' lc rgb '#ff0000' lw 2``
  - the inline data rows that gnuplot reads after the statement, one series
    at a time, each block terminated by ``e``.

Function series (``sin(x)``) have a clause but no rows.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from ._binning import maybe_bin
from ._types import (
    DATE_FORMAT,
    TIME_FORMAT,
    Color,
    Filling,
    fmt_float,
    format_date,
    format_time,
    quote,
    to_color,
)

ColorLike = Union[Color, str, Tuple[int, int, int], None]

# ─── Input conversion ─────────────────────────────────────────────────────────


def _to_float_list(data) -> List[float]:
    """Convert a list, tuple, generator or numpy array to a list of floats."""
    if isinstance(data, np.ndarray):
        return data.ravel().astype(np.float64).tolist()
    return [float(v) for v in data]


def _to_rows(data, width: int) -> Tuple[Tuple[float, ...], ...]:
    """Convert a sequence of ``width``-tuples (or an (n, width) array) to float tuples."""
    if isinstance(data, np.ndarray):
        arr = data.astype(np.float64)
        if arr.size == 0:
            return ()
        if arr.ndim != 2 or arr.shape[1] != width:
            raise ValueError(f"expected an (n, {width}) array, got shape {arr.shape}")
        return tuple(tuple(row) for row in arr.tolist())
    rows = []
    for item in data:
        row = tuple(float(v) for v in item)
        if len(row) != width:
            raise ValueError(f"expected {width} values per point, got {len(row)}")
        rows.append(row)
    return tuple(rows)


def _to_ohlc_rows(data) -> Tuple[Tuple[float, ...], ...]:
    """Accept ``(t, (o, h, l, c))`` pairs or flat ``(t, o, h, l, c)`` rows."""
    if isinstance(data, np.ndarray):
        return _to_rows(data, 5)
    rows = []
    for item in data:
        t, rest = item[0], item[1:]
        if len(rest) == 1:
            rest = rest[0]
        rows.append((t, *rest))
    return _to_rows(rows, 5)


# ─── Data variants ────────────────────────────────────────────────────────────


class Data:
    """Immutable data payload tagged by kind.

    Build with the variant constructors (``Data.y``, ``Data.xy``, ...). The
    payload is copied into tuples so later changes to the caller's list or
    array do not leak into an already-built series.
    """

    Y = "y"
    XY = "xy"
    XYZ = "xyz"
    TIME_Y = "time_y"
    DATE_Y = "date_y"
    TIME_OHLC = "time_ohlc"
    DATE_OHLC = "date_ohlc"
    FUNC = "func"

    # kind -> columns per emitted row
    COLUMNS = {
        Y: 2,
        XY: 2,
        XYZ: 3,
        TIME_Y: 2,
        DATE_Y: 2,
        TIME_OHLC: 5,
        DATE_OHLC: 5,
        FUNC: 0,
    }

    THREE_D = frozenset({XYZ})

    __slots__ = ("_kind", "_payload", "_zone")

    def __init__(self, kind: str, payload, zone: float = 0.0) -> None:
        if kind not in self.COLUMNS:
            raise ValueError(f"Unknown data kind {kind!r}")
        self._kind = kind
        self._payload = payload
        self._zone = float(zone)

    @classmethod
    def y(cls, values) -> "Data":
        return cls(cls.Y, tuple(_to_float_list(values)))

    @classmethod
    def xy(cls, points) -> "Data":
        return cls(cls.XY, _to_rows(points, 2))

    @classmethod
    def xyz(cls, points) -> "Data":
        return cls(cls.XYZ, _to_rows(points, 3))

    @classmethod
    def time_y(cls, points, zone: float) -> "Data":
        return cls(cls.TIME_Y, _to_rows(points, 2), zone)

    @classmethod
    def date_y(cls, points) -> "Data":
        return cls(cls.DATE_Y, _to_rows(points, 2))

    @classmethod
    def time_ohlc(cls, points, zone: float) -> "Data":
        return cls(cls.TIME_OHLC, _to_ohlc_rows(points), zone)

    @classmethod
    def date_ohlc(cls, points) -> "Data":
        return cls(cls.DATE_OHLC, _to_ohlc_rows(points))

    @classmethod
    def func(cls, expression: str) -> "Data":
        return cls(cls.FUNC, str(expression))

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def columns(self) -> int:
        return self.COLUMNS[self._kind]

    @property
    def zone(self) -> float:
        return self._zone

    @property
    def is_function(self) -> bool:
        return self._kind == self.FUNC

    @property
    def is_3d(self) -> bool:
        return self._kind in self.THREE_D

    @property
    def timefmt(self) -> Optional[str]:
        """The ``set timefmt`` the rows are written in, if the X column is a timestamp."""
        if self._kind in (self.TIME_Y, self.TIME_OHLC):
            return TIME_FORMAT
        if self._kind in (self.DATE_Y, self.DATE_OHLC):
            return DATE_FORMAT
        return None

    @property
    def source(self) -> str:
        """The data-source part of a plot clause."""
        if self._kind == self.FUNC:
            return self._payload
        if self._kind in (self.TIME_OHLC, self.DATE_OHLC):
            # rows are t o h l c; candlesticks read x:open:low:high:close
            return "'-' using 1:2:4:3:5"
        if self._kind == self.XYZ:
            return "'-' using 1:2:3"
        return "'-' using 1:2"

    def __len__(self) -> int:
        if self._kind == self.FUNC:
            return 0
        return len(self._payload)

    def rows(self) -> Iterator[str]:
        """Yield the inline data rows, fields separated by a space."""
        kind = self._kind
        if kind == self.FUNC:
            return
        if kind == self.Y:
            for i, v in enumerate(self._payload):
                yield f"{i} {fmt_float(v)}"
            return
        if kind in (self.TIME_Y, self.TIME_OHLC):
            stamp = lambda t: format_time(t, self._zone)  # noqa: E731
        elif kind in (self.DATE_Y, self.DATE_OHLC):
            stamp = format_date
        else:
            stamp = fmt_float
        for row in self._payload:
            yield " ".join([stamp(row[0])] + [fmt_float(v) for v in row[1:]])

    def __repr__(self) -> str:
        return f"Data({self._kind}, n={len(self)})"


# ─── Series ───────────────────────────────────────────────────────────────────


def _clause(
    source: str,
    style: str,
    title: Optional[str] = None,
    color: ColorLike = None,
    weight: Optional[int] = None,
    fill: Optional[Filling] = None,
) -> str:
    parts = [source, "with", style]
    if title is not None:
        parts.append("title " + quote(title))
    color = to_color(color)
    if color is not None:
        parts.append(color.to_arg())
    if weight is not None:
        parts.append(f"lw {int(weight)}")
    if fill is not None:
        parts.append(fill.to_arg())
    return " ".join(parts)


class _Plottable:
    """Shared shape of Series and Splot: a plot clause plus its data."""

    __slots__ = ("_clause", "_data", "_style")

    def __init__(self, clause: str, data: Data, style: Optional[str] = None) -> None:
        self._clause = clause
        self._data = data
        self._style = style

    @property
    def clause(self) -> str:
        return self._clause

    @property
    def data(self) -> Data:
        return self._data

    @property
    def style(self) -> Optional[str]:
        """The draw style keyword (None for custom clauses)."""
        return self._style

    def rows(self) -> List[str]:
        return list(self._data.rows())

    @classmethod
    def _make(cls, style, data, title=None, color=None, weight=None, fill=None):
        return cls(_clause(data.source, style, title, color, weight, fill), data, style)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._clause!r})"


class Series(_Plottable):
    """A 2-D data series for ``Session.plot`` / ``Session.plot_many``.

    Usage::

        Series.lines([1.0, 2.0, 3.0], title="y", color="red")
        Series.points_xy([(0, 1), (1, 4)], weight=2)
        Series.boxes(samples, fill=Filling.solid(), bins=30)
        Series.candles_date_ohlc([(day, (o, h, l, c)), ...])
        Series.lines_func("sin(x)")
    """

    __slots__ = ()

    def __init__(self, clause: str, data: Data, style: Optional[str] = None) -> None:
        if data.is_3d:
            raise ValueError("Series takes 2-D data; use Splot for XYZ points")
        super().__init__(clause, data, style)

    @classmethod
    def custom(cls, clause: str, data: Data) -> "Series":
        """Low-level: use ``clause`` verbatim (including the ``'-' using`` part)."""
        return cls(clause, data)

    # lines

    @classmethod
    def lines(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("lines", Data.y(data), title, color, weight)

    @classmethod
    def lines_xy(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("lines", Data.xy(data), title, color, weight)

    @classmethod
    def lines_timey(cls, data, *, zone, title=None, color=None, weight=None) -> "Series":
        return cls._make("lines", Data.time_y(data, zone), title, color, weight)

    @classmethod
    def lines_datey(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("lines", Data.date_y(data), title, color, weight)

    @classmethod
    def lines_func(cls, expression, *, title=None, color=None, weight=None) -> "Series":
        """Line plot of a gnuplot expression such as ``sin(x)``; X comes from the plot range."""
        return cls._make("lines", Data.func(expression), title, color, weight)

    # points

    @classmethod
    def points(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("points", Data.y(data), title, color, weight)

    @classmethod
    def points_xy(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("points", Data.xy(data), title, color, weight)

    @classmethod
    def points_timey(cls, data, *, zone, title=None, color=None, weight=None) -> "Series":
        return cls._make("points", Data.time_y(data, zone), title, color, weight)

    @classmethod
    def points_datey(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("points", Data.date_y(data), title, color, weight)

    @classmethod
    def points_func(cls, expression, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("points", Data.func(expression), title, color, weight)

    # linespoints

    @classmethod
    def linespoints(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("linespoints", Data.y(data), title, color, weight)

    @classmethod
    def linespoints_xy(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("linespoints", Data.xy(data), title, color, weight)

    @classmethod
    def linespoints_timey(cls, data, *, zone, title=None, color=None, weight=None) -> "Series":
        return cls._make("linespoints", Data.time_y(data, zone), title, color, weight)

    @classmethod
    def linespoints_datey(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("linespoints", Data.date_y(data), title, color, weight)

    @classmethod
    def linespoints_func(cls, expression, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("linespoints", Data.func(expression), title, color, weight)

    # steps

    @classmethod
    def steps(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("steps", Data.y(data), title, color, weight)

    @classmethod
    def steps_xy(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("steps", Data.xy(data), title, color, weight)

    @classmethod
    def steps_timey(cls, data, *, zone, title=None, color=None, weight=None) -> "Series":
        return cls._make("steps", Data.time_y(data, zone), title, color, weight)

    @classmethod
    def steps_datey(cls, data, *, title=None, color=None, weight=None) -> "Series":
        return cls._make("steps", Data.date_y(data), title, color, weight)

    # histograms

    @classmethod
    def histeps(cls, data, *, title=None, color=None, weight=None, bins=None, binwidth=None) -> "Series":
        """Histogram with style ``histeps``; bins the values when ``bins`` or ``binwidth`` is set."""
        return cls._make("histeps", _binned(data, bins, binwidth), title, color, weight)

    @classmethod
    def boxes(cls, data, *, title=None, color=None, weight=None, fill=None,
              bins=None, binwidth=None) -> "Series":
        """Bar graph; bins the values when ``bins`` or ``binwidth`` is set."""
        return cls._make("boxes", _binned(data, bins, binwidth), title, color, weight, fill)

    @classmethod
    def histogram(cls, data, *, title=None, color=None, weight=None, fill=None) -> "Series":
        """Bar chart of pre-aggregated Y values with style ``histograms``."""
        data = Data.y(data)
        clause = _clause("'-' using 2", "histograms", title, color, weight, fill)
        return cls(clause, data, "histograms")

    # candlesticks

    @classmethod
    def candles_time_ohlc(cls, data, *, zone, title=None, color=None, weight=None,
                          fill=None) -> "Series":
        return cls._make("candlesticks", Data.time_ohlc(data, zone), title, color, weight, fill)

    @classmethod
    def candles_date_ohlc(cls, data, *, title=None, color=None, weight=None,
                          fill=None) -> "Series":
        return cls._make("candlesticks", Data.date_ohlc(data), title, color, weight, fill)


def _binned(values, bins, binwidth) -> Data:
    values = _to_float_list(values)
    buckets = maybe_bin(values, bins=bins, binwidth=binwidth)
    if buckets is None:
        return Data.y(values)
    return Data.xy(buckets)


class Splot(_Plottable):
    """A 3-D data series for ``Session.splot`` / ``Session.splot_many``."""

    __slots__ = ()

    def __init__(self, clause: str, data: Data, style: Optional[str] = None) -> None:
        if not data.is_3d:
            raise ValueError("Splot takes XYZ data; use Series for 2-D data")
        super().__init__(clause, data, style)

    @classmethod
    def custom(cls, clause: str, data: Data) -> "Splot":
        return cls(clause, data)

    @classmethod
    def lines_xyz(cls, data, *, title=None, color=None, weight=None) -> "Splot":
        return cls._make("lines", Data.xyz(data), title, color, weight)

    @classmethod
    def points_xyz(cls, data, *, title=None, color=None, weight=None) -> "Splot":
        return cls._make("points", Data.xyz(data), title, color, weight)

    @classmethod
    def linespoints_xyz(cls, data, *, title=None, color=None, weight=None) -> "Splot":
        return cls._make("linespoints", Data.xyz(data), title, color, weight)


Plottable = Union[Series, Splot]
