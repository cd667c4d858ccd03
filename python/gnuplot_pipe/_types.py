"""Value types describing chart appearance: colors, fillings, ranges, outputs, labels.

Every value here is immutable once built and only consumed by the series
encoder and the command builder.
"""

from __future__ import annotations

from datetime import datetime, timezone as _tz
from typing import List, Optional, Tuple

# ─── Timestamps ───────────────────────────────────────────────────────────────

TIME_FORMAT = "%Y-%m-%d-%H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


def fmt_float(value: float) -> str:
    """Render a number the way rows and ranges carry it (``1.0``, ``-2.5``)."""
    return repr(float(value))


def quote(text: str) -> str:
    """Wrap text in a gnuplot single-quoted string."""
    return "'" + text.replace("'", "''") + "'"


def local_offset(t: float) -> float:
    """UTC offset (hours) of the running process's local zone at time ``t``."""
    offset = datetime.fromtimestamp(t).astimezone().utcoffset()
    return offset.total_seconds() / 3600.0 if offset is not None else 0.0


def format_time(t: float, zone: float = 0.0) -> str:
    """Format epoch seconds shifted by ``zone`` hours as TIME_FORMAT."""
    shifted = float(t) + float(zone) * 3600.0
    return datetime.fromtimestamp(shifted, tz=_tz.utc).strftime(TIME_FORMAT)


def format_date(d: float) -> str:
    """Format epoch seconds as DATE_FORMAT (UTC calendar day)."""
    return datetime.fromtimestamp(float(d), tz=_tz.utc).strftime(DATE_FORMAT)


# ─── Color ────────────────────────────────────────────────────────────────────

_NAMED_RGB = {
    "black": (0, 0, 0),
    "red": (255, 0, 0),
    "green": (0, 128, 0),
    "yellow": (255, 255, 0),
    "blue": (0, 0, 255),
    "magenta": (255, 0, 255),
    "cyan": (0, 255, 255),
    "white": (255, 255, 255),
}


class Color:
    """A named color or an RGB triple.

    Components are not range-checked; gnuplot reports bad values itself.
    """

    __slots__ = ("_name", "_rgb")

    def __init__(self, name: Optional[str], rgb: Tuple[int, int, int]) -> None:
        self._name = name
        self._rgb = rgb

    @classmethod
    def named(cls, name: str) -> "Color":
        key = name.lower()
        if key not in _NAMED_RGB:
            raise ValueError(f"Unknown color {name!r}; expected one of {sorted(_NAMED_RGB)}")
        return cls(key, _NAMED_RGB[key])

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(None, (int(r), int(g), int(b)))

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def components(self) -> Tuple[int, int, int]:
        return self._rgb

    def to_arg(self) -> str:
        r, g, b = self._rgb
        return f"lc rgb '#{r:02x}{g:02x}{b:02x}'"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Color) and other._rgb == self._rgb

    def __hash__(self) -> int:
        return hash(self._rgb)

    def __repr__(self) -> str:
        if self._name is not None:
            return f"Color.{self._name.upper()}"
        return "Color.rgb(%d, %d, %d)" % self._rgb


for _name in _NAMED_RGB:
    setattr(Color, _name.upper(), Color.named(_name))
del _name


def to_color(color) -> Optional[Color]:
    """Accept a Color, a color name, or an (r, g, b) tuple."""
    if color is None or isinstance(color, Color):
        return color
    if isinstance(color, str):
        return Color.named(color)
    r, g, b = color
    return Color.rgb(r, g, b)


# ─── Filling ──────────────────────────────────────────────────────────────────

class Filling:
    """Solid fill, or one of gnuplot's predefined fill patterns."""

    __slots__ = ("_pattern",)

    def __init__(self, pattern: Optional[int] = None) -> None:
        if pattern is not None:
            if isinstance(pattern, bool) or not isinstance(pattern, int) or pattern < 0:
                raise ValueError(f"Fill pattern must be a non-negative integer, got {pattern!r}")
        self._pattern = pattern

    @classmethod
    def solid(cls) -> "Filling":
        return cls(None)

    @classmethod
    def pattern(cls, index: int) -> "Filling":
        return cls(index)

    @property
    def is_solid(self) -> bool:
        return self._pattern is None

    @property
    def pattern_index(self) -> Optional[int]:
        return self._pattern

    def _style(self) -> str:
        if self._pattern is None:
            return "solid"
        return f"pattern {self._pattern}"

    def to_arg(self) -> str:
        """Per-series fill clause."""
        return f"fs {self._style()}"

    def to_set(self) -> str:
        return f"set style fill {self._style()}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Filling) and other._pattern == self._pattern

    def __hash__(self) -> int:
        return hash(("fill", self._pattern))

    def __repr__(self) -> str:
        if self._pattern is None:
            return "Filling.solid()"
        return f"Filling.pattern({self._pattern})"


# ─── Range ────────────────────────────────────────────────────────────────────

class Range:
    """Axis range for one plot call.

    Build with one of the variant constructors::

        Range.x(-10, 10)
        Range.xyz(0, 1, 0, 1, -1, 1)
        Range.time(t0, t1, zone=2.0)
    """

    X = "x"
    Y = "y"
    XY = "xy"
    XYZ = "xyz"
    DATE = "date"
    TIME = "time"
    LOCAL_TIME = "local_time"

    __slots__ = ("_kind", "_bounds", "_zone")

    def __init__(self, kind: str, bounds: Tuple[float, ...], zone: Optional[float] = None) -> None:
        self._kind = kind
        self._bounds = tuple(float(b) for b in bounds)
        self._zone = zone

    @classmethod
    def x(cls, x1: float, x2: float) -> "Range":
        return cls(cls.X, (x1, x2))

    @classmethod
    def y(cls, y1: float, y2: float) -> "Range":
        return cls(cls.Y, (y1, y2))

    @classmethod
    def xy(cls, x1: float, x2: float, y1: float, y2: float) -> "Range":
        return cls(cls.XY, (x1, x2, y1, y2))

    @classmethod
    def xyz(cls, x1: float, x2: float, y1: float, y2: float, z1: float, z2: float) -> "Range":
        return cls(cls.XYZ, (x1, x2, y1, y2, z1, z2))

    @classmethod
    def date(cls, d1: float, d2: float) -> "Range":
        return cls(cls.DATE, (d1, d2))

    @classmethod
    def time(cls, t1: float, t2: float, zone: float) -> "Range":
        return cls(cls.TIME, (t1, t2), float(zone))

    @classmethod
    def local_time(cls, t1: float, t2: float) -> "Range":
        return cls(cls.LOCAL_TIME, (t1, t2))

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def bounds(self) -> Tuple[float, ...]:
        return self._bounds

    @property
    def timefmt(self) -> Optional[str]:
        """The ``set timefmt`` this range's bounds are written in, if any."""
        if self._kind == self.DATE:
            return DATE_FORMAT
        if self._kind in (self.TIME, self.LOCAL_TIME):
            return TIME_FORMAT
        return None

    def to_commands(self) -> List[str]:
        b = self._bounds
        if self._kind == self.DATE:
            return [f'set xrange ["{format_date(b[0])}":"{format_date(b[1])}"]']
        if self._kind in (self.TIME, self.LOCAL_TIME):
            if self._kind == self.TIME:
                z1 = z2 = self._zone
            else:
                z1, z2 = local_offset(b[0]), local_offset(b[1])
            return [f'set xrange ["{format_time(b[0], z1)}":"{format_time(b[1], z2)}"]']

        axes = {self.X: "x", self.Y: "y", self.XY: "xy", self.XYZ: "xyz"}[self._kind]
        return [
            f"set {axis}range [{fmt_float(b[2 * i])}:{fmt_float(b[2 * i + 1])}]"
            for i, axis in enumerate(axes)
        ]

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Range)
            and (other._kind, other._bounds, other._zone) == (self._kind, self._bounds, self._zone)
        )

    def __hash__(self) -> int:
        return hash((self._kind, self._bounds, self._zone))

    def __repr__(self) -> str:
        args = ", ".join(fmt_float(b) for b in self._bounds)
        if self._zone is not None:
            args += f", zone={self._zone}"
        return f"Range.{self._kind}({args})"


# ─── Output ───────────────────────────────────────────────────────────────────

# terminal tag -> (gnuplot device, needs a file path)
_TERMINALS = {
    "wxt": ("wxt persist", False),
    "x11": ("x11 persist", False),
    "qt": ("qt persist", False),
    "png": ("png", True),
    "pngcairo": ("pngcairo", True),
    "eps": ("postscript eps enhanced color", True),
}


class Output:
    """Target device for gnuplot, with optional font, pixel size and extra params."""

    __slots__ = ("_terminal", "_path", "_font", "_size", "_params")

    def __init__(
        self,
        terminal: str,
        path: Optional[str] = None,
        font: Optional[str] = None,
        size: Optional[Tuple[int, int]] = None,
        params: Optional[str] = None,
    ) -> None:
        if terminal not in _TERMINALS:
            raise ValueError(f"Unknown terminal {terminal!r}; expected one of {sorted(_TERMINALS)}")
        needs_path = _TERMINALS[terminal][1]
        if needs_path and not path:
            raise ValueError(f"Terminal {terminal!r} needs an output file path")
        if not needs_path and path:
            raise ValueError(f"Terminal {terminal!r} is interactive and takes no path")
        self._terminal = terminal
        self._path = path
        self._font = font
        self._size = (int(size[0]), int(size[1])) if size is not None else None
        self._params = params

    @classmethod
    def create(
        cls,
        terminal: str,
        path: Optional[str] = None,
        *,
        font: Optional[str] = None,
        size: Optional[Tuple[int, int]] = None,
        params: Optional[str] = None,
    ) -> "Output":
        """Create an output, e.g. ``Output.create("png", "chart.png", size=(800, 600))``."""
        return cls(terminal, path, font=font, size=size, params=params)

    @property
    def terminal(self) -> str:
        return self._terminal

    @property
    def path(self) -> Optional[str]:
        return self._path

    def to_commands(self) -> List[str]:
        term = "set term " + _TERMINALS[self._terminal][0]
        if self._font is not None:
            term += " font " + quote(self._font)
        if self._size is not None:
            term += " size %d,%d" % self._size
        if self._params:
            term += " " + self._params
        cmds = [term]
        if self._path is not None:
            cmds.append("set output " + quote(self._path))
        return cmds

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Output) and other._key() == self._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self):
        return (self._terminal, self._path, self._font, self._size, self._params)

    def __repr__(self) -> str:
        return f"Output(terminal={self._terminal!r}, path={self._path!r})"


# ─── Labels ───────────────────────────────────────────────────────────────────

class Labels:
    """Axis labels; a label left as None leaves that axis untouched."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: Optional[str] = None, y: Optional[str] = None) -> None:
        self._x = x
        self._y = y

    @classmethod
    def create(cls, x: Optional[str] = None, y: Optional[str] = None) -> "Labels":
        return cls(x, y)

    @property
    def x(self) -> Optional[str]:
        return self._x

    @property
    def y(self) -> Optional[str]:
        return self._y

    def _given(self):
        return [(axis, text) for axis, text in (("x", self._x), ("y", self._y)) if text is not None]

    def to_commands(self) -> List[str]:
        return [f"set {axis}label {quote(text)}" for axis, text in self._given()]

    def to_unset(self) -> List[str]:
        return [f"unset {axis}label" for axis, _ in self._given()]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Labels) and (other._x, other._y) == (self._x, self._y)

    def __hash__(self) -> int:
        return hash((self._x, self._y))

    def __repr__(self) -> str:
        return f"Labels(x={self._x!r}, y={self._y!r})"
