"""gnuplot-pipe — drive a gnuplot process from Python.

Usage::

    from gnuplot_pipe import Session, Series, Range, Filling

    with Session() as gp:
        gp.plot(Series.lines([1.0, 2.0, 3.0], title="y"))
        gp.plot_many(
            [Series.boxes(samples, fill=Filling.solid(), color="red", bins=30),
             Series.histeps(samples, color="blue", bins=30)],
            range=Range.x(-10.0, 10.0),
        )
        gp.plot_func("sin(x)", range=Range.x(-3.14, 3.14))
"""

from ._session import Session, with_session
from ._series import Data, Series, Splot
from ._types import Color, Filling, Labels, Output, Range
from ._binning import bin_values
from ._errors import GnuplotError, LaunchError, ChannelError

try:
    from importlib.metadata import version as _pkg_version
    __version__ = _pkg_version("gnuplot-pipe")
except Exception:
    __version__ = "0.1.0"

__all__ = [
    "Session",
    "with_session",
    "Data",
    "Series",
    "Splot",
    "Color",
    "Filling",
    "Labels",
    "Output",
    "Range",
    "bin_values",
    "GnuplotError",
    "LaunchError",
    "ChannelError",
]
