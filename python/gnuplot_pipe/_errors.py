"""Exception hierarchy for the gnuplot-pipe client."""


class GnuplotError(Exception):
    """Base exception for all gnuplot-pipe errors."""
    pass


class LaunchError(GnuplotError):
    """The gnuplot executable could not be found or started."""
    pass


class ChannelError(GnuplotError):
    """Failed to write to the gnuplot process, or the session is closed."""
    pass
