#!/usr/bin/env python3
"""Basic line plot — a sine wave with labels, grid and a fixed range.

Usage:
    python examples/basic_line.py
    GNUPLOT_PIPE_LOG=DEBUG python examples/basic_line.py   # log every command

Pass --png to write sine.png instead of opening a window.
"""

import math
import sys
import os

# Allow running from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import gnuplot_pipe as gp

frequency = 5.0 # Hz
amplitude = 2.0
w = 2 * math.pi * frequency

sample_rate = 200.0 # Hz
sampling_time = 4.0 # Seconds

n = int(sample_rate * sampling_time)
points = [(i / sample_rate, amplitude * math.sin(w * i / sample_rate)) for i in range(n)]

output = gp.Output.create("png", "sine.png", size=(1280, 720)) if "--png" in sys.argv else None


def draw(session):
    session.plot(
        gp.Series.lines_xy(points, title="sin(x)", color="blue", weight=2),
        output=output,
        title="Sine Wave",
        use_grid=True,
        range=gp.Range.xy(0.0, sampling_time, -amplitude - 0.5, amplitude + 0.5),
        labels=gp.Labels.create(x="x", y="y"),
    )
    if output is None:
        input("Press Enter to exit.")


gp.with_session(draw, verbose="-v" in sys.argv)
print("Done.")
