#!/usr/bin/env python3
"""Histogram of Gaussian samples — boxes and histeps over the same range.

Usage:
    python examples/histogram.py

Needs gnuplot on PATH (or GNUPLOT_PIPE_PATH). Opens a window for ten seconds.
"""

import math
import os
import random
import sys
import time

# Allow running from repo root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import gnuplot_pipe as gp


def gaussian_noise(n, rng):
    """Box-Muller transform, two samples per pair of uniforms."""
    out = []
    while len(out) < n:
        u1 = 1.0 - rng.random()
        u2 = rng.random()
        r = math.sqrt(-2.0 * math.log(u1))
        t = 2.0 * math.pi * u2
        out.append(r * math.cos(t))
        out.append(r * math.sin(t))
    return out[:n]


rng = random.Random()

with gp.Session() as session:
    session.set(title="Histogram of gaussian distribution")
    session.plot_many(
        [
            gp.Series.boxes(gaussian_noise(1000, rng), fill=gp.Filling.solid(),
                            color="red", bins=30),
            gp.Series.histeps(gaussian_noise(1000, rng), color="blue", bins=30),
        ],
        range=gp.Range.x(-10.0, 10.0),
    )
    time.sleep(10)
