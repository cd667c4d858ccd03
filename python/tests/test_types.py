"""Tests for the value types — colors, fillings, ranges, outputs, labels."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gnuplot_pipe import _types
from gnuplot_pipe._types import (
    Color,
    Filling,
    Labels,
    Output,
    Range,
    format_date,
    format_time,
    quote,
    to_color,
)


# ─── Color ────────────────────────────────────────────────────────────────────

class TestColor:
    def test_named_to_arg(self):
        assert Color.RED.to_arg() == "lc rgb '#ff0000'"
        assert Color.GREEN.to_arg() == "lc rgb '#008000'"

    def test_rgb(self):
        assert Color.rgb(16, 32, 255).to_arg() == "lc rgb '#1020ff'"

    def test_rgb_out_of_range_passes_through(self):
        assert Color.rgb(0, 0, 300).components == (0, 0, 300)
        assert "12c" in Color.rgb(0, 0, 300).to_arg()

    def test_named_is_case_insensitive(self):
        assert Color.named("Blue") == Color.BLUE

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            Color.named("chartreuse")

    def test_to_color(self):
        assert to_color(None) is None
        assert to_color("cyan") == Color.CYAN
        assert to_color((0, 128, 0)) == Color.GREEN
        assert to_color(Color.WHITE) is Color.WHITE


# ─── Filling ──────────────────────────────────────────────────────────────────

class TestFilling:
    def test_solid(self):
        f = Filling.solid()
        assert f.is_solid
        assert f.to_arg() == "fs solid"
        assert f.to_set() == "set style fill solid"

    def test_pattern(self):
        f = Filling.pattern(3)
        assert f.pattern_index == 3
        assert f.to_arg() == "fs pattern 3"
        assert f.to_set() == "set style fill pattern 3"

    def test_negative_pattern(self):
        with pytest.raises(ValueError):
            Filling.pattern(-1)

    def test_equality(self):
        assert Filling.pattern(2) == Filling.pattern(2)
        assert Filling.pattern(2) != Filling.solid()


# ─── Range ────────────────────────────────────────────────────────────────────

class TestRange:
    def test_x(self):
        assert Range.x(-10, 10).to_commands() == ["set xrange [-10.0:10.0]"]

    def test_y(self):
        assert Range.y(0, 1.5).to_commands() == ["set yrange [0.0:1.5]"]

    def test_xy(self):
        assert Range.xy(0, 1, 2, 3).to_commands() == [
            "set xrange [0.0:1.0]",
            "set yrange [2.0:3.0]",
        ]

    def test_xyz(self):
        assert Range.xyz(0, 1, 2, 3, 4, 5).to_commands() == [
            "set xrange [0.0:1.0]",
            "set yrange [2.0:3.0]",
            "set zrange [4.0:5.0]",
        ]

    def test_date(self):
        r = Range.date(0.0, 86400.0)
        assert r.to_commands() == ['set xrange ["1970-01-01":"1970-01-02"]']
        assert r.timefmt == "%Y-%m-%d"

    def test_time_with_zone(self):
        r = Range.time(0.0, 3600.0, zone=2.0)
        assert r.to_commands() == ['set xrange ["1970-01-01-02:00:00":"1970-01-01-03:00:00"]']
        assert r.timefmt == "%Y-%m-%d-%H:%M:%S"

    def test_local_time_uses_process_offset(self, monkeypatch):
        monkeypatch.setattr(_types, "local_offset", lambda t: -5.0)
        r = Range.local_time(0.0, 60.0)
        assert r.to_commands() == ['set xrange ["1969-12-31-19:00:00":"1969-12-31-19:01:00"]']

    def test_numeric_ranges_have_no_timefmt(self):
        for r in (Range.x(0, 1), Range.y(0, 1), Range.xy(0, 1, 0, 1), Range.xyz(0, 1, 0, 1, 0, 1)):
            assert r.timefmt is None

    def test_equality(self):
        assert Range.x(0, 1) == Range.x(0.0, 1.0)
        assert Range.x(0, 1) != Range.y(0, 1)


# ─── Output ───────────────────────────────────────────────────────────────────

class TestOutput:
    def test_interactive(self):
        assert Output.create("wxt").to_commands() == ["set term wxt persist"]
        assert Output.create("qt").to_commands() == ["set term qt persist"]
        assert Output.create("x11").to_commands() == ["set term x11 persist"]

    def test_png_with_options(self):
        out = Output.create("png", "chart.png", font="Arial,10", size=(800, 600), params="transparent")
        assert out.to_commands() == [
            "set term png font 'Arial,10' size 800,600 transparent",
            "set output 'chart.png'",
        ]

    def test_pngcairo(self):
        assert Output.create("pngcairo", "c.png").to_commands() == [
            "set term pngcairo",
            "set output 'c.png'",
        ]

    def test_eps(self):
        assert Output.create("eps", "c.eps").to_commands()[0] == "set term postscript eps enhanced color"

    def test_file_terminal_needs_path(self):
        with pytest.raises(ValueError):
            Output.create("png")

    def test_interactive_rejects_path(self):
        with pytest.raises(ValueError):
            Output.create("wxt", "x.png")

    def test_unknown_terminal(self):
        with pytest.raises(ValueError):
            Output.create("svgz", "x.svg")


# ─── Labels ───────────────────────────────────────────────────────────────────

class TestLabels:
    def test_both(self):
        labels = Labels.create(x="time", y="price")
        assert labels.to_commands() == ["set xlabel 'time'", "set ylabel 'price'"]
        assert labels.to_unset() == ["unset xlabel", "unset ylabel"]

    def test_only_y(self):
        labels = Labels.create(y="count")
        assert labels.to_commands() == ["set ylabel 'count'"]
        assert labels.to_unset() == ["unset ylabel"]

    def test_none(self):
        assert Labels.create().to_commands() == []
        assert Labels.create().to_unset() == []


# ─── Formatting helpers ───────────────────────────────────────────────────────

class TestFormatting:
    def test_quote_escapes(self):
        assert quote("it's") == "'it''s'"

    def test_format_time(self):
        assert format_time(0.0) == "1970-01-01-00:00:00"
        assert format_time(0.0, zone=-1.0) == "1969-12-31-23:00:00"

    def test_format_date(self):
        assert format_date(86400.0 * 365) == "1971-01-01"
