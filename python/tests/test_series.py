"""Tests for the series encoder — clauses, row layouts, binning hookup."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gnuplot_pipe._series import Data, Series, Splot
from gnuplot_pipe._types import Color, Filling


DAY = 86400.0


# ─── Row layouts ──────────────────────────────────────────────────────────────

class TestColumnLayout:
    """Each data kind's rows have exactly the documented number of fields."""

    CASES = [
        (Data.Y, lambda: Data.y([1.0, 2.0])),
        (Data.XY, lambda: Data.xy([(0.0, 1.0), (1.0, 2.0)])),
        (Data.XYZ, lambda: Data.xyz([(0.0, 1.0, 2.0)])),
        (Data.TIME_Y, lambda: Data.time_y([(0.0, 1.0), (60.0, 2.0)], zone=0.0)),
        (Data.DATE_Y, lambda: Data.date_y([(0.0, 1.0), (DAY, 2.0)])),
        (Data.TIME_OHLC, lambda: Data.time_ohlc([(0.0, (1.0, 2.0, 0.5, 1.5))], zone=1.0)),
        (Data.DATE_OHLC, lambda: Data.date_ohlc([(0.0, (1.0, 2.0, 0.5, 1.5))])),
    ]

    @pytest.mark.parametrize("kind,build", CASES)
    def test_row_width(self, kind, build):
        data = build()
        assert data.kind == kind
        rows = list(data.rows())
        assert rows
        for row in rows:
            assert len(row.split(" ")) == data.columns

    def test_function_has_no_rows(self):
        data = Data.func("sin(x)")
        assert data.columns == 0
        assert list(data.rows()) == []
        assert data.source == "sin(x)"

    def test_y_rows_carry_implied_index(self):
        assert list(Data.y([1.0, 2.0, 3.0]).rows()) == ["0 1.0", "1 2.0", "2 3.0"]

    def test_timey_shifted_by_zone(self):
        rows = list(Data.time_y([(0.0, 1.0)], zone=-1.0).rows())
        assert rows == ["1969-12-31-23:00:00 1.0"]

    def test_datey(self):
        assert list(Data.date_y([(DAY, 4.0)]).rows()) == ["1970-01-02 4.0"]

    def test_ohlc_accepts_flat_rows(self):
        nested = list(Data.date_ohlc([(0.0, (1.0, 3.0, 0.5, 2.0))]).rows())
        flat = list(Data.date_ohlc([(0.0, 1.0, 3.0, 0.5, 2.0)]).rows())
        assert nested == flat == ["1970-01-01 1.0 3.0 0.5 2.0"]

    def test_wrong_width_rejected(self):
        with pytest.raises(ValueError):
            Data.xy([(1.0, 2.0, 3.0)])

    def test_numpy_xy(self):
        np = pytest.importorskip("numpy")
        data = Data.xy(np.array([[0.0, 1.0], [2.0, 3.0]]))
        assert list(data.rows()) == ["0.0 1.0", "2.0 3.0"]

    def test_payload_is_copied(self):
        values = [1.0, 2.0]
        data = Data.y(values)
        values.append(3.0)
        values[0] = 9.0
        assert list(data.rows()) == ["0 1.0", "1 2.0"]


# ─── Clauses ──────────────────────────────────────────────────────────────────

class TestSeriesClause:
    def test_default_styling(self):
        s = Series.lines([1.0, 2.0, 3.0])
        assert s.clause == "'-' using 1:2 with lines"
        assert s.style == "lines"

    def test_full_styling(self):
        s = Series.points_xy([(0, 1)], title="p", color="red", weight=2)
        assert s.clause == "'-' using 1:2 with points title 'p' lc rgb '#ff0000' lw 2"

    def test_color_object(self):
        s = Series.steps([1.0], color=Color.rgb(1, 2, 3))
        assert s.clause.endswith("lc rgb '#010203'")

    def test_func(self):
        s = Series.linespoints_func("cos(x)", title="cos")
        assert s.clause == "cos(x) with linespoints title 'cos'"
        assert s.rows() == []

    def test_histogram(self):
        s = Series.histogram([3.0, 1.0], fill=Filling.pattern(2))
        assert s.clause == "'-' using 2 with histograms fs pattern 2"
        assert s.rows() == ["0 3.0", "1 1.0"]

    def test_candles_date(self):
        s = Series.candles_date_ohlc([(0.0, (1.0, 3.0, 0.5, 2.0))], fill=Filling.solid())
        assert s.clause == "'-' using 1:2:4:3:5 with candlesticks fs solid"
        assert s.data.timefmt == "%Y-%m-%d"

    def test_candles_time(self):
        s = Series.candles_time_ohlc([(0.0, (1.0, 3.0, 0.5, 2.0))], zone=0.0)
        assert s.rows() == ["1970-01-01-00:00:00 1.0 3.0 0.5 2.0"]
        assert s.data.timefmt == "%Y-%m-%d-%H:%M:%S"

    @pytest.mark.parametrize("ctor,style", [
        (Series.lines_timey, "lines"),
        (Series.points_timey, "points"),
        (Series.linespoints_timey, "linespoints"),
        (Series.steps_timey, "steps"),
    ])
    def test_timey_families(self, ctor, style):
        s = ctor([(0.0, 1.0)], zone=0.0)
        assert s.clause == f"'-' using 1:2 with {style}"
        assert s.data.kind == Data.TIME_Y

    @pytest.mark.parametrize("ctor,style", [
        (Series.lines_datey, "lines"),
        (Series.points_datey, "points"),
        (Series.linespoints_datey, "linespoints"),
        (Series.steps_datey, "steps"),
    ])
    def test_datey_families(self, ctor, style):
        s = ctor([(0.0, 1.0)])
        assert s.style == style
        assert s.data.kind == Data.DATE_Y

    def test_custom(self):
        s = Series.custom("'-' using 1:2 with impulses", Data.xy([(1, 2)]))
        assert s.clause == "'-' using 1:2 with impulses"
        assert s.style is None
        assert s.rows() == ["1.0 2.0"]

    def test_series_rejects_xyz(self):
        with pytest.raises(ValueError):
            Series.custom("'-' using 1:2:3 with lines", Data.xyz([(1, 2, 3)]))


# ─── Binned series ────────────────────────────────────────────────────────────

class TestBinnedSeries:
    def test_boxes_binned(self):
        s = Series.boxes([1.0, 1.0, 2.0, 3.0], bins=2, fill=Filling.solid(), color="red")
        assert s.clause == "'-' using 1:2 with boxes lc rgb '#ff0000' fs solid"
        assert s.data.kind == Data.XY
        assert s.rows() == ["1.5 2.0", "2.5 2.0"]

    def test_boxes_unbinned(self):
        s = Series.boxes([4.0, 2.0])
        assert s.data.kind == Data.Y
        assert s.rows() == ["0 4.0", "1 2.0"]

    def test_histeps_binwidth(self):
        s = Series.histeps([0.0, 1.0, 2.5], binwidth=1.0)
        assert s.rows() == ["0.5 1.0", "1.5 1.0", "2.5 1.0"]

    def test_histeps_empty(self):
        assert Series.histeps([], bins=10).rows() == []


# ─── 3-D ──────────────────────────────────────────────────────────────────────

class TestSplot:
    def test_points_xyz(self):
        s = Splot.points_xyz([(1, 2, 3)], title="cloud")
        assert s.clause == "'-' using 1:2:3 with points title 'cloud'"
        assert s.rows() == ["1.0 2.0 3.0"]

    def test_lines_and_linespoints(self):
        assert Splot.lines_xyz([(0, 0, 0)]).style == "lines"
        assert Splot.linespoints_xyz([(0, 0, 0)]).style == "linespoints"

    def test_splot_rejects_2d(self):
        with pytest.raises(ValueError):
            Splot.custom("'-' using 1:2 with lines", Data.y([1.0]))
