"""Tests for chart geometry."""

from __future__ import annotations

import pytest

from fakedata.content.source import ContentSource
from fakedata.content.themes import Theme
from fakedata.generators import charts


@pytest.fixture
def source() -> ContentSource:
    return ContentSource(Theme.RETAIL, seed=7)


def test_truncate_label() -> None:
    assert charts.truncate_label("Inventory") == "Inventory"
    assert charts.truncate_label("Supply Chain Costs") == "Supply Cha..."


def test_thousands() -> None:
    assert charts.thousands(45_400) == "$45K"


def test_bar_chart(source: ContentSource) -> None:
    chart = charts.bar_chart(source)
    assert chart.kind == "bar"
    assert len(chart.bars) == 6
    assert len(chart.y_ticks) == 6
    x0, y0, x1, y1 = chart.plot
    tallest = min(bar.box[1] for bar in chart.bars)
    assert tallest == y0 + 50
    for bar in chart.bars:
        left, top, right, bottom = bar.box
        assert x0 < left < right <= x1
        assert bottom == y1
        assert 10_000 <= bar.value <= 100_000
        assert len(bar.label) <= 13
    assert [t.pos for t in chart.y_ticks] == sorted((t.pos for t in chart.y_ticks), reverse=True)
    assert chart.y_ticks[0].label == "$0K"
    assert chart.title.count(" - ") == 1
    assert chart.footer.startswith("Confidential - ")


def test_pie_chart(source: ContentSource) -> None:
    chart = charts.pie_chart(source)
    assert len(chart.slices) == 5
    assert chart.pie_center == (500, 420)
    assert chart.pie_radius == 200
    assert sum(s.share for s in chart.slices) == pytest.approx(100.0)
    assert chart.slices[0].start == 0.0
    assert chart.slices[-1].end == pytest.approx(360.0)
    for prev, nxt in zip(chart.slices, chart.slices[1:]):
        assert prev.end == pytest.approx(nxt.start)


def test_line_chart(source: ContentSource) -> None:
    chart = charts.line_chart(source)
    assert [s.name for s in chart.series] == ["Revenue", "Expenses"]
    assert [t.label for t in chart.x_ticks] == list(charts.MONTH_ABBR)
    x0, y0, x1, y1 = chart.plot
    peak = min(y for s in chart.series for _, y in s.points)
    assert peak == y0 + 50
    for series in chart.series:
        assert len(series.points) == 12
        assert all(y0 <= y <= y1 for _, y in series.points)
        xs = [x for x, _ in series.points]
        assert xs == sorted(xs) and xs[0] == x0


def test_build_chart_kinds(source: ContentSource) -> None:
    for kind in charts.CHART_KINDS:
        assert charts.build_chart(source, kind).kind == kind
    assert charts.build_chart(source).kind in charts.CHART_KINDS
