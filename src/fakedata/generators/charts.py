"""Chart geometry for JPEG business graphics.

Each builder samples its data from a :class:`ContentSource` and lays it out on
a fixed 1200x800 canvas.  The plot area starts at (150, 120) and spans 900x550
pixels; bar and line values are scaled so the largest reaches 50 pixels below
the top of the plot area.
"""

from __future__ import annotations

from typing import Final

from ..content.source import ContentSource
from .outline import Bar, ChartKind, ChartOutline, LineSeries, PieSlice, Tick

WIDTH: Final = 1200
HEIGHT: Final = 800
PLOT_X: Final = 150
PLOT_Y: Final = 120
PLOT_W: Final = WIDTH - 300
PLOT_H: Final = HEIGHT - 250
HEADROOM: Final = 50
BAR_GAP: Final = 20
LABEL_MAX: Final = 10

PALETTE: Final = (
    (66, 133, 244),
    (219, 68, 55),
    (244, 180, 0),
    (15, 157, 88),
    (171, 71, 188),
    (255, 112, 67),
)

MONTH_ABBR: Final = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
                     "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

CHART_KINDS: Final[tuple[ChartKind, ...]] = ("bar", "pie", "line")


def _scale_y(value: float, max_value: float) -> int:
    return PLOT_Y + PLOT_H - int((value / max_value) * (PLOT_H - HEADROOM))


def truncate_label(label: str, limit: int = LABEL_MAX) -> str:
    """Shorten ``label`` to ``limit`` characters followed by ``...``."""

    return label if len(label) <= limit else label[:limit] + "..."


def thousands(value: float) -> str:
    return f"${value / 1000:.0f}K"


def _blank(kind: ChartKind, source: ContentSource) -> ChartOutline:
    return ChartOutline(
        kind=kind,
        width=WIDTH,
        height=HEIGHT,
        title=f"{source.company_name()} - {source.quarter()} {source.year()}",
        subtitle=source.image_name().replace("_", " "),
        footer=f"Confidential - {source.company_name()}",
        plot=(PLOT_X, PLOT_Y, PLOT_X + PLOT_W, PLOT_Y + PLOT_H),
    )


def bar_chart(source: ContentSource) -> ChartOutline:
    """Expense categories as vertical bars with six evenly spaced ticks."""

    chart = _blank("bar", source)
    categories = source.expense_categories()[:6]
    values = [source.amount(10_000, 100_000) for _ in categories]
    max_value = max(values)

    slot = (PLOT_W - 100) // len(categories)
    bottom = PLOT_Y + PLOT_H
    for i, (label, value) in enumerate(zip(categories, values)):
        x0 = PLOT_X + 50 + i * slot
        top = _scale_y(value, max_value)
        chart.bars.append(
            Bar(truncate_label(label), value, (x0, top, x0 + slot - BAR_GAP, bottom), PALETTE[i % len(PALETTE)])
        )
        chart.x_ticks.append(Tick(x0 + (slot - BAR_GAP) // 2, truncate_label(label)))

    for i in range(6):
        tick_value = max_value * i / 5
        chart.y_ticks.append(Tick(_scale_y(tick_value, max_value), thousands(tick_value)))
    return chart


def pie_chart(source: ContentSource) -> ChartOutline:
    """Revenue streams as pie slices with percentage shares."""

    chart = _blank("pie", source)
    chart.pie_center = (WIDTH // 2 - 100, HEIGHT // 2 + 20)
    chart.pie_radius = 200
    streams = source.revenue_streams()[:5]
    values = [source.amount(10, 100) for _ in streams]
    total = sum(values)

    start = 0.0
    for i, (label, value) in enumerate(zip(streams, values)):
        share = value / total
        end = start + share * 360.0
        chart.slices.append(PieSlice(label, value, share * 100.0, start, end, PALETTE[i % len(PALETTE)]))
        start = end
    return chart


def line_chart(source: ContentSource) -> ChartOutline:
    """Twelve months of rising revenue and expenses."""

    chart = _blank("line", source)
    base_revenue = source.amount(50, 100)
    base_expenses = source.amount(30, 80)
    revenue = [base_revenue + source.amount(-10, 20) + i * 3 for i in range(12)]
    expenses = [base_expenses + source.amount(-10, 15) + i * 2 for i in range(12)]
    max_value = max(revenue + expenses)

    step = PLOT_W // (len(MONTH_ABBR) - 1)
    xs = [PLOT_X + i * step for i in range(len(MONTH_ABBR))]
    for name, values, color in (("Revenue", revenue, PALETTE[0]), ("Expenses", expenses, PALETTE[1])):
        points = [(x, _scale_y(v, max_value)) for x, v in zip(xs, values)]
        chart.series.append(LineSeries(name, values, points, color))

    chart.x_ticks = [Tick(x, month) for x, month in zip(xs, MONTH_ABBR)]
    chart.y_ticks = [
        Tick(PLOT_Y + PLOT_H - int((i / 5) * (PLOT_H - HEADROOM)), "") for i in range(1, 6)
    ]
    return chart


_BUILDERS = {"bar": bar_chart, "pie": pie_chart, "line": line_chart}


def build_chart(source: ContentSource, kind: ChartKind | None = None) -> ChartOutline:
    """Build a chart of ``kind``, or of a randomly chosen kind."""

    chosen = kind if kind is not None else source.pick(CHART_KINDS)
    return _BUILDERS[chosen](source)


__all__ = [
    "CHART_KINDS",
    "HEIGHT",
    "PALETTE",
    "WIDTH",
    "bar_chart",
    "build_chart",
    "line_chart",
    "pie_chart",
    "thousands",
    "truncate_label",
]
