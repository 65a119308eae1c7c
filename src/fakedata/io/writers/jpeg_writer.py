"""JPEG chart writer built on Pillow."""

from __future__ import annotations

import os

from PIL import Image, ImageDraw, ImageFont

from ...generators.outline import ChartOutline

INK = (51, 51, 51)
MUTED = (102, 102, 102)
FAINT = (153, 153, 153)
GRID = (220, 220, 220)
JPEG_QUALITY = 90


def _font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    return ImageFont.load_default(size=size)


def _text_width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    left, _, right, _ = draw.textbbox((0, 0), text, font=font)
    return int(right - left)


def _centered(draw: ImageDraw.ImageDraw, text: str, cx: int, y: int, font, fill) -> None:
    draw.text((cx - _text_width(draw, text, font) // 2, y), text, fill=fill, font=font)


def _draw_axes(draw: ImageDraw.ImageDraw, chart: ChartOutline) -> None:
    x0, y0, x1, y1 = chart.plot
    draw.line([(x0, y1), (x1, y1)], fill=INK, width=2)
    draw.line([(x0, y0), (x0, y1)], fill=INK, width=2)


def _draw_bar(draw: ImageDraw.ImageDraw, chart: ChartOutline) -> None:
    x0, _, x1, y1 = chart.plot
    small = _font(10)
    for tick in chart.y_ticks:
        draw.line([(x0, tick.pos), (x1, tick.pos)], fill=GRID, width=1)
        draw.text((x0 - 60, tick.pos - 6), tick.label, fill=INK, font=small)
    _draw_axes(draw, chart)
    bold = _font(11)
    for bar in chart.bars:
        left, top, right, bottom = bar.box
        draw.rectangle(bar.box, fill=bar.color)
        value = f"${bar.value / 1000:.0f}K"
        _centered(draw, value, (left + right) // 2, top - 18, bold, INK)
    for tick in chart.x_ticks:
        _centered(draw, tick.label, tick.pos, y1 + 10, small, INK)


def _draw_pie(draw: ImageDraw.ImageDraw, chart: ChartOutline) -> None:
    cx, cy = chart.pie_center
    r = chart.pie_radius
    for piece in chart.slices:
        draw.pieslice([(cx - r, cy - r), (cx + r, cy + r)], piece.start, piece.end, fill=piece.color)
    legend_x = cx + r + 80
    legend_y = cy - len(chart.slices) * 30 // 2
    font = _font(14)
    for i, piece in enumerate(chart.slices):
        top = legend_y + i * 30
        draw.rectangle([(legend_x, top), (legend_x + 20, top + 20)], fill=piece.color)
        draw.text((legend_x + 30, top + 3), f"{piece.label} ({piece.share:.1f}%)", fill=INK, font=font)


def _draw_line(draw: ImageDraw.ImageDraw, chart: ChartOutline) -> None:
    x0, y0, x1, y1 = chart.plot
    for tick in chart.y_ticks:
        draw.line([(x0, tick.pos), (x1, tick.pos)], fill=GRID, width=1)
    _draw_axes(draw, chart)
    for series in chart.series:
        draw.line(series.points, fill=series.color, width=3)
        for x, y in series.points:
            draw.ellipse([(x - 5, y - 5), (x + 5, y + 5)], fill=series.color)
    small = _font(10)
    for tick in chart.x_ticks:
        draw.text((tick.pos - 10, y1 + 10), tick.label, fill=INK, font=small)
    legend = _font(12)
    for i, series in enumerate(chart.series):
        top = y0 + 10 + i * 25
        draw.rectangle([(x1 - 200, top), (x1 - 185, top + 15)], fill=series.color)
        draw.text((x1 - 180, top), series.name, fill=INK, font=legend)


_PAINTERS = {"bar": _draw_bar, "pie": _draw_pie, "line": _draw_line}


def write_jpeg(path: str | os.PathLike[str], outline: ChartOutline) -> None:
    """Render ``outline`` as an RGB JPEG at ``path``."""

    image = Image.new("RGB", (outline.width, outline.height), "white")
    draw = ImageDraw.Draw(image)

    _centered(draw, outline.title, outline.width // 2, 25, _font(28), INK)
    _centered(draw, outline.subtitle, outline.width // 2, 70, _font(16), MUTED)
    _PAINTERS[outline.kind](draw, outline)
    draw.text((50, outline.height - 42), outline.footer, fill=FAINT, font=_font(12))

    image.save(os.fspath(path), format="JPEG", quality=JPEG_QUALITY)


__all__ = ["write_jpeg"]
