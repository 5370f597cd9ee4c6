"""Rendered regions of the calendar view, rasterized with Pillow.

A region is one page worth of the view: the header (goal title, dates,
totals and legend) or a single month grid. Layout is expressed in CSS-like
base pixels and multiplied by the scale factor at rasterization time.
"""
from __future__ import annotations
import math
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont

from goal.domain.CalendarReport import CalendarReport, MonthGrid
from goal.utilities.config import FONT_PATH
from goal.utilities.constants import WEEKDAY_NAMES, MONTH_NAMES, LEGEND_EXAMPLE

# Layout (base pixels)
REGION_WIDTH = 800
MARGIN = 20
COLUMN_WIDTH = (REGION_WIDTH - 2 * MARGIN) / 7
DAY_HEADER_HEIGHT = 32
CELL_HEIGHT = 84
TITLE_HEIGHT = 60

# Colors
BG_COLOR = "white"
TEXT_COLOR = "black"
GRID_COLOR = "#333333"
HEADER_BG_COLOR = "#2c3e50"
HEADER_TEXT_COLOR = "white"
EMPTY_CELL_COLOR = "#f2f2f2"
DAY_NUMBER_COLOR = "#e53935"   # red, top-left
REMAINING_COLOR = "#2e7d32"    # green, bottom-right


@lru_cache(maxsize=32)
def _font(size: int) -> ImageFont.FreeTypeFont:
    if FONT_PATH:
        return ImageFont.truetype(FONT_PATH, size)
    return ImageFont.load_default(size=size)


def format_long_date(d) -> str:
    """'January 1, 2024' (en-US long form)."""
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"


class Region(ABC):
    label = "region"

    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """Base-pixel (width, height) of the region."""

    @abstractmethod
    def draw(self, draw: ImageDraw.ImageDraw, s) -> None:
        """Paint the region; `s` maps base pixels to output pixels."""

    def rasterize(self, scale: float = 1.0) -> Image.Image:
        """Render the region to an RGB image upscaled by `scale`."""
        width, height = self.size()

        def s(v):
            return int(round(v * scale))

        img = Image.new("RGB", (max(1, s(width)), max(1, s(height))), BG_COLOR)
        self.draw(ImageDraw.Draw(img), s)
        return img

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.label}>"


class HeaderRegion(Region):
    """Goal title, date range, totals and the cell legend."""
    label = "header"

    INFO_LINE_HEIGHT = 30
    LEGEND_BOX = 90

    def __init__(self, report: CalendarReport):
        self.report = report

    def info_lines(self) -> List[Tuple[str, str]]:
        r = self.report
        return [
            ("START DATE:", format_long_date(r.plan.start_date)),
            ("END DATE:", format_long_date(r.plan.end_date)),
            ("TOTAL DAYS:", f"{r.total_days} DAYS"),
            ("REMAINING DAYS:", f"{r.days_remaining} DAYS"),
        ]

    def size(self) -> Tuple[int, int]:
        info_h = self.INFO_LINE_HEIGHT * len(self.info_lines())
        return REGION_WIDTH, TITLE_HEIGHT + info_h + self.LEGEND_BOX + 3 * MARGIN

    def draw(self, draw, s) -> None:
        title = f"TARGET: {self.report.plan.name}"
        draw.text((s(REGION_WIDTH / 2), s(MARGIN + TITLE_HEIGHT / 2)), title,
                  fill=TEXT_COLOR, font=_font(s(32)), anchor="mm")

        y = MARGIN + TITLE_HEIGHT
        for key, value in self.info_lines():
            draw.text((s(MARGIN * 2), s(y)), key, fill=TEXT_COLOR, font=_font(s(18)))
            draw.text((s(MARGIN * 2 + 190), s(y)), value, fill=TEXT_COLOR, font=_font(s(18)))
            y += self.INFO_LINE_HEIGHT

        self._draw_legend(draw, s, MARGIN * 2, y + MARGIN)

    def _draw_legend(self, draw, s, x, y) -> None:
        box = self.LEGEND_BOX
        day_number, calendar_day, remaining = LEGEND_EXAMPLE
        draw.rectangle([s(x), s(y), s(x + box), s(y + box)], outline=GRID_COLOR, width=max(1, s(2)))
        draw.text((s(x + 6), s(y + 4)), str(day_number), fill=DAY_NUMBER_COLOR, font=_font(s(14)))
        draw.text((s(x + box / 2), s(y + box / 2)), str(calendar_day), fill=TEXT_COLOR,
                  font=_font(s(30)), anchor="mm")
        draw.text((s(x + box - 6), s(y + box - 4)), str(remaining), fill=REMAINING_COLOR,
                  font=_font(s(14)), anchor="rd")

        explanations = [
            (DAY_NUMBER_COLOR, "Day number (top-left)"),
            (TEXT_COLOR, "Calendar date (center)"),
            (REMAINING_COLOR, "Days remaining (bottom-right)"),
        ]
        ex = x + box + 30
        ey = y + 8
        for color, text in explanations:
            draw.rectangle([s(ex), s(ey), s(ex + 16), s(ey + 16)], fill=color)
            draw.text((s(ex + 26), s(ey)), text, fill=TEXT_COLOR, font=_font(s(15)))
            ey += 28


class MonthRegion(Region):
    """One month: title, Sunday-first weekday row and the day cells."""

    def __init__(self, month: MonthGrid):
        self.month = month
        self.label = month.title

    @property
    def rows(self) -> int:
        return math.ceil((self.month.first_weekday_offset + self.month.day_count) / 7)

    def size(self) -> Tuple[int, int]:
        return REGION_WIDTH, MARGIN * 2 + TITLE_HEIGHT + DAY_HEADER_HEIGHT + self.rows * CELL_HEIGHT

    def cell_box(self, slot: int) -> Tuple[float, float, float, float]:
        """Base-pixel box of grid slot `slot` (0-based, Sunday-first)."""
        row, col = divmod(slot, 7)
        x0 = MARGIN + col * COLUMN_WIDTH
        y0 = MARGIN + TITLE_HEIGHT + DAY_HEADER_HEIGHT + row * CELL_HEIGHT
        return x0, y0, x0 + COLUMN_WIDTH, y0 + CELL_HEIGHT

    def draw(self, draw, s) -> None:
        m = self.month
        draw.text((s(REGION_WIDTH / 2), s(MARGIN + TITLE_HEIGHT / 2)), m.title,
                  fill=TEXT_COLOR, font=_font(s(28)), anchor="mm")

        header_y = MARGIN + TITLE_HEIGHT
        for col, name in enumerate(WEEKDAY_NAMES):
            x0 = MARGIN + col * COLUMN_WIDTH
            draw.rectangle([s(x0), s(header_y), s(x0 + COLUMN_WIDTH), s(header_y + DAY_HEADER_HEIGHT)],
                           fill=HEADER_BG_COLOR, outline=GRID_COLOR)
            draw.text((s(x0 + COLUMN_WIDTH / 2), s(header_y + DAY_HEADER_HEIGHT / 2)), name,
                      fill=HEADER_TEXT_COLOR, font=_font(s(13)), anchor="mm")

        for slot in range(m.first_weekday_offset):
            x0, y0, x1, y1 = self.cell_box(slot)
            draw.rectangle([s(x0), s(y0), s(x1), s(y1)], fill=EMPTY_CELL_COLOR)

        for day_idx, cell in enumerate(m.cells):
            x0, y0, x1, y1 = self.cell_box(m.first_weekday_offset + day_idx)
            if cell is None:
                draw.rectangle([s(x0), s(y0), s(x1), s(y1)], fill=EMPTY_CELL_COLOR)
                continue
            draw.rectangle([s(x0), s(y0), s(x1), s(y1)], fill=BG_COLOR, outline=GRID_COLOR,
                           width=max(1, s(1)))
            draw.text((s(x0 + 6), s(y0 + 4)), str(cell.sequence_index), fill=DAY_NUMBER_COLOR,
                      font=_font(s(13)))
            draw.text((s((x0 + x1) / 2), s((y0 + y1) / 2)), str(cell.calendar_day), fill=TEXT_COLOR,
                      font=_font(s(28)), anchor="mm")
            draw.text((s(x1 - 6), s(y1 - 4)), str(cell.days_remaining), fill=REMAINING_COLOR,
                      font=_font(s(13)), anchor="rd")


def regions_for_report(report: CalendarReport) -> Tuple[HeaderRegion, List[MonthRegion]]:
    """The header region and one region per month, in page order."""
    return HeaderRegion(report), [MonthRegion(m) for m in report.months]


__all__ = ['Region', 'HeaderRegion', 'MonthRegion', 'regions_for_report', 'format_long_date']
