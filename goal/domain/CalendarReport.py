"""Calendar report value objects: DayCell, MonthGrid and the CalendarReport aggregate.

A CalendarReport is recomputed wholesale from a GoalPlan; none of these
objects are mutated after creation.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from goal.domain.GoalPlan import GoalPlan


@dataclass(frozen=True)
class DayCell:
    calendar_day: int
    sequence_index: int  # 1-based position in the whole range
    days_remaining: int

    def to_dict(self):
        return {
            "calendar_day": self.calendar_day,
            "sequence_index": self.sequence_index,
            "days_remaining": self.days_remaining,
        }


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month_index: int  # 0..11
    month_name: str
    first_weekday_offset: int  # 0 = Sunday
    day_count: int
    cells: tuple[Optional[DayCell], ...]

    @property
    def active_cells(self) -> list[DayCell]:
        """Cells that fall inside the goal range, in calendar order."""
        return [c for c in self.cells if c is not None]

    @property
    def title(self) -> str:
        return f"{self.month_name} {self.year}"

    def to_dict(self):
        return {
            "year": self.year,
            "month_index": self.month_index,
            "month_name": self.month_name,
            "first_weekday_offset": self.first_weekday_offset,
            "day_count": self.day_count,
            "cells": [c.to_dict() if c else None for c in self.cells],
        }


@dataclass(frozen=True)
class CalendarReport:
    plan: GoalPlan
    total_days: int
    days_elapsed: Optional[int]  # None until the goal has started
    days_remaining: int
    months: tuple[MonthGrid, ...]

    def to_dict(self):
        '''Converts the report to a dictionary for the JSON API.'''
        return {
            "plan": self.plan.to_dict(),
            "total_days": self.total_days,
            "days_elapsed": self.days_elapsed,
            "days_remaining": self.days_remaining,
            "months": [m.to_dict() for m in self.months],
        }

    def __str__(self) -> str:
        return f"CalendarReport({self.plan.name}, {self.total_days} days, {len(self.months)} months)"
