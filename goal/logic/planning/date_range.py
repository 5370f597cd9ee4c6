"""Date range planning: day counts and the month-partitioned calendar report.

All functions are pure; "today" is the only outside input and can be passed
explicitly so reports are reproducible.
"""
from __future__ import annotations
import calendar
import logging
from datetime import date, datetime, time, timedelta
from typing import Iterator, Optional, Tuple, Union

from goal.domain.CalendarReport import CalendarReport, DayCell, MonthGrid
from goal.domain.GoalPlan import GoalPlan
from goal.utilities.constants import MS_PER_DAY, MONTH_NAMES
from goal.utilities.validators import validate_plan

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

_US_PER_DAY = MS_PER_DAY * 1000

__all__ = [
    "compute_total_days", "compute_days_elapsed", "compute_days_remaining",
    "iter_months", "build_month_grid", "build_calendar_report",
]


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def compute_total_days(start: DateLike, end: DateLike) -> int:
    """Inclusive number of days between two dates.

    Uses the absolute difference, so the order of the arguments is not
    checked here; callers validate end >= start first. A partial day counts
    as a whole one.
    """
    diff = abs(_as_datetime(end) - _as_datetime(start))
    micros = diff // timedelta(microseconds=1)
    return -(-micros // _US_PER_DAY) + 1


def compute_days_elapsed(start: DateLike, today: Optional[DateLike] = None) -> Optional[int]:
    """Whole days from the start date to today, both taken at midnight.

    Returns None while the goal has not started yet.
    """
    today_d = _as_date(today) if today is not None else date.today()
    start_d = _as_date(start)
    if today_d < start_d:
        return None
    return (today_d - start_d).days


def compute_days_remaining(total_days: int, days_elapsed: Optional[int]) -> int:
    # total - elapsed - 1 is kept as-is; past the end date it falls back to total
    if days_elapsed is None:
        return total_days
    remaining = total_days - days_elapsed - 1
    return remaining if remaining >= 0 else total_days


def iter_months(start: date, end: date) -> Iterator[Tuple[int, int]]:
    """Yield (year, month) from the month of start through the month of end."""
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        yield year, month
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)


def build_month_grid(year: int, month: int, start: date, end: date,
                     counter: int, total_days: int) -> Tuple[MonthGrid, int]:
    """Build one MonthGrid and return it with the next sequence number.

    counter is the sequence index the first in-range day of this month gets;
    it keeps increasing across months.
    """
    first_weekday, day_count = calendar.monthrange(year, month)
    cells = []
    for day in range(1, day_count + 1):
        current = date(year, month, day)
        if start <= current <= end:
            cells.append(DayCell(
                calendar_day=day,
                sequence_index=counter,
                days_remaining=total_days - counter,
            ))
            counter += 1
        else:
            cells.append(None)
    grid = MonthGrid(
        year=year,
        month_index=month - 1,
        month_name=MONTH_NAMES[month - 1],
        # calendar.monthrange counts from Monday; the grid starts on Sunday
        first_weekday_offset=(first_weekday + 1) % 7,
        day_count=day_count,
        cells=tuple(cells),
    )
    return grid, counter


def build_calendar_report(plan: GoalPlan, today: Optional[DateLike] = None) -> CalendarReport:
    """Validate the plan and compute its full calendar report.

    Raises ValidationError for an empty name, a missing date or an end date
    before the start date.
    """
    validate_plan(plan)
    start, end = _as_date(plan.start_date), _as_date(plan.end_date)

    total_days = compute_total_days(start, end)
    days_elapsed = compute_days_elapsed(start, today)
    days_remaining = compute_days_remaining(total_days, days_elapsed)

    months = []
    counter = 1
    for year, month in iter_months(start, end):
        grid, counter = build_month_grid(year, month, start, end, counter, total_days)
        months.append(grid)

    logger.debug("Built calendar for %r: %d days over %d months", plan.name, total_days, len(months))
    return CalendarReport(
        plan=plan,
        total_days=total_days,
        days_elapsed=days_elapsed,
        days_remaining=days_remaining,
        months=tuple(months),
    )
