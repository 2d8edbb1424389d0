"""
Calendar grid generation for the day, week and month views.

Weeks start on Sunday. Weekday indices in this module follow that
convention (Sunday = 0 .. Saturday = 6), unlike ``date.weekday()``.

Usage:
    cells = generate_days(date(2024, 3, 4), CalendarView.WEEK)
    assert cells[0].date == "2024-03-03"
"""

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Union

logger = logging.getLogger(__name__)

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DAYS_PER_WEEK = 7

SLOT_START_HOUR = 8
SLOT_END_HOUR = 20
SLOT_MINUTES = 30


class CalendarView(str, Enum):
    """Granularity of the visible calendar."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class CalendarCell:
    """One rendered date in the calendar grid."""
    date: str
    day_name: str
    day_number: int

    def as_date(self) -> date:
        return date.fromisoformat(self.date)


def normalize_view(view: Union[CalendarView, str, None]) -> CalendarView:
    """Coerce a view value, falling back to the week view for anything unknown."""
    try:
        return CalendarView(view)
    except ValueError:
        logger.debug("Unknown calendar view %r, using week", view)
        return CalendarView.WEEK


def sunday_index(day: date) -> int:
    """Weekday index with Sunday = 0."""
    return day.isoweekday() % DAYS_PER_WEEK


def _as_date(value: Union[date, datetime]) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def make_cell(day: date) -> CalendarCell:
    return CalendarCell(
        date=day.isoformat(),
        day_name=DAY_NAMES[sunday_index(day)],
        day_number=day.day,
    )


def week_start(reference_date: Union[date, datetime]) -> date:
    """The Sunday on or before ``reference_date``."""
    day = _as_date(reference_date)
    return day - timedelta(days=sunday_index(day))


def generate_days(
    reference_date: Union[date, datetime],
    view: Union[CalendarView, str],
) -> list[CalendarCell]:
    """
    Produce the ordered cells to render for a reference date and view.

    Args:
        reference_date: Any date inside the period to show.
        view: ``day``, ``week`` or ``month``. Unknown values render a week.

    Returns:
        One cell for a day, seven cells (Sunday first) for a week, or every
        date of the month for a month. Month grids carry no placeholders;
        see ``leading_padding``.
    """
    day = _as_date(reference_date)
    view = normalize_view(view)

    if view == CalendarView.DAY:
        return [make_cell(day)]

    if view == CalendarView.MONTH:
        _, last = calendar.monthrange(day.year, day.month)
        return [make_cell(date(day.year, day.month, n)) for n in range(1, last + 1)]

    start = week_start(day)
    return [make_cell(start + timedelta(days=i)) for i in range(DAYS_PER_WEEK)]


def leading_padding(
    cells: list[CalendarCell],
    view: Union[CalendarView, str] = CalendarView.MONTH,
) -> int:
    """Number of empty placeholders before the first cell of a Sunday-first month grid."""
    if not cells or normalize_view(view) != CalendarView.MONTH:
        return 0
    return sunday_index(cells[0].as_date())


def generate_time_slots(
    start_hour: int = SLOT_START_HOUR,
    end_hour: int = SLOT_END_HOUR,
    step_minutes: int = SLOT_MINUTES,
) -> list[str]:
    """Zero-padded ``HH:MM`` labels from ``start_hour`` up to, not including, ``end_hour``."""
    return [
        f"{minutes // 60:02d}:{minutes % 60:02d}"
        for minutes in range(start_hour * 60, end_hour * 60, step_minutes)
    ]


def _shift_months(day: date, months: int) -> date:
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    _, last = calendar.monthrange(year, month)
    return date(year, month, min(day.day, last))


def advance(
    reference_date: Union[date, datetime],
    view: Union[CalendarView, str],
    direction: int,
) -> date:
    """
    Move the reference date one period forward (+1) or back (-1).

    Month moves clamp the day of month to the target month's length, so
    stepping forward from January 31 lands on the last day of February.
    """
    day = _as_date(reference_date)
    view = normalize_view(view)

    if view == CalendarView.DAY:
        return day + timedelta(days=direction)
    if view == CalendarView.MONTH:
        return _shift_months(day, direction)
    return day + timedelta(days=DAYS_PER_WEEK * direction)
