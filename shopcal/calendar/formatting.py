"""Display helpers for calendar entries."""

from datetime import date, datetime
from enum import Enum
from typing import Union

from shopcal.schemas.appointment_schema import AppointmentStatus

LONG_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class StatusColor(str, Enum):
    GREEN = "#4ade80"
    RED = "#f87171"
    ORANGE = "#f97316"
    BLUE = "#60a5fa"


STATUS_COLORS: dict[str, StatusColor] = {
    AppointmentStatus.COMPLETED.value: StatusColor.GREEN,
    AppointmentStatus.CANCELLED.value: StatusColor.RED,
    AppointmentStatus.NO_SHOW.value: StatusColor.ORANGE,
}


def status_color(status: Union[AppointmentStatus, str, None]) -> StatusColor:
    """Color for a status. Scheduled and unrecognized values are blue."""
    value = status.value if isinstance(status, Enum) else status
    return STATUS_COLORS.get(value, StatusColor.BLUE)


def format_time(moment: datetime) -> str:
    """12-hour clock label, e.g. ``9:30 AM``."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_time_range(start: datetime, end: datetime) -> str:
    return f"{format_time(start)} - {format_time(end)}"


def format_header(day: Union[date, datetime]) -> str:
    """Long heading for the selected date, e.g. ``Monday, March 4, 2024``."""
    return (
        f"{LONG_DAY_NAMES[day.weekday()]}, "
        f"{MONTH_NAMES[day.month - 1]} {day.day}, {day.year}"
    )


def format_month_header(day: Union[date, datetime]) -> str:
    return f"{MONTH_NAMES[day.month - 1]} {day.year}"
