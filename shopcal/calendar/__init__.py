from shopcal.calendar.binning import bin_appointments, bin_by_time_slot
from shopcal.calendar.formatting import StatusColor, status_color
from shopcal.calendar.grid import (
    CalendarCell,
    CalendarView,
    advance,
    generate_days,
    generate_time_slots,
    leading_padding,
)
from shopcal.calendar.status import AppointmentStatusTracker, InvalidStatusError
from shopcal.calendar.view_state import CalendarViewState

__all__ = [
    "CalendarCell",
    "CalendarView",
    "CalendarViewState",
    "generate_days",
    "generate_time_slots",
    "leading_padding",
    "advance",
    "bin_appointments",
    "bin_by_time_slot",
    "status_color",
    "StatusColor",
    "AppointmentStatusTracker",
    "InvalidStatusError",
]
