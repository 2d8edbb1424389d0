"""Assign appointments to calendar cells and half-hour slots."""

from datetime import date
from typing import Iterable, Union

from shopcal.calendar.grid import CalendarCell
from shopcal.schemas.appointment_schema import Appointment


def _cell_key(cell_date: Union[CalendarCell, date, str]) -> str:
    if isinstance(cell_date, CalendarCell):
        return cell_date.date
    if isinstance(cell_date, date):
        return cell_date.isoformat()
    return cell_date


def slot_label(appointment: Appointment) -> str:
    return appointment.start_time.strftime("%H:%M")


def bin_appointments(
    appointments: Iterable[Appointment],
    cell_date: Union[CalendarCell, date, str],
) -> list[Appointment]:
    """
    Appointments starting on ``cell_date``, earliest first.

    Matching compares the calendar date of ``start_time`` as written, not a
    time range. Ties keep their input order.
    """
    key = _cell_key(cell_date)
    matches = [a for a in appointments if a.start_time.date().isoformat() == key]
    return sorted(matches, key=lambda a: a.start_time)


def bin_by_time_slot(day_appointments: Iterable[Appointment], label: str) -> list[Appointment]:
    """
    Appointments whose start is exactly ``label`` (``HH:MM``).

    Appointments off the slot boundaries (e.g. 09:10) match no slot and are
    left out of the grid rather than moved to the nearest one.
    """
    return [a for a in day_appointments if slot_label(a) == label]
