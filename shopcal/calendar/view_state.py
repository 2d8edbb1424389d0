"""
View-state container for the barber calendar.

Holds the reference date, view mode and the current appointment
collection, and derives the cells, slots and per-cell appointment lists
the presentation layer renders. Days are regenerated only when the date
or view change; appointment lists are re-binned from an immutable
snapshot, so a render never sees a half-applied update.
"""

import logging
from datetime import date, datetime, time
from typing import Iterable, Optional, Union

from shopcal.calendar.binning import bin_appointments, bin_by_time_slot
from shopcal.calendar.grid import (
    CalendarCell,
    CalendarView,
    advance,
    generate_days,
    generate_time_slots,
    leading_padding,
    normalize_view,
)
from shopcal.schemas.appointment_schema import Appointment

logger = logging.getLogger(__name__)


class CalendarViewState:
    """Reactive calendar state for one view session."""

    def __init__(
        self,
        reference_date: Optional[date] = None,
        view: Union[CalendarView, str] = CalendarView.WEEK,
        time_slots: Optional[list[str]] = None,
    ) -> None:
        self._reference_date = reference_date or date.today()
        self._view = normalize_view(view)
        self._time_slots: tuple[str, ...] = tuple(time_slots or generate_time_slots())
        self._appointments: tuple[Appointment, ...] = ()
        self._days: Optional[list[CalendarCell]] = None

    @property
    def reference_date(self) -> date:
        return self._reference_date

    @property
    def view(self) -> CalendarView:
        return self._view

    @property
    def time_slots(self) -> tuple[str, ...]:
        return self._time_slots

    @property
    def appointments(self) -> tuple[Appointment, ...]:
        return self._appointments

    @property
    def days(self) -> list[CalendarCell]:
        if self._days is None:
            self._days = generate_days(self._reference_date, self._view)
            logger.debug(
                "Generated %d cells for %s view around %s",
                len(self._days), self._view.value, self._reference_date,
            )
        return self._days

    def set_view(self, view: Union[CalendarView, str]) -> None:
        new_view = normalize_view(view)
        if new_view != self._view:
            self._view = new_view
            self._days = None

    def go_to(self, reference_date: date) -> None:
        if reference_date != self._reference_date:
            self._reference_date = reference_date
            self._days = None

    def navigate(self, direction: int) -> date:
        """Step one period back (-1) or forward (+1) and return the new date."""
        self.go_to(advance(self._reference_date, self._view, direction))
        return self._reference_date

    def replace_appointments(self, appointments: Iterable[Appointment]) -> None:
        self._appointments = tuple(appointments)

    def upsert_appointment(self, appointment: Appointment) -> None:
        kept = [a for a in self._appointments if a.id != appointment.id]
        self._appointments = tuple(kept) + (appointment,)

    def remove_appointment(self, appointment_id: str) -> None:
        self._appointments = tuple(a for a in self._appointments if a.id != appointment_id)

    def visible_range(self) -> tuple[datetime, datetime]:
        """First instant of the first cell through the last second of the last cell."""
        cells = self.days
        start = datetime.combine(cells[0].as_date(), time(0, 0, 0))
        end = datetime.combine(cells[-1].as_date(), time(23, 59, 59))
        return start, end

    def day_appointments(self, cell: Union[CalendarCell, date, str]) -> list[Appointment]:
        return bin_appointments(self._appointments, cell)

    def slot_appointments(
        self, cell: Union[CalendarCell, date, str], slot: str
    ) -> list[Appointment]:
        return bin_by_time_slot(self.day_appointments(cell), slot)

    def month_grid(self) -> list[Optional[CalendarCell]]:
        """Cells prefixed with ``None`` placeholders so day 1 sits under its weekday."""
        cells = self.days
        return [None] * leading_padding(cells, self._view) + list(cells)

    def slot_grid(self) -> list[tuple[str, list[list[Appointment]]]]:
        """Rows of ``(slot, [appointments per visible day])`` for day and week views."""
        per_day = [self.day_appointments(cell) for cell in self.days]
        return [
            (slot, [bin_by_time_slot(day_list, slot) for day_list in per_day])
            for slot in self._time_slots
        ]
