"""
Appointment status lifecycle.

Appointments start as ``scheduled``. A barber may move an appointment to
any other status by an explicit edit; nothing changes status
automatically and no status is final.

Usage:
    tracker = AppointmentStatusTracker()
    tracker.transition("completed")
    assert tracker.current_status == AppointmentStatus.COMPLETED
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from shopcal.schemas.appointment_schema import AppointmentStatus

logger = logging.getLogger(__name__)

INITIAL_STATUS = AppointmentStatus.SCHEDULED


@dataclass
class StatusEntry:
    """Recorded history entry for a status change."""
    status: AppointmentStatus
    changed_at: datetime
    previous: Optional[AppointmentStatus] = None


class InvalidStatusError(ValueError):
    """Raised when an edit names a status outside the lifecycle."""


def parse_status(value: Union[AppointmentStatus, str]) -> AppointmentStatus:
    try:
        return AppointmentStatus(value)
    except ValueError:
        valid = [s.value for s in AppointmentStatus]
        raise InvalidStatusError(
            f"Unknown appointment status {value!r}. Valid statuses: {valid}"
        ) from None


class AppointmentStatusTracker:
    """Current status of one appointment plus the edits that led to it."""

    def __init__(self, status: Union[AppointmentStatus, str] = INITIAL_STATUS) -> None:
        self._current = parse_status(status)
        self._history: list[StatusEntry] = [
            StatusEntry(status=self._current, changed_at=datetime.now(timezone.utc))
        ]

    @property
    def current_status(self) -> AppointmentStatus:
        return self._current

    def transition(self, status: Union[AppointmentStatus, str]) -> AppointmentStatus:
        """
        Apply a user edit.

        Raises:
            InvalidStatusError: If ``status`` is not one of the four statuses.
        """
        new_status = parse_status(status)
        old_status = self._current
        self._current = new_status
        self._history.append(StatusEntry(
            status=new_status,
            changed_at=datetime.now(timezone.utc),
            previous=old_status,
        ))
        logger.debug("Status change: %s -> %s", old_status.value, new_status.value)
        return new_status

    def get_history(self) -> list[StatusEntry]:
        return list(self._history)

    def get_status_trace(self) -> list[str]:
        return [entry.status.value for entry in self.get_history()]
