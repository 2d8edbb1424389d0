"""Tests for the appointment status lifecycle."""

import pytest

from shopcal.calendar.status import (
    AppointmentStatusTracker,
    InvalidStatusError,
    parse_status,
)
from shopcal.schemas.appointment_schema import AppointmentStatus


class TestInitialState:
    def test_starts_scheduled(self):
        assert AppointmentStatusTracker().current_status == AppointmentStatus.SCHEDULED

    def test_initial_history_has_one_entry(self):
        tracker = AppointmentStatusTracker()
        assert len(tracker.get_history()) == 1
        assert tracker.get_history()[0].previous is None

    def test_can_start_from_stored_status(self):
        tracker = AppointmentStatusTracker("no-show")
        assert tracker.current_status == AppointmentStatus.NO_SHOW

    def test_rejects_unknown_initial_status(self):
        with pytest.raises(InvalidStatusError):
            AppointmentStatusTracker("pending")


class TestTransitions:
    @pytest.mark.parametrize("source", list(AppointmentStatus))
    @pytest.mark.parametrize("target", list(AppointmentStatus))
    def test_every_status_reaches_every_other(self, source, target):
        tracker = AppointmentStatusTracker(source)
        assert tracker.transition(target) == target

    def test_no_terminal_state(self):
        tracker = AppointmentStatusTracker()
        tracker.transition(AppointmentStatus.CANCELLED)
        tracker.transition(AppointmentStatus.SCHEDULED)
        assert tracker.current_status == AppointmentStatus.SCHEDULED

    def test_accepts_string_values(self):
        tracker = AppointmentStatusTracker()
        assert tracker.transition("no-show") == AppointmentStatus.NO_SHOW

    def test_invalid_status_leaves_state_unchanged(self):
        tracker = AppointmentStatusTracker()
        with pytest.raises(InvalidStatusError, match="Valid statuses"):
            tracker.transition("done")
        assert tracker.current_status == AppointmentStatus.SCHEDULED
        assert len(tracker.get_history()) == 1


class TestHistory:
    def test_trace_records_each_edit(self):
        tracker = AppointmentStatusTracker()
        tracker.transition("completed")
        tracker.transition("no-show")
        assert tracker.get_status_trace() == ["scheduled", "completed", "no-show"]

    def test_history_entry_links_previous(self):
        tracker = AppointmentStatusTracker()
        tracker.transition("cancelled")
        last = tracker.get_history()[-1]
        assert last.previous == AppointmentStatus.SCHEDULED
        assert last.status == AppointmentStatus.CANCELLED

    def test_history_is_a_copy(self):
        tracker = AppointmentStatusTracker()
        tracker.get_history().clear()
        assert len(tracker.get_history()) == 1


class TestParseStatus:
    def test_round_trips_enum(self):
        assert parse_status(AppointmentStatus.COMPLETED) == AppointmentStatus.COMPLETED

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_status("archived")
