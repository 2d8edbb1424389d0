"""Tests for calendar actions against the mock data source."""

from datetime import date, datetime, timedelta

import pytest

from shopcal.calendar.view_state import CalendarViewState
from shopcal.schemas.appointment_schema import (
    AppointmentCreate,
    AppointmentDraft,
    AppointmentStatus,
    AppointmentUpdate,
)
from shopcal.services.calendar_service import BarberCalendar
from shopcal.stores.errors import ValidationError
from tests.conftest import REFERENCE_DATE, make_appointment


@pytest.fixture
def calendar(actor, empty_source, view_state):
    cal = BarberCalendar(actor, empty_source, view_state)
    cal.load_catalog()
    return cal


def _draft(**kwargs):
    values = {"client_id": "client-1", "service_id": "2", "day": REFERENCE_DATE, "time": "09:00"}
    values.update(kwargs)
    return AppointmentDraft(**values)


def _seed(source, start: datetime, client_id="client-1", service_id="1"):
    return source.create_appointment(AppointmentCreate(
        client_id=client_id,
        service_id=service_id,
        start_time=start,
        end_time=start + timedelta(minutes=30),
        barber_id="barber-1",
        tenant_id="shop-1",
    ))


class TestLoading:
    def test_load_catalog(self, calendar):
        assert len(calendar.services) == 5
        assert len(calendar.clients) == 5

    def test_refresh_only_visible_range(self, calendar, empty_source):
        _seed(empty_source, datetime(2024, 3, 4, 9, 0))
        _seed(empty_source, datetime(2024, 3, 20, 9, 0))
        result = calendar.refresh()
        assert result["success"]
        assert len(calendar.view_state.appointments) == 1

    def test_refresh_failure_keeps_snapshot(self, actor, failing_source, view_state):
        cal = BarberCalendar(actor, failing_source, view_state)
        result = cal.refresh()
        assert not result["success"]
        assert result["message"] == "Failed to load appointments."
        assert cal.view_state.appointments == ()

    def test_load_catalog_failure(self, actor, failing_source):
        result = BarberCalendar(actor, failing_source).load_catalog()
        assert not result["success"]


class TestNavigation:
    def test_navigate_refetches(self, calendar, empty_source):
        _seed(empty_source, datetime(2024, 2, 27, 10, 0))
        calendar.refresh()
        assert calendar.view_state.appointments == ()
        calendar.navigate(-1)
        assert calendar.view_state.days[0].date == "2024-02-25"
        assert len(calendar.view_state.appointments) == 1

    def test_set_view_month(self, calendar, empty_source):
        _seed(empty_source, datetime(2024, 3, 28, 10, 0))
        calendar.set_view("month")
        assert len(calendar.view_state.days) == 31
        assert len(calendar.view_state.appointments) == 1

    def test_go_to(self, calendar):
        calendar.go_to(date(2024, 5, 1))
        assert calendar.view_state.reference_date == date(2024, 5, 1)


class TestCreate:
    def test_end_time_from_service_duration(self, calendar):
        result = calendar.create_appointment(_draft(service_id="2"))
        assert result["success"]
        appointment = result["appointment"]
        assert appointment.start_time == datetime(2024, 3, 4, 9, 0)
        assert appointment.end_time == datetime(2024, 3, 4, 9, 15)
        assert appointment.status == AppointmentStatus.SCHEDULED

    def test_created_appointment_visible_in_slot(self, calendar):
        calendar.create_appointment(_draft(time="10:30"))
        state = calendar.view_state
        assert len(state.slot_appointments("2024-03-04", "10:30")) == 1
        assert state.day_appointments("2024-03-04")[0].client_name == "John Smith"

    def test_default_duration_when_service_not_in_catalog(self, actor, empty_source, view_state):
        cal = BarberCalendar(actor, empty_source, view_state)
        payload = cal.build_payload(_draft(service_id="4"))
        assert payload.end_time - payload.start_time == timedelta(minutes=30)

    def test_payload_carries_actor(self, calendar):
        payload = calendar.build_payload(_draft())
        assert payload.barber_id == "barber-1"
        assert payload.tenant_id == "shop-1"

    @pytest.mark.parametrize("field", ["client_id", "service_id"])
    def test_missing_reference_rejected(self, calendar, empty_source, field):
        result = calendar.create_appointment(_draft(**{field: ""}))
        assert not result["success"]
        assert "Please choose" in result["message"]
        assert calendar.view_state.appointments == ()

    def test_build_payload_raises(self, calendar):
        with pytest.raises(ValidationError, match="client and a service"):
            calendar.build_payload(_draft(client_id="", service_id=""))

    def test_store_rejection_surfaces_message(self, calendar):
        result = calendar.create_appointment(_draft(client_id="ghost"))
        assert not result["success"]
        assert "Unknown client" in result["message"]

    def test_store_failure(self, actor, failing_source, view_state):
        cal = BarberCalendar(actor, failing_source, view_state)
        result = cal.create_appointment(_draft())
        assert result == {"success": False, "message": "Failed to create appointment."}
        assert cal.view_state.appointments == ()


class TestUpdate:
    def test_status_change(self, calendar):
        created = calendar.create_appointment(_draft())["appointment"]
        result = calendar.update_appointment(created.id, {"status": "completed"})
        assert result["success"]
        assert calendar.view_state.appointments[0].status == AppointmentStatus.COMPLETED
        assert calendar.view_state.appointments[0].client_name == "John Smith"
        assert calendar.status_history(created.id) == ["scheduled", "completed"]

    def test_accepts_update_model(self, calendar):
        created = calendar.create_appointment(_draft())["appointment"]
        result = calendar.update_appointment(created.id, AppointmentUpdate(notes="Bring photo"))
        assert result["appointment"].notes == "Bring photo"
        assert calendar.status_history(created.id) == ["scheduled"]

    def test_invalid_status(self, calendar):
        created = calendar.create_appointment(_draft())["appointment"]
        result = calendar.update_appointment(created.id, {"status": "finished"})
        assert not result["success"]
        assert calendar.view_state.appointments[0].status == AppointmentStatus.SCHEDULED

    def test_missing_target(self, calendar):
        result = calendar.update_appointment("gone", {"notes": "x"})
        assert result == {"success": False, "message": "That appointment no longer exists."}

    def test_store_failure_leaves_local_state(self, actor, failing_source, view_state):
        cal = BarberCalendar(actor, failing_source, view_state)
        result = cal.update_appointment("a-1", {"status": "completed"})
        assert result["message"] == "Failed to update appointment."


class TestDelete:
    def test_delete(self, calendar):
        created = calendar.create_appointment(_draft())["appointment"]
        result = calendar.delete_appointment(created.id)
        assert result["success"]
        assert calendar.view_state.appointments == ()
        assert calendar.status_history(created.id) == []

    def test_delete_missing(self, calendar):
        assert not calendar.delete_appointment("gone")["success"]

    def test_delete_failure_keeps_appointment(self, actor, failing_source):
        state = CalendarViewState(REFERENCE_DATE)
        cal = BarberCalendar(actor, failing_source, state)
        state.replace_appointments([make_appointment("a-1")])
        result = cal.delete_appointment("a-1")
        assert result["message"] == "Failed to delete appointment."
        assert len(state.appointments) == 1
