"""Shared test fixtures and helpers."""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest

from shopcal.calendar.view_state import CalendarViewState
from shopcal.schemas.appointment_schema import Appointment, AppointmentStatus
from shopcal.schemas.session_schema import ActorContext
from shopcal.stores.errors import StoreError
from shopcal.stores.mock import MockDataSource

REFERENCE_DATE = date(2024, 3, 4)  # a Monday


@pytest.fixture
def actor():
    return ActorContext(actor_id="barber-1", tenant_id="shop-1")


@pytest.fixture
def empty_source(actor):
    return MockDataSource(actor, seed_appointments=False)


@pytest.fixture
def seeded_source(actor):
    return MockDataSource(actor, today=REFERENCE_DATE)


@pytest.fixture
def view_state():
    return CalendarViewState(reference_date=REFERENCE_DATE, view="week")


def make_appointment(
    appointment_id: str = "a-1",
    start: str = "2024-03-04T09:00:00",
    minutes: int = 30,
    status: AppointmentStatus = AppointmentStatus.SCHEDULED,
    client_id: str = "client-1",
    service_id: str = "1",
    service_name: Optional[str] = "Haircut",
    service_price: Optional[str] = "25",
    client_name: Optional[str] = "John Smith",
) -> Appointment:
    """Helper to create an Appointment with sensible defaults."""
    start_time = datetime.fromisoformat(start)
    return Appointment(
        id=appointment_id,
        client_id=client_id,
        service_id=service_id,
        start_time=start_time,
        end_time=start_time + timedelta(minutes=minutes),
        status=status,
        barber_id="barber-1",
        tenant_id="shop-1",
        client_name=client_name,
        service_name=service_name,
        service_price=Decimal(service_price) if service_price is not None else None,
    )


class FailingSource(MockDataSource):
    """Mock source whose every call fails like an unreachable backend."""

    def _fail(self, *args, **kwargs):
        raise StoreError("backend unavailable")

    list_appointments = _fail
    create_appointment = _fail
    update_appointment = _fail
    delete_appointment = _fail
    list_services = _fail
    list_clients = _fail
    update_client_notes = _fail
    get_tenant = _fail
    update_tenant = _fail


@pytest.fixture
def failing_source(actor):
    return FailingSource(actor, seed_appointments=False)
