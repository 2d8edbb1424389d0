"""
In-memory data source backed by generated fixtures.

Used for development mode and tests. Nothing is persisted; each instance
starts from the same seeded catalog and appointment set.
"""

import logging
import uuid
from datetime import date
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from shopcal.fixtures import FixtureGenerator
from shopcal.schemas.appointment_schema import (
    Appointment,
    AppointmentCreate,
    AppointmentQuery,
    AppointmentUpdate,
)
from shopcal.schemas.catalog_schema import Client, Service
from shopcal.schemas.session_schema import ActorContext, Tenant
from shopcal.stores.base import DataSource
from shopcal.stores.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class MockDataSource(DataSource):
    """Fixture-seeded store holding everything in dictionaries."""

    def __init__(
        self,
        actor: ActorContext,
        generator: Optional[FixtureGenerator] = None,
        today: Optional[date] = None,
        seed_appointments: bool = True,
        shop_name: str = "Demo Barbershop",
    ) -> None:
        self.actor = actor
        self.generator = generator or FixtureGenerator()
        self._services: dict[str, Service] = {s.id: s for s in self.generator.services()}
        self._clients: dict[str, Client] = {c.id: c for c in self.generator.clients()}
        self._appointments: dict[str, Appointment] = {}
        self._tenants: dict[str, Tenant] = {
            actor.tenant_id: Tenant(id=actor.tenant_id, name=shop_name, subdomain="demo"),
        }

        if seed_appointments:
            today = today or date.today()
            services = list(self._services.values())
            clients = list(self._clients.values())
            seeded = self.generator.history(today, services, clients)
            seeded += self.generator.appointments(today, services, clients)
            for appointment in seeded:
                self._store(appointment.model_copy(update={
                    "barber_id": actor.actor_id,
                    "tenant_id": actor.tenant_id,
                }))

    def _store(self, appointment: Appointment) -> Appointment:
        self._appointments[appointment.id] = appointment
        return appointment

    def _get(self, appointment_id: str) -> Appointment:
        try:
            return self._appointments[appointment_id]
        except KeyError:
            raise NotFoundError(f"Appointment {appointment_id} not found.") from None

    def list_appointments(self, query: AppointmentQuery) -> list[Appointment]:
        matches = [a for a in self._appointments.values() if query.matches(a)]
        return sorted(matches, key=lambda a: a.start_time)

    def create_appointment(self, payload: AppointmentCreate) -> Appointment:
        client = self._clients.get(payload.client_id)
        service = self._services.get(payload.service_id)
        if client is None:
            raise ValidationError(f"Unknown client {payload.client_id!r}.")
        if service is None:
            raise ValidationError(f"Unknown service {payload.service_id!r}.")

        appointment = Appointment(
            id=f"mock-{uuid.uuid4().hex[:8]}",
            client_name=client.full_name,
            service_name=service.name,
            service_price=service.price,
            **payload.model_dump(),
        )
        logger.info(
            "Mock appointment created: %s for %s at %s",
            appointment.id, client.full_name, appointment.start_time,
        )
        return self._store(appointment)

    def update_appointment(self, appointment_id: str, changes: dict) -> Appointment:
        current = self._get(appointment_id)
        try:
            edit = AppointmentUpdate(**changes)
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid changes for {appointment_id}: {exc}") from exc
        updated = current.model_copy(update=edit.model_dump(exclude_none=True))
        logger.info("Mock appointment updated: %s %s", appointment_id, edit.changes())
        return self._store(updated)

    def delete_appointment(self, appointment_id: str) -> None:
        self._get(appointment_id)
        del self._appointments[appointment_id]
        logger.info("Mock appointment deleted: %s", appointment_id)

    def list_services(self, tenant_id: str) -> list[Service]:
        return list(self._services.values())

    def list_clients(self, owner_id: str) -> list[Client]:
        return list(self._clients.values())

    def update_client_notes(self, client_id: str, notes: str) -> Client:
        if client_id not in self._clients:
            raise NotFoundError(f"Client {client_id} not found.")
        client = self._clients[client_id].model_copy(update={"notes": notes})
        self._clients[client_id] = client
        return client

    def get_tenant(self, tenant_id: str) -> Tenant:
        try:
            return self._tenants[tenant_id]
        except KeyError:
            raise NotFoundError(f"Tenant {tenant_id} not found.") from None

    def update_tenant(self, tenant_id: str, changes: dict) -> Tenant:
        tenant = self.get_tenant(tenant_id).model_copy(update=changes)
        self._tenants[tenant_id] = tenant
        return tenant
