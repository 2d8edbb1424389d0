"""
Data source capability shared by the mock and remote backends.

A dashboard is composed with exactly one implementation, chosen at
startup; services call these methods without knowing which one they got.
All methods raise ``StoreError`` subclasses on failure.
"""

from abc import ABC, abstractmethod

from shopcal.schemas.appointment_schema import (
    Appointment,
    AppointmentCreate,
    AppointmentQuery,
)
from shopcal.schemas.catalog_schema import Client, Service
from shopcal.schemas.session_schema import Tenant


class DataSource(ABC):
    """Appointment, catalog and tenant storage."""

    # --- Appointments ---

    @abstractmethod
    def list_appointments(self, query: AppointmentQuery) -> list[Appointment]:
        """Appointments matching ``query``, ordered by start time."""

    @abstractmethod
    def create_appointment(self, payload: AppointmentCreate) -> Appointment:
        """Persist a new appointment. Raises ``ValidationError`` on bad references."""

    @abstractmethod
    def update_appointment(self, appointment_id: str, changes: dict) -> Appointment:
        """Apply a partial edit. Raises ``NotFoundError`` if the id is unknown."""

    @abstractmethod
    def delete_appointment(self, appointment_id: str) -> None:
        """Remove an appointment. Raises ``NotFoundError`` if the id is unknown."""

    # --- Catalog ---

    @abstractmethod
    def list_services(self, tenant_id: str) -> list[Service]:
        """Services offered by a shop."""

    @abstractmethod
    def list_clients(self, owner_id: str) -> list[Client]:
        """Clients who have booked with a barber, most recent first."""

    @abstractmethod
    def update_client_notes(self, client_id: str, notes: str) -> Client:
        """Replace the barber's notes on a client."""

    # --- Tenant ---

    @abstractmethod
    def get_tenant(self, tenant_id: str) -> Tenant:
        """Shop settings. Raises ``NotFoundError`` if the tenant is unknown."""

    @abstractmethod
    def update_tenant(self, tenant_id: str, changes: dict) -> Tenant:
        """Apply settings changes and return the stored tenant."""
