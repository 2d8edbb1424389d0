"""Client directory: who has booked with a barber, how often, and notes."""

from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from shopcal.logging_context import get_tenant_logger
from shopcal.schemas.appointment_schema import Appointment, AppointmentQuery, AppointmentStatus
from shopcal.schemas.catalog_schema import Client
from shopcal.schemas.session_schema import ActorContext
from shopcal.services.calendar_service import ActionResult
from shopcal.stores.base import DataSource
from shopcal.stores.errors import NotFoundError, StoreError
from shopcal.utils import normalize_phone

logger = get_tenant_logger(__name__)


@dataclass
class ClientSummary:
    """A client plus figures derived from their appointment history."""
    client: Client
    total_visits: int = 0
    last_visit: Optional[date] = None
    preferred_service: Optional[str] = None

    @property
    def id(self) -> str:
        return self.client.id


def summarize_clients(
    clients: Iterable[Client], appointments: Iterable[Appointment]
) -> list[ClientSummary]:
    """
    One summary per unique client, in first-seen order.

    Visits count every appointment except cancellations. The preferred
    service is the most booked one, earliest booking winning ties.
    """
    summaries: dict[str, ClientSummary] = {}
    for client in clients:
        if client.id not in summaries:
            summaries[client.id] = ClientSummary(client=client)

    services: dict[str, Counter] = {}
    for appointment in sorted(appointments, key=lambda a: a.start_time):
        summary = summaries.get(appointment.client_id)
        if summary is None or appointment.status == AppointmentStatus.CANCELLED:
            continue
        summary.total_visits += 1
        visit_day = appointment.start_time.date()
        if summary.last_visit is None or visit_day > summary.last_visit:
            summary.last_visit = visit_day
        if appointment.service_name:
            services.setdefault(summary.id, Counter())[appointment.service_name] += 1

    for client_id, counter in services.items():
        summaries[client_id].preferred_service = counter.most_common(1)[0][0]
    return list(summaries.values())


def matches_search(client: Client, term: str) -> bool:
    """Case-insensitive match on full name or email, or a phone digits match."""
    needle = term.strip().lower()
    if not needle:
        return True
    if needle in client.full_name.lower() or needle in client.email.lower():
        return True
    digits = normalize_phone(needle)
    return bool(digits) and digits in normalize_phone(client.phone)


class ClientDirectory:
    """Client list screen logic for one barber."""

    def __init__(self, actor: ActorContext, source: DataSource) -> None:
        self.actor = actor
        self.source = source
        self._summaries: list[ClientSummary] = []

    @property
    def summaries(self) -> list[ClientSummary]:
        return list(self._summaries)

    def load(self) -> list[ClientSummary]:
        """
        Fetch clients and their appointment history.

        Raises:
            StoreError: If either list cannot be fetched.
        """
        clients = self.source.list_clients(self.actor.actor_id)
        appointments = self.source.list_appointments(AppointmentQuery(
            owner_id=self.actor.actor_id, tenant_id=self.actor.tenant_id,
        ))
        self._summaries = summarize_clients(clients, appointments)
        logger.debug("Loaded %d clients", len(self._summaries))
        return self.summaries

    def search(self, term: str) -> list[ClientSummary]:
        return [s for s in self._summaries if matches_search(s.client, term)]

    def history(self, client_id: str) -> list[Appointment]:
        """A client's appointments with this barber, newest first."""
        appointments = self.source.list_appointments(AppointmentQuery(
            owner_id=self.actor.actor_id,
            tenant_id=self.actor.tenant_id,
            client_id=client_id,
        ))
        return sorted(appointments, key=lambda a: a.start_time, reverse=True)

    def save_notes(self, client_id: str, notes: str) -> ActionResult:
        try:
            client = self.source.update_client_notes(client_id, notes)
        except NotFoundError:
            return {"success": False, "message": "That client no longer exists."}
        except StoreError as exc:
            logger.error("Error saving notes for %s: %s", client_id, exc)
            return {"success": False, "message": "Failed to save notes."}

        for summary in self._summaries:
            if summary.id == client_id:
                summary.client = client
        return {"success": True, "message": "Notes saved."}
