"""
Barber calendar actions: load, navigate, create, edit and delete appointments.

Store failures never escape this module. Each action returns an
``ActionResult`` carrying a user-facing message, and local state changes
only after the store has confirmed the write.
"""

from datetime import date, timedelta
from typing import Optional, TypedDict, Union

from shopcal.calendar.grid import CalendarView
from shopcal.calendar.status import AppointmentStatusTracker, InvalidStatusError, parse_status
from shopcal.calendar.view_state import CalendarViewState
from shopcal.logging_context import get_tenant_logger
from shopcal.schemas.appointment_schema import (
    Appointment,
    AppointmentCreate,
    AppointmentDraft,
    AppointmentQuery,
    AppointmentUpdate,
)
from shopcal.schemas.catalog_schema import Client, Service
from shopcal.schemas.session_schema import ActorContext
from shopcal.stores.base import DataSource
from shopcal.stores.errors import NotFoundError, StoreError, ValidationError

logger = get_tenant_logger(__name__)

DEFAULT_DURATION_MINUTES = 30


class ActionResult(TypedDict, total=False):
    """Outcome of a calendar action, ready to show as a notification."""

    success: bool
    message: str
    appointment: Appointment


class BarberCalendar:
    """
    Calendar screen logic for one barber.

    Owns the view state and the locally held catalog; every read and write
    goes through the injected data source.
    """

    def __init__(
        self,
        actor: ActorContext,
        source: DataSource,
        view_state: Optional[CalendarViewState] = None,
        default_duration_minutes: int = DEFAULT_DURATION_MINUTES,
    ) -> None:
        self.actor = actor
        self.source = source
        self.view_state = view_state or CalendarViewState()
        self.default_duration_minutes = default_duration_minutes
        self._services: dict[str, Service] = {}
        self._clients: dict[str, Client] = {}
        self._trackers: dict[str, AppointmentStatusTracker] = {}

    @property
    def services(self) -> list[Service]:
        return list(self._services.values())

    @property
    def clients(self) -> list[Client]:
        return list(self._clients.values())

    # ------------------------------------------------------------------ #
    # Loading
    # ------------------------------------------------------------------ #

    def load_catalog(self) -> ActionResult:
        try:
            services = self.source.list_services(self.actor.tenant_id)
            clients = self.source.list_clients(self.actor.actor_id)
        except StoreError as exc:
            logger.error("Error fetching calendar data: %s", exc)
            return {"success": False, "message": "Failed to load services and clients."}

        self._services = {s.id: s for s in services}
        self._clients = {c.id: c for c in clients}
        return {
            "success": True,
            "message": f"Loaded {len(services)} services and {len(clients)} clients.",
        }

    def refresh(self) -> ActionResult:
        """Fetch appointments for the visible cells and replace the local snapshot."""
        start, end = self.view_state.visible_range()
        query = AppointmentQuery(
            owner_id=self.actor.actor_id,
            tenant_id=self.actor.tenant_id,
            start=start,
            end=end,
        )
        try:
            appointments = self.source.list_appointments(query)
        except StoreError as exc:
            logger.error("Error fetching appointments: %s", exc)
            return {"success": False, "message": "Failed to load appointments."}

        self.view_state.replace_appointments(self._enrich(a) for a in appointments)
        return {"success": True, "message": f"{len(appointments)} appointments loaded."}

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def set_view(self, view: Union[CalendarView, str]) -> ActionResult:
        self.view_state.set_view(view)
        return self.refresh()

    def navigate(self, direction: int) -> ActionResult:
        self.view_state.navigate(direction)
        return self.refresh()

    def go_to(self, reference_date: date) -> ActionResult:
        self.view_state.go_to(reference_date)
        return self.refresh()

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def _enrich(self, appointment: Appointment) -> Appointment:
        """Fill display names from the local catalog where the store left them out."""
        updates: dict = {}
        client = self._clients.get(appointment.client_id)
        service = self._services.get(appointment.service_id)
        if appointment.client_name is None:
            updates["client_name"] = client.full_name if client else "Client Name"
        if appointment.service_name is None:
            updates["service_name"] = service.name if service else "Service"
        if appointment.service_price is None and service is not None:
            updates["service_price"] = service.price
        return appointment.model_copy(update=updates) if updates else appointment

    def build_payload(self, draft: AppointmentDraft) -> AppointmentCreate:
        """
        Turn form values into a store payload.

        The end time is the start plus the service duration, or the default
        duration for a service missing from the local catalog.

        Raises:
            ValidationError: If the client or service reference is missing.
        """
        missing = [
            name for name, value in (("client", draft.client_id), ("service", draft.service_id))
            if not value or not value.strip()
        ]
        if missing:
            raise ValidationError(f"Please choose a {' and a '.join(missing)}.")

        service = self._services.get(draft.service_id)
        duration = service.duration_minutes if service else self.default_duration_minutes
        start = draft.start_datetime()
        return AppointmentCreate(
            client_id=draft.client_id,
            service_id=draft.service_id,
            start_time=start,
            end_time=start + timedelta(minutes=duration),
            notes=draft.notes,
            barber_id=self.actor.actor_id,
            tenant_id=self.actor.tenant_id,
        )

    def create_appointment(self, draft: AppointmentDraft) -> ActionResult:
        try:
            payload = self.build_payload(draft)
            created = self.source.create_appointment(payload)
        except ValidationError as exc:
            logger.warning("Appointment rejected: %s", exc)
            return {"success": False, "message": str(exc)}
        except StoreError as exc:
            logger.error("Error creating appointment: %s", exc)
            return {"success": False, "message": "Failed to create appointment."}

        created = self._enrich(created)
        self.view_state.upsert_appointment(created)
        self._trackers[created.id] = AppointmentStatusTracker(created.status)
        logger.info("Appointment created: %s at %s", created.id, created.start_time)
        return {
            "success": True,
            "message": "Appointment created successfully!",
            "appointment": created,
        }

    def update_appointment(
        self, appointment_id: str, changes: Union[AppointmentUpdate, dict]
    ) -> ActionResult:
        if isinstance(changes, AppointmentUpdate):
            changes = changes.changes()
        try:
            if "status" in changes:
                changes = {**changes, "status": parse_status(changes["status"]).value}
            updated = self.source.update_appointment(appointment_id, changes)
        except (InvalidStatusError, ValidationError) as exc:
            return {"success": False, "message": str(exc)}
        except NotFoundError as exc:
            logger.warning("Update target missing: %s", exc)
            return {"success": False, "message": "That appointment no longer exists."}
        except StoreError as exc:
            logger.error("Error updating appointment %s: %s", appointment_id, exc)
            return {"success": False, "message": "Failed to update appointment."}

        previous = next(
            (a for a in self.view_state.appointments if a.id == appointment_id), None
        )
        if previous is not None:
            carried = {
                "client_name": previous.client_name,
                "service_name": previous.service_name,
                "service_price": previous.service_price,
            }
            updated = updated.model_copy(
                update={k: v for k, v in carried.items() if getattr(updated, k) is None}
            )
        updated = self._enrich(updated)
        self.view_state.upsert_appointment(updated)

        tracker = self._trackers.get(appointment_id)
        if tracker is None:
            initial = previous.status if previous is not None else updated.status
            tracker = self._trackers[appointment_id] = AppointmentStatusTracker(initial)
        if tracker.current_status != updated.status:
            tracker.transition(updated.status)

        return {
            "success": True,
            "message": "Appointment updated successfully!",
            "appointment": updated,
        }

    def delete_appointment(self, appointment_id: str) -> ActionResult:
        try:
            self.source.delete_appointment(appointment_id)
        except NotFoundError as exc:
            logger.warning("Delete target missing: %s", exc)
            return {"success": False, "message": "That appointment no longer exists."}
        except StoreError as exc:
            logger.error("Error deleting appointment %s: %s", appointment_id, exc)
            return {"success": False, "message": "Failed to delete appointment."}

        self.view_state.remove_appointment(appointment_id)
        self._trackers.pop(appointment_id, None)
        return {"success": True, "message": "Appointment deleted successfully!"}

    def status_history(self, appointment_id: str) -> list[str]:
        """Statuses this session has seen for an appointment, oldest first."""
        tracker = self._trackers.get(appointment_id)
        return tracker.get_status_trace() if tracker else []
