"""
Data source backed by the hosted backend's row-level REST API.

Speaks the PostgREST dialect: tables live under ``/rest/v1/<table>``,
filters are query parameters such as ``barber_id=eq.<id>``, and writes ask
for ``Prefer: return=representation`` so the stored row comes back.
Row isolation between tenants is enforced by the backend; the filters
sent here only narrow the result.
"""

from typing import Any, Callable, Optional, TypeVar

import requests
from pydantic import ValidationError as PydanticValidationError

from shopcal.logging_context import get_tenant_logger
from shopcal.schemas.appointment_schema import (
    Appointment,
    AppointmentCreate,
    AppointmentQuery,
)
from shopcal.schemas.catalog_schema import Client, Service
from shopcal.schemas.session_schema import Tenant
from shopcal.stores.base import DataSource
from shopcal.stores.errors import NotFoundError, StoreError, ValidationError

logger = get_tenant_logger(__name__)

APPOINTMENT_COLUMNS = (
    "id,client_id,service_id,start_time,end_time,status,notes,barber_id,tenant_id,"
    "profiles:client_id(first_name,last_name),services:service_id(name,price)"
)
CLIENT_COLUMNS = "client_id,profiles:client_id(id,first_name,last_name,email,phone,notes)"

VALIDATION_STATUSES = (400, 409, 422)

T = TypeVar("T")


def _row_to_appointment(row: dict) -> Appointment:
    row = dict(row)
    profile = row.pop("profiles", None) or {}
    service = row.pop("services", None) or {}
    if profile:
        row["client_name"] = (
            f"{profile.get('first_name') or ''} {profile.get('last_name') or ''}".strip()
        )
    if service:
        row["service_name"] = service.get("name")
        row["service_price"] = service.get("price")
    row["notes"] = row.get("notes") or ""
    return Appointment(**row)


def _row_to_client(row: dict) -> Client:
    row = {k: v for k, v in row.items() if v is not None}
    return Client(**row)


def _parse_rows(table: str, rows: list[dict], convert: Callable[[dict], T]) -> list[T]:
    """Convert backend rows to models, reporting a malformed row as a store failure."""
    try:
        return [convert(row) for row in rows]
    except PydanticValidationError as exc:
        logger.error("Malformed %s row: %s", table, exc)
        raise StoreError(f"{table} returned a row that could not be read.") from exc


class RemoteDataSource(DataSource):
    """HTTP client for the hosted appointments, services, profiles and tenants tables."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        access_token: Optional[str] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "apikey": api_key,
            "Authorization": f"Bearer {access_token or api_key}",
            "Content-Type": "application/json",
        })

    def _request(
        self,
        method: str,
        table: str,
        params: Any = None,
        payload: Optional[dict] = None,
        returning: bool = False,
    ) -> list[dict]:
        url = f"{self.base_url}/rest/v1/{table}"
        headers = {"Prefer": "return=representation"} if returning else {}
        try:
            response = self.session.request(
                method, url, params=params, json=payload, headers=headers, timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, table, exc)
            raise StoreError(f"Could not reach the backend: {exc}") from exc

        if response.status_code == 404:
            raise NotFoundError(f"{table} resource not found.")
        if response.status_code in VALIDATION_STATUSES:
            raise ValidationError(f"{table} rejected the request: {response.text}")
        if response.status_code >= 400:
            logger.error("%s %s returned %s", method, table, response.status_code)
            raise StoreError(f"{table} request failed with status {response.status_code}.")

        if not response.content:
            return []
        return response.json()

    # --- Appointments ---

    def list_appointments(self, query: AppointmentQuery) -> list[Appointment]:
        params: list[tuple[str, str]] = [
            ("select", APPOINTMENT_COLUMNS),
            ("barber_id", f"eq.{query.owner_id}"),
            ("tenant_id", f"eq.{query.tenant_id}"),
            ("order", "start_time.asc"),
        ]
        if query.start is not None:
            params.append(("start_time", f"gte.{query.start.isoformat()}"))
        if query.end is not None:
            params.append(("start_time", f"lte.{query.end.isoformat()}"))
        if query.status is not None:
            params.append(("status", f"eq.{query.status.value}"))
        if query.client_id is not None:
            params.append(("client_id", f"eq.{query.client_id}"))

        rows = self._request("GET", "appointments", params=params)
        logger.debug("Fetched %d appointments", len(rows))
        return _parse_rows("appointments", rows, _row_to_appointment)

    def create_appointment(self, payload: AppointmentCreate) -> Appointment:
        rows = self._request(
            "POST", "appointments", payload=payload.model_dump(mode="json"), returning=True,
        )
        if not rows:
            raise StoreError("Backend did not return the created appointment.")
        return _parse_rows("appointments", rows[:1], _row_to_appointment)[0]

    def update_appointment(self, appointment_id: str, changes: dict) -> Appointment:
        rows = self._request(
            "PATCH", "appointments",
            params={"id": f"eq.{appointment_id}"}, payload=changes, returning=True,
        )
        if not rows:
            raise NotFoundError(f"Appointment {appointment_id} not found.")
        return _parse_rows("appointments", rows[:1], _row_to_appointment)[0]

    def delete_appointment(self, appointment_id: str) -> None:
        rows = self._request(
            "DELETE", "appointments", params={"id": f"eq.{appointment_id}"}, returning=True,
        )
        if not rows:
            raise NotFoundError(f"Appointment {appointment_id} not found.")

    # --- Catalog ---

    def list_services(self, tenant_id: str) -> list[Service]:
        rows = self._request(
            "GET", "services", params={"select": "*", "tenant_id": f"eq.{tenant_id}"},
        )
        return _parse_rows("services", rows, Service.model_validate)

    def list_clients(self, owner_id: str) -> list[Client]:
        rows = self._request(
            "GET", "appointments",
            params={
                "select": CLIENT_COLUMNS,
                "barber_id": f"eq.{owner_id}",
                "order": "created_at.desc",
            },
        )
        profiles: dict[str, dict] = {}
        for row in rows:
            profile = row.get("profiles")
            if profile:
                profiles.setdefault(str(profile.get("id") or row.get("client_id")), profile)
        return _parse_rows("profiles", list(profiles.values()), _row_to_client)

    def update_client_notes(self, client_id: str, notes: str) -> Client:
        rows = self._request(
            "PATCH", "profiles",
            params={"id": f"eq.{client_id}"}, payload={"notes": notes}, returning=True,
        )
        if not rows:
            raise NotFoundError(f"Client {client_id} not found.")
        return _parse_rows("profiles", rows[:1], _row_to_client)[0]

    # --- Tenant ---

    def get_tenant(self, tenant_id: str) -> Tenant:
        rows = self._request("GET", "tenants", params={"select": "*", "id": f"eq.{tenant_id}"})
        if not rows:
            raise NotFoundError(f"Tenant {tenant_id} not found.")
        return _parse_rows("tenants", rows[:1], Tenant.model_validate)[0]

    def update_tenant(self, tenant_id: str, changes: dict) -> Tenant:
        rows = self._request(
            "PATCH", "tenants",
            params={"id": f"eq.{tenant_id}"}, payload=changes, returning=True,
        )
        if not rows:
            raise NotFoundError(f"Tenant {tenant_id} not found.")
        return _parse_rows("tenants", rows[:1], Tenant.model_validate)[0]
