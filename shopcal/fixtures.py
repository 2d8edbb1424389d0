"""
Seedable mock data for development mode and tests.

Produces a small service catalog, a client list and randomized
appointments. Every draw goes through one ``random.Random`` instance, so
a fixed seed reproduces the same data set.
"""

import logging
import random
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional

from shopcal.schemas.appointment_schema import Appointment, AppointmentStatus
from shopcal.schemas.catalog_schema import Client, Service

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42

# Appointment generation parameters
MIN_APPOINTMENTS = 10
MAX_APPOINTMENTS = 15
WINDOW_DAYS_BEFORE = 7
WINDOW_DAYS = 14
FIRST_HOUR = 9
LAST_HOUR = 16
NOTES_PROBABILITY = 0.5
SCHEDULED_PROBABILITY = 0.8
HISTORY_DAYS = 90
MAX_HISTORY_PER_DAY = 4
NO_SHOW_PROBABILITY = 0.1

MOCK_SERVICES: list[dict] = [
    {"id": "1", "name": "Haircut", "duration_minutes": 30, "price": "25"},
    {"id": "2", "name": "Beard Trim", "duration_minutes": 15, "price": "15"},
    {"id": "3", "name": "Full Service", "duration_minutes": 45, "price": "40"},
    {"id": "4", "name": "Hair Coloring", "duration_minutes": 90, "price": "60"},
    {"id": "5", "name": "Kids Cut", "duration_minutes": 20, "price": "18"},
]

MOCK_CLIENTS: list[dict] = [
    {"id": "client-1", "first_name": "John", "last_name": "Smith",
     "email": "john@example.com", "phone": "555-123-4567",
     "notes": "Prefers scissors over clippers. Usually books every 3 weeks."},
    {"id": "client-2", "first_name": "Michael", "last_name": "Johnson",
     "email": "michael@example.com", "phone": "555-987-6543"},
    {"id": "client-3", "first_name": "Robert", "last_name": "Williams",
     "email": "robert@example.com", "phone": "555-456-7890",
     "notes": "Sensitive scalp, use gentle products."},
    {"id": "client-4", "first_name": "David", "last_name": "Brown",
     "email": "david@example.com", "phone": "555-789-0123"},
    {"id": "client-5", "first_name": "James", "last_name": "Jones",
     "email": "james@example.com", "phone": "555-321-6547"},
]


class FixtureGenerator:
    """Builds reproducible catalogs and appointment sets."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = seed
        self._rng = random.Random(seed)
        self._counter = 0

    def reset(self) -> None:
        """Re-seed so the next draws repeat from the start."""
        self._rng = random.Random(self.seed)
        self._counter = 0

    def services(self) -> list[Service]:
        return [
            Service(
                id=s["id"],
                name=s["name"],
                duration_minutes=s["duration_minutes"],
                price=Decimal(s["price"]),
            )
            for s in MOCK_SERVICES
        ]

    def clients(self) -> list[Client]:
        return [Client(**c) for c in MOCK_CLIENTS]

    def _next_id(self) -> str:
        appointment_id = f"mock-appointment-{self._counter}"
        self._counter += 1
        return appointment_id

    def _build(
        self,
        start: datetime,
        client: Client,
        service: Service,
        status: AppointmentStatus,
        notes: str = "",
    ) -> Appointment:
        return Appointment(
            id=self._next_id(),
            client_id=client.id,
            service_id=service.id,
            start_time=start,
            end_time=start + timedelta(minutes=service.duration_minutes),
            status=status,
            notes=notes,
            client_name=client.full_name,
            service_name=service.name,
            service_price=service.price,
        )

    def _random_start(self, day: date) -> datetime:
        hour = self._rng.randint(FIRST_HOUR, LAST_HOUR)
        minute = 30 if self._rng.random() > 0.5 else 0
        return datetime(day.year, day.month, day.day, hour, minute)

    def _random_status(self) -> AppointmentStatus:
        if self._rng.random() < SCHEDULED_PROBABILITY:
            return AppointmentStatus.SCHEDULED
        if self._rng.random() > 0.5:
            return AppointmentStatus.COMPLETED
        return AppointmentStatus.CANCELLED

    def appointments(
        self,
        around: date,
        services: Optional[list[Service]] = None,
        clients: Optional[list[Client]] = None,
        count: Optional[int] = None,
    ) -> list[Appointment]:
        """
        Random appointments within a week either side of ``around``.

        Starts fall on the hour or half hour between 9am and 4:30pm.
        """
        services = services or self.services()
        clients = clients or self.clients()
        if count is None:
            count = self._rng.randint(MIN_APPOINTMENTS, MAX_APPOINTMENTS)

        result = []
        for _ in range(count):
            offset = self._rng.randrange(WINDOW_DAYS) - WINDOW_DAYS_BEFORE
            start = self._random_start(around + timedelta(days=offset))
            client = self._rng.choice(clients)
            service = self._rng.choice(services)
            notes = "Some notes for this appointment" if self._rng.random() < NOTES_PROBABILITY else ""
            result.append(self._build(start, client, service, self._random_status(), notes))

        logger.debug("Generated %d mock appointments around %s", len(result), around)
        return result

    def history(
        self,
        until: date,
        services: Optional[list[Service]] = None,
        clients: Optional[list[Client]] = None,
        days: int = HISTORY_DAYS,
    ) -> list[Appointment]:
        """Past appointments, mostly completed, for the ``days`` days before ``until``."""
        services = services or self.services()
        clients = clients or self.clients()

        result = []
        for offset in range(days, 0, -1):
            day = until - timedelta(days=offset)
            for _ in range(self._rng.randint(0, MAX_HISTORY_PER_DAY)):
                status = (
                    AppointmentStatus.NO_SHOW
                    if self._rng.random() < NO_SHOW_PROBABILITY
                    else AppointmentStatus.COMPLETED
                )
                result.append(self._build(
                    self._random_start(day),
                    self._rng.choice(clients),
                    self._rng.choice(services),
                    status,
                ))
        return result
