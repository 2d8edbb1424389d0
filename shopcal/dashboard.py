"""
Dashboard composition root.

Picks the data source once from configuration and wires the calendar,
client, revenue and settings services around an explicit actor context.

Usage:
    actor = ActorContext(actor_id="barber-1", tenant_id="shop-1")
    dashboard = build_dashboard(actor)
    dashboard.calendar.refresh()
"""

import logging
from datetime import date
from typing import Optional

from shopcal.calendar.grid import generate_time_slots
from shopcal.calendar.view_state import CalendarViewState
from shopcal.config import AppConfig, DataSourceConfig, settings
from shopcal.fixtures import FixtureGenerator
from shopcal.logging_context import set_tenant_id
from shopcal.schemas.session_schema import ActorContext
from shopcal.services.calendar_service import BarberCalendar
from shopcal.services.clients import ClientDirectory
from shopcal.services.revenue import RevenueAnalytics
from shopcal.services.tenant import TenantSettings
from shopcal.stores.base import DataSource
from shopcal.stores.mock import MockDataSource
from shopcal.stores.remote import RemoteDataSource

logger = logging.getLogger(__name__)

BARBER_VIEWS = ("dashboard", "calendar", "clients", "revenue", "settings")
CLIENT_VIEWS = ("dashboard",)


def build_data_source(
    config: DataSourceConfig,
    actor: ActorContext,
    today: Optional[date] = None,
    shop_name: str = "Demo Barbershop",
) -> DataSource:
    """Select the mock or remote backend. Called once per dashboard."""
    if config.kind == "remote":
        logger.info("Using remote data source at %s", config.backend_url)
        return RemoteDataSource(
            base_url=config.backend_url,
            api_key=config.backend_api_key,
            timeout=config.timeout_seconds,
        )
    logger.info("Using mock data source (seed=%d)", config.fixture_seed)
    return MockDataSource(
        actor,
        generator=FixtureGenerator(config.fixture_seed),
        today=today,
        shop_name=shop_name,
    )


class Dashboard:
    """Services available to one signed-in actor."""

    def __init__(
        self,
        actor: ActorContext,
        source: DataSource,
        config: AppConfig = settings,
        reference_date: Optional[date] = None,
    ) -> None:
        self.actor = actor
        self.source = source
        set_tenant_id(actor.tenant_id)

        cal = config.calendar
        view_state = CalendarViewState(
            reference_date=reference_date,
            view=cal.default_view,
            time_slots=generate_time_slots(cal.day_start_hour, cal.day_end_hour, cal.slot_minutes),
        )
        self.calendar = BarberCalendar(
            actor, source, view_state, default_duration_minutes=cal.default_duration_minutes,
        )
        self.clients = ClientDirectory(actor, source)
        self.revenue = RevenueAnalytics(actor, source)
        self.settings = TenantSettings(actor, source)

    @property
    def views(self) -> tuple[str, ...]:
        return BARBER_VIEWS if self.actor.is_barber else CLIENT_VIEWS

    def open_calendar(self) -> None:
        """Load the catalog and the appointments for the initial view."""
        self.calendar.load_catalog()
        self.calendar.refresh()


def build_dashboard(
    actor: ActorContext,
    config: AppConfig = settings,
    today: Optional[date] = None,
) -> Dashboard:
    source = build_data_source(config.data_source, actor, today=today, shop_name=config.shop.name)
    return Dashboard(actor, source, config=config, reference_date=today)
