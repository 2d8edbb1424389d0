"""
Revenue analytics for completed appointments.

Aggregates totals, a per-service breakdown, daily revenue and a monthly
trend from whatever completed appointments fall in the chosen period.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from shopcal.calendar.grid import CalendarView, advance
from shopcal.logging_context import get_tenant_logger
from shopcal.schemas.appointment_schema import Appointment, AppointmentQuery, AppointmentStatus
from shopcal.schemas.session_schema import ActorContext
from shopcal.stores.base import DataSource

logger = get_tenant_logger(__name__)

PERIODS = ("week", "month", "year", "all")
ALL_TIME_START = date(2010, 1, 1)
CENTS = Decimal("0.01")
UNKNOWN_SERVICE = "Unknown"


@dataclass
class ServiceRevenue:
    name: str
    count: int = 0
    revenue: Decimal = Decimal("0")


@dataclass
class DailyRevenue:
    date: str
    amount: Decimal


@dataclass
class MonthlyRevenue:
    month: str
    amount: Decimal


@dataclass
class RevenueSummary:
    """Aggregated figures for one reporting period."""

    total_revenue: Decimal = Decimal("0")
    appointments_completed: int = 0
    average_service: Decimal = Decimal("0")
    top_service: str = ""
    service_breakdown: list[ServiceRevenue] = field(default_factory=list)
    daily_revenue: list[DailyRevenue] = field(default_factory=list)
    monthly_trend: list[MonthlyRevenue] = field(default_factory=list)


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """
    Start and end dates for a reporting period ending today.

    ``week`` covers the last 7 days, ``month`` and ``year`` go back one
    calendar month or year, ``all`` starts in 2010. Unknown periods use
    ``month``.
    """
    end = today or date.today()
    if period == "week":
        return end - timedelta(days=7), end
    if period == "year":
        if end.month == 2 and end.day == 29:
            return date(end.year - 1, 2, 28), end
        return end.replace(year=end.year - 1), end
    if period == "all":
        return ALL_TIME_START, end
    return advance(end, CalendarView.MONTH, -1), end


def summarize(appointments: Iterable[Appointment]) -> RevenueSummary:
    """Aggregate completed appointments. Others are ignored."""
    summary = RevenueSummary()
    by_service: dict[str, ServiceRevenue] = {}
    by_day: dict[str, Decimal] = {}
    by_month: dict[str, Decimal] = {}

    for appointment in appointments:
        if appointment.status != AppointmentStatus.COMPLETED:
            continue
        price = appointment.service_price or Decimal("0")
        name = appointment.service_name or UNKNOWN_SERVICE

        summary.appointments_completed += 1
        summary.total_revenue += price

        entry = by_service.setdefault(name, ServiceRevenue(name=name))
        entry.count += 1
        entry.revenue += price

        day_key = appointment.start_time.date().isoformat()
        by_day[day_key] = by_day.get(day_key, Decimal("0")) + price
        month_key = day_key[:7]
        by_month[month_key] = by_month.get(month_key, Decimal("0")) + price

    if summary.appointments_completed:
        summary.average_service = (
            summary.total_revenue / summary.appointments_completed
        ).quantize(CENTS, rounding=ROUND_HALF_UP)

    top_revenue = Decimal("0")
    for entry in by_service.values():
        if entry.revenue > top_revenue:
            summary.top_service = entry.name
            top_revenue = entry.revenue

    summary.service_breakdown = sorted(by_service.values(), key=lambda s: s.revenue, reverse=True)
    summary.daily_revenue = [DailyRevenue(d, amount) for d, amount in sorted(by_day.items())]
    summary.monthly_trend = [MonthlyRevenue(m, amount) for m, amount in sorted(by_month.items())]
    return summary


def bar_widths(values: list[Decimal]) -> list[float]:
    """Each value as a percentage of the largest one."""
    peak = max(values, default=Decimal("0"))
    if peak <= 0:
        return [0.0 for _ in values]
    return [float(v / peak * 100) for v in values]


def line_heights(values: list[Decimal]) -> list[float]:
    """Heights between 10% and 90% scaled to the value range; 50% when flat."""
    if not values:
        return []
    low, high = min(values), max(values)
    spread = high - low
    if spread == 0:
        return [50.0 for _ in values]
    return [float((v - low) / spread * 80 + 10) for v in values]


class RevenueAnalytics:
    """Loads completed appointments for a barber and summarizes them."""

    def __init__(self, actor: ActorContext, source: DataSource) -> None:
        self.actor = actor
        self.source = source

    def load(self, period: str = "month", today: Optional[date] = None) -> RevenueSummary:
        """
        Summary for ``period``.

        Raises:
            StoreError: If the appointments cannot be fetched.
        """
        start, end = get_date_range(period, today)
        query = AppointmentQuery(
            owner_id=self.actor.actor_id,
            tenant_id=self.actor.tenant_id,
            start=datetime.combine(start, time(0, 0)),
            end=datetime.combine(end, time(23, 59, 59)),
            status=AppointmentStatus.COMPLETED,
        )
        appointments = self.source.list_appointments(query)
        logger.debug("Summarizing %d completed appointments for %s", len(appointments), period)
        return summarize(appointments)
