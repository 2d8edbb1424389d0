"""
Offline console demo. Renders the barber dashboard in the terminal.

Uses the mock data source, the real calendar grid, binning and the
revenue/client services. No backend, no network calls.

Usage:
    python console_demo.py
    python console_demo.py --view month --date 2024-03-04
    python console_demo.py --section revenue --period year
"""

import argparse
import sys
from datetime import date
from typing import Optional

from shopcal.calendar.formatting import (
    StatusColor,
    format_header,
    format_month_header,
    format_time_range,
    status_color,
)
from shopcal.calendar.grid import DAY_NAMES, CalendarView
from shopcal.config import settings
from shopcal.dashboard import Dashboard, build_dashboard
from shopcal.schemas.session_schema import ActorContext
from shopcal.services.revenue import PERIODS, bar_widths, line_heights
from shopcal.stores.errors import StoreError
from shopcal.utils import format_compact, format_currency

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

TERMINAL_COLORS = {
    StatusColor.GREEN: GREEN,
    StatusColor.RED: RED,
    StatusColor.ORANGE: YELLOW,
    StatusColor.BLUE: BLUE,
}

CELL_WIDTH = 14
BAR_WIDTH = 30
SECTIONS = ("calendar", "revenue", "clients", "all")


class ConsoleDashboard:
    """Prints the calendar, revenue and client screens for a demo barber."""

    def __init__(self, dashboard: Dashboard) -> None:
        self.dashboard = dashboard
        self.calendar = dashboard.calendar
        self.currency = settings.shop.currency_symbol

    def banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {title}{RESET}")
        print(f"{BOLD}  Shop: {settings.shop.name}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _colored(self, status, text: str) -> str:
        return f"{TERMINAL_COLORS[status_color(status)]}{text}{RESET}"

    # ------------------------------------------------------------------ #
    # Calendar
    # ------------------------------------------------------------------ #

    def show_calendar(self) -> None:
        state = self.calendar.view_state
        self.banner(f"Barber Schedule - {state.view.value} view")
        if state.view == CalendarView.MONTH:
            print(f"\n{BOLD}{format_month_header(state.reference_date)}{RESET}")
            self._print_month()
        else:
            print(f"\n{BOLD}{format_header(state.reference_date)}{RESET}")
            self._print_slots()
        self.system_log(f"{len(state.appointments)} appointments in view")

    def _print_month(self) -> None:
        state = self.calendar.view_state
        print("".join(name.ljust(CELL_WIDTH) for name in DAY_NAMES))
        grid = state.month_grid()
        for row_start in range(0, len(grid), len(DAY_NAMES)):
            row = grid[row_start:row_start + len(DAY_NAMES)]
            line = []
            for cell in row:
                if cell is None:
                    line.append(" " * CELL_WIDTH)
                    continue
                count = len(state.day_appointments(cell))
                label = f"{cell.day_number:>2}" + (f" ({count})" if count else "")
                line.append(label.ljust(CELL_WIDTH))
            print("".join(line))

    def _print_slots(self) -> None:
        state = self.calendar.view_state
        header = "".join(f"{c.day_name} {c.day_number}".ljust(CELL_WIDTH) for c in state.days)
        print(f"{'':7}{header}")
        for slot, columns in state.slot_grid():
            if not any(columns):
                continue
            cells = []
            for appointments in columns:
                if not appointments:
                    cells.append(" " * CELL_WIDTH)
                    continue
                first = appointments[0]
                name = (first.client_name or "")[:CELL_WIDTH - 3]
                suffix = f"+{len(appointments) - 1}" if len(appointments) > 1 else ""
                cells.append(self._colored(first.status, f"{name}{suffix}".ljust(CELL_WIDTH)))
            print(f"{slot:7}{''.join(cells)}")

        for cell in state.days:
            for appointment in state.day_appointments(cell):
                span = format_time_range(appointment.start_time, appointment.end_time)
                print(
                    f"  {cell.date} {span:<20} "
                    f"{self._colored(appointment.status, appointment.status.value):<22} "
                    f"{appointment.client_name} - {appointment.service_name}"
                )

    # ------------------------------------------------------------------ #
    # Revenue
    # ------------------------------------------------------------------ #

    def show_revenue(self, period: str) -> None:
        self.banner(f"Revenue Analytics - {period}")
        try:
            summary = self.dashboard.revenue.load(period, self.calendar.view_state.reference_date)
        except StoreError as exc:
            print(f"{RED}Failed to load revenue: {exc}{RESET}")
            return

        print(f"  Total revenue:      {format_currency(summary.total_revenue, self.currency)}")
        print(f"  Completed:          {format_compact(summary.appointments_completed)}")
        print(f"  Average service:    {format_currency(summary.average_service, self.currency)}")
        print(f"  Top service:        {summary.top_service or '-'}")
        print()
        widths = bar_widths([s.revenue for s in summary.service_breakdown])
        for entry, width in zip(summary.service_breakdown, widths):
            bar = "#" * round(width / 100 * BAR_WIDTH)
            print(f"  {entry.name:<14} {bar:<{BAR_WIDTH}} {format_currency(entry.revenue, self.currency)}")
        print()
        heights = line_heights([m.amount for m in summary.monthly_trend])
        for month, height in zip(summary.monthly_trend, heights):
            marker = "." * round(height / 100 * BAR_WIDTH)
            print(f"  {month.month}  {marker:<{BAR_WIDTH}} {format_currency(month.amount, self.currency)}")

    # ------------------------------------------------------------------ #
    # Clients
    # ------------------------------------------------------------------ #

    def show_clients(self, search: Optional[str]) -> None:
        self.banner("Client Management")
        try:
            self.dashboard.clients.load()
        except StoreError as exc:
            print(f"{RED}Failed to load clients: {exc}{RESET}")
            return

        for summary in self.dashboard.clients.search(search or ""):
            client = summary.client
            last = summary.last_visit.isoformat() if summary.last_visit else "Unknown"
            print(
                f"  {client.full_name:<18} {client.phone:<14} "
                f"visits: {summary.total_visits:<3} last: {last:<10} "
                f"prefers: {summary.preferred_service or 'Unknown'}"
            )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Barber dashboard console demo")
    parser.add_argument("--view", choices=[v.value for v in CalendarView],
                        default=settings.calendar.default_view)
    parser.add_argument("--date", type=date.fromisoformat, default=None,
                        help="Reference date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--navigate", type=int, default=0,
                        help="Periods to move forward (positive) or back (negative)")
    parser.add_argument("--section", choices=SECTIONS, default="all")
    parser.add_argument("--period", choices=PERIODS, default="month")
    parser.add_argument("--search", default=None, help="Filter the client list")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    actor = ActorContext(actor_id="demo-barber", tenant_id="demo-shop")
    dashboard = build_dashboard(actor, today=args.date)
    console = ConsoleDashboard(dashboard)

    dashboard.calendar.view_state.set_view(args.view)
    dashboard.open_calendar()
    step = 1 if args.navigate > 0 else -1
    for _ in range(abs(args.navigate)):
        dashboard.calendar.navigate(step)

    if args.section in ("calendar", "all"):
        console.show_calendar()
    if args.section in ("revenue", "all"):
        console.show_revenue(args.period)
    if args.section in ("clients", "all"):
        console.show_clients(args.search)
    return 0


if __name__ == "__main__":
    sys.exit(main())
