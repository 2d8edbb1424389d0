"""
Dashboard entry point.

Runs the console rendering of the barber dashboard against whichever
data source the environment selects (``DATA_SOURCE=mock`` by default).

Usage:
    Console demo: python main.py console [--view month ...]
    Config check: python main.py check
"""

import sys

from shopcal.config import settings


def _run_console_mode(argv: list[str]) -> int:
    """Render the dashboard in the terminal."""
    from console_demo import main as console_main

    return console_main(argv)


def _run_config_check() -> int:
    """Print the effective configuration and exit."""
    print(f"Shop:         {settings.shop.name}")
    print(f"Data source:  {settings.data_source.kind}")
    print(f"Default view: {settings.calendar.default_view}")
    print(
        f"Slots:        {settings.calendar.day_start_hour:02d}:00-"
        f"{settings.calendar.day_end_hour:02d}:00 every {settings.calendar.slot_minutes} min"
    )
    return 0


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "check":
        sys.exit(_run_config_check())
    args = sys.argv[2:] if len(sys.argv) > 1 and sys.argv[1] == "console" else sys.argv[1:]
    sys.exit(_run_console_mode(args))
