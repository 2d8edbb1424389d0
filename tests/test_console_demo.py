"""Smoke tests for the console rendering of the dashboard."""

from console_demo import ConsoleDashboard, parse_args
from shopcal.dashboard import Dashboard
from shopcal.stores.mock import MockDataSource
from tests.conftest import REFERENCE_DATE
from tests.test_dashboard import MOCK_CONFIG


def _console(actor, view="week"):
    source = MockDataSource(actor, today=REFERENCE_DATE)
    dashboard = Dashboard(actor, source, config=MOCK_CONFIG, reference_date=REFERENCE_DATE)
    dashboard.calendar.view_state.set_view(view)
    dashboard.open_calendar()
    return ConsoleDashboard(dashboard)


class TestConsoleDashboard:
    def test_week_view(self, actor, capsys):
        _console(actor).show_calendar()
        out = capsys.readouterr().out
        assert "Monday, March 4, 2024" in out
        assert "appointments in view" in out

    def test_month_view(self, actor, capsys):
        _console(actor, "month").show_calendar()
        out = capsys.readouterr().out
        assert "March 2024" in out
        assert "Sun" in out

    def test_revenue(self, actor, capsys):
        _console(actor).show_revenue("month")
        out = capsys.readouterr().out
        assert "Total revenue" in out
        assert "2024-02" in out

    def test_clients_search(self, actor, capsys):
        _console(actor).show_clients("smith")
        out = capsys.readouterr().out
        assert "John Smith" in out
        assert "Michael Johnson" not in out


class TestArgs:
    def test_parse_args(self):
        args = parse_args(["--view", "day", "--date", "2024-03-04", "--navigate", "-2"])
        assert args.view == "day"
        assert args.date == REFERENCE_DATE
        assert args.navigate == -2
