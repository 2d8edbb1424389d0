"""Tests for the seedable fixture generator."""

from datetime import date, timedelta

from shopcal.fixtures import MAX_APPOINTMENTS, MIN_APPOINTMENTS, FixtureGenerator
from shopcal.schemas.appointment_schema import AppointmentStatus

AROUND = date(2024, 3, 4)


class TestCatalog:
    def test_services(self):
        services = FixtureGenerator().services()
        assert [s.name for s in services][:2] == ["Haircut", "Beard Trim"]
        assert all(s.duration_minutes > 0 for s in services)

    def test_clients(self):
        clients = FixtureGenerator().clients()
        assert clients[0].full_name == "John Smith"
        assert len({c.id for c in clients}) == len(clients)


class TestAppointments:
    def test_same_seed_same_data(self):
        first = FixtureGenerator(7).appointments(AROUND)
        second = FixtureGenerator(7).appointments(AROUND)
        assert first == second

    def test_reset_repeats(self):
        generator = FixtureGenerator(3)
        first = generator.appointments(AROUND)
        generator.reset()
        assert generator.appointments(AROUND) == first

    def test_count_in_range(self):
        for seed in range(10):
            appointments = FixtureGenerator(seed).appointments(AROUND)
            assert MIN_APPOINTMENTS <= len(appointments) <= MAX_APPOINTMENTS

    def test_starts_are_slot_aligned_business_hours(self):
        for appointment in FixtureGenerator(11).appointments(AROUND, count=50):
            start = appointment.start_time
            assert 9 <= start.hour <= 16
            assert start.minute in (0, 30)

    def test_within_window(self):
        for appointment in FixtureGenerator(5).appointments(AROUND, count=50):
            offset = appointment.start_time.date() - AROUND
            assert timedelta(days=-7) <= offset <= timedelta(days=6)

    def test_end_is_start_plus_duration(self):
        generator = FixtureGenerator()
        durations = {s.id: s.duration_minutes for s in generator.services()}
        for appointment in generator.appointments(AROUND):
            expected = timedelta(minutes=durations[appointment.service_id])
            assert appointment.end_time - appointment.start_time == expected

    def test_unique_ids(self):
        generator = FixtureGenerator()
        appointments = generator.appointments(AROUND) + generator.appointments(AROUND)
        assert len({a.id for a in appointments}) == len(appointments)


class TestHistory:
    def test_history_before_until(self):
        history = FixtureGenerator().history(AROUND, days=30)
        assert history
        assert all(a.start_time.date() < AROUND for a in history)
        assert all(a.start_time.date() >= AROUND - timedelta(days=30) for a in history)

    def test_history_statuses(self):
        history = FixtureGenerator().history(AROUND)
        statuses = {a.status for a in history}
        assert statuses <= {AppointmentStatus.COMPLETED, AppointmentStatus.NO_SHOW}
        assert AppointmentStatus.COMPLETED in statuses
