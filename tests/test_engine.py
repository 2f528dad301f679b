"""
Integration tests for the availability engine: text in, resolved day out.
"""

from datetime import date, datetime

from availability import AvailabilityEngine
from models import Appointment, ENGLISH, SlotStatus

MONDAY = date(2025, 3, 10)
WEDNESDAY = date(2025, 3, 12)


class TestSlotsForDate:
    """Test the full pipeline for one professional and date."""

    def test_open_day(self, engine, ana_schedule):
        slots = engine.slots_for_date(ana_schedule, 1, [], MONDAY)

        # 08:00-12:00 at 60+5 minutes
        assert [s.time for s in slots] == ["08:00", "09:05", "10:10"]
        assert all(s.status == SlotStatus.AVAILABLE for s in slots)
        assert all(s.duration_minutes == 60 for s in slots)

    def test_booked_slot(self, engine, ana_schedule):
        appointments = [
            Appointment.from_record({
                "professionalId": 1,
                "appointmentDate": "2025-03-10T09:05:00",
                "patientName": "João Pereira",
            }),
        ]

        slots = engine.slots_for_date(ana_schedule, 1, appointments, MONDAY)

        assert slots[1].status == SlotStatus.BOOKED
        assert slots[1].occupant_label == "João Pereira"

    def test_closed_day(self, engine, ana_schedule):
        assert engine.slots_for_date(ana_schedule, 1, [], WEDNESDAY) == []

    def test_no_schedule_text(self, engine):
        assert engine.slots_for_date(None, 1, None, MONDAY) == []

    def test_not_before(self, engine, ana_schedule):
        slots = engine.slots_for_date(
            ana_schedule, 1, [], MONDAY, not_before=datetime(2025, 3, 10, 9, 0)
        )

        assert [s.status for s in slots] == [
            SlotStatus.UNAVAILABLE, SlotStatus.AVAILABLE, SlotStatus.AVAILABLE
        ]

    def test_english_engine(self):
        engine = AvailabilityEngine(vocabulary=ENGLISH)

        slots = engine.slots_for_date("Monday: 9 to 10\nConsultation duration: 20 minutes", 1, [], MONDAY)

        assert [s.time for s in slots] == ["09:00", "09:25"]


class TestOpenDates:
    """Test the upcoming-dates listing of the booking form."""

    def test_week_from_monday(self, engine, ana_schedule):
        dates = engine.open_dates(ana_schedule, MONDAY, days=7)

        assert dates == [date(2025, 3, 10), date(2025, 3, 11), date(2025, 3, 15)]

    def test_default_lookahead(self, engine, george_schedule):
        dates = engine.open_dates(george_schedule, MONDAY)

        # Monday to Friday over 30 days starting on a Monday
        assert len(dates) == 22
        assert all(d.weekday() < 5 for d in dates)

    def test_empty_schedule(self, engine):
        assert engine.open_dates("", MONDAY) == []


class TestDayReport:
    """Test statistics and grouping of a resolved day."""

    def test_report(self, engine, maria_schedule):
        appointments = [
            Appointment.from_record({"idProfissional": 3, "dt_Agendamento": "2025-03-10T08:00:00"}),
        ]

        report = engine.day_report(maria_schedule, 3, appointments, MONDAY)

        assert report.weekday == "Segunda"
        assert [s.time for s in report.slots] == [
            "08:00", "09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00"
        ]
        assert report.statistics == {
            "total_slots": 9,
            "available": 6,
            "booked": 1,
            "lunch_break": 2,
            "unavailable": 0,
            "first_available": "09:00",
            "occupancy_rate": 14.3,
        }
        assert {name: len(slots) for name, slots in report.periods.items()} == {
            "Manhã": 4, "Tarde": 5, "Noite": 0
        }

    def test_to_dict(self, engine, maria_schedule):
        report = engine.day_report(maria_schedule, 3, [], MONDAY)

        data = report.to_dict()

        assert data["date"] == "2025-03-10"
        assert data["periods"]["Tarde"] == ["12:00", "13:00", "14:00", "15:00", "16:00"]
        assert data["slots"][4]["status"] == "LunchBreak"

    def test_empty_day_statistics(self, engine, ana_schedule):
        report = engine.day_report(ana_schedule, 1, [], WEDNESDAY)

        assert report.statistics["total_slots"] == 0
        assert report.statistics["occupancy_rate"] == 0.0
        assert report.statistics["first_available"] is None
