"""
Property-based tests for the slot generator and parser.

These tests verify invariants that must always hold true, regardless of the
opening hours and timing settings. Uses Hypothesis for property-based testing.
"""

from hypothesis import given, strategies as st

from availability import ScheduleTextParser, SlotGenerator
from models import DaySchedule, ScheduleSettings, TimeRange, format_minutes, to_minutes


@st.composite
def open_days(draw):
    start = draw(st.integers(min_value=0, max_value=24 * 60 - 2))
    end = draw(st.integers(min_value=start + 1, max_value=24 * 60 - 1))
    return DaySchedule.open_between(format_minutes(start), format_minutes(end))


@st.composite
def schedule_settings(draw):
    lunch = None
    if draw(st.booleans()):
        lunch_start = draw(st.integers(min_value=0, max_value=24 * 60 - 2))
        lunch_end = draw(st.integers(min_value=lunch_start + 1, max_value=24 * 60 - 1))
        lunch = TimeRange(start_time=format_minutes(lunch_start), end_time=format_minutes(lunch_end))
    return ScheduleSettings(
        consultation_duration_minutes=draw(st.integers(min_value=1, max_value=240)),
        patient_interval_minutes=draw(st.integers(min_value=0, max_value=60)),
        lunch_break=lunch
    )


generator = SlotGenerator()


@given(schedule_settings())
def test_closed_day_is_always_empty(settings):
    assert generator.generate(DaySchedule.closed(), settings) == []


@given(open_days(), schedule_settings())
def test_no_slot_overruns_closing_time(day, settings):
    close = to_minutes(day.end_time)
    for slot in generator.generate(day, settings):
        assert slot.start_minute + settings.consultation_duration_minutes <= close


@given(open_days(), schedule_settings())
def test_slots_are_evenly_spaced(day, settings):
    starts = [slot.start_minute for slot in generator.generate(day, settings)]
    assert all(b - a == settings.step_minutes for a, b in zip(starts, starts[1:]))


@given(open_days(), schedule_settings())
def test_sequence_starts_at_opening_and_is_maximal(day, settings):
    slots = generator.generate(day, settings)
    open_min, close = to_minutes(day.start_time), to_minutes(day.end_time)
    duration = settings.consultation_duration_minutes

    if open_min + duration > close:
        assert slots == []
    else:
        assert slots[0].start_minute == open_min
        assert slots[-1].start_minute + settings.step_minutes + duration > close


@given(open_days(), schedule_settings())
def test_generation_is_pure(day, settings):
    assert generator.generate(day, settings) == generator.generate(day, settings)


@given(open_days(), schedule_settings())
def test_lunch_flag_matches_overlap(day, settings):
    lunch = settings.lunch_break
    for slot in generator.generate(day, settings):
        expected = lunch is not None and (
            slot.start_minute < lunch.end_minute and slot.end_minute > lunch.start_minute
        )
        assert slot.excluded_by_lunch == expected


@given(st.text())
def test_parser_never_raises(raw_text):
    schedule, settings = ScheduleTextParser().parse(raw_text)

    assert len(schedule.days) == 7
    assert settings.consultation_duration_minutes > 0
