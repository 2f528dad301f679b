"""
Slot generation for one day of a professional's agenda.

Slots start at the opening time and repeat every (consultation + interval)
minutes for as long as a full consultation still fits before closing time.
Slots touching the lunch break are kept and flagged, so the booking screen
can render them as "lunch" instead of leaving a hole in the day.
"""

from dataclasses import dataclass
from typing import List, Optional

from models import DaySchedule, ScheduleSettings, TimeRange, to_minutes, format_minutes


@dataclass(frozen=True)
class CandidateSlot:
    """A generated start time, before reconciliation with existing bookings."""
    time: str  # HH:MM
    start_minute: int
    duration_minutes: int
    excluded_by_lunch: bool = False

    @property
    def end_minute(self) -> int:
        return self.start_minute + self.duration_minutes


def overlaps_lunch(start_minute: int, duration_minutes: int, lunch: Optional[TimeRange]) -> bool:
    """[start, start+duration) against [lunch_start, lunch_end)."""
    if lunch is None:
        return False
    # Standard Overlap Logic: StartA < EndB and StartB < EndA
    return start_minute < lunch.end_minute and lunch.start_minute < start_minute + duration_minutes


class SlotGenerator:
    """
    Produces the ordered candidate slots of a single day.
    Pure: the same day and settings always give the same list.
    """

    def generate(self, day: DaySchedule, settings: ScheduleSettings) -> List[CandidateSlot]:
        if not day.is_open:
            return []

        open_min = to_minutes(day.start_time)
        close_min = to_minutes(day.end_time)
        duration = settings.consultation_duration_minutes
        step = settings.step_minutes

        slots = []
        current = open_min
        # Last slot: the latest start whose consultation still ends by closing time
        while current + duration <= close_min:
            slots.append(CandidateSlot(
                time=format_minutes(current),
                start_minute=current,
                duration_minutes=duration,
                excluded_by_lunch=overlaps_lunch(current, duration, settings.lunch_break)
            ))
            current += step

        return slots
