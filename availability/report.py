"""
Day reporting for resolved agendas.

This module turns a resolved slot list into what the dashboard shows next to
the slot grid:
1. Status counts and occupancy.
2. Slots grouped by period of the day (morning / afternoon / evening).
"""

from dataclasses import dataclass, field
from datetime import date as date_type
from typing import Any, Dict, List, Union
from collections import Counter

from models import ScheduleVocabulary, SlotStatus, TimeSlot, to_minutes

AFTERNOON_STARTS = 12 * 60
EVENING_STARTS = 18 * 60


@dataclass
class DayReport:
    """Everything the agenda screen needs for one professional on one date."""
    professional_id: Union[int, str]
    date: date_type
    weekday: str
    slots: List[TimeSlot] = field(default_factory=list)
    statistics: Dict[str, Any] = field(default_factory=dict)
    periods: Dict[str, List[TimeSlot]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (used by the export)."""
        return {
            "professional_id": self.professional_id,
            "date": self.date.isoformat(),
            "weekday": self.weekday,
            "slots": [slot.model_dump(mode='json') for slot in self.slots],
            "statistics": self.statistics,
            "periods": {name: [s.time for s in slots] for name, slots in self.periods.items()},
        }


def summarize(slots: List[TimeSlot]) -> Dict[str, Any]:
    """
    Generate the day statistics.
    Occupancy is booked / bookable-in-principle (everything but lunch), in percent.
    """
    counts = Counter(slot.status for slot in slots)
    booked = counts[SlotStatus.BOOKED]
    outside_lunch = len(slots) - counts[SlotStatus.LUNCH_BREAK]
    first_available = next((s.time for s in slots if s.status == SlotStatus.AVAILABLE), None)

    return {
        "total_slots": len(slots),
        "available": counts[SlotStatus.AVAILABLE],
        "booked": booked,
        "lunch_break": counts[SlotStatus.LUNCH_BREAK],
        "unavailable": counts[SlotStatus.UNAVAILABLE],
        "first_available": first_available,
        "occupancy_rate": round(booked / outside_lunch * 100, 1) if outside_lunch else 0.0,
    }


def group_by_period(slots: List[TimeSlot], vocabulary: ScheduleVocabulary) -> Dict[str, List[TimeSlot]]:
    """Split slots into morning (<12h), afternoon (<18h) and evening, keeping order."""
    morning, afternoon, evening = vocabulary.period_names
    groups: Dict[str, List[TimeSlot]] = {morning: [], afternoon: [], evening: []}

    for slot in slots:
        start = to_minutes(slot.time)
        if start < AFTERNOON_STARTS:
            groups[morning].append(slot)
        elif start < EVENING_STARTS:
            groups[afternoon].append(slot)
        else:
            groups[evening].append(slot)

    return groups
