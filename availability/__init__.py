"""
Availability pipeline for the clinic agenda.

- Schedule text parsing (parser.py)
- Slot generation (slots.py)
- Booking reconciliation (resolver.py)
- Day statistics and grouping (report.py)
- Request facade (engine.py)
"""

from .parser import ScheduleTextParser, ParseReport, SkippedLine
from .slots import SlotGenerator, CandidateSlot, overlaps_lunch
from .resolver import AvailabilityResolver
from .report import DayReport, summarize, group_by_period
from .engine import AvailabilityEngine

__all__ = [
    "ScheduleTextParser",
    "ParseReport",
    "SkippedLine",
    "SlotGenerator",
    "CandidateSlot",
    "overlaps_lunch",
    "AvailabilityResolver",
    "DayReport",
    "summarize",
    "group_by_period",
    "AvailabilityEngine",
]
