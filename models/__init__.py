"""
Data models package for the clinic agenda availability engine.

This package exports the three pillars of the data architecture:
1. Input (WeeklySchedule, DaySchedule, ScheduleSettings, Appointment)
2. Locale configuration (ScheduleVocabulary)
3. Output (TimeSlot, SlotStatus)
"""

from .schedule import (
    DaySchedule,
    ScheduleSettings,
    TimeRange,
    WeeklySchedule,
    TimeSlot,
    SlotStatus,
    to_minutes,
    format_minutes
)

from .appointment import Appointment

from .vocabulary import (
    ScheduleVocabulary,
    PORTUGUESE,
    ENGLISH,
    VOCABULARIES
)

__all__ = [
    # --- Input Models ---
    "DaySchedule",
    "ScheduleSettings",
    "TimeRange",
    "WeeklySchedule",
    "Appointment",

    # --- Locale Configuration ---
    "ScheduleVocabulary",
    "PORTUGUESE",
    "ENGLISH",
    "VOCABULARIES",

    # --- Output Models ---
    "TimeSlot",
    "SlotStatus",

    # --- Clock Helpers ---
    "to_minutes",
    "format_minutes",
]
