"""
Schedule data models for the clinic agenda.

This module defines both ends of the availability pipeline:
1. Input: the structured weekly schedule and timing settings of a professional.
2. Output: the time slots shown to the booking screen.

Wall-clock times are stored as zero-padded "HH:MM" strings, exactly as they
are rendered; arithmetic is done on integer minutes-since-midnight.
"""

import re
from typing import Dict, Optional
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from datetime import date as date_type, datetime, time as time_type

CLOCK_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")
MINUTES_PER_DAY = 24 * 60


def to_minutes(clock: str) -> int:
    """Convert an "HH:MM" string into minutes since midnight."""
    match = CLOCK_PATTERN.match(clock)
    if not match:
        raise ValueError(f"Invalid clock time '{clock}', expected HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Clock time '{clock}' is out of range")
    return hour * 60 + minute


def format_minutes(minutes: int) -> str:
    """Render minutes since midnight as a zero-padded "HH:MM" string."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def _check_clock(value: Optional[str]) -> Optional[str]:
    if value is not None:
        to_minutes(value)
    return value


class TimeRange(BaseModel):
    """A same-day wall-clock window, e.g. the lunch break."""
    model_config = ConfigDict(frozen=True)

    start_time: str = Field(description="Window start (HH:MM)")
    end_time: str = Field(description="Window end (HH:MM), exclusive")

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_clock(cls, v):
        return _check_clock(v)

    @model_validator(mode='after')
    def validate_times(self):
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError("End time must be strictly after start time")
        return self

    @property
    def start_minute(self) -> int:
        return to_minutes(self.start_time)

    @property
    def end_minute(self) -> int:
        return to_minutes(self.end_time)


class DaySchedule(BaseModel):
    """One weekday's opening hours. A closed day carries no times."""
    model_config = ConfigDict(frozen=True)

    is_open: bool = Field(default=False, description="Whether the professional attends this day")
    start_time: Optional[str] = Field(default=None, description="Opening time (HH:MM)")
    end_time: Optional[str] = Field(default=None, description="Closing time (HH:MM)")

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_clock(cls, v):
        return _check_clock(v)

    @model_validator(mode='after')
    def validate_window(self):
        if not self.is_open:
            return self
        if self.start_time is None or self.end_time is None:
            raise ValueError("An open day needs both start_time and end_time")
        if to_minutes(self.start_time) >= to_minutes(self.end_time):
            raise ValueError("End time must be strictly after start time")
        return self

    @classmethod
    def closed(cls) -> "DaySchedule":
        return cls(is_open=False)

    @classmethod
    def open_between(cls, start_time: str, end_time: str) -> "DaySchedule":
        return cls(is_open=True, start_time=start_time, end_time=end_time)


class ScheduleSettings(BaseModel):
    """
    Timing parameters shared by every day of one professional's agenda.
    Defaults apply whenever the free text does not state a value.
    """
    model_config = ConfigDict(frozen=True)

    consultation_duration_minutes: int = Field(
        default=30,
        gt=0,
        le=MINUTES_PER_DAY,
        description="Minutes a single appointment occupies"
    )
    patient_interval_minutes: int = Field(
        default=5,
        ge=0,
        le=MINUTES_PER_DAY,
        description="Buffer minutes inserted between consecutive slots"
    )
    lunch_break: Optional[TimeRange] = Field(
        default=None,
        description="Window during which slots are shown but not bookable"
    )

    @property
    def step_minutes(self) -> int:
        """Distance between the starts of two consecutive slots."""
        return self.consultation_duration_minutes + self.patient_interval_minutes


class WeeklySchedule(BaseModel):
    """
    Opening hours for all seven weekdays, keyed by the vocabulary's weekday names.
    Keys are kept in week order (Monday first).
    """
    model_config = ConfigDict(frozen=True)

    days: Dict[str, DaySchedule] = Field(description="Weekday name -> DaySchedule")

    @model_validator(mode='after')
    def validate_week(self):
        if len(self.days) != 7:
            raise ValueError("A weekly schedule must define exactly 7 days")
        return self

    def __getitem__(self, weekday: str) -> DaySchedule:
        return self.days[weekday]

    def open_days(self) -> Dict[str, DaySchedule]:
        return {name: day for name, day in self.days.items() if day.is_open}


class SlotStatus(str, Enum):
    """Status of a resolved slot."""
    AVAILABLE = "Available"
    BOOKED = "Booked"
    LUNCH_BREAK = "LunchBreak"
    UNAVAILABLE = "Unavailable"


class TimeSlot(BaseModel):
    """
    One resolved appointment slot, ready for rendering or for a booking action.
    Immutable: the resolver builds each slot with its final status and label.
    """
    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "date": "2025-03-10",
            "time": "14:00",
            "duration_minutes": 30,
            "status": "Booked",
            "occupant_label": "Maria Souza"
        }
    })

    date: date_type = Field(description="Calendar date")
    time: str = Field(description="Slot start (HH:MM)")
    duration_minutes: int = Field(gt=0, description="Copied from the settings at generation time")
    status: SlotStatus = Field(default=SlotStatus.AVAILABLE, description="Resolved state")
    occupant_label: Optional[str] = Field(
        default=None,
        description="Who holds the slot (Booked slots only)"
    )

    @field_validator("time")
    @classmethod
    def validate_clock(cls, v):
        return _check_clock(v)

    @model_validator(mode='after')
    def validate_label(self):
        if self.occupant_label is not None and self.status != SlotStatus.BOOKED:
            raise ValueError("Only booked slots can carry an occupant label")
        return self

    @property
    def start(self) -> datetime:
        """Absolute (naive, local) start of the slot."""
        return datetime.combine(self.date, time_type.fromisoformat(self.time))

    @property
    def is_bookable(self) -> bool:
        return self.status == SlotStatus.AVAILABLE
