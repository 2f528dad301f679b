"""
The clinic agenda availability engine.

This module wires the three pipeline stages for a single request:
1. ScheduleTextParser  - free text -> weekly schedule + settings.
2. SlotGenerator       - one open day -> candidate start times.
3. AvailabilityResolver - candidates + bookings -> resolved slots.

Nothing is cached between calls: the schedule is re-derived from the text on
every request, so edits to a professional's hours apply immediately.
"""

import logging
from datetime import date as date_type, datetime, timedelta, tzinfo
from typing import Iterable, List, Optional, Union

from models import Appointment, ScheduleVocabulary, TimeSlot, PORTUGUESE
from .parser import ScheduleTextParser
from .slots import SlotGenerator
from .resolver import AvailabilityResolver
from .report import DayReport, summarize, group_by_period

logger = logging.getLogger(__name__)


class AvailabilityEngine:
    """
    Facade over the availability pipeline.
    Takes already-fetched data (schedule text, appointments), returns slots.
    """

    DEFAULT_LOOKAHEAD_DAYS = 30

    def __init__(self, vocabulary: ScheduleVocabulary = PORTUGUESE, local_tz: Optional[tzinfo] = None):
        self.vocabulary = vocabulary

        # Initialize Stages
        self.parser = ScheduleTextParser(vocabulary)
        self.generator = SlotGenerator()
        self.resolver = AvailabilityResolver(local_tz)

    def weekday_name(self, for_date: date_type) -> str:
        return self.vocabulary.weekday_for_index(for_date.weekday())

    def slots_for_date(
        self,
        raw_text: Optional[str],
        professional_id: Union[int, str],
        appointments: Optional[Iterable[Appointment]],
        for_date: date_type,
        not_before: Optional[datetime] = None
    ) -> List[TimeSlot]:
        """
        Compute the resolved slots of one professional on one calendar date.
        A closed day or an empty schedule text gives an empty list.
        """
        schedule, settings = self.parser.parse(raw_text)
        weekday = self.weekday_name(for_date)

        candidates = self.generator.generate(schedule[weekday], settings)
        slots = self.resolver.resolve(
            candidates, professional_id, appointments, for_date, not_before=not_before
        )

        logger.info(
            f"Professional {professional_id} on {for_date.isoformat()} ({weekday}): "
            f"{len(slots)} slots"
        )
        return slots

    def open_dates(
        self,
        raw_text: Optional[str],
        start_date: date_type,
        days: int = DEFAULT_LOOKAHEAD_DAYS
    ) -> List[date_type]:
        """Dates in [start_date, start_date + days) whose weekday the professional attends."""
        schedule, _ = self.parser.parse(raw_text)
        open_names = set(schedule.open_days())

        dates = []
        for offset in range(days):
            day = start_date + timedelta(days=offset)
            if self.weekday_name(day) in open_names:
                dates.append(day)
        return dates

    def day_report(
        self,
        raw_text: Optional[str],
        professional_id: Union[int, str],
        appointments: Optional[Iterable[Appointment]],
        for_date: date_type,
        not_before: Optional[datetime] = None
    ) -> DayReport:
        """Slots of the day plus their statistics and period grouping."""
        slots = self.slots_for_date(
            raw_text, professional_id, appointments, for_date, not_before=not_before
        )
        return DayReport(
            professional_id=professional_id,
            date=for_date,
            weekday=self.weekday_name(for_date),
            slots=slots,
            statistics=summarize(slots),
            periods=group_by_period(slots, self.vocabulary)
        )
