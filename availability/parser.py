"""
Free-text schedule parser.

This module turns the operator-entered "hours of attendance" field of a
professional into a WeeklySchedule plus ScheduleSettings.

Grammar (one statement per line, any order, case-insensitive):
1. Duration line:  <duration label> ... <N> <minutes word>
2. Interval line:  <interval label> ... <N> <minutes word>
3. Lunch line:     <lunch label> ... <range>      (ignored if marked closed)
4. Day line:       <weekday>: <range> | <weekday>: <closed marker>

<range> is  H[h][:][MM] <connector> H[h][:][MM], e.g. "8h:00 às 12h00", "12 às 13h".

Parsing is best-effort: a line that matches nothing, or whose values are out
of range, is skipped and reported, never raised.
"""

import logging
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from models import (
    DaySchedule,
    ScheduleSettings,
    ScheduleVocabulary,
    TimeRange,
    WeeklySchedule,
    PORTUGUESE,
    format_minutes,
)
from models.schedule import MINUTES_PER_DAY

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = ScheduleSettings()


@dataclass
class SkippedLine:
    """Detailed reason for ignoring a line of the schedule text."""
    line_number: int
    text: str
    reason: str


@dataclass
class ParseReport:
    """Result of one parse, including the lines that contributed nothing."""
    schedule: WeeklySchedule
    settings: ScheduleSettings
    skipped: List[SkippedLine] = field(default_factory=list)


class ScheduleTextParser:
    """
    Parses schedule texts written with one ScheduleVocabulary.
    Holds only compiled patterns; every parse call is self-contained.
    """

    def __init__(self, vocabulary: ScheduleVocabulary = PORTUGUESE):
        self.vocabulary = vocabulary

        self._duration_labels = [label.casefold() for label in vocabulary.duration_labels]
        self._interval_labels = [label.casefold() for label in vocabulary.interval_labels]
        self._lunch_labels = [label.casefold() for label in vocabulary.lunch_labels]
        self._closed_markers = [marker.casefold() for marker in vocabulary.closed_markers]

        connectors = "|".join(re.escape(t) for t in vocabulary.ordered_tokens("range_connectors"))
        clock = r"(\d{1,2})h?:?(\d{2})?"
        self._range_pattern = re.compile(
            rf"(?<!\d){clock}\s*(?:{connectors})\s*{clock}",
            re.IGNORECASE
        )

        minute_words = "|".join(re.escape(t) for t in vocabulary.ordered_tokens("minute_words"))
        self._minutes_pattern = re.compile(rf"(\d+)\s*(?:{minute_words})\b", re.IGNORECASE)

    def parse(self, raw_text: Optional[str]) -> Tuple[WeeklySchedule, ScheduleSettings]:
        """
        Parse a schedule text. Empty or missing text yields a week with every
        day closed and the default settings (30 min consultation, 5 min interval,
        no lunch break).
        """
        report = self.parse_report(raw_text)
        return report.schedule, report.settings

    def parse_report(self, raw_text: Optional[str]) -> ParseReport:
        """Same as parse(), but also returns the skipped lines with their reasons."""
        days: Dict[str, DaySchedule] = {
            name: DaySchedule.closed() for name in self.vocabulary.weekday_names
        }
        duration = DEFAULT_SETTINGS.consultation_duration_minutes
        interval = DEFAULT_SETTINGS.patient_interval_minutes
        lunch: Optional[TimeRange] = None
        skipped: List[SkippedLine] = []

        lines = unicodedata.normalize("NFC", raw_text).splitlines() if raw_text else []

        for number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line:
                continue
            folded = line.casefold()

            def skip(reason: str) -> None:
                logger.debug(f"Skipping schedule line {number} ({line!r}): {reason}")
                skipped.append(SkippedLine(number, line, reason))

            # 1. Settings lines take precedence over day lines
            if self._has_any(folded, self._duration_labels):
                value = self._parse_minutes(line)
                if value is None or not 0 < value <= MINUTES_PER_DAY:
                    skip("consultation duration without a valid minute count")
                else:
                    duration = value
                continue

            if self._has_any(folded, self._interval_labels):
                value = self._parse_minutes(line)
                if value is None or value > MINUTES_PER_DAY:
                    skip("patient interval without a valid minute count")
                else:
                    interval = value
                continue

            if self._has_any(folded, self._lunch_labels):
                if self._has_any(folded, self._closed_markers):
                    lunch = None
                    continue
                span = self.parse_range(line)
                if span is None:
                    skip("lunch break without a valid time range")
                else:
                    lunch = TimeRange(start_time=span[0], end_time=span[1])
                continue

            # 2. Day lines: "<weekday>: <rest>"
            if ":" not in line:
                skip("no colon")
                continue

            head, rest = line.split(":", 1)
            weekday = self.vocabulary.canonical_weekday(head)
            if weekday is None:
                skip(f"unknown weekday '{head.strip()}'")
                continue

            if self._has_any(rest.casefold(), self._closed_markers):
                days[weekday] = DaySchedule.closed()
                continue

            span = self.parse_range(rest)
            if span is None:
                # Day keeps whatever an earlier line gave it (closed by default)
                skip(f"no valid time range for {weekday}")
                continue

            days[weekday] = DaySchedule.open_between(*span)

        settings = ScheduleSettings(
            consultation_duration_minutes=duration,
            patient_interval_minutes=interval,
            lunch_break=lunch
        )
        return ParseReport(WeeklySchedule(days=days), settings, skipped)

    def parse_range(self, text: str) -> Optional[Tuple[str, str]]:
        """
        Find the first time range in `text` and return it as ("HH:MM", "HH:MM").
        Returns None when there is no range, a value is out of bounds, or the
        range does not end after it starts.
        """
        match = self._range_pattern.search(text)
        if not match:
            return None

        start_h, start_m, end_h, end_m = match.groups()
        start = self._clock_minutes(start_h, start_m)
        end = self._clock_minutes(end_h, end_m)
        if start is None or end is None or start >= end:
            return None
        return format_minutes(start), format_minutes(end)

    def _parse_minutes(self, line: str) -> Optional[int]:
        match = self._minutes_pattern.search(line)
        return int(match.group(1)) if match else None

    @staticmethod
    def _clock_minutes(hour_text: str, minute_text: Optional[str]) -> Optional[int]:
        hour = int(hour_text)
        minute = int(minute_text) if minute_text else 0
        if hour > 23 or minute > 59:
            return None
        return hour * 60 + minute

    @staticmethod
    def _has_any(folded_text: str, tokens: List[str]) -> bool:
        return any(token in folded_text for token in tokens)
