"""
Reconciles generated slots with the bookings already in the agenda.

Status priority for each slot:
1. LunchBreak  - the slot touches the lunch break.
2. Booked      - an appointment of the same professional starts less than one
                 consultation away from the slot start (proximity match, so
                 off-grid legacy bookings still occupy the nearest slot).
3. Unavailable - the slot starts before `not_before` (e.g. already past).
4. Available   - everything else.
"""

from datetime import date as date_type, datetime, time as time_type, timedelta, tzinfo
from typing import Iterable, List, Optional, Sequence, Union

from models import Appointment, SlotStatus, TimeSlot
from .slots import CandidateSlot


class AvailabilityResolver:
    """
    Assigns a final status to each candidate slot.

    All absolute times are compared as naive wall-clock datetimes in one local
    zone: `local_tz` when given, otherwise the zone of the running process.
    Naive appointment times are taken as already local.
    """

    def __init__(self, local_tz: Optional[tzinfo] = None):
        self.local_tz = local_tz

    def resolve(
        self,
        candidate_slots: Sequence[CandidateSlot],
        professional_id: Union[int, str],
        existing_appointments: Optional[Iterable[Appointment]],
        for_date: date_type,
        not_before: Optional[datetime] = None
    ) -> List[TimeSlot]:
        bookings = [
            appt for appt in (existing_appointments or [])
            if appt.belongs_to(professional_id)
        ]
        cutoff = self._to_local(not_before) if not_before else None
        midnight = datetime.combine(for_date, time_type(0, 0))

        resolved = []
        for candidate in candidate_slots:
            slot_start = midnight + timedelta(minutes=candidate.start_minute)
            label = None

            if candidate.excluded_by_lunch:
                status = SlotStatus.LUNCH_BREAK
            else:
                match = self._closest_booking(slot_start, candidate.duration_minutes, bookings)
                if match is not None:
                    status = SlotStatus.BOOKED
                    label = match.occupant_label
                elif cutoff is not None and slot_start < cutoff:
                    status = SlotStatus.UNAVAILABLE
                else:
                    status = SlotStatus.AVAILABLE

            resolved.append(TimeSlot(
                date=for_date,
                time=candidate.time,
                duration_minutes=candidate.duration_minutes,
                status=status,
                occupant_label=label
            ))

        return resolved

    def _closest_booking(
        self,
        slot_start: datetime,
        duration_minutes: int,
        bookings: List[Appointment]
    ) -> Optional[Appointment]:
        """The booking nearest to slot_start within one consultation, first one on ties."""
        window = timedelta(minutes=duration_minutes)
        best = None
        best_gap = None
        for appt in bookings:
            gap = abs(self._to_local(appt.date_time) - slot_start)
            if gap < window and (best_gap is None or gap < best_gap):
                best, best_gap = appt, gap
        return best

    def _to_local(self, moment: datetime) -> datetime:
        if moment.tzinfo is None:
            return moment
        return moment.astimezone(self.local_tz).replace(tzinfo=None)
