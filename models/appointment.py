"""
Appointment data model.

Appointments are owned by the external appointment store; the availability
pipeline only reads their owner and start time to decide which slots are taken.
"""

from typing import Any, Mapping, Optional, Union
from pydantic import BaseModel, Field, ConfigDict, ValidationError
from datetime import datetime

# Column names used by the appointment store and its API, in lookup order.
PROFESSIONAL_KEYS = ("professional_id", "professionalId", "idProfissional")
DATETIME_KEYS = ("date_time", "dateTimeISO", "appointmentDate", "dt_Agendamento")
LABEL_KEYS = ("occupant_label", "patientName", "patient_name", "fullName", "description", "descricao")


def _first_present(record: Mapping[str, Any], keys) -> Any:
    for key in keys:
        value = record.get(key)
        if value not in (None, ""):
            return value
    return None


class Appointment(BaseModel):
    """An existing booking of one professional. Read-only input."""
    model_config = ConfigDict(frozen=True)

    professional_id: Union[int, str] = Field(description="Owner of the booking")
    date_time: datetime = Field(description="Absolute start, parsed from ISO-8601")
    occupant_label: Optional[str] = Field(
        default=None,
        description="Display label of the booking party (e.g. patient name)"
    )

    def belongs_to(self, professional_id: Union[int, str]) -> bool:
        """Ids are compared as text: the store returns ints, query strings carry str."""
        return str(self.professional_id) == str(professional_id)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Appointment":
        """
        Build an Appointment from an appointment-store row.

        Accepts both the API shape (professionalId / appointmentDate / patientName)
        and the raw table shape (idProfissional / dt_Agendamento / descricao).
        Raises ValueError when the owner or the start time is missing or unparseable.
        """
        professional_id = _first_present(record, PROFESSIONAL_KEYS)
        date_time = _first_present(record, DATETIME_KEYS)
        if professional_id is None or date_time is None:
            raise ValueError(f"Appointment record lacks professional or date: {dict(record)}")

        label = _first_present(record, LABEL_KEYS)
        try:
            return cls(
                professional_id=professional_id,
                date_time=date_time,
                occupant_label=str(label) if label is not None else None,
            )
        except ValidationError as e:
            raise ValueError(f"Invalid appointment record: {e}") from e
