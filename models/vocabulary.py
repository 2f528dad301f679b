"""
Locale vocabulary for the free-text "hours of attendance" field.

Operators type the weekly hours of a professional in their own language, e.g.

    Segunda: 8h:00 às 12h00
    Quarta: ❌ Agenda Fechada
    Duração da Consulta: 30 Minutos (Obrigatório)
    Intervalo entre Pacientes para atendimento: 5 minutos
    intervalo para o almoço: 12 às 13h00

A ScheduleVocabulary lists every token the parser needs to recognize such a
text. Matching is case-insensitive; weekday names keep the spelling given here.
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ScheduleVocabulary(BaseModel):
    """Tokens of one locale, plus the day-period names used for grouping slots."""
    model_config = ConfigDict(frozen=True)

    locale: str = Field(description="Short locale tag, e.g. 'pt-BR'")

    weekday_names: Tuple[str, ...] = Field(
        description="The 7 weekday names, Monday first (matches date.weekday())"
    )

    # --- Settings labels ---
    duration_labels: Tuple[str, ...] = Field(description="Labels of the consultation duration line")
    interval_labels: Tuple[str, ...] = Field(description="Labels of the interval-between-patients line")
    lunch_labels: Tuple[str, ...] = Field(description="Labels of the lunch break line")
    minute_words: Tuple[str, ...] = Field(description="Words for 'minutes' that follow a number")

    # --- Time-range grammar ---
    range_connectors: Tuple[str, ...] = Field(
        description="Tokens joining the two ends of a range ('to', 'until', '-')"
    )
    closed_markers: Tuple[str, ...] = Field(
        description="Substrings marking a day or the lunch break as closed"
    )

    # --- Presentation ---
    period_names: Tuple[str, str, str] = Field(
        description="Names for morning (<12h), afternoon (<18h) and evening slots"
    )

    @field_validator('weekday_names')
    @classmethod
    def validate_week_length(cls, v):
        if len(v) != 7:
            raise ValueError("Exactly 7 weekday names are required (Monday first)")
        if len({name.casefold() for name in v}) != 7:
            raise ValueError("Weekday names must be distinct")
        return v

    @field_validator('duration_labels', 'interval_labels', 'lunch_labels',
                     'minute_words', 'range_connectors', 'closed_markers')
    @classmethod
    def validate_not_empty(cls, v):
        if not v or any(not token.strip() for token in v):
            raise ValueError("Token lists must be non-empty and contain no blank tokens")
        return v

    def weekday_for_index(self, index: int) -> str:
        """0=Monday ... 6=Sunday."""
        return self.weekday_names[index]

    def canonical_weekday(self, token: str) -> Optional[str]:
        """Return the vocabulary spelling of a weekday token, or None if unknown."""
        folded = token.strip().casefold()
        for name in self.weekday_names:
            if name.casefold() == folded:
                return name
        return None

    def ordered_tokens(self, field_name: str) -> List[str]:
        """Tokens of a field sorted longest first, so regex alternations prefer full words."""
        return sorted(getattr(self, field_name), key=len, reverse=True)


PORTUGUESE = ScheduleVocabulary(
    locale="pt-BR",
    weekday_names=("Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado", "Domingo"),
    duration_labels=("duração da consulta", "duração de consulta"),
    interval_labels=("intervalo entre pacientes",),
    lunch_labels=("intervalo para o almoço", "intervalo de almoço", "intervalo almoço"),
    minute_words=("minutos", "minuto", "min"),
    range_connectors=("às", "as", "até", "a", "-"),
    closed_markers=("❌", "fechad"),
    period_names=("Manhã", "Tarde", "Noite"),
)

ENGLISH = ScheduleVocabulary(
    locale="en",
    weekday_names=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    duration_labels=("consultation duration", "duration of consultation"),
    interval_labels=("interval between patients",),
    lunch_labels=("lunch break", "lunch interval"),
    minute_words=("minutes", "minute", "min"),
    range_connectors=("until", "to", "-"),
    closed_markers=("❌", "closed"),
    period_names=("Morning", "Afternoon", "Evening"),
)

VOCABULARIES = {vocab.locale: vocab for vocab in (PORTUGUESE, ENGLISH)}
