"""
Shared fixtures for the availability test suite.

Schedule texts are copied from real professional records, including the
emoji header line and the "(Obrigatório)" suffix operators type.
"""

import pytest
from availability import AvailabilityEngine, ScheduleTextParser

ANA_SCHEDULE = """🕒 Dias e Horários de Atendimento - para uso interno do sistema de marcação
Segunda: 8h:00 às 12h00
Terça: 14h:00 às 18h00
Quarta: ❌ Agenda Fechada
Quinta: ❌ Agenda Fechada
Sexta: ❌ Agenda Fechada
Sábado: 9h00 às 13h00
Domingo: ❌ Fechado
Duração da Consulta: 60 Minutos (Obrigatório)
Intervalo entre Pacientes para atendimento: 5 minutos
intervalo para o almoço: 12 às 13h00"""

GEORGE_SCHEDULE = """🕒 Dias e Horários de Atendimento - para uso interno do sistema de marcação
Segunda: 7h:00 às 12h00
Terça: 7h:00 às 12h00
Quarta: 14h:00 às 18h00
Quinta: 14h:00 às 18h00
Sexta: 7h:00 às 12h00
Sábado: ❌ Agenda Fechada
Domingo: ❌ Fechado
Duração da Consulta: 30 Minutos (Obrigatório)
Intervalo entre Pacientes para atendimento: 10 minutos
intervalo para o almoço: ❌"""

MARIA_SCHEDULE = """Segunda: 8h:00 às 17h00
Terça: 8h:00 às 17h00
Quarta: 8h:00 às 17h00
Quinta: 8h:00 às 17h00
Sexta: 8h:00 às 12h00
Sábado: ❌ Agenda Fechada
Domingo: ❌ Fechado
Duração da Consulta: 45 Minutos (Obrigatório)
Intervalo entre Pacientes para atendimento: 15 minutos
intervalo para o almoço: 12 às 14h00"""


@pytest.fixture
def ana_schedule():
    return ANA_SCHEDULE


@pytest.fixture
def george_schedule():
    return GEORGE_SCHEDULE


@pytest.fixture
def maria_schedule():
    return MARIA_SCHEDULE


@pytest.fixture
def parser():
    return ScheduleTextParser()


@pytest.fixture
def engine():
    return AvailabilityEngine()
