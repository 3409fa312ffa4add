"""
Dublês usados pelos testes do core: canais falsos, relógio fixo e fábricas
de entidades.
"""
from __future__ import annotations

import uuid
from datetime import UTC, date, datetime

from checkup_alerts.adapters.repositories.in_memory_repos import InMemoryAlertRepo
from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import ChannelError, PersistenceError

FIXED_SENT_AT = datetime(2024, 4, 10, 12, 0, tzinfo=UTC)


class FakeChannel:
    """Canal que apenas guarda o que recebeu; `fail=True` simula erro do provedor."""

    def __init__(self, channel: str, fail: bool = False) -> None:
        self.channel = channel
        self.fail = fail
        self.sent: list[tuple[str, PatientEntity]] = []

    def send(self, text: str, patient: PatientEntity) -> None:
        if self.fail:
            raise ChannelError(self.channel, "provedor indisponível")
        self.sent.append((text, patient))


class FlakyAlertRepo(InMemoryAlertRepo):
    """Falha ao criar alertas para os pacientes listados."""

    def __init__(self, failing_patient_ids: set[str]) -> None:
        super().__init__()
        self.failing_patient_ids = failing_patient_ids

    def create(self, alert: AlertEntity) -> AlertEntity:
        if str(alert.patient_id) in self.failing_patient_ids:
            raise PersistenceError("banco indisponível")
        return super().create(alert)


def make_patient(**overrides) -> PatientEntity:
    data = dict(
        id=uuid.uuid4(),
        name="Maria Silva",
        exam_type="Cardiologia",
        last_exam_date=date(2024, 1, 15),
        risk_profile="alto",
        next_checkup_date=date(2024, 4, 15),
        status="ativo",
        phone="(11) 99999-1111",
        email="maria@email.com",
    )
    data.update(overrides)
    return PatientEntity(**data)


def make_alert(patient: PatientEntity, **overrides) -> AlertEntity:
    data = dict(
        id=uuid.uuid4(),
        patient_id=patient.id,
        patient_name=patient.name,
        type="checkup_reminder",
        message="Check-up cardiologia agendado para 15/04/2024",
        scheduled_for=datetime(2024, 4, 10, tzinfo=UTC),
        status="pending",
        created_at=datetime(2024, 4, 10, tzinfo=UTC),
    )
    data.update(overrides)
    return AlertEntity(**data)


def make_settings(**overrides) -> ClinicSettingsEntity:
    data = dict(
        id=uuid.uuid4(),
        name="Clínica Saúde Total",
        whatsapp_template="Olá {nome}, é hora do seu check-up! Agende sua consulta.",
        email_template="Prezado(a) {nome}, lembramos que está na hora do seu exame de {exame}.",
    )
    data.update(overrides)
    return ClinicSettingsEntity(**data)
