"""
Dados de demonstração da clínica (pacientes, mensagens e um alerta pendente).
"""
from __future__ import annotations

import uuid
from datetime import UTC, date, datetime

import structlog

from checkup_alerts.core.application.services.checkup_calculator import compute_next_checkup
from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity
from checkup_alerts.core.domain.entities.enums import (
    AlertStatus,
    AlertType,
    MessageStatus,
    MessageType,
    PatientStatus,
)
from checkup_alerts.core.domain.entities.message_entity import MessageEntity
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import DuplicatePendingAlertError
from checkup_alerts.core.domain.repositories import (
    AlertRepository,
    ClinicSettingsRepository,
    MessageRepository,
    PatientRepository,
)

logger = structlog.get_logger(__name__)

DEMO_PATIENTS = [
    # nome, cpf, telefone, e-mail, exame, último exame, risco, criado em
    ("Maria Silva", "123.456.789-01", "(11) 99999-1111", "maria@email.com",
     "Ginecologia", date(2024, 1, 15), "alto", datetime(2024, 1, 15, 10, 0, tzinfo=UTC)),
    ("João Santos", "987.654.321-02", "(11) 99999-2222", "joao@email.com",
     "Cardiologia", date(2023, 12, 10), "moderado", datetime(2023, 12, 10, 14, 30, tzinfo=UTC)),
    ("Carlos Oliveira", "456.789.123-03", "(11) 99999-3333", "carlos@email.com",
     "Urologia", date(2023, 11, 20), "baixo", datetime(2023, 11, 20, 9, 15, tzinfo=UTC)),
]


def demo_clinic_settings() -> ClinicSettingsEntity:
    return ClinicSettingsEntity(
        id=uuid.uuid4(),
        name="Clínica Saúde Total",
        cnpj="12.345.678/0001-90",
        email="contato@saudetotal.com.br",
        phone="(11) 3456-7890",
        whatsapp_number="5511987654321",
        address="Rua das Flores, 123",
        city="São Paulo",
        state="SP",
        zip_code="01234-567",
        email_signature="Equipe Clínica Saúde Total",
        whatsapp_template="Olá {nome}, é hora do seu check-up! Agende sua consulta.",
        email_template="Prezado(a) {nome}, lembramos que está na hora do seu exame de {exame}.",
    )


def seed_demo_data(
    patient_repo: PatientRepository,
    alert_repo: AlertRepository,
    message_repo: MessageRepository,
    settings_repo: ClinicSettingsRepository,
) -> dict[str, int]:
    settings = settings_repo.get() or settings_repo.save(demo_clinic_settings())

    patients: list[PatientEntity] = []
    for name, cpf, phone, email, exam, last_exam, risk, created in DEMO_PATIENTS:
        patients.append(
            patient_repo.save(
                PatientEntity(
                    id=uuid.uuid4(),
                    name=name,
                    cpf=cpf,
                    phone=phone,
                    email=email,
                    exam_type=exam,
                    last_exam_date=last_exam,
                    risk_profile=risk,
                    next_checkup_date=compute_next_checkup(last_exam, risk),
                    status=PatientStatus.ACTIVE.value,
                    created_at=created,
                    updated_at=created,
                )
            )
        )

    maria, joao = patients[0], patients[1]
    history = [
        (maria, MessageType.WHATSAPP, "Olá Maria, é hora do seu check-up ginecológico!",
         MessageStatus.DELIVERED, datetime(2024, 1, 10, 8, 0, tzinfo=UTC)),
        (joao, MessageType.EMAIL, "Prezado João, lembramos que está na hora do seu exame cardiológico.",
         MessageStatus.READ, datetime(2024, 1, 8, 10, 30, tzinfo=UTC)),
    ]
    for patient, msg_type, content, status, sent_at in history:
        message_repo.create(
            MessageEntity(
                id=uuid.uuid4(),
                patient_id=patient.id,
                patient_name=patient.name,
                type=msg_type.value,
                content=content,
                status=status.value,
                sent_at=sent_at,
            )
        )

    alerts = 0
    try:
        alert_repo.create(
            AlertEntity(
                id=uuid.uuid4(),
                patient_id=maria.id,
                patient_name=maria.name,
                type=AlertType.CHECKUP_REMINDER.value,
                message="Check-up ginecológico vencendo em 7 dias",
                scheduled_for=datetime(2024, 4, 8, 9, 0, tzinfo=UTC),
                status=AlertStatus.PENDING.value,
                created_at=datetime(2024, 1, 15, 10, 0, tzinfo=UTC),
            )
        )
        alerts = 1
    except DuplicatePendingAlertError:
        logger.info("seed.alert_exists", patient_id=str(maria.id))

    counts = {"patients": len(patients), "messages": len(history), "alerts": alerts}
    logger.info("seed.done", clinic=settings.name, **counts)
    return counts
