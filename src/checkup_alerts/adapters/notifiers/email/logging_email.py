from __future__ import annotations

import structlog

from checkup_alerts.adapters.notifiers.base import BaseNotifier
from checkup_alerts.core.application.dtos.notification_dtos import EmailNotificationDTO
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import ChannelError

logger = structlog.get_logger()


class LoggingEmail(BaseNotifier):
    """
    Canal de e-mail sem provedor real: monta a mensagem e registra no log.
    """

    DEFAULT_SUBJECT = "Lembrete de check-up"

    def __init__(self, from_email: str | None = None, subject: str = DEFAULT_SUBJECT):
        super().__init__("log", "email")
        self._from_email = from_email
        self._subject = subject

    def _send(self, text: str, patient: PatientEntity) -> None:
        if not patient.email:
            raise ChannelError(self.channel, f"Paciente '{patient.name}' não possui e-mail.")

        dto = EmailNotificationDTO(recipients=[patient.email], subject=self._subject, body=text)
        logger.info(
            "email.sent",
            provider=self.provider,
            from_=self._from_email,
            recipients=len(dto.recipients),
            subject=dto.subject,
            patient_id=str(patient.id),
        )
