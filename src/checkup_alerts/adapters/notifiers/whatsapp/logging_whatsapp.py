from __future__ import annotations

from typing import Final

import structlog

from checkup_alerts.adapters.notifiers.base import BaseNotifier
from checkup_alerts.core.application.dtos.notification_dtos import WhatsappNotificationDTO
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import ChannelError

log = structlog.get_logger()


class LoggingWhatsapp(BaseNotifier):
    """
    Canal WhatsApp sem provedor real: monta o payload e registra no log.
    """

    _DEFAULT_OPTIONS: Final[dict] = {
        "delay": 1200,
        "presence": "composing",
        "linkPreview": False,
    }

    def __init__(self, sender_number: str | None = None) -> None:
        super().__init__("log", "whatsapp")
        self._sender_number = sender_number

    def _send(self, text: str, patient: PatientEntity) -> None:
        if not patient.phone:
            raise ChannelError(self.channel, f"Paciente '{patient.name}' não possui telefone.")

        dto = WhatsappNotificationDTO(to=patient.phone, message=text, options=self._DEFAULT_OPTIONS)
        log.info(
            "whatsapp.sent",
            provider=self.provider,
            sender=self._sender_number,
            to=dto.to,
            patient_id=str(patient.id),
            cpf=patient.masked_cpf(),
            message=dto.message,
        )
