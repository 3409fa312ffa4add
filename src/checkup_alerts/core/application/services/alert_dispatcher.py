from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol

import structlog

from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity
from checkup_alerts.core.domain.entities.enums import AlertStatus, MessageStatus, MessageType
from checkup_alerts.core.domain.entities.message_entity import MessageEntity
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.events import AlertDispatchedEvent
from checkup_alerts.core.domain.events.exceptions import PersistenceError
from checkup_alerts.core.domain.repositories import (
    AlertRepository,
    ClinicSettingsRepository,
    MessageRepository,
    PatientRepository,
)
from checkup_alerts.core.domain.services.event_dispatcher import EventDispatcher
from checkup_alerts.core.utils.template_utils import render_message

logger = structlog.get_logger(__name__)


class NotificationChannel(Protocol):
    channel: str

    def send(self, text: str, patient: PatientEntity) -> None:
        """Envia o texto ao paciente; qualquer exceção conta como falha do canal."""
        ...


class AlertDispatcher:
    """
    Transforma um alerta pendente em notificações (WhatsApp + e-mail).

    O envio é tratado como uma unidade para o status do alerta: se qualquer
    canal falhar o alerta vira `failed`, mas as mensagens já registradas
    pelos canais que funcionaram permanecem.
    """

    def __init__(  # noqa: PLR0913
        self,
        alert_repo: AlertRepository,
        patient_repo: PatientRepository,
        settings_repo: ClinicSettingsRepository,
        message_repo: MessageRepository,
        whatsapp_channel: NotificationChannel,
        email_channel: NotificationChannel,
        dispatcher: EventDispatcher | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.alert_repo = alert_repo
        self.patient_repo = patient_repo
        self.settings_repo = settings_repo
        self.message_repo = message_repo
        self.whatsapp_channel = whatsapp_channel
        self.email_channel = email_channel
        self.dispatcher = dispatcher
        self._clock = clock or (lambda: datetime.now(UTC))

    def send_alert(self, alert_id: str) -> bool:
        try:
            alert = self.alert_repo.find_by_id(str(alert_id))
            patient = self.patient_repo.find_by_id(str(alert.patient_id)) if alert else None
            settings = self.settings_repo.get() if patient else None
        except PersistenceError as e:
            logger.error("dispatch.lookup_failed", alert_id=str(alert_id), error=str(e))
            return False

        if alert is None:
            logger.warning("dispatch.alert_not_found", alert_id=str(alert_id))
            return False

        if patient is None:
            logger.warning("dispatch.patient_not_found", alert_id=str(alert.id), patient_id=str(alert.patient_id))
            return False

        if settings is None:
            logger.warning("dispatch.settings_not_found", alert_id=str(alert.id))
            return False

        sent_channels: list[str] = []
        try:
            for channel, template, msg_type in self._plan(settings):
                text = render_message(template, {"nome": patient.name, "exame": patient.exam_type})
                channel.send(text, patient)
                self._record_message(patient, msg_type, text)
                sent_channels.append(msg_type.value)
        except Exception as e:
            logger.error(
                "dispatch.failed",
                alert_id=str(alert.id),
                patient_id=str(patient.id),
                sent_channels=sent_channels,
                error=str(e),
                error_type=type(e).__name__,
            )
            self._finish(alert, AlertStatus.FAILED, sent_channels)
            return False

        if not self._finish(alert, AlertStatus.SENT, sent_channels):
            return False
        logger.info("dispatch.sent", alert_id=str(alert.id), patient_id=str(patient.id))
        return True

    # ------------------------------------------------------------------
    def _plan(self, settings: ClinicSettingsEntity):
        return (
            (self.whatsapp_channel, settings.whatsapp_template, MessageType.WHATSAPP),
            (self.email_channel, settings.email_template, MessageType.EMAIL),
        )

    def _record_message(self, patient: PatientEntity, msg_type: MessageType, content: str) -> MessageEntity:
        return self.message_repo.create(
            MessageEntity(
                id=uuid.uuid4(),
                patient_id=patient.id,
                patient_name=patient.name,
                type=msg_type.value,
                content=content,
                status=MessageStatus.SENT.value,
                sent_at=self._clock(),
                clinic_id=patient.clinic_id,
            )
        )

    def _finish(self, alert: AlertEntity, status: AlertStatus, sent_channels: list[str]) -> bool:
        try:
            self.alert_repo.update_status(str(alert.id), status.value)
        except PersistenceError:
            logger.exception("dispatch.status_update_failed", alert_id=str(alert.id), status=status.value)
            return False

        if self.dispatcher is not None:
            self.dispatcher.dispatch(
                AlertDispatchedEvent(
                    alert_id=alert.id,
                    patient_id=alert.patient_id,
                    status=status.value,
                    channels=tuple(sent_channels),
                )
            )
        return True
