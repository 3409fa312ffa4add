from __future__ import annotations

import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, time, timedelta, tzinfo

import structlog

from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.enums import AlertStatus, AlertType
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.events import AlertCreatedEvent
from checkup_alerts.core.domain.events.exceptions import (
    DuplicatePendingAlertError,
    PersistenceError,
)
from checkup_alerts.core.domain.repositories import AlertRepository, PatientRepository
from checkup_alerts.core.domain.services.event_dispatcher import EventDispatcher

logger = structlog.get_logger(__name__)

DEFAULT_REMINDER_WINDOW = timedelta(days=7)
DATE_FORMAT = "%d/%m/%Y"
LOCK_STRIPES = 64


@dataclass
class ScanResult:
    created: int = 0
    skipped: int = 0
    failed: int = 0
    alerts: list[AlertEntity] = field(default_factory=list)

    def as_dict(self) -> dict[str, int]:
        return {"created": self.created, "skipped": self.skipped, "failed": self.failed}


class ReminderScanner:
    """
    Varre os pacientes ativos e gera no máximo UM alerta pendente por paciente.

    - `checkup_reminder` quando `now` está em [vencimento - janela, vencimento)
    - `overdue` quando `now` >= vencimento
    - nada antes da janela

    O vencimento é o início do dia de `next_checkup_date` no fuso configurado.
    Falhas de um paciente são registradas e não interrompem a varredura.
    """

    def __init__(  # noqa: PLR0913
        self,
        patient_repo: PatientRepository,
        alert_repo: AlertRepository,
        dispatcher: EventDispatcher | None = None,
        reminder_window: timedelta = DEFAULT_REMINDER_WINDOW,
        tz: tzinfo = UTC,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.patient_repo = patient_repo
        self.alert_repo = alert_repo
        self.dispatcher = dispatcher
        self.reminder_window = reminder_window
        self.tz = tz
        self._clock = clock or (lambda: datetime.now(tz))
        # pool fixo: pacientes distintos podem dividir um lock, o mesmo paciente sempre usa o mesmo
        self._locks = tuple(threading.Lock() for _ in range(LOCK_STRIPES))

    # ------------------------------------------------------------------
    def scan(self, now: datetime | None = None) -> ScanResult:
        now = self._aware(now or self._clock())
        result = ScanResult()

        try:
            patients = self.patient_repo.list_all()
        except Exception:
            logger.exception("scan.list_patients_failed")
            return result

        for patient in patients:
            if not patient.is_active:
                continue
            self._scan_patient(patient, now, result)

        logger.info("scan.finished", now=now.isoformat(), **result.as_dict())
        return result

    # ------------------------------------------------------------------
    def _scan_patient(self, patient: PatientEntity, now: datetime, result: ScanResult) -> None:
        if patient.next_checkup_date is None:
            logger.debug("scan.no_checkup_date", patient_id=str(patient.id))
            result.skipped += 1
            return

        # "verifica pendente → cria" serializado por paciente
        with self._lock_for(str(patient.id)):
            try:
                if self.alert_repo.find_pending_by_patient(str(patient.id)) is not None:
                    result.skipped += 1
                    return

                alert = self._build_alert(patient, now)
                if alert is None:
                    return

                saved = self.alert_repo.create(alert)
            except DuplicatePendingAlertError:
                logger.info("scan.pending_alert_exists", patient_id=str(patient.id))
                result.skipped += 1
                return
            except PersistenceError as e:
                logger.warning("scan.persistence_error", patient_id=str(patient.id), error=str(e))
                result.failed += 1
                return
            except Exception:
                logger.exception("scan.unhandled_error", patient_id=str(patient.id))
                result.failed += 1
                return

        result.created += 1
        result.alerts.append(saved)
        logger.info(
            "scan.alert_created",
            alert_id=str(saved.id),
            patient_id=str(patient.id),
            type=saved.type,
        )
        if self.dispatcher is not None:
            self.dispatcher.dispatch(
                AlertCreatedEvent(
                    alert_id=saved.id,
                    patient_id=saved.patient_id,
                    alert_type=saved.type,
                    scheduled_for=saved.scheduled_for,
                )
            )

    def _build_alert(self, patient: PatientEntity, now: datetime) -> AlertEntity | None:
        due_at = datetime.combine(patient.next_checkup_date, time.min, tzinfo=self.tz)
        window_start = due_at - self.reminder_window
        exam = (patient.exam_type or "").lower()
        due_label = patient.next_checkup_date.strftime(DATE_FORMAT)

        if window_start <= now < due_at:
            alert_type = AlertType.CHECKUP_REMINDER
            message = f"Check-up {exam} agendado para {due_label}"
        elif now >= due_at:
            alert_type = AlertType.OVERDUE
            message = f"Check-up {exam} em atraso desde {due_label}"
        else:
            return None

        return AlertEntity(
            id=uuid.uuid4(),
            patient_id=patient.id,
            patient_name=patient.name,
            type=alert_type.value,
            message=message,
            scheduled_for=now,
            status=AlertStatus.PENDING.value,
            clinic_id=patient.clinic_id,
            created_at=now,
        )

    def _lock_for(self, patient_id: str) -> threading.Lock:
        return self._locks[hash(patient_id) % len(self._locks)]

    def _aware(self, dt: datetime) -> datetime:
        return dt if dt.tzinfo is not None else dt.replace(tzinfo=self.tz)
