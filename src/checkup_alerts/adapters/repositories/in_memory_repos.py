"""
Repositórios em memória: usados pelo backend `memory` (demo/dev) e pelos testes.
Cada repositório protege seu estado com um Lock, pois a varredura pode rodar
na thread do agendador enquanto o processo principal consulta os dados.
"""
from __future__ import annotations

import threading
from dataclasses import replace
from datetime import UTC, datetime

from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity
from checkup_alerts.core.domain.entities.message_entity import MessageEntity
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import DuplicatePendingAlertError
from checkup_alerts.core.domain.repositories import (
    AlertRepository,
    ClinicSettingsRepository,
    MessageRepository,
    PatientRepository,
)

_EPOCH = datetime.min.replace(tzinfo=UTC)


class InMemoryPatientRepo(PatientRepository):
    def __init__(self, patients: list[PatientEntity] | None = None) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, PatientEntity] = {}
        for p in patients or []:
            self._items[str(p.id)] = replace(p)

    def list_all(self) -> list[PatientEntity]:
        with self._lock:
            return [replace(p) for p in self._items.values()]

    def find_by_id(self, patient_id: str) -> PatientEntity | None:
        with self._lock:
            p = self._items.get(str(patient_id))
            return replace(p) if p else None

    def save(self, patient: PatientEntity) -> PatientEntity:
        with self._lock:
            self._items[str(patient.id)] = replace(patient)
            return replace(patient)

    def delete(self, patient_id: str) -> bool:
        with self._lock:
            return self._items.pop(str(patient_id), None) is not None


class InMemoryAlertRepo(AlertRepository):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, AlertEntity] = {}

    def list_all(self) -> list[AlertEntity]:
        with self._lock:
            items = [replace(a) for a in self._items.values()]
        return sorted(items, key=lambda a: a.created_at or _EPOCH, reverse=True)

    def find_by_id(self, alert_id: str) -> AlertEntity | None:
        with self._lock:
            a = self._items.get(str(alert_id))
            return replace(a) if a else None

    def find_pending_by_patient(self, patient_id: str) -> AlertEntity | None:
        with self._lock:
            return self._pending_for(str(patient_id))

    def create(self, alert: AlertEntity) -> AlertEntity:
        with self._lock:
            if alert.is_pending and self._pending_for(str(alert.patient_id)) is not None:
                raise DuplicatePendingAlertError(
                    f"Paciente {alert.patient_id} já possui alerta pendente."
                )
            self._items[str(alert.id)] = replace(alert)
            return replace(alert)

    def update_status(self, alert_id: str, status: str) -> AlertEntity | None:
        with self._lock:
            a = self._items.get(str(alert_id))
            if a is None:
                return None
            a.status = status
            return replace(a)

    def _pending_for(self, patient_id: str) -> AlertEntity | None:
        for a in self._items.values():
            if str(a.patient_id) == patient_id and a.is_pending:
                return replace(a)
        return None


class InMemoryClinicSettingsRepo(ClinicSettingsRepository):
    def __init__(self, settings: ClinicSettingsEntity | None = None) -> None:
        self._lock = threading.Lock()
        self._settings = replace(settings) if settings else None

    def get(self) -> ClinicSettingsEntity | None:
        with self._lock:
            return replace(self._settings) if self._settings else None

    def save(self, settings: ClinicSettingsEntity) -> ClinicSettingsEntity:
        with self._lock:
            self._settings = replace(settings)
            return replace(settings)


class InMemoryMessageRepo(MessageRepository):
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: list[MessageEntity] = []

    def create(self, message: MessageEntity) -> MessageEntity:
        with self._lock:
            self._items.append(replace(message))
            return replace(message)

    def list_all(self) -> list[MessageEntity]:
        with self._lock:
            items = [replace(m) for m in self._items]
        return sorted(items, key=lambda m: m.sent_at, reverse=True)
