from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from checkup_alerts.core.domain.entities._base import EntityMixin
from checkup_alerts.core.domain.entities.enums import AlertStatus


@dataclass(slots=True)
class AlertEntity(EntityMixin):
    id: uuid.UUID
    patient_id: uuid.UUID
    # cópia do nome no momento da criação; não acompanha edições do paciente
    patient_name: str
    type: str
    message: str
    scheduled_for: datetime
    status: str = AlertStatus.PENDING.value
    clinic_id: uuid.UUID | None = None
    created_at: datetime | None = None

    @property
    def is_pending(self) -> bool:
        return self.status == AlertStatus.PENDING.value
