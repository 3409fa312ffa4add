from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime

from checkup_alerts.core.domain.entities._base import EntityMixin
from checkup_alerts.core.domain.entities.enums import PatientStatus, RiskProfile


@dataclass(slots=True)
class PatientEntity(EntityMixin):
    id: uuid.UUID
    name: str
    exam_type: str
    last_exam_date: date
    risk_profile: str = RiskProfile.LOW.value
    next_checkup_date: date | None = None
    status: str = PatientStatus.ACTIVE.value
    cpf: str | None = None
    phone: str | None = None
    email: str | None = None
    clinic_id: uuid.UUID | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == PatientStatus.ACTIVE.value

    def masked_cpf(self) -> str | None:
        if not self.cpf or len(self.cpf) < 3:  # noqa: PLR2004
            return None
        return f"***.***.***-{self.cpf[-2:]}"
