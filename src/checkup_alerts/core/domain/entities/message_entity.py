from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime

from checkup_alerts.core.domain.entities._base import EntityMixin


@dataclass(slots=True)
class MessageEntity(EntityMixin):
    id: uuid.UUID
    patient_id: uuid.UUID
    patient_name: str
    type: str
    content: str
    status: str
    sent_at: datetime
    scheduled_for: datetime | None = None
    clinic_id: uuid.UUID | None = None
