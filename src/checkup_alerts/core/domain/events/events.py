from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime


# ───────────────────────────────────────────────
# Event Base e Domain Events
# ───────────────────────────────────────────────
@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    event_id: uuid.UUID = field(default_factory=uuid.uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

# ╭──────────────────────────────────────────────╮
# │ Alertas de check-up                          │
# ╰──────────────────────────────────────────────╯
@dataclass(frozen=True)
class AlertCreatedEvent(DomainEvent):
    alert_id: uuid.UUID
    patient_id: uuid.UUID
    alert_type: str
    scheduled_for: datetime

@dataclass(frozen=True)
class AlertDispatchedEvent(DomainEvent):
    alert_id: uuid.UUID
    patient_id: uuid.UUID
    status: str
    channels: tuple[str, ...] = ()
