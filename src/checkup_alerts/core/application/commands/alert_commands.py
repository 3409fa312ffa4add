from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from checkup_alerts.core.application.cqrs import CommandDTO


@dataclass(frozen=True)
class ScanCheckupRemindersCommand(CommandDTO):
    now: datetime | None = None

@dataclass(frozen=True)
class SendAlertCommand(CommandDTO):
    alert_id: str
