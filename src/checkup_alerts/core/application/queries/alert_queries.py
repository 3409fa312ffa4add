from dataclasses import dataclass

from checkup_alerts.core.application.cqrs import QueryDTO


@dataclass(frozen=True)
class ListAlertsQuery(QueryDTO):
    status: str | None = None

@dataclass(frozen=True)
class ListMessagesQuery(QueryDTO):
    patient_id: str | None = None
