from datetime import datetime

from checkup_alerts.core.application.commands.alert_commands import (
    ScanCheckupRemindersCommand,
    SendAlertCommand,
)
from checkup_alerts.core.application.cqrs import CommandBus, QueryBus
from checkup_alerts.core.application.dtos.dashboard_dto import DashboardSummaryDTO
from checkup_alerts.core.application.queries.alert_queries import ListAlertsQuery, ListMessagesQuery
from checkup_alerts.core.application.queries.dashboard_queries import GetDashboardSummaryQuery
from checkup_alerts.core.application.services.reminder_scanner import ScanResult
from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.message_entity import MessageEntity


class CheckupAlertFacadeService:
    """
    Fachada chamada pelos management commands e tasks do Celery.
    """

    def __init__(self, command_bus: CommandBus, query_bus: QueryBus) -> None:
        self.commands = command_bus
        self.queries = query_bus

    def scan(self, now: datetime | None = None) -> ScanResult:
        return self.commands.dispatch(ScanCheckupRemindersCommand(now=now))

    def send_alert(self, alert_id: str) -> bool:
        return self.commands.dispatch(SendAlertCommand(alert_id=str(alert_id)))

    def pending_alerts(self) -> list[AlertEntity]:
        return self.queries.dispatch(ListAlertsQuery(status="pending"))

    def messages(self, patient_id: str | None = None) -> list[MessageEntity]:
        return self.queries.dispatch(ListMessagesQuery(patient_id=patient_id))

    def dashboard(self) -> DashboardSummaryDTO:
        return self.queries.dispatch(GetDashboardSummaryQuery())
