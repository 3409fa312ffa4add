from checkup_alerts.core.application.commands.alert_commands import (
    ScanCheckupRemindersCommand,
    SendAlertCommand,
)
from checkup_alerts.core.application.cqrs import CommandHandler, QueryHandler
from checkup_alerts.core.application.queries.alert_queries import ListAlertsQuery, ListMessagesQuery
from checkup_alerts.core.application.services.alert_dispatcher import AlertDispatcher
from checkup_alerts.core.application.services.reminder_scanner import ReminderScanner, ScanResult
from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.entities.message_entity import MessageEntity
from checkup_alerts.core.domain.repositories import AlertRepository, MessageRepository

# ——— VARREDURA / ENVIO ——————————————————————————————————————

class ScanCheckupRemindersHandler(CommandHandler[ScanCheckupRemindersCommand]):
    def __init__(self, scanner: ReminderScanner):
        self.scanner = scanner

    def handle(self, command: ScanCheckupRemindersCommand) -> ScanResult:
        return self.scanner.scan(now=command.now)

class SendAlertHandler(CommandHandler[SendAlertCommand]):
    def __init__(self, alert_dispatcher: AlertDispatcher):
        self.alert_dispatcher = alert_dispatcher

    def handle(self, command: SendAlertCommand) -> bool:
        return self.alert_dispatcher.send_alert(command.alert_id)

# ——— CONSULTAS ————————————————————————————————————————————

class ListAlertsHandler(QueryHandler[ListAlertsQuery, list[AlertEntity]]):
    def __init__(self, repo: AlertRepository):
        self.repo = repo

    def handle(self, query: ListAlertsQuery) -> list[AlertEntity]:
        alerts = self.repo.list_all()
        if query.status:
            alerts = [a for a in alerts if a.status == query.status]
        return alerts

class ListMessagesHandler(QueryHandler[ListMessagesQuery, list[MessageEntity]]):
    def __init__(self, repo: MessageRepository):
        self.repo = repo

    def handle(self, query: ListMessagesQuery) -> list[MessageEntity]:
        messages = self.repo.list_all()
        if query.patient_id:
            messages = [m for m in messages if str(m.patient_id) == str(query.patient_id)]
        return messages
