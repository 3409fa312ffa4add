from checkup_alerts.core.application.cqrs import QueryHandler
from checkup_alerts.core.application.dtos.dashboard_dto import DashboardSummaryDTO
from checkup_alerts.core.application.queries.dashboard_queries import GetDashboardSummaryQuery
from checkup_alerts.core.application.services.dashboard_service import DashboardService


class DashboardSummaryHandler(QueryHandler[GetDashboardSummaryQuery, DashboardSummaryDTO]):
    def __init__(self, service: DashboardService):
        self.service = service

    def handle(self, query: GetDashboardSummaryQuery) -> DashboardSummaryDTO:
        return self.service.summary()
