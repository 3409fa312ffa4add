from dataclasses import dataclass

from checkup_alerts.core.application.cqrs import QueryDTO


@dataclass(frozen=True)
class GetDashboardSummaryQuery(QueryDTO):
    pass
