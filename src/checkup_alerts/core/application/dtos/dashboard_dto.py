from pydantic import BaseModel


class DashboardSummaryDTO(BaseModel):
    total_patients: int
    active_patients: int
    pending_alerts: int
    sent_messages: int
    read_messages: int
    response_rate: float
    risk_distribution: dict[str, int]
