from __future__ import annotations

import structlog

from checkup_alerts.core.application.dtos.dashboard_dto import DashboardSummaryDTO
from checkup_alerts.core.domain.entities.enums import AlertStatus, MessageStatus, RiskProfile
from checkup_alerts.core.domain.repositories import (
    AlertRepository,
    MessageRepository,
    PatientRepository,
)

logger = structlog.get_logger(__name__)


class DashboardService:
    """Indicadores exibidos na página inicial do painel."""

    def __init__(
        self,
        patient_repo: PatientRepository,
        alert_repo: AlertRepository,
        message_repo: MessageRepository,
    ) -> None:
        self.patient_repo = patient_repo
        self.alert_repo = alert_repo
        self.message_repo = message_repo

    def summary(self) -> DashboardSummaryDTO:
        patients = self.patient_repo.list_all()
        alerts = self.alert_repo.list_all()
        messages = self.message_repo.list_all()

        sent = len(messages)
        read = sum(1 for m in messages if m.status == MessageStatus.READ.value)

        distribution = {profile.value: 0 for profile in RiskProfile}
        for p in patients:
            distribution[RiskProfile.parse(p.risk_profile).value] += 1

        summary = DashboardSummaryDTO(
            total_patients=len(patients),
            active_patients=sum(1 for p in patients if p.is_active),
            pending_alerts=sum(1 for a in alerts if a.status == AlertStatus.PENDING.value),
            sent_messages=sent,
            read_messages=read,
            response_rate=(read / sent * 100) if sent else 0.0,
            risk_distribution=distribution,
        )
        logger.debug("dashboard.summary", **summary.model_dump(exclude={"risk_distribution"}))
        return summary
