"""
Cálculo da data do próximo check-up a partir do perfil de risco.

A soma de meses usa `relativedelta`, que ajusta para o último dia do mês de
destino quando o dia não existe (31/01 + 1 mês → 29/02 em ano bissexto).
"""
from __future__ import annotations

from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from checkup_alerts.core.domain.entities.enums import RiskProfile

RISK_PROFILE_MONTHS: dict[RiskProfile, int] = {
    RiskProfile.HIGH: 3,
    RiskProfile.MODERATE: 6,
    RiskProfile.LOW: 12,
}


def _as_date(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def compute_next_checkup(last_exam_date: date | datetime | str, risk_profile: str | RiskProfile | None) -> date:
    months = RISK_PROFILE_MONTHS[RiskProfile.parse(risk_profile)]
    return _as_date(last_exam_date) + relativedelta(months=months)
