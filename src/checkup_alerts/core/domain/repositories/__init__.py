from checkup_alerts.core.domain.repositories.alert_repository import AlertRepository
from checkup_alerts.core.domain.repositories.clinic_settings_repository import ClinicSettingsRepository
from checkup_alerts.core.domain.repositories.message_repository import MessageRepository
from checkup_alerts.core.domain.repositories.patient_repository import PatientRepository

__all__ = [
    "AlertRepository",
    "ClinicSettingsRepository",
    "MessageRepository",
    "PatientRepository",
]
