from dataclasses import dataclass

from checkup_alerts.core.application.cqrs import CommandDTO
from checkup_alerts.core.application.dtos.clinic_settings_dto import ClinicSettingsUpdateDTO


@dataclass(frozen=True)
class UpdateClinicSettingsCommand(CommandDTO):
    payload: ClinicSettingsUpdateDTO
