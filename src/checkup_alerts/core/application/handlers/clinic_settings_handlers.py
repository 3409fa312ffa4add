from dataclasses import replace

from checkup_alerts.core.application.commands.clinic_settings_commands import UpdateClinicSettingsCommand
from checkup_alerts.core.application.cqrs import CommandHandler
from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity
from checkup_alerts.core.domain.events.exceptions import NotFoundError
from checkup_alerts.core.domain.repositories import ClinicSettingsRepository


class UpdateClinicSettingsHandler(CommandHandler[UpdateClinicSettingsCommand]):
    def __init__(self, repo: ClinicSettingsRepository):
        self.repo = repo

    def handle(self, command: UpdateClinicSettingsCommand) -> ClinicSettingsEntity:
        current = self.repo.get()
        if current is None:
            raise NotFoundError("Configurações da clínica não encontradas")
        return self.repo.save(replace(current, **command.payload.model_dump(exclude_none=True)))
