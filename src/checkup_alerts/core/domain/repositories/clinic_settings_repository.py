from abc import ABC, abstractmethod

from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity


class ClinicSettingsRepository(ABC):
    @abstractmethod
    def get(self) -> ClinicSettingsEntity | None:
        """Retorna as configurações da clínica corrente."""
        ...

    @abstractmethod
    def save(self, settings: ClinicSettingsEntity) -> ClinicSettingsEntity:
        """Cria ou atualiza as configurações."""
        ...
