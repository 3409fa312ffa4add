from checkup_alerts.adapters.repositories._db_errors import translate_db_errors
from checkup_alerts.core.domain.entities.clinic_settings_entity import ClinicSettingsEntity
from checkup_alerts.core.domain.repositories.clinic_settings_repository import ClinicSettingsRepository
from plugins.django_interface.models import Clinic as ClinicModel


class ClinicSettingsRepoImpl(ClinicSettingsRepository):
    """
    Configurações da clínica corrente. Sem `clinic_id` configurado usa a
    primeira clínica cadastrada.
    """

    def __init__(self, clinic_id: str | None = None):
        self.clinic_id = clinic_id

    def get(self) -> ClinicSettingsEntity | None:
        with translate_db_errors("clinic_settings.get"):
            qs = ClinicModel.objects.all()
            if self.clinic_id:
                qs = qs.filter(id=self.clinic_id)
            m = qs.order_by("created_at").first()
        return ClinicSettingsEntity.from_model(m) if m else None

    def save(self, settings: ClinicSettingsEntity) -> ClinicSettingsEntity:
        data = settings.to_dict(exclude=("id",))
        with translate_db_errors("clinic_settings.save"):
            m, _ = ClinicModel.objects.update_or_create(id=settings.id, defaults=data)
        return ClinicSettingsEntity.from_model(m)
