from checkup_alerts.adapters.repositories._db_errors import parse_uuid, translate_db_errors
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.repositories.patient_repository import PatientRepository
from plugins.django_interface.models import Patient as PatientModel


class PatientRepoImpl(PatientRepository):
    """Implementação Django do PatientRepository, opcionalmente restrita a uma clínica."""

    def __init__(self, clinic_id: str | None = None):
        self.clinic_id = clinic_id

    def _qs(self):
        qs = PatientModel.objects.all()
        if self.clinic_id:
            qs = qs.filter(clinic_id=self.clinic_id)
        return qs

    def list_all(self) -> list[PatientEntity]:
        with translate_db_errors("patient.list_all"):
            return [PatientEntity.from_model(m) for m in self._qs()]

    def find_by_id(self, patient_id: str) -> PatientEntity | None:
        if (pk := parse_uuid(patient_id)) is None:
            return None
        with translate_db_errors("patient.find_by_id"):
            try:
                m = self._qs().get(id=pk)
            except PatientModel.DoesNotExist:
                return None
        return PatientEntity.from_model(m)

    def save(self, patient: PatientEntity) -> PatientEntity:
        data = patient.to_dict(exclude=("id",), drop_none=("created_at", "updated_at"))
        if data.get("clinic_id") is None and self.clinic_id:
            data["clinic_id"] = self.clinic_id
        with translate_db_errors("patient.save"):
            m, _ = PatientModel.objects.update_or_create(id=patient.id, defaults=data)
        return PatientEntity.from_model(m)

    def delete(self, patient_id: str) -> bool:
        if (pk := parse_uuid(patient_id)) is None:
            return False
        with translate_db_errors("patient.delete"):
            deleted, _ = self._qs().filter(id=pk).delete()
        return deleted > 0
