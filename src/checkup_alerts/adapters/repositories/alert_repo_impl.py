from django.db import IntegrityError, transaction

from checkup_alerts.adapters.repositories._db_errors import parse_uuid, translate_db_errors
from checkup_alerts.core.domain.entities.alert_entity import AlertEntity
from checkup_alerts.core.domain.events.exceptions import DuplicatePendingAlertError
from checkup_alerts.core.domain.repositories.alert_repository import AlertRepository
from plugins.django_interface.models import Alert as AlertModel


class AlertRepoImpl(AlertRepository):
    """Implementação Django do AlertRepository."""

    def __init__(self, clinic_id: str | None = None):
        self.clinic_id = clinic_id

    def _qs(self):
        qs = AlertModel.objects.all()
        if self.clinic_id:
            qs = qs.filter(clinic_id=self.clinic_id)
        return qs

    # ────────────────────────────────── #
    # Consultas
    # ────────────────────────────────── #
    def list_all(self) -> list[AlertEntity]:
        with translate_db_errors("alert.list_all"):
            return [AlertEntity.from_model(m) for m in self._qs().order_by("-created_at")]

    def find_by_id(self, alert_id: str) -> AlertEntity | None:
        if (pk := parse_uuid(alert_id)) is None:
            return None
        with translate_db_errors("alert.find_by_id"):
            m = self._qs().filter(id=pk).first()
        return AlertEntity.from_model(m) if m else None

    def find_pending_by_patient(self, patient_id: str) -> AlertEntity | None:
        if (pk := parse_uuid(patient_id)) is None:
            return None
        with translate_db_errors("alert.find_pending_by_patient"):
            m = AlertModel.objects.filter(patient_id=pk, status=AlertModel.Status.PENDING).first()
        return AlertEntity.from_model(m) if m else None

    # ────────────────────────────────── #
    # Escrita
    # ────────────────────────────────── #
    def create(self, alert: AlertEntity) -> AlertEntity:
        """
        A unicidade do pendente é garantida pelo UniqueConstraint
        `uniq_pending_alert_per_patient`; a violação vira DuplicatePendingAlertError.
        """
        data = alert.to_dict(drop_none=("created_at",))
        if data.get("clinic_id") is None and self.clinic_id:
            data["clinic_id"] = self.clinic_id
        with translate_db_errors("alert.create"):
            try:
                with transaction.atomic():
                    m = AlertModel.objects.create(**data)
            except IntegrityError as e:
                raise DuplicatePendingAlertError(
                    f"Paciente {alert.patient_id} já possui alerta pendente."
                ) from e
        return AlertEntity.from_model(m)

    def update_status(self, alert_id: str, status: str) -> AlertEntity | None:
        if (pk := parse_uuid(alert_id)) is None:
            return None
        with translate_db_errors("alert.update_status"), transaction.atomic():
            updated = AlertModel.objects.filter(id=pk).update(status=status)
            if not updated:
                return None
            m = AlertModel.objects.get(id=pk)
        return AlertEntity.from_model(m)
