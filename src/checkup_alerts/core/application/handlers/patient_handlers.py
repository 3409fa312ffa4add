import uuid
from dataclasses import replace
from datetime import UTC, datetime

import structlog

from checkup_alerts.core.application.commands.patient_commands import (
    CreatePatientCommand,
    DeletePatientCommand,
    UpdatePatientCommand,
)
from checkup_alerts.core.application.cqrs import CommandHandler
from checkup_alerts.core.application.services.checkup_calculator import compute_next_checkup
from checkup_alerts.core.domain.entities.enums import RiskProfile
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import NotFoundError
from checkup_alerts.core.domain.repositories import PatientRepository

logger = structlog.get_logger(__name__)

# ——— PATIENT ——————————————————————————————————————————————

class CreatePatientHandler(CommandHandler[CreatePatientCommand]):
    def __init__(self, repo: PatientRepository):
        self.repo = repo

    def handle(self, command: CreatePatientCommand) -> PatientEntity:
        data = command.payload.model_dump()
        now = datetime.now(UTC)
        data['id'] = uuid.uuid4()
        data['risk_profile'] = RiskProfile.parse(data['risk_profile']).value
        data['next_checkup_date'] = compute_next_checkup(data['last_exam_date'], data['risk_profile'])
        data['created_at'] = now
        data['updated_at'] = now
        if data.get('clinic_id'):
            data['clinic_id'] = uuid.UUID(str(data['clinic_id']))
        entity = PatientEntity.from_dict(data)
        return self.repo.save(entity)

class UpdatePatientHandler(CommandHandler[UpdatePatientCommand]):
    def __init__(self, repo: PatientRepository):
        self.repo = repo

    def handle(self, command: UpdatePatientCommand) -> PatientEntity:
        current = self.repo.find_by_id(command.id)
        if current is None:
            raise NotFoundError(f"Paciente {command.id} não encontrado")

        changes = command.payload.model_dump(exclude_none=True)
        if 'risk_profile' in changes:
            changes['risk_profile'] = RiskProfile.parse(changes['risk_profile']).value
        updated = replace(current, **changes)
        # a data derivada é sempre recalculada a partir dos valores finais
        updated.next_checkup_date = compute_next_checkup(updated.last_exam_date, updated.risk_profile)
        updated.updated_at = datetime.now(UTC)
        return self.repo.save(updated)

class DeletePatientHandler(CommandHandler[DeletePatientCommand]):
    def __init__(self, repo: PatientRepository):
        self.repo = repo

    def handle(self, command: DeletePatientCommand) -> None:
        if not self.repo.delete(command.id):
            raise NotFoundError(f"Paciente {command.id} não encontrado")
        logger.info("patient.deleted", patient_id=command.id)
