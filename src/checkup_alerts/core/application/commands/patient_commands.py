from dataclasses import dataclass

from checkup_alerts.core.application.cqrs import CommandDTO
from checkup_alerts.core.application.dtos.patient_dto import PatientDTO, PatientUpdateDTO


@dataclass(frozen=True)
class CreatePatientCommand(CommandDTO):
    payload: PatientDTO

@dataclass(frozen=True)
class UpdatePatientCommand(CommandDTO):
    id: str
    payload: PatientUpdateDTO

@dataclass(frozen=True)
class DeletePatientCommand(CommandDTO):
    id: str
