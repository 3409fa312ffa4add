from abc import ABC, abstractmethod

from checkup_alerts.core.domain.entities.patient_entity import PatientEntity


class PatientRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[PatientEntity]:
        """Lista todos os pacientes da clínica."""
        ...

    @abstractmethod
    def find_by_id(self, patient_id: str) -> PatientEntity | None:
        """Retorna um paciente pelo ID interno."""
        ...

    @abstractmethod
    def save(self, patient: PatientEntity) -> PatientEntity:
        """Cria ou atualiza um Patient."""
        ...

    @abstractmethod
    def delete(self, patient_id: str) -> bool:
        """Remove um Patient pelo ID. Retorna False se não existia."""
        ...
