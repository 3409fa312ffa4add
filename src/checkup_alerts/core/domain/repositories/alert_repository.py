from abc import ABC, abstractmethod

from checkup_alerts.core.domain.entities.alert_entity import AlertEntity


class AlertRepository(ABC):
    @abstractmethod
    def list_all(self) -> list[AlertEntity]:
        """Lista todos os alertas, mais recentes primeiro."""
        ...

    @abstractmethod
    def find_by_id(self, alert_id: str) -> AlertEntity | None:
        """Recupera um alerta pelo seu ID."""
        ...

    @abstractmethod
    def find_pending_by_patient(self, patient_id: str) -> AlertEntity | None:
        """Retorna o alerta pendente do paciente, se houver."""
        ...

    @abstractmethod
    def create(self, alert: AlertEntity) -> AlertEntity:
        """
        Persiste um novo alerta.
        Levanta DuplicatePendingAlertError se o paciente já tem um pendente.
        """
        ...

    @abstractmethod
    def update_status(self, alert_id: str, status: str) -> AlertEntity | None:
        """Atualiza o status do alerta. Retorna None se não existir."""
        ...
