from abc import ABC, abstractmethod

from checkup_alerts.core.domain.entities.message_entity import MessageEntity


class MessageRepository(ABC):
    @abstractmethod
    def create(self, message: MessageEntity) -> MessageEntity:
        """Registra uma mensagem enviada."""
        ...

    @abstractmethod
    def list_all(self) -> list[MessageEntity]:
        """Lista as mensagens, mais recentes primeiro."""
        ...
