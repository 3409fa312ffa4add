from checkup_alerts.adapters.repositories._db_errors import translate_db_errors
from checkup_alerts.core.domain.entities.message_entity import MessageEntity
from checkup_alerts.core.domain.repositories.message_repository import MessageRepository
from plugins.django_interface.models import Message as MessageModel


class MessageRepoImpl(MessageRepository):
    def __init__(self, clinic_id: str | None = None):
        self.clinic_id = clinic_id

    def create(self, message: MessageEntity) -> MessageEntity:
        data = message.to_dict()
        if data.get("clinic_id") is None and self.clinic_id:
            data["clinic_id"] = self.clinic_id
        with translate_db_errors("message.create"):
            m = MessageModel.objects.create(**data)
        return MessageEntity.from_model(m)

    def list_all(self) -> list[MessageEntity]:
        with translate_db_errors("message.list_all"):
            qs = MessageModel.objects.all()
            if self.clinic_id:
                qs = qs.filter(clinic_id=self.clinic_id)
            return [MessageEntity.from_model(m) for m in qs.order_by("-sent_at")]
