from enum import Enum


class RiskProfile(str, Enum):
    HIGH = "alto"
    MODERATE = "moderado"
    LOW = "baixo"

    @classmethod
    def parse(cls, value: "str | RiskProfile | None") -> "RiskProfile":
        """
        Aceita o valor persistido (alto/moderado/baixo) ou o nome em inglês
        (high/moderate/low). Qualquer outro valor cai em LOW.
        """
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        return _RISK_ALIASES.get(key, cls.LOW)


_RISK_ALIASES = {
    "alto": RiskProfile.HIGH,
    "high": RiskProfile.HIGH,
    "moderado": RiskProfile.MODERATE,
    "moderate": RiskProfile.MODERATE,
    "baixo": RiskProfile.LOW,
    "low": RiskProfile.LOW,
}


class PatientStatus(str, Enum):
    ACTIVE = "ativo"
    INACTIVE = "inativo"


class AlertType(str, Enum):
    CHECKUP_REMINDER = "checkup_reminder"
    OVERDUE = "overdue"
    # reservado para alertas manuais / externos
    URGENT = "urgent"


class AlertStatus(str, Enum):
    PENDING = "pending"
    SENT = "sent"
    FAILED = "failed"


class MessageType(str, Enum):
    EMAIL = "email"
    WHATSAPP = "whatsapp"


class MessageStatus(str, Enum):
    SENT = "enviado"
    DELIVERED = "entregue"
    READ = "lido"
    ERROR = "erro"
