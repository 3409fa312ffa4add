import time
from abc import ABC, abstractmethod

import structlog

from checkup_alerts.adapters.observability.metrics import (
    NOTIFIER_FAILURE,
    NOTIFIER_LATENCY,
    NOTIFIER_SUCCESS,
)
from checkup_alerts.core.domain.entities.patient_entity import PatientEntity
from checkup_alerts.core.domain.events.exceptions import ChannelError

logger = structlog.get_logger()


class BaseNotifier(ABC):
    def __init__(self, provider: str, channel: str) -> None:
        self.provider = provider
        self.channel  = channel

    def send(self, text: str, patient: PatientEntity) -> None:
        """
        Envia `text` ao paciente. Qualquer falha do provedor chega ao chamador
        como ChannelError.
        """
        start = time.perf_counter()
        try:
            self._send(text, patient)
            NOTIFIER_SUCCESS.labels(self.provider, self.channel).inc()
        except ChannelError:
            NOTIFIER_FAILURE.labels(self.provider, self.channel).inc()
            raise
        except Exception as e:
            NOTIFIER_FAILURE.labels(self.provider, self.channel).inc()
            raise ChannelError(self.channel, f"Erro inesperado durante o envio: {e}") from e
        finally:
            NOTIFIER_LATENCY.labels(self.provider, self.channel).observe(time.perf_counter() - start)

    @abstractmethod
    def _send(self, text: str, patient: PatientEntity) -> None:
        """Entrega efetiva ao provedor do canal."""
        ...
