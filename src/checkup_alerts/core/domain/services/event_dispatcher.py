from collections import defaultdict
from collections.abc import Callable

import structlog

from checkup_alerts.core.domain.events.events import DomainEvent

logger = structlog.get_logger(__name__)

EventHandler = Callable[[DomainEvent], None]


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, '__name__', handler.__class__.__name__)


class EventDispatcher:
    """
    Publica eventos de domínio para os assinantes registrados.

    Quem assina uma classe base (ex.: `DomainEvent`) recebe também as
    subclasses. Erro em um assinante é registrado e não impede os demais.
    """
    def __init__(self) -> None:
        self._subs: defaultdict[type[DomainEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._subs[event_type].append(handler)
        logger.debug("event.subscribed", event_type=event_type.__name__, handler_name=_handler_name(handler))

    def handlers_for(self, event_type: type[DomainEvent]) -> list[EventHandler]:
        return [h for cls in event_type.__mro__ for h in self._subs.get(cls, ())]

    def dispatch(self, event: DomainEvent) -> int:
        """Entrega o evento e devolve quantos assinantes o processaram sem erro."""
        handlers = self.handlers_for(type(event))
        log = logger.bind(event_name=type(event).__name__, event_id=str(event.event_id))
        log.debug("event.dispatch", listeners=len(handlers))

        delivered = 0
        for h in handlers:
            try:
                h(event)
            except Exception:
                log.exception("event.handler_error", handler_name=_handler_name(h))
            else:
                delivered += 1
        return delivered
