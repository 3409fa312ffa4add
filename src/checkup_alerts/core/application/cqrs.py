from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import structlog

from checkup_alerts.core.domain.events.events import DomainEvent
from checkup_alerts.core.domain.services.event_dispatcher import EventDispatcher

C = TypeVar('C')  # Command type
Q = TypeVar('Q')  # Query type
R = TypeVar('R')  # Query result type

logger = structlog.get_logger(__name__)

# ───────────────────────────────────────────────
# DTOs
# ───────────────────────────────────────────────
@dataclass(frozen=True)
class CommandDTO:
    """Base dos comandos (varredura, envio, CRUD de paciente/configuração)."""

@dataclass(frozen=True)
class QueryDTO:
    """Base das consultas de leitura."""

# ───────────────────────────────────────────────
# Handlers
# ───────────────────────────────────────────────
class CommandHandler(Protocol, Generic[C]):
    def handle(self, command: C) -> Any:
        ...

class QueryHandler(Protocol, Generic[Q, R]):
    def handle(self, query: Q) -> R:
        ...

# ───────────────────────────────────────────────
# Buses
# ───────────────────────────────────────────────
class _Bus:
    """Roteia uma mensagem para o handler do seu tipo exato e mede a duração."""

    kind = "message"

    def __init__(self) -> None:
        self._handlers: dict[type, Any] = {}

    def register(self, message_type: type, handler: Any) -> None:
        self._handlers[message_type] = handler
        logger.debug(f"{self.kind}.registered", name=message_type.__name__)

    def dispatch(self, message: Any) -> Any:
        name = type(message).__name__
        handler = self._handlers.get(type(message))
        if handler is None:
            raise ValueError(f"Nenhum handler para {self.kind}: {name}")

        start = time.perf_counter()
        try:
            return handler.handle(message)
        finally:
            logger.debug(f"{self.kind}.executed", name=name, duration=f"{time.perf_counter() - start:.3f}s")


class CommandBus(_Bus):
    kind = "command"


class QueryBus(_Bus):
    kind = "query"


class CommandBusImpl(CommandBus):
    """CommandBus que publica no EventDispatcher os eventos devolvidos pelos handlers."""

    def __init__(self, dispatcher: EventDispatcher):
        super().__init__()
        self.dispatcher = dispatcher

    def dispatch(self, command: Any) -> Any:
        result = super().dispatch(command)
        if isinstance(result, DomainEvent):
            self.dispatcher.dispatch(result)
        return result


class QueryBusImpl(QueryBus):
    """QueryBus padrão do container."""
