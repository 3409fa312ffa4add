import uuid
from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError

from checkup_alerts.core.domain.events.exceptions import PersistenceError


@contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """Converte erros do ORM em PersistenceError do domínio."""
    try:
        yield
    except DatabaseError as e:
        raise PersistenceError(f"{operation}: {e}") from e


def parse_uuid(value) -> uuid.UUID | None:
    """Id recebido de fora (CLI, task) como UUID; None se não for um UUID válido."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None
