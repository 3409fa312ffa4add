import logging
import os
import sys

import structlog

# bibliotecas muito verbosas em DEBUG
NOISY_LOGGERS = ("celery", "kombu", "amqp", "django.db.backends")


def configure_logging(
    level: str | None = None,
    json_logs: bool | None = None,
) -> None:
    """
    Configura structlog sobre o logging da stdlib.

    - `level` vem de LOG_LEVEL (padrão INFO).
    - Com JSON_LOGS definido usa JSONRenderer; senão ConsoleRenderer colorido.
    Deve ser chamado antes de qualquer import que crie loggers.
    """
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if json_logs is None:
        json_logs = bool(os.getenv("JSON_LOGS", ""))

    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=pre_chain,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.getLevelName(level), logging.WARNING))

    logging.captureWarnings(True)
