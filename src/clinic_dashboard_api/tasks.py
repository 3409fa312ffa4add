from __future__ import annotations

import structlog
from celery import Task, shared_task

from checkup_alerts.adapters.config.composition_root import get_container

log = structlog.get_logger(__name__)

# ──────────────────────────────────────────────────────────────────────────
# Constantes de filas
# ──────────────────────────────────────────────────────────────────────────
QUEUE_CHECKUP = "checkup_alerts"

# ──────────────────────────────────────────────────────────────────────────
# Base Task com DLQ
# ──────────────────────────────────────────────────────────────────────────
class BaseTaskWithDLQ(Task):
    """
    Envia p/ Dead Letter Queue quando falhar após todas as retentativas.
    Em 'task_always_eager' apenas registra no log.
    """
    def on_failure(self, exc, task_id, args, kwargs, einfo):
        is_eager = bool(getattr(self.app.conf, "task_always_eager", False))
        if is_eager:
            log.critical(
                "task.failed_eager_mode",
                task=self.name, task_id=task_id, error=str(exc),
            )
        else:
            log.critical(
                "task.failed_dlq_redirect",
                task=self.name, task_id=task_id, error=str(exc),
                queue="dead_letter",
            )
            self.app.send_task(
                self.name,
                args=args,
                kwargs=kwargs,
                queue="dead_letter",
                routing_key="dead_letter",
            )
        super().on_failure(exc, task_id, args, kwargs, einfo)

# ──────────────────────────────────────────────────────────────────────────
# Varredura e envio
# ──────────────────────────────────────────────────────────────────────────
@shared_task(
    base=BaseTaskWithDLQ, bind=True, max_retries=3, default_retry_delay=60,
    acks_late=True, queue=QUEUE_CHECKUP
)
def scan_checkup_reminders(self) -> dict[str, int]:
    """
    Uma varredura completa. Os alertas criados ficam pendentes até o envio
    manual (`send_alert_task` / comando `send_alert`).
    """
    try:
        result = get_container().checkup_alert_service().scan()
    except Exception as exc:
        log.error("scan.task_failed", error=str(exc))
        raise self.retry(exc=exc) from exc

    log.info("scan.task_done", **result.as_dict())
    return result.as_dict()


@shared_task(
    base=BaseTaskWithDLQ, bind=True, max_retries=3, default_retry_delay=60,
    acks_late=True, queue=QUEUE_CHECKUP
)
def send_alert_task(self, alert_id: str) -> bool:
    try:
        sent = get_container().checkup_alert_service().send_alert(alert_id)
    except Exception as exc:
        log.error("dispatch.task_failed", alert_id=alert_id, error=str(exc))
        raise self.retry(exc=exc) from exc
    log.info("dispatch.task_done", alert_id=alert_id, sent=sent)
    return sent
