from django.http import HttpResponse
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

from checkup_alerts.core.domain.events.events import AlertCreatedEvent, AlertDispatchedEvent, DomainEvent
from checkup_alerts.core.domain.services.event_dispatcher import EventDispatcher

registry = CollectorRegistry()

ALERTS_CREATED = Counter(
    "checkup_alerts_created_total",
    "Alertas de check-up criados pela varredura",
    ["type"],
    registry=registry,
)

ALERT_DISPATCH = Counter(
    "checkup_alert_dispatch_total",
    "Resultado do envio de alertas",
    ["status"],
    registry=registry,
)

DOMAIN_EVENTS = Counter(
    "checkup_domain_events_total",
    "Eventos de domínio publicados",
    ["event"],
    registry=registry,
)

NOTIFIER_LATENCY = Histogram(
    "notifier_request_seconds",
    "Latency",
    ["provider", "channel"],
    registry=registry,
)
NOTIFIER_SUCCESS = Counter("notifier_success_total", "Success", ["provider", "channel"], registry=registry)
NOTIFIER_FAILURE = Counter("notifier_failure_total", "Failure", ["provider", "channel"], registry=registry)


def _on_domain_event(event: DomainEvent) -> None:
    DOMAIN_EVENTS.labels(type(event).__name__).inc()


def _on_alert_created(event: AlertCreatedEvent) -> None:
    ALERTS_CREATED.labels(event.alert_type).inc()


def _on_alert_dispatched(event: AlertDispatchedEvent) -> None:
    ALERT_DISPATCH.labels(event.status).inc()


def register_metric_listeners(dispatcher: EventDispatcher) -> EventDispatcher:
    dispatcher.subscribe(DomainEvent, _on_domain_event)
    dispatcher.subscribe(AlertCreatedEvent, _on_alert_created)
    dispatcher.subscribe(AlertDispatchedEvent, _on_alert_dispatched)
    return dispatcher


def metrics(request):
    data = generate_latest(registry)
    return HttpResponse(data, content_type=CONTENT_TYPE_LATEST)
