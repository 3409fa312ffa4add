"""
Fábrica de notifiers: devolve o provedor correto baseado no canal.
"""
import os
from functools import lru_cache
from typing import Literal

from checkup_alerts.adapters.notifiers.base import BaseNotifier
from checkup_alerts.adapters.notifiers.email.logging_email import LoggingEmail
from checkup_alerts.adapters.notifiers.whatsapp.logging_whatsapp import LoggingWhatsapp


@lru_cache
def get_email_notifier() -> BaseNotifier:
    return LoggingEmail(from_email=os.getenv("DEFAULT_FROM_EMAIL"))


@lru_cache
def get_whatsapp_notifier() -> BaseNotifier:
    return LoggingWhatsapp(sender_number=os.getenv("WHATSAPP_SENDER_NUMBER"))


def get_notifier(channel: Literal["email", "whatsapp"]) -> BaseNotifier:
    """
    Retorna o provedor de notificação para o canal especificado.

    - 'email' → LoggingEmail
    - 'whatsapp' → LoggingWhatsapp
    """
    if channel == "email":
        return get_email_notifier()
    if channel == "whatsapp":
        return get_whatsapp_notifier()
    raise ValueError(f"Canal de notificação desconhecido: {channel}")
