from django.test import SimpleTestCase

from checkup_alerts.adapters.notifiers.base import BaseNotifier
from checkup_alerts.adapters.notifiers.email.logging_email import LoggingEmail
from checkup_alerts.adapters.notifiers.registry import get_notifier
from checkup_alerts.adapters.notifiers.whatsapp.logging_whatsapp import LoggingWhatsapp
from checkup_alerts.adapters.observability.metrics import registry
from checkup_alerts.core.domain.events.exceptions import ChannelError
from tests.helpers.fakes import make_patient


def _sample(name, channel, provider="log"):
    return registry.get_sample_value(name, {"provider": provider, "channel": channel}) or 0


class _ExplodingNotifier(BaseNotifier):
    def _send(self, text, patient):
        raise ConnectionError("timeout")


class NotifierTests(SimpleTestCase):
    def test_whatsapp_sends_and_counts_success(self):
        before = _sample("notifier_success_total", "whatsapp")
        LoggingWhatsapp().send("Olá Maria", make_patient())
        self.assertEqual(_sample("notifier_success_total", "whatsapp"), before + 1)

    def test_whatsapp_without_phone_raises_channel_error(self):
        before = _sample("notifier_failure_total", "whatsapp")

        with self.assertRaises(ChannelError) as ctx:
            LoggingWhatsapp().send("Olá", make_patient(phone=None))

        self.assertEqual(ctx.exception.channel, "whatsapp")
        self.assertEqual(_sample("notifier_failure_total", "whatsapp"), before + 1)

    def test_email_without_address_raises_channel_error(self):
        with self.assertRaises(ChannelError) as ctx:
            LoggingEmail().send("Prezado", make_patient(email=""))
        self.assertEqual(ctx.exception.channel, "email")

    def test_unexpected_error_is_wrapped(self):
        with self.assertRaises(ChannelError) as ctx:
            _ExplodingNotifier("fake", "sms").send("x", make_patient())
        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)


class RegistryTests(SimpleTestCase):
    def test_returns_cached_notifier_per_channel(self):
        self.assertIsInstance(get_notifier("whatsapp"), LoggingWhatsapp)
        self.assertIsInstance(get_notifier("email"), LoggingEmail)
        self.assertIs(get_notifier("email"), get_notifier("email"))

    def test_unknown_channel(self):
        with self.assertRaises(ValueError):
            get_notifier("sms")
