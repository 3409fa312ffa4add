from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase

from plugins.django_interface.models import Alert, Clinic, Message, Patient


class ManagementCommandTests(TestCase):
    def _call(self, *args):
        out = StringIO()
        call_command(*args, stdout=out)
        return out.getvalue()

    def test_seed_scan_and_send(self):
        self._call("seed_demo_data")
        self.assertEqual(Clinic.objects.count(), 1)
        self.assertEqual(Patient.objects.count(), 3)
        self.assertEqual(Message.objects.count(), 2)
        self.assertEqual(Alert.objects.filter(status="pending").count(), 1)

        output = self._call("run_checkup_scan", "--now", "2025-01-01T00:00:00+00:00")
        self.assertIn("criados=2", output)
        self.assertEqual(Alert.objects.filter(status="pending").count(), 3)

        alert = Alert.objects.filter(type="overdue").first()
        self._call("send_alert", "--alert-id", str(alert.id))

        alert.refresh_from_db()
        self.assertEqual(alert.status, "sent")
        self.assertEqual(Message.objects.filter(patient_id=alert.patient_id, status="enviado").count(), 2)
        self.assertEqual(Message.objects.count(), 4)

    def test_send_unknown_alert_fails(self):
        with self.assertRaises(CommandError):
            self._call("send_alert", "--alert-id", "00000000-0000-0000-0000-000000000000")

    def test_invalid_now_is_rejected(self):
        with self.assertRaises(CommandError):
            self._call("run_checkup_scan", "--now", "amanhã")


class MetricsEndpointTests(TestCase):
    def test_metrics_exposes_checkup_counters(self):
        response = self.client.get("/metrics/")

        self.assertEqual(response.status_code, 200)
        self.assertIn(b"checkup_alert_dispatch_total", response.content)
