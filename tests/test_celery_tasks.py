from django.test import TestCase

from checkup_alerts.adapters.config.composition_root import get_container
from clinic_dashboard_api.tasks import scan_checkup_reminders, send_alert_task
from plugins.django_interface.models import Alert, Message


class CheckupTasksTests(TestCase):
    def setUp(self):
        get_container().demo_seeder()

    def test_scan_only_creates_pending_alerts(self):
        messages_before = Message.objects.count()

        result = scan_checkup_reminders.apply().get()

        # Maria já tem alerta pendente; João e Carlos estão vencidos
        self.assertEqual(result, {"created": 2, "skipped": 1, "failed": 0})
        self.assertEqual(Alert.objects.filter(type="overdue", status="pending").count(), 2)
        self.assertFalse(Alert.objects.filter(status="sent").exists())
        self.assertEqual(Message.objects.count(), messages_before)

    def test_send_alert_task_returns_false_for_unknown_alert(self):
        self.assertFalse(send_alert_task.apply(args=("00000000-0000-0000-0000-000000000000",)).get())

    def test_send_alert_task_returns_false_for_malformed_id(self):
        result = send_alert_task.apply(args=("not-a-uuid",))

        self.assertTrue(result.successful())
        self.assertFalse(result.get())

    def test_facade_send_alert_with_malformed_id_returns_false(self):
        service = get_container().checkup_alert_service()
        pending_before = Alert.objects.filter(status="pending").count()

        self.assertFalse(service.send_alert("not-a-uuid"))
        self.assertEqual(Alert.objects.filter(status="pending").count(), pending_before)
