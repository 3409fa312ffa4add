import uuid
from datetime import UTC, date, datetime

from django.test import TestCase

from checkup_alerts.adapters.repositories.alert_repo_impl import AlertRepoImpl
from checkup_alerts.adapters.repositories.clinic_settings_repo_impl import ClinicSettingsRepoImpl
from checkup_alerts.adapters.repositories.message_repo_impl import MessageRepoImpl
from checkup_alerts.adapters.repositories.patient_repo_impl import PatientRepoImpl
from checkup_alerts.core.application.services.reminder_scanner import ReminderScanner
from checkup_alerts.core.domain.entities.message_entity import MessageEntity
from checkup_alerts.core.domain.events.exceptions import DuplicatePendingAlertError
from plugins.django_interface.models import Alert, Patient
from tests.helpers.fakes import make_alert, make_patient, make_settings


class PatientRepoImplTests(TestCase):
    def setUp(self):
        self.repo = PatientRepoImpl()

    def test_save_and_find(self):
        patient = self.repo.save(make_patient())

        found = self.repo.find_by_id(str(patient.id))
        self.assertEqual(found.name, "Maria Silva")
        self.assertEqual(found.next_checkup_date, date(2024, 4, 15))
        self.assertIsNotNone(found.created_at)

    def test_save_updates_existing_row(self):
        patient = self.repo.save(make_patient())
        patient.name = "Maria S. Souza"
        self.repo.save(patient)

        self.assertEqual(Patient.objects.count(), 1)
        self.assertEqual(self.repo.find_by_id(str(patient.id)).name, "Maria S. Souza")

    def test_malformed_id_is_not_found(self):
        self.assertIsNone(self.repo.find_by_id("not-a-uuid"))
        self.assertFalse(self.repo.delete("not-a-uuid"))

    def test_delete(self):
        patient = self.repo.save(make_patient())

        self.assertTrue(self.repo.delete(str(patient.id)))
        self.assertFalse(self.repo.delete(str(patient.id)))
        self.assertIsNone(self.repo.find_by_id(str(patient.id)))

    def test_clinic_filter(self):
        clinic_a, clinic_b = uuid.uuid4(), uuid.uuid4()
        self.repo.save(make_patient(clinic_id=clinic_a))
        self.repo.save(make_patient(name="João Santos", clinic_id=clinic_b))

        scoped = PatientRepoImpl(clinic_id=str(clinic_a))
        self.assertEqual([p.name for p in scoped.list_all()], ["Maria Silva"])
        self.assertEqual(len(self.repo.list_all()), 2)


class AlertRepoImplTests(TestCase):
    def setUp(self):
        self.repo = AlertRepoImpl()
        self.patient = make_patient()

    def test_duplicate_pending_is_rejected(self):
        self.repo.create(make_alert(self.patient))

        with self.assertRaises(DuplicatePendingAlertError):
            self.repo.create(make_alert(self.patient, type="overdue"))

        self.assertEqual(Alert.objects.count(), 1)

    def test_new_pending_allowed_after_status_change(self):
        first = self.repo.create(make_alert(self.patient))

        updated = self.repo.update_status(str(first.id), "sent")
        self.assertEqual(updated.status, "sent")
        self.assertIsNone(self.repo.find_pending_by_patient(str(self.patient.id)))

        second = self.repo.create(make_alert(self.patient, type="overdue"))
        self.assertEqual(self.repo.find_pending_by_patient(str(self.patient.id)).id, second.id)

    def test_update_unknown_alert_returns_none(self):
        self.assertIsNone(self.repo.update_status(str(uuid.uuid4()), "sent"))

    def test_malformed_ids_are_not_found(self):
        self.assertIsNone(self.repo.find_by_id("not-a-uuid"))
        self.assertIsNone(self.repo.find_pending_by_patient("123"))
        self.assertIsNone(self.repo.update_status("not-a-uuid", "sent"))

    def test_list_all_newest_first(self):
        older = self.repo.create(make_alert(self.patient, status="sent", created_at=datetime(2024, 1, 1, tzinfo=UTC)))
        newer = self.repo.create(make_alert(self.patient, created_at=datetime(2024, 2, 1, tzinfo=UTC)))

        self.assertEqual([a.id for a in self.repo.list_all()], [newer.id, older.id])


class ClinicSettingsAndMessageRepoTests(TestCase):
    def test_settings_roundtrip(self):
        repo = ClinicSettingsRepoImpl()
        self.assertIsNone(repo.get())

        saved = repo.save(make_settings(city="São Paulo"))

        self.assertEqual(repo.get().id, saved.id)
        self.assertEqual(repo.get().city, "São Paulo")

    def test_messages_newest_first(self):
        repo = MessageRepoImpl()
        patient = make_patient()
        for day in (1, 3, 2):
            repo.create(
                MessageEntity(
                    id=uuid.uuid4(),
                    patient_id=patient.id,
                    patient_name=patient.name,
                    type="whatsapp",
                    content=f"dia {day}",
                    status="enviado",
                    sent_at=datetime(2024, 1, day, tzinfo=UTC),
                )
            )

        self.assertEqual([m.content for m in repo.list_all()], ["dia 3", "dia 2", "dia 1"])


class ScannerWithDjangoReposTests(TestCase):
    def test_double_scan_creates_one_alert(self):
        PatientRepoImpl().save(make_patient())
        scanner = ReminderScanner(PatientRepoImpl(), AlertRepoImpl())
        now = datetime(2024, 4, 10, tzinfo=UTC)

        first = scanner.scan(now=now)
        second = scanner.scan(now=now)

        self.assertEqual(first.created, 1)
        self.assertEqual(second.skipped, 1)
        self.assertEqual(Alert.objects.filter(status="pending").count(), 1)
