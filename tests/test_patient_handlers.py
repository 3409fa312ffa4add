from datetime import date

from django.test import SimpleTestCase

from checkup_alerts.adapters.repositories.in_memory_repos import (
    InMemoryClinicSettingsRepo,
    InMemoryPatientRepo,
)
from checkup_alerts.core.application.commands.clinic_settings_commands import UpdateClinicSettingsCommand
from checkup_alerts.core.application.commands.patient_commands import (
    CreatePatientCommand,
    DeletePatientCommand,
    UpdatePatientCommand,
)
from checkup_alerts.core.application.dtos.clinic_settings_dto import ClinicSettingsUpdateDTO
from checkup_alerts.core.application.dtos.patient_dto import PatientDTO, PatientUpdateDTO
from checkup_alerts.core.application.handlers.clinic_settings_handlers import UpdateClinicSettingsHandler
from checkup_alerts.core.application.handlers.patient_handlers import (
    CreatePatientHandler,
    DeletePatientHandler,
    UpdatePatientHandler,
)
from checkup_alerts.core.domain.events.exceptions import NotFoundError
from tests.helpers.fakes import make_settings


class PatientHandlersTests(SimpleTestCase):
    def setUp(self):
        self.repo = InMemoryPatientRepo()

    def _create(self, **overrides):
        data = dict(name="Maria Silva", exam_type="Ginecologia", last_exam_date=date(2024, 1, 15), risk_profile="alto")
        data.update(overrides)
        return CreatePatientHandler(self.repo).handle(CreatePatientCommand(payload=PatientDTO(**data)))

    def test_create_computes_next_checkup(self):
        patient = self._create()

        self.assertEqual(patient.next_checkup_date, date(2024, 4, 15))
        self.assertEqual(patient.status, "ativo")
        self.assertIsNotNone(patient.created_at)
        self.assertIsNotNone(self.repo.find_by_id(str(patient.id)))

    def test_create_normalizes_risk_alias(self):
        patient = self._create(risk_profile="moderate")
        self.assertEqual(patient.risk_profile, "moderado")
        self.assertEqual(patient.next_checkup_date, date(2024, 7, 15))

    def test_update_risk_recomputes_next_checkup(self):
        patient = self._create()

        updated = UpdatePatientHandler(self.repo).handle(
            UpdatePatientCommand(id=str(patient.id), payload=PatientUpdateDTO(risk_profile="baixo"))
        )

        self.assertEqual(updated.next_checkup_date, date(2025, 1, 15))
        self.assertEqual(updated.name, "Maria Silva")
        self.assertGreaterEqual(updated.updated_at, patient.updated_at)

    def test_update_last_exam_recomputes_next_checkup(self):
        patient = self._create()

        updated = UpdatePatientHandler(self.repo).handle(
            UpdatePatientCommand(id=str(patient.id), payload=PatientUpdateDTO(last_exam_date=date(2024, 5, 31)))
        )

        self.assertEqual(updated.next_checkup_date, date(2024, 8, 31))

    def test_update_unknown_patient_raises(self):
        with self.assertRaises(NotFoundError):
            UpdatePatientHandler(self.repo).handle(
                UpdatePatientCommand(id="nao-existe", payload=PatientUpdateDTO(name="X"))
            )

    def test_delete(self):
        patient = self._create()
        DeletePatientHandler(self.repo).handle(DeletePatientCommand(id=str(patient.id)))

        self.assertIsNone(self.repo.find_by_id(str(patient.id)))
        with self.assertRaises(NotFoundError):
            DeletePatientHandler(self.repo).handle(DeletePatientCommand(id=str(patient.id)))


class UpdateClinicSettingsHandlerTests(SimpleTestCase):
    def test_merges_only_given_fields(self):
        repo = InMemoryClinicSettingsRepo(make_settings())

        saved = UpdateClinicSettingsHandler(repo).handle(
            UpdateClinicSettingsCommand(payload=ClinicSettingsUpdateDTO(whatsapp_template="Oi {nome}!"))
        )

        self.assertEqual(saved.whatsapp_template, "Oi {nome}!")
        self.assertEqual(saved.name, "Clínica Saúde Total")

    def test_missing_settings_raise(self):
        with self.assertRaises(NotFoundError):
            UpdateClinicSettingsHandler(InMemoryClinicSettingsRepo()).handle(
                UpdateClinicSettingsCommand(payload=ClinicSettingsUpdateDTO(name="Nova"))
            )
