from django.test import SimpleTestCase

from checkup_alerts.core.utils.template_utils import render_message


class RenderMessageTests(SimpleTestCase):
    def test_replaces_every_occurrence(self):
        out = render_message("{nome}, {nome}! Exame: {exame}", {"nome": "Maria", "exame": "Cardiologia"})
        self.assertEqual(out, "Maria, Maria! Exame: Cardiologia")

    def test_unknown_tokens_are_kept(self):
        out = render_message("Olá {nome}, {clinica}", {"nome": "João"})
        self.assertEqual(out, "Olá João, {clinica}")

    def test_missing_context_key_leaves_placeholder(self):
        self.assertEqual(render_message("Exame de {exame}", {}), "Exame de {exame}")

    def test_substitution_is_case_sensitive(self):
        self.assertEqual(render_message("{Nome}", {"nome": "Maria"}), "{Nome}")
