from django.core.management.base import BaseCommand

from checkup_alerts.adapters.config.composition_root import get_container


class Command(BaseCommand):
    help = "Carrega a clínica de demonstração, pacientes, mensagens e um alerta pendente."

    def handle(self, *args, **opts):
        counts = get_container().demo_seeder()
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed OK: pacientes={counts['patients']} mensagens={counts['messages']} "
                f"alertas={counts['alerts']}"
            )
        )
