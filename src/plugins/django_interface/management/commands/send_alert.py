from django.core.management.base import BaseCommand, CommandError

from checkup_alerts.adapters.config.composition_root import get_container


class Command(BaseCommand):
    help = "Envia manualmente um alerta (WhatsApp + e-mail) pelo ID."

    def add_arguments(self, parser):
        parser.add_argument("--alert-id", required=True, help="UUID do alerta (campo Alert.id)")

    def handle(self, *args, **opts):
        alert_id = opts["alert_id"]
        sent = get_container().checkup_alert_service().send_alert(alert_id)
        if not sent:
            raise CommandError(f"Alerta {alert_id} não foi enviado (veja os logs).")
        self.stdout.write(self.style.SUCCESS(f"Alerta {alert_id} enviado."))
