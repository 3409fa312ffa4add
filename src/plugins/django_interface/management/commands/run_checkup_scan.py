from datetime import datetime

from django.core.management.base import BaseCommand, CommandError

from checkup_alerts.adapters.config.composition_root import get_container


class Command(BaseCommand):
    help = "Executa UMA varredura de lembretes de check-up."

    def add_arguments(self, parser):
        parser.add_argument(
            "--now",
            help="Instante de referência em ISO-8601 (ex.: 2024-03-09T08:00:00-03:00). Padrão: agora.",
        )

    def handle(self, *args, **opts):
        now = None
        if opts.get("now"):
            try:
                now = datetime.fromisoformat(opts["now"])
            except ValueError as exc:
                raise CommandError(f"--now inválido: {opts['now']}") from exc

        result = get_container().checkup_alert_service().scan(now=now)
        self.stdout.write(
            self.style.SUCCESS(
                f"Varredura concluída: criados={result.created} "
                f"ignorados={result.skipped} falhas={result.failed}"
            )
        )
