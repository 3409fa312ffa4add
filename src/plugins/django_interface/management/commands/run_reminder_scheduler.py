import signal
import threading

from django.core.management.base import BaseCommand

from checkup_alerts.adapters.config.composition_root import get_container


class Command(BaseCommand):
    help = "Roda o agendador de lembretes em primeiro plano até Ctrl+C / SIGTERM."

    def handle(self, *args, **opts):
        scheduler = get_container().reminder_scheduler()
        stop = threading.Event()

        def _on_signal(signum, frame):
            stop.set()

        signal.signal(signal.SIGINT, _on_signal)
        signal.signal(signal.SIGTERM, _on_signal)

        scheduler.start()
        self.stdout.write(
            self.style.SUCCESS(
                f"Agendador iniciado (intervalo={int(scheduler.interval.total_seconds())}s)."
            )
        )
        stop.wait()
        scheduler.stop()
        self.stdout.write(self.style.SUCCESS(f"Agendador encerrado após {scheduler.runs} varreduras."))
