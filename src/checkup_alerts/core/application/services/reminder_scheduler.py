from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import timedelta
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

DEFAULT_SCAN_INTERVAL = timedelta(hours=1)


class ReminderScheduler:
    """
    Executa a varredura de lembretes em uma thread própria: uma vez logo no
    `start()` e depois a cada `interval`.

    `stop()` impede novas execuções; uma varredura em andamento termina
    normalmente antes do join.
    """

    def __init__(
        self,
        run: Callable[[], Any],
        interval: timedelta = DEFAULT_SCAN_INTERVAL,
        name: str = "checkup_reminder_scheduler",
    ) -> None:
        self._run = run
        self.interval = interval
        self.name = name
        self.runs = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._runs_cond = threading.Condition()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self.is_running:
                logger.debug("scheduler.already_running", name=self.name)
                return
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._loop, name=self.name, daemon=True)
            self._thread.start()
        logger.info("scheduler.started", name=self.name, interval_seconds=self.interval.total_seconds())

    def stop(self, timeout: float | None = None) -> None:
        with self._lock:
            thread = self._thread
            self._stop_event.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        logger.info("scheduler.stopped", name=self.name, runs=self.runs)

    def wait_for_runs(self, count: int, timeout: float) -> bool:
        """Bloqueia até `count` execuções completas ou até o timeout."""
        with self._runs_cond:
            return self._runs_cond.wait_for(lambda: self.runs >= count, timeout)

    # ------------------------------------------------------------------
    def _loop(self) -> None:
        while not self._stop_event.is_set():
            try:
                self._run()
            except Exception:
                logger.exception("scheduler.iteration_failed", name=self.name)
            finally:
                with self._runs_cond:
                    self.runs += 1
                    self._runs_cond.notify_all()
            if self._stop_event.wait(self.interval.total_seconds()):
                break
