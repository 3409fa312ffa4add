import threading
from datetime import timedelta

from django.test import SimpleTestCase

from checkup_alerts.core.application.services.reminder_scheduler import ReminderScheduler


class ReminderSchedulerTests(SimpleTestCase):
    def test_runs_immediately_on_start(self):
        calls = []
        scheduler = ReminderScheduler(lambda: calls.append(1), interval=timedelta(hours=1))

        scheduler.start()
        try:
            self.assertTrue(scheduler.wait_for_runs(1, timeout=5))
            self.assertTrue(scheduler.is_running)
        finally:
            scheduler.stop(timeout=5)

        self.assertEqual(calls, [1])
        self.assertFalse(scheduler.is_running)

    def test_repeats_until_stopped(self):
        scheduler = ReminderScheduler(lambda: None, interval=timedelta(milliseconds=10))

        scheduler.start()
        self.assertTrue(scheduler.wait_for_runs(3, timeout=5))
        scheduler.stop(timeout=5)

        runs_after_stop = scheduler.runs
        self.assertFalse(scheduler.is_running)
        self.assertFalse(scheduler.wait_for_runs(runs_after_stop + 1, timeout=0.1))

    def test_failing_iteration_does_not_kill_loop(self):
        def boom():
            raise RuntimeError("falha na varredura")

        scheduler = ReminderScheduler(boom, interval=timedelta(milliseconds=10))
        scheduler.start()
        try:
            self.assertTrue(scheduler.wait_for_runs(2, timeout=5))
        finally:
            scheduler.stop(timeout=5)

    def test_start_twice_keeps_single_thread(self):
        gate = threading.Event()
        scheduler = ReminderScheduler(gate.wait, interval=timedelta(hours=1))

        scheduler.start()
        first = scheduler._thread
        scheduler.start()
        self.assertIs(scheduler._thread, first)

        gate.set()
        scheduler.stop(timeout=5)

    def test_stop_lets_running_scan_finish(self):
        started, release = threading.Event(), threading.Event()
        finished = []

        def slow_scan():
            started.set()
            release.wait(5)
            finished.append(True)

        scheduler = ReminderScheduler(slow_scan, interval=timedelta(hours=1))
        scheduler.start()
        self.assertTrue(started.wait(5))

        stopper = threading.Thread(target=scheduler.stop, kwargs={"timeout": 5})
        stopper.start()
        release.set()
        stopper.join(5)

        self.assertEqual(finished, [True])
        self.assertEqual(scheduler.runs, 1)
        self.assertFalse(scheduler.is_running)

    def test_can_restart_after_stop(self):
        scheduler = ReminderScheduler(lambda: None, interval=timedelta(hours=1))
        scheduler.start()
        scheduler.wait_for_runs(1, timeout=5)
        scheduler.stop(timeout=5)

        scheduler.start()
        try:
            self.assertTrue(scheduler.wait_for_runs(2, timeout=5))
        finally:
            scheduler.stop(timeout=5)
