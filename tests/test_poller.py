"""Tests for the fixed-interval poller."""

import logging
import threading
import time

from conftest import ImmediateExecutor, wait_for

from sheet_viewer.data.poller import Poller


class ConcurrencyProbe:
    """Fetch stand-in that records how many calls overlap."""

    def __init__(self, hold: threading.Event = None, delay: float = 0.0):
        self.hold = hold
        self.delay = delay
        self.calls = 0
        self.active = 0
        self.max_active = 0
        self.started = threading.Event()
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            self.calls += 1
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        self.started.set()
        if self.hold is not None:
            self.hold.wait(2)
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.active -= 1


class TestTick:
    def test_tick_while_in_flight_is_skipped(self):
        release = threading.Event()
        probe = ConcurrencyProbe(hold=release)
        poller = Poller(probe, interval_seconds=3600)

        assert poller.tick() is True
        assert probe.started.wait(2)
        assert poller.in_flight

        assert poller.tick() is False
        assert poller.tick() is False

        release.set()
        assert wait_for(lambda: not poller.in_flight)
        assert poller.tick() is True
        assert wait_for(lambda: probe.calls == 2 and not poller.in_flight)

        poller.stop()
        assert probe.max_active == 1

    def test_tick_after_stop_is_noop(self):
        probe = ConcurrencyProbe()
        poller = Poller(probe, executor=ImmediateExecutor())

        poller.stop()

        assert poller.tick() is False
        assert probe.calls == 0

    def test_unexpected_error_stops_polling(self, caplog):
        def broken():
            raise RuntimeError("boom")

        poller = Poller(broken, executor=ImmediateExecutor())

        with caplog.at_level(logging.ERROR):
            assert poller.tick() is True

        assert poller.stopped
        assert not poller.in_flight
        assert "Unexpected error during fetch" in caplog.text


class TestTimer:
    def test_first_tick_is_immediate(self):
        probe = ConcurrencyProbe()
        poller = Poller(probe, interval_seconds=3600, executor=ImmediateExecutor())

        poller.start()

        assert wait_for(lambda: probe.calls == 1)
        poller.stop()

    def test_repeats_every_interval(self):
        probe = ConcurrencyProbe()
        poller = Poller(probe, interval_seconds=0.01, executor=ImmediateExecutor())

        poller.start()

        assert wait_for(lambda: probe.calls >= 3)
        poller.stop()

    def test_slow_fetch_never_overlaps(self):
        probe = ConcurrencyProbe(delay=0.05)
        poller = Poller(probe, interval_seconds=0.01)

        poller.start()
        time.sleep(0.3)
        poller.stop()

        assert probe.calls >= 2
        assert probe.max_active == 1

    def test_stop_from_inside_fetch_is_permanent(self):
        calls = []
        poller = None

        def fetch_then_stop():
            calls.append(1)
            poller.stop()

        poller = Poller(fetch_then_stop, interval_seconds=0.01)
        poller.start()
        assert wait_for(lambda: poller.stopped)
        time.sleep(0.05)

        assert len(calls) == 1

    def test_start_after_stop_is_noop(self):
        probe = ConcurrencyProbe()
        poller = Poller(probe, interval_seconds=0.01, executor=ImmediateExecutor())

        poller.stop()
        poller.start()
        time.sleep(0.05)

        assert probe.calls == 0
