"""
Disk activity monitor: blinks an LED whenever a disk's diskstats line changes.

State machine: INITIALIZING -> RUNNING -> SHUTTING_DOWN -> TERMINATED
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace

from ..errors import ActuatorWriteFailure, RecordNotFound, SourceUnavailable
from ..leds.sysfs_led import Actuator
from .extractor import RecordSource
from .fingerprint import fingerprint, has_changed
from .types import Fingerprint, LoopState, MonitorConfig, UNREADABLE

log = logging.getLogger(__name__)


def _now_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


class ActivityMonitor:
    """
    Foreground polling loop. Owns its config and LoopState; the only thing
    shared with the outside is the stop event, set by request_stop().
    """

    def __init__(self, config: MonitorConfig, source: RecordSource, led: Actuator) -> None:
        self._cfg = config
        self._source = source
        self._led = led
        self._state = LoopState()
        self._initialized = False

        # Transition tracking so outages are logged once, not every tick
        self._source_ok = True
        self._led_ok = True

    @property
    def config(self) -> MonitorConfig:
        return self._cfg

    def get_state(self) -> LoopState:
        """Snapshot of the loop state (the stop event is shared, not copied)."""
        return replace(self._state)

    def request_stop(self) -> None:
        # Called from signal handlers: set the flag and nothing else.
        self._state.stop_evt.set()

    def initialize(self) -> Fingerprint:
        """Take the baseline reading. A zero baseline is allowed."""
        self._state.status = "INITIALIZING"
        self._state.last_fingerprint = self._read_fingerprint()
        self._initialized = True
        log.debug("Baseline fingerprint for %s: %d", self._source.describe(), self._state.last_fingerprint)
        return self._state.last_fingerprint

    def tick(self) -> bool:
        """
        One read-compare-signal cycle.

        Returns:
            True if a change was detected on this tick.
        """
        state = self._state
        state.ticks += 1

        current = self._read_fingerprint()
        if not has_changed(state.last_fingerprint, current):
            return False

        state.activity_count += 1
        state.last_fingerprint = current
        log.debug(
            "Disk activity detected on %s! (Count: %d)",
            self._cfg.disk, state.activity_count,
        )
        self._signal()
        return True

    def run(self) -> int:
        """
        Poll until request_stop() is called.

        Returns:
            Total number of activity events detected.
        """
        if not self._initialized:
            self.initialize()

        state = self._state
        state.status = "RUNNING"
        interval_s = self._cfg.poll_interval_ms / 1000.0
        log.info(
            "Monitoring disk %s, controlling LED %s (interval %dms, pulse %dms)",
            self._cfg.disk, self._cfg.led, self._cfg.poll_interval_ms, self._cfg.pulse_ms,
        )

        while state.running:
            self.tick()
            # Returns early only when a stop is requested.
            state.stop_evt.wait(interval_s)

        state.status = "SHUTTING_DOWN"
        log.info(
            "Shutting down at %s. Total disk activities detected: %d",
            _now_iso(), state.activity_count,
        )
        state.status = "TERMINATED"
        return state.activity_count

    def _read_fingerprint(self) -> Fingerprint:
        try:
            line = self._source.read()
        except (SourceUnavailable, RecordNotFound) as e:
            self._state.read_failures += 1
            if self._source_ok:
                log.info("Statistics unavailable: %s", e)
                self._source_ok = False
            else:
                log.debug("Statistics still unavailable: %s", e)
            return UNREADABLE

        if not self._source_ok:
            log.info("Statistics readable again: %s", self._source.describe())
            self._source_ok = True
        return fingerprint(line)

    def _signal(self) -> None:
        try:
            self._led.pulse(self._cfg.pulse_ms / 1000.0)
        except ActuatorWriteFailure as e:
            self._state.led_failures += 1
            if self._led_ok:
                log.info("LED write failed: %s", e)
                self._led_ok = False
            else:
                log.debug("LED write failed again: %s", e)
            return

        if not self._led_ok:
            log.info("LED %s writable again", self._cfg.led)
            self._led_ok = True
