from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Literal

MonitorStatus = Literal["INITIALIZING", "RUNNING", "SHUTTING_DOWN", "TERMINATED"]

# Fingerprint of a record line; 0 means the source was unreadable this tick.
Fingerprint = int
UNREADABLE: Fingerprint = 0


@dataclass(frozen=True)
class MonitorConfig:
    disk: str
    led: str
    verbose: bool = False
    poll_interval_ms: int = 100
    pulse_ms: int = 50
    diskstats_path: str = "/proc/diskstats"
    leds_root: str = "/sys/class/leds"
    on_brightness: int = 1
    off_brightness: int = 0


@dataclass
class LoopState:
    """
    Mutable state owned by the monitor loop.
    stop_evt is the only field touched outside the loop (by signal handlers).
    """
    status: MonitorStatus = "INITIALIZING"
    last_fingerprint: Fingerprint = UNREADABLE
    activity_count: int = 0
    ticks: int = 0
    read_failures: int = 0
    led_failures: int = 0
    stop_evt: threading.Event = field(default_factory=threading.Event)

    @property
    def running(self) -> bool:
        return not self.stop_evt.is_set()
