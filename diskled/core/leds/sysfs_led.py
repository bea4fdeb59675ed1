"""
LED control through the Linux LED class (/sys/class/leds/<name>/brightness).

Every state change is an independent open/write/close of the brightness
file. Write failures surface as ActuatorWriteFailure; the monitor decides
whether they matter.
"""

from __future__ import annotations

import os
import time
from typing import Protocol

from ..errors import ActuatorWriteFailure


class Actuator(Protocol):
    def set_brightness(self, value: int) -> None:
        ...

    def pulse(self, hold_s: float) -> None:
        ...


class SysfsLed:
    def __init__(
        self,
        name: str,
        leds_root: str = "/sys/class/leds",
        on_value: int = 1,
        off_value: int = 0,
    ) -> None:
        self._name = name
        self._path = os.path.join(leds_root, name, "brightness")
        self._on = on_value
        self._off = off_value

    @property
    def name(self) -> str:
        return self._name

    @property
    def brightness_path(self) -> str:
        return self._path

    def exists(self) -> bool:
        """The control endpoint exists if it can be opened for reading."""
        try:
            with open(self._path, "r", encoding="utf-8"):
                return True
        except OSError:
            return False

    def set_brightness(self, value: int) -> None:
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(f"{value}\n")
        except OSError as e:
            raise ActuatorWriteFailure(f"Failed to write {value} to {self._path}: {e}") from e

    def pulse(self, hold_s: float) -> None:
        """Turn on, hold, turn off. The off write is attempted even if the on write failed."""
        try:
            self.set_brightness(self._on)
            time.sleep(hold_s)
        finally:
            self.set_brightness(self._off)
