from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from diskled.core.monitor.types import MonitorConfig


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    disk: Optional[str] = None
    led: Optional[str] = None
    verbose: bool = False
    poll_interval_ms: int = Field(default=100, ge=1)
    pulse_ms: int = Field(default=50, ge=0)
    diskstats_path: str = "/proc/diskstats"
    leds_root: str = "/sys/class/leds"
    on_brightness: int = Field(default=1, ge=1)
    log_to_file: bool = True

    def with_overrides(self, **overrides) -> "AppConfig":
        """Copy with every non-None override applied (command line beats file)."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return AppConfig.model_validate(data)

    def to_monitor_config(self) -> MonitorConfig:
        if not self.disk or not self.led:
            raise ValueError("disk and led must both be set")
        return MonitorConfig(
            disk=self.disk,
            led=self.led,
            verbose=self.verbose,
            poll_interval_ms=self.poll_interval_ms,
            pulse_ms=self.pulse_ms,
            diskstats_path=self.diskstats_path,
            leds_root=self.leds_root,
            on_brightness=self.on_brightness,
        )
