"""
Startup checks for the disk and LED targets, plus discovery helpers used
in error messages and by --list.
"""

from __future__ import annotations

import logging
import os
from typing import List

import psutil

from ..errors import ConfigurationError, RecordNotFound, SourceUnavailable
from ..leds.sysfs_led import SysfsLed
from .extractor import read_record
from .types import MonitorConfig

log = logging.getLogger(__name__)


def check_led_exists(led: str, leds_root: str) -> bool:
    return SysfsLed(led, leds_root).exists()


def check_disk_exists(disk: str, diskstats_path: str) -> bool:
    try:
        read_record(diskstats_path, disk)
        return True
    except (SourceUnavailable, RecordNotFound):
        return False


def check_source_readable(diskstats_path: str) -> bool:
    return os.access(diskstats_path, os.R_OK)


def verify_targets(config: MonitorConfig) -> None:
    """Raise ConfigurationError for the first target that fails its check."""
    if not check_led_exists(config.led, config.leds_root):
        raise ConfigurationError(f"LED '{config.led}' not found in {config.leds_root}/")
    if not check_disk_exists(config.disk, config.diskstats_path):
        raise ConfigurationError(f"Disk '{config.disk}' not found in {config.diskstats_path}")
    if not check_source_readable(config.diskstats_path):
        raise ConfigurationError(f"Cannot read {config.diskstats_path}")
    log.debug("Targets verified: disk=%s led=%s", config.disk, config.led)


def available_leds(leds_root: str) -> List[str]:
    try:
        return sorted(os.listdir(leds_root))
    except OSError:
        return []


def available_disks() -> List[str]:
    """Disk names known to the kernel, via psutil's per-disk I/O counters."""
    try:
        counters = psutil.disk_io_counters(perdisk=True)
    except (OSError, RuntimeError) as e:
        log.debug("psutil could not read disk counters: %s", e)
        return []
    return sorted(counters or {})
