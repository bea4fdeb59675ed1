from collections import namedtuple

import pytest

from diskled.core.errors import ConfigurationError
from diskled.core.monitor import preflight
from diskled.core.monitor.types import MonitorConfig

_IO = namedtuple("_IO", "read_count write_count")


def _cfg(diskstats, leds_root, disk="sda", led="led0"):
    return MonitorConfig(disk=disk, led=led, diskstats_path=str(diskstats), leds_root=str(leds_root))


def test_verify_targets_ok(diskstats, leds_root):
    preflight.verify_targets(_cfg(diskstats, leds_root))


def test_verify_targets_missing_led(diskstats, leds_root):
    with pytest.raises(ConfigurationError, match="LED 'led9'"):
        preflight.verify_targets(_cfg(diskstats, leds_root, led="led9"))


def test_verify_targets_missing_disk(diskstats, leds_root):
    with pytest.raises(ConfigurationError, match="Disk 'vdz'"):
        preflight.verify_targets(_cfg(diskstats, leds_root, disk="vdz"))


def test_verify_targets_missing_source(tmp_path, leds_root):
    with pytest.raises(ConfigurationError, match="Disk 'sda'"):
        preflight.verify_targets(_cfg(tmp_path / "missing", leds_root))


def test_available_leds(leds_root, tmp_path):
    (leds_root / "input0::capslock").mkdir()
    assert preflight.available_leds(str(leds_root)) == ["input0::capslock", "led0"]
    assert preflight.available_leds(str(tmp_path / "nope")) == []


def test_available_disks_uses_psutil(monkeypatch):
    counters = {"sdb": _IO(1, 2), "sda": _IO(3, 4)}
    monkeypatch.setattr(preflight.psutil, "disk_io_counters", lambda perdisk: counters)
    assert preflight.available_disks() == ["sda", "sdb"]


def test_available_disks_when_counters_unavailable(monkeypatch):
    monkeypatch.setattr(preflight.psutil, "disk_io_counters", lambda perdisk: None)
    assert preflight.available_disks() == []
