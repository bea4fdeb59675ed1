import pytest

from diskled.core.errors import ActuatorWriteFailure
from diskled.core.leds.sysfs_led import SysfsLed


def test_exists(leds_root):
    assert SysfsLed("led0", str(leds_root)).exists()
    assert not SysfsLed("led1", str(leds_root)).exists()


def test_set_brightness_writes_value(leds_root):
    led = SysfsLed("led0", str(leds_root))
    led.set_brightness(1)
    assert (leds_root / "led0" / "brightness").read_text() == "1\n"


def test_set_brightness_failure(tmp_path):
    led = SysfsLed("ghost", str(tmp_path))
    with pytest.raises(ActuatorWriteFailure):
        led.set_brightness(1)


def test_pulse_ends_off(leds_root):
    led = SysfsLed("led0", str(leds_root), on_value=255)
    writes = []
    original = led.set_brightness

    def record(value):
        writes.append(value)
        original(value)

    led.set_brightness = record
    led.pulse(0)
    assert writes == [255, 0]
    assert (leds_root / "led0" / "brightness").read_text() == "0\n"


def test_pulse_attempts_off_after_failed_on(leds_root):
    led = SysfsLed("led0", str(leds_root))
    writes = []

    def flaky(value):
        writes.append(value)
        if value == 1:
            raise ActuatorWriteFailure("on failed")

    led.set_brightness = flaky
    with pytest.raises(ActuatorWriteFailure, match="on failed"):
        led.pulse(0)
    assert writes == [1, 0]
