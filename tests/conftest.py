import pytest

SDA_LINE = "   8       0 sda 4136 1350 290352 1858 2167 2549 48576 3141 0 3452 4999 0 0 0 0\n"
SDA1_LINE = "   8       1 sda1 3900 1200 280000 1700 2000 2400 47000 3000 0 3300 4700 0 0 0 0\n"
NVME_LINE = " 259       0 nvme0n1 91234 12 5123456 40211 80321 5521 9912345 120334 0 88123 170012 0 0 0 0\n"


@pytest.fixture
def diskstats(tmp_path):
    path = tmp_path / "diskstats"
    path.write_text(SDA_LINE + SDA1_LINE + NVME_LINE, encoding="utf-8")
    return path


@pytest.fixture
def leds_root(tmp_path):
    root = tmp_path / "leds"
    led = root / "led0"
    led.mkdir(parents=True)
    (led / "brightness").write_text("0\n", encoding="utf-8")
    return root
