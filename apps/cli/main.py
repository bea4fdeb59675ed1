import argparse
import logging
import signal
import sys
from typing import List, Optional

from diskled.core.errors import ConfigurationError
from diskled.core.leds.sysfs_led import SysfsLed
from diskled.core.logging_ import setup_logging
from diskled.core.monitor.activity_monitor import ActivityMonitor
from diskled.core.monitor.extractor import DiskstatsSource
from diskled.core.monitor.preflight import available_disks, available_leds, verify_targets
from diskled.shared.store import ConfigStore

log = logging.getLogger(__name__)

MISSING_TARGETS = (
    "\nERROR:\nYou must specify both the disk to monitor and the path to the LED to control\n"
    "Browse /sys/class/leds for available LEDs to control.\n\n"
    "Note that this program must be run with elevated privileges to change LED state!\n"
)

EPILOG = """examples:
  %(prog)s -d sda -l led0
  %(prog)s -d nvme0n1 -l input0::capslock -v
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="disk-led-monitor",
        description="Blink an LED whenever a disk shows activity in /proc/diskstats.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("-d", "--disk", help="disk to monitor (e.g., sda, nvme0n1)")
    ap.add_argument("-l", "--led", help="LED to control (e.g., led0, input0::capslock)")
    ap.add_argument("-v", "--verbose", action="store_true", default=None, help="enable verbose/debug output")
    ap.add_argument("-c", "--config", help="JSON config file (default: app data dir)")
    ap.add_argument("--interval-ms", type=int, dest="poll_interval_ms", help="poll interval in milliseconds")
    ap.add_argument("--pulse-ms", type=int, dest="pulse_ms", help="LED on-time per blink in milliseconds")
    ap.add_argument("--list", action="store_true", help="list available disks and LEDs, then exit")
    return ap


def _print_available(leds_root: str) -> None:
    disks = available_disks()
    leds = available_leds(leds_root)
    print("Disks: " + (", ".join(disks) if disks else "(none found)"))
    print("LEDs:  " + (", ".join(leds) if leds else "(none found)"))


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        app_cfg = ConfigStore(args.config).load().with_overrides(
            disk=args.disk,
            led=args.led,
            verbose=args.verbose,
            poll_interval_ms=args.poll_interval_ms,
            pulse_ms=args.pulse_ms,
        )
    except (ConfigurationError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.list:
        _print_available(app_cfg.leds_root)
        return 0

    if not app_cfg.disk or not app_cfg.led:
        print(MISSING_TARGETS, file=sys.stderr)
        ap.print_usage(sys.stderr)
        return 1

    cfg = app_cfg.to_monitor_config()
    setup_logging(verbose=cfg.verbose, log_to_file=app_cfg.log_to_file)

    try:
        verify_targets(cfg)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    source = DiskstatsSource(cfg.diskstats_path, cfg.disk)
    led = SysfsLed(cfg.led, cfg.leds_root, on_value=cfg.on_brightness, off_value=cfg.off_brightness)
    monitor = ActivityMonitor(cfg, source, led)

    # Handlers only flip the stop flag; the loop notices it at the next tick.
    def signal_handler(sig, frame):
        monitor.request_stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    log.debug("Disk LED Monitor starting. Press Ctrl+C to stop")
    monitor.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
