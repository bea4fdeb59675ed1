from __future__ import annotations

import os
from pathlib import Path

APP_NAME = "disk-led-monitor"

def app_data_dir() -> Path:
    override = os.environ.get("DISKLED_HOME")
    if override:
        return Path(override)
    base = os.environ.get("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
    return Path(base) / APP_NAME

def config_path() -> Path:
    return app_data_dir() / "config.json"

def logs_dir() -> Path:
    return app_data_dir() / "logs"

def log_path() -> Path:
    return logs_dir() / "monitor.log"

def ensure_app_dirs() -> None:
    app_data_dir().mkdir(parents=True, exist_ok=True)
    logs_dir().mkdir(parents=True, exist_ok=True)
