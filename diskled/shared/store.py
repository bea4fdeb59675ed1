from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from diskled.core.errors import ConfigurationError
from diskled.shared.config import AppConfig
from diskled.shared.paths import config_path


class ConfigStore:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else config_path()

    def load(self) -> AppConfig:
        if not self._path.exists():
            return AppConfig()

        try:
            raw = self._path.read_text(encoding="utf-8")
            data: Any = json.loads(raw)
            return AppConfig.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            raise ConfigurationError(f"Invalid config file {self._path}: {e}") from e

    def save(self, cfg: AppConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(cfg.model_dump_json(indent=2), encoding="utf-8")

    def path(self) -> str:
        return str(self._path)
