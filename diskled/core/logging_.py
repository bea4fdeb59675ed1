from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from diskled.shared.paths import log_path, ensure_app_dirs


def setup_logging(verbose: bool = False, log_to_file: bool = True) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    if root.handlers:
        return

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

    # Steady-state problems are logged at INFO, so they only reach the
    # console in verbose mode.
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.WARNING)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if not log_to_file:
        return

    try:
        ensure_app_dirs()
        fh = RotatingFileHandler(str(log_path()), maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    except OSError as e:
        logging.getLogger(__name__).warning("File logging disabled: %s", e)
        return
    fh.setLevel(logging.INFO)
    fh.setFormatter(fmt)
    root.addHandler(fh)
