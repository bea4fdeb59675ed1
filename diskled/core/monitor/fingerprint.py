"""
Cheap change detection for a single diskstats line.

DJB2 hash (seed 5381, h = h * 33 + byte) truncated to 64 bits. Collisions
only cause a missed blink, never a wrong one.
"""

from __future__ import annotations

from .types import Fingerprint, UNREADABLE

_SEED = 5381
_MASK = 0xFFFFFFFFFFFFFFFF


def fingerprint(line: str) -> Fingerprint:
    h = _SEED
    for b in line.encode("utf-8"):
        h = ((h << 5) + h + b) & _MASK
    return h


def has_changed(previous: Fingerprint, current: Fingerprint) -> bool:
    # An unreadable tick never counts as activity.
    return current != previous and current != UNREADABLE
