"""
Record extraction from /proc/diskstats.

The device key is matched as a plain substring anywhere in the line, so
"sda" also matches "sda1". The first matching line wins; callers must pass
an unambiguous key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ..errors import RecordNotFound, SourceUnavailable


def find_record(lines: Iterable[str], key: str) -> str:
    """Return the first line containing key, or raise RecordNotFound."""
    for line in lines:
        if key in line:
            return line
    raise RecordNotFound(f"'{key}' not found")


def read_record(path: str, key: str) -> str:
    """
    Open the statistics file, scan it top to bottom and close it again.
    
    Raises:
        SourceUnavailable: the file could not be opened or read
        RecordNotFound: no line contains key
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return find_record(f, key)
    except OSError as e:
        raise SourceUnavailable(f"Cannot read {path}: {e}") from e


class RecordSource(ABC):
    """Interface for reading the current record of one device."""

    @abstractmethod
    def read(self) -> str:
        """Return the current record line. Raises SourceUnavailable or RecordNotFound."""
        ...

    @abstractmethod
    def describe(self) -> str:
        ...


class DiskstatsSource(RecordSource):
    """Reads one disk's line from a diskstats-format file on every call."""

    def __init__(self, path: str, key: str) -> None:
        self._path = path
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> str:
        try:
            return read_record(self._path, self._key)
        except RecordNotFound:
            raise RecordNotFound(f"Disk '{self._key}' not found in {self._path}") from None

    def describe(self) -> str:
        return f"{self._key} in {self._path}"
