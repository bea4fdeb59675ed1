from __future__ import annotations


class DiskLedError(Exception):
    """Base class for disk LED monitor errors."""


class SourceUnavailable(DiskLedError):
    """The statistics source could not be opened or read."""


class RecordNotFound(DiskLedError):
    """The device key is not present in the statistics source."""


class ActuatorWriteFailure(DiskLedError):
    """Writing to the LED control endpoint failed."""


class ConfigurationError(DiskLedError):
    """Startup validation failed. Fatal."""
