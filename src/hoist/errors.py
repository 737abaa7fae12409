"""Error types raised by hoist operations."""

from __future__ import annotations


class HoistError(Exception):
    """Base class for all hoist errors."""


class ConfigurationError(HoistError):
    """A prerequisite is missing or the home directory is unusable."""


class LoadError(HoistError):
    """A chart could not be read from disk."""


class FetchError(HoistError):
    """A chart could not be copied from the repository cache."""


class SerializationError(HoistError):
    """A resource could not be encoded for kubectl."""


class SyncError(HoistError):
    """A git clone or update failed."""


class ApplyError(HoistError):
    """kubectl exited non-zero or could not be started."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode: int | None = returncode


class DeploymentError(HoistError):
    """A deployment stopped part way through.

    Wraps the first SerializationError or ApplyError and records the
    resources that were already created before it.
    """

    def __init__(self, failed: str, cause: HoistError, applied: list[str]):
        super().__init__(f"{failed}: {cause}")
        self.failed: str = failed
        self.cause: HoistError = cause
        self.applied: list[str] = applied
