"""Error taxonomy for the sync tool."""

from typing import Optional


class SyncError(Exception):
    """Base class for all errors raised by the sync tool."""


class ConfigurationError(SyncError):
    """Required scope or credential input is missing or invalid."""


class TransportError(SyncError):
    """The GitHub API could not be reached (connection failure, timeout)."""


class RemoteError(SyncError):
    """The GitHub API answered with an unexpected status code."""

    def __init__(self, status: int, body: str = "", message: Optional[str] = None):
        self.status = status
        self.body = body
        super().__init__(message or f"GitHub API returned status {status}: {body}")


class LocalIOError(SyncError):
    """Reading or writing a local CSV file failed."""


class BackupError(SyncError):
    """A backup snapshot could not be written.

    The underlying fetch or write failure is available as ``__cause__``.
    """
