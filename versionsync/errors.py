# versionsync/errors.py - SINGLE SOURCE OF TRUTH for error types
"""
Every fatal condition raised by versionsync derives from VersionSyncError.

The CLI prints str(error) after an "Error:" prefix and exits 1, so messages
are written for the user, not for developers.
"""

from pathlib import Path


# =============================================================================
# Exceptions
# =============================================================================


class VersionSyncError(Exception):
    """Base exception for version synchronization errors."""

    pass


class UsageError(VersionSyncError):
    """Raised when the command line does not name exactly one known action."""

    pass


class MissingVersionError(VersionSyncError):
    """Raised when a manifest has no recognizable version line."""

    def __init__(self, path: Path, detail: str = ""):
        self.path = Path(path)
        message = f"unable to read version from {self.path}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class FormatError(VersionSyncError):
    """Raised when a version value is not a single-digit X.Y.Z triplet."""

    def __init__(self, value: str, manifest_name: str, path: Path = None):
        self.value = value
        self.manifest_name = manifest_name
        self.path = Path(path) if path is not None else None
        message = f"{manifest_name} version '{value}' must be one-digit triplet (X.Y.Z with 0..9)."
        if self.path is not None:
            message = f"{message} [{self.path}]"
        super().__init__(message)


class VersionOverflowError(VersionSyncError, OverflowError):
    """Raised when the targeted component is already at its maximum."""

    def __init__(self, action: str, ceiling: int):
        self.action = action
        self.ceiling = ceiling
        super().__init__(f"cannot bump {action} beyond {ceiling}.")


class WriteFailure(VersionSyncError):
    """Raised when a manifest cannot be staged. The original file is untouched."""

    def __init__(self, path: Path, detail: str):
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"failed to update {self.path}: {detail}")
