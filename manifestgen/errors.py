"""Error taxonomy for manifest file operations."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class ManifestErrorKind(str, Enum):
    """Category of filesystem failure reported by the writer."""

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    IO = "io"


class ManifestError(RuntimeError):
    """Raised when a manifest operation fails.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    kind: ManifestErrorKind = ManifestErrorKind.IO

    def __init__(self, path: Path, operation: str, reason: str) -> None:
        self.path = path
        self.operation = operation
        self.reason = reason
        super().__init__(f"Cannot {operation} manifest at {path}: {reason}")


class ManifestExistsError(ManifestError):
    """Raised when creating a manifest over an existing file."""

    kind = ManifestErrorKind.ALREADY_EXISTS


class ManifestNotFoundError(ManifestError):
    """Raised when opening or removing a manifest that does not exist."""

    kind = ManifestErrorKind.NOT_FOUND


class ManifestPermissionError(ManifestError):
    """Raised when the filesystem denies access to the manifest."""

    kind = ManifestErrorKind.PERMISSION_DENIED


def wrap_os_error(exc: OSError, path: Path, operation: str) -> ManifestError:
    """Map an ``OSError`` onto the manifest error taxonomy."""
    reason = exc.strerror or str(exc)
    if isinstance(exc, FileExistsError):
        return ManifestExistsError(path, operation, reason)
    if isinstance(exc, FileNotFoundError):
        return ManifestNotFoundError(path, operation, reason)
    if isinstance(exc, PermissionError):
        return ManifestPermissionError(path, operation, reason)
    return ManifestError(path, operation, reason)
