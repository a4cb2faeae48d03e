from __future__ import annotations

from typing import Optional


class RepoBrowserError(Exception):
    """Base error for the repository browser server."""


class InvalidUrlError(RepoBrowserError):
    """Raised when a repository URL does not have the github.com/<owner>/<repo> shape."""


class FetchError(RepoBrowserError):
    """Raised when the GitHub contents API call fails (network, auth, not found)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotAFileError(RepoBrowserError):
    """Raised when a file read resolves to a directory or a non-file entry."""


class InvalidPathError(RepoBrowserError):
    """Raised when a repository path contains '.' or '..' segments."""
