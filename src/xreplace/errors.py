"""Error taxonomy for xreplace runs."""

from __future__ import annotations


class ReplaceError(Exception):
    """Base class for user-facing xreplace failures.

    Parameters
    ----------
    message : str
        Human-readable diagnostic printed after ``ERROR:``.
    overwritten : int | None, default=None
        Number of files already overwritten when the error surfaced.
        ``None`` means the run failed before any copy was attempted.
    """

    exit_code: int = 1

    def __init__(self, message: str, *, overwritten: int | None = None) -> None:
        super().__init__(message)
        self.overwritten = overwritten


class ArgumentError(ReplaceError):
    """Raised for malformed or missing command-line input."""


class ValidationError(ReplaceError):
    """Raised when paths, mode or extension fail precondition checks."""


class EmptySetError(ReplaceError):
    """Raised when a scan found no files matching the extension."""


class CopyError(ReplaceError):
    """Raised when a source or destination file cannot be opened or written."""


class DeclinedError(ReplaceError):
    """Raised when the user declines a confirmation prompt."""
