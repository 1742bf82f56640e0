"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class DirectoryScanner(Protocol):
    """List regular files directly inside a directory."""

    def scan(self, directory: Path, extension: str) -> list[Path]:
        """Return absolute paths whose suffix equals ``extension``."""


class FileCopier(Protocol):
    """Replace one file's content with another's."""

    def copy(self, source: Path, destination: Path) -> None:
        """Overwrite ``destination`` with the bytes of ``source``."""


class ConfirmationGate(Protocol):
    """Ask the user a yes/no question."""

    def confirm(self, message: str) -> bool:
        """Show ``message`` and return ``True`` when the user confirms."""
