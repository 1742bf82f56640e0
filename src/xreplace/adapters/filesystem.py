"""Filesystem adapters: directory scanning and byte-for-byte overwrite."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from xreplace.errors import CopyError, ValidationError

logger = logging.getLogger(__name__)


class ExtensionDirectoryScanner:
    """List regular files in one directory whose suffix matches exactly."""

    def scan(self, directory: Path, extension: str) -> list[Path]:
        """Return matching files in native directory enumeration order.

        Parameters
        ----------
        directory : Path
            Directory to list. Subdirectories are not descended into.
        extension : str
            Suffix including the leading dot, compared case-sensitively.

        Returns
        -------
        list[Path]
            Absolute paths, possibly empty.

        Raises
        ------
        ValidationError
            If ``directory`` does not exist or is not a directory.
        """
        if not directory.is_dir():
            raise ValidationError(f"Directory is invalid: {directory}")

        root = directory.absolute()
        try:
            matches = [
                entry
                for entry in root.iterdir()
                if entry.suffix == extension and entry.is_file()
            ]
        except OSError as exc:
            raise CopyError(f"Failed to read directory: {root}") from exc
        logger.debug("found %d '%s' file(s) in %s", len(matches), extension, root)
        return matches


class StreamFileCopier:
    """Overwrite a destination with the full content of a source file."""

    def __init__(self, *, chunk_size: int = 1 << 20) -> None:
        self.chunk_size = chunk_size

    def copy(self, source: Path, destination: Path) -> None:
        """Truncate ``destination`` and write the bytes of ``source`` into it.

        Copying a file onto itself leaves it unchanged.

        Raises
        ------
        CopyError
            If either file cannot be opened, read or written.
        """
        try:
            src = source.open("rb")
        except OSError as exc:
            raise CopyError(f"Failed to open source file: {source}") from exc

        with src:
            if destination.exists() and source.samefile(destination):
                logger.debug("skipping %s, source and destination are the same file", destination)
                return
            try:
                dst = destination.open("wb")
            except OSError as exc:
                raise CopyError(f"Failed to open destination file: {destination}") from exc
            with dst:
                try:
                    shutil.copyfileobj(src, dst, self.chunk_size)
                except OSError as exc:
                    raise CopyError(
                        f"Failed to copy {source} to {destination}: {exc}"
                    ) from exc
