"""Batch file content replacer: overwrite files by extension from one or many sources."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xreplace.application.results import RunResult

__version__ = "0.6.10"


def replace_from_file(
    source_file: str | Path, dest_dir: str | Path, extension: str, **kwargs: bool
) -> RunResult:
    """Replicate one source file into every matching destination."""
    from xreplace.api import replace_from_file as _impl

    return _impl(source_file, dest_dir, extension, **kwargs)


def replace_from_dir(
    source_dir: str | Path, dest_dir: str | Path, extension: str, **kwargs: bool
) -> RunResult:
    """Distribute the matching files of a source directory over destinations."""
    from xreplace.api import replace_from_dir as _impl

    return _impl(source_dir, dest_dir, extension, **kwargs)


__all__ = ["__version__", "replace_from_dir", "replace_from_file"]
