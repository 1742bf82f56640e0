"""Typed option objects shared across replace use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from xreplace.types import SourceMode


@dataclass(frozen=True)
class ReplaceOptions:
    """Immutable configuration for one replace run."""

    source: Path
    dest_dir: Path
    extension: str
    mode: SourceMode
    skip_confirmation: bool = False
    confirm_each: bool = False
    sort_files: bool = False
    dry_run: bool = False
