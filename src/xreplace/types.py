"""Shared type aliases for xreplace modules."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Literal

type SourceMode = Literal["single", "multi"]
type FileList = Sequence[Path]
