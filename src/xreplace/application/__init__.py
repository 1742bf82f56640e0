"""Application-layer use-cases and option objects."""

from __future__ import annotations

from xreplace.application.options import ReplaceOptions
from xreplace.application.results import RunResult

__all__ = ["ReplaceOptions", "RunResult"]
