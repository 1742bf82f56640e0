"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from xreplace.distribution import DistributionPlan
from xreplace.types import SourceMode


@dataclass(frozen=True)
class RunResult:
    """Structured replace outcome."""

    overwritten: int
    mode: SourceMode
    group_sizes: tuple[int, ...] = ()
    dry_run: bool = False
    plan: DistributionPlan | None = None
