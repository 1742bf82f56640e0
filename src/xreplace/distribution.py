"""Distribution planning: decide which source overwrites which destination."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from xreplace.errors import EmptySetError

NO_SOURCES_MESSAGE = "No source files found with the given extension"
NO_DESTINATIONS_MESSAGE = "No destination files found with the given extension"


@dataclass(frozen=True)
class SourceGroup:
    """One source file and the contiguous run of destinations it overwrites."""

    source: Path
    destinations: tuple[Path, ...]


@dataclass(frozen=True)
class DistributionPlan:
    """Ordered assignment of every destination to exactly one source.

    Groups keep the source enumeration order; destinations inside a group
    keep the destination enumeration order. A group may be empty when there
    are more sources than destinations.
    """

    groups: tuple[SourceGroup, ...]

    def pairs(self) -> Iterator[tuple[Path, Path]]:
        """Yield ``(source, destination)`` pairs in execution order."""
        for group in self.groups:
            for destination in group.destinations:
                yield group.source, destination

    @property
    def sizes(self) -> tuple[int, ...]:
        """Return the number of destinations assigned to each source."""
        return tuple(len(group.destinations) for group in self.groups)

    def __len__(self) -> int:
        return sum(self.sizes)


def partition_sizes(n_sources: int, n_destinations: int) -> list[int]:
    """Split ``n_destinations`` into ``n_sources`` near-equal group sizes.

    The first ``n_destinations % n_sources`` groups receive one extra item.

    Parameters
    ----------
    n_sources : int
        Number of buckets, must be positive.
    n_destinations : int
        Number of items to distribute, must not be negative.

    Returns
    -------
    list[int]
        Group sizes in source order, summing to ``n_destinations``.

    Examples
    --------
    >>> partition_sizes(3, 200)
    [67, 67, 66]
    """
    if n_sources <= 0:
        raise ValueError("n_sources must be positive")
    if n_destinations < 0:
        raise ValueError("n_destinations must not be negative")
    base, remainder = divmod(n_destinations, n_sources)
    return [base + (1 if index < remainder else 0) for index in range(n_sources)]


def distribute_single(source: Path, destinations: Sequence[Path]) -> DistributionPlan:
    """Assign every destination to the same ``source`` file.

    Raises
    ------
    EmptySetError
        If ``destinations`` is empty.
    """
    if not destinations:
        raise EmptySetError(NO_DESTINATIONS_MESSAGE)
    return DistributionPlan(groups=(SourceGroup(source, tuple(destinations)),))


def distribute_multi(
    sources: Sequence[Path], destinations: Sequence[Path]
) -> DistributionPlan:
    """Partition ``destinations`` into contiguous runs, one per source.

    Parameters
    ----------
    sources : Sequence[Path]
        Source files in enumeration order.
    destinations : Sequence[Path]
        Destination files in enumeration order.

    Returns
    -------
    DistributionPlan
        Plan whose group sizes differ by at most one, earlier sources taking
        the larger size when the split is uneven.

    Raises
    ------
    EmptySetError
        If either list is empty. Sources are checked first.
    """
    if not sources:
        raise EmptySetError(NO_SOURCES_MESSAGE)
    if not destinations:
        raise EmptySetError(NO_DESTINATIONS_MESSAGE)

    groups: list[SourceGroup] = []
    start = 0
    for source, size in zip(
        sources, partition_sizes(len(sources), len(destinations)), strict=True
    ):
        groups.append(SourceGroup(source, tuple(destinations[start : start + size])))
        start += size
    return DistributionPlan(groups=tuple(groups))
