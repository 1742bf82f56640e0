"""Unit tests for distribution planning."""

from __future__ import annotations

from pathlib import Path

import pytest

from xreplace.distribution import (
    distribute_multi,
    distribute_single,
    partition_sizes,
)
from xreplace.errors import EmptySetError


def _paths(prefix: str, count: int) -> list[Path]:
    return [Path(f"/data/{prefix}{index:03d}.obj") for index in range(count)]


def test_partition_sizes_matches_documented_split() -> None:
    """200 targets over 3 sources split into 67, 67 and 66."""
    assert partition_sizes(3, 200) == [67, 67, 66]


@pytest.mark.parametrize("n_sources", range(1, 9))
@pytest.mark.parametrize("n_destinations", [1, 2, 5, 7, 16, 31])
def test_partition_sizes_are_even_and_front_loaded(
    n_sources: int, n_destinations: int
) -> None:
    """Sizes sum to the total, differ by at most one, larger ones first."""
    sizes = partition_sizes(n_sources, n_destinations)
    base, remainder = divmod(n_destinations, n_sources)

    assert len(sizes) == n_sources
    assert sum(sizes) == n_destinations
    assert set(sizes) <= {base, base + 1}
    assert sizes[:remainder] == [base + 1] * remainder
    assert sizes[remainder:] == [base] * (n_sources - remainder)


def test_partition_sizes_rejects_invalid_counts() -> None:
    """Zero buckets and negative totals are programming errors."""
    with pytest.raises(ValueError, match="n_sources"):
        partition_sizes(0, 3)
    with pytest.raises(ValueError, match="n_destinations"):
        partition_sizes(2, -1)


def test_distribute_single_maps_every_destination_to_source() -> None:
    """Single mode uses one source for all destinations, order preserved."""
    source = Path("/src/cube.obj")
    destinations = _paths("t", 4)

    plan = distribute_single(source, destinations)

    assert list(plan.pairs()) == [(source, dest) for dest in destinations]
    assert plan.sizes == (4,)
    assert len(plan) == 4


def test_distribute_single_rejects_empty_destinations() -> None:
    """No destination files is an error before any copy."""
    with pytest.raises(EmptySetError, match="No destination files found"):
        distribute_single(Path("/src/cube.obj"), [])


def test_distribute_multi_partitions_contiguously_in_order() -> None:
    """Each source takes the next contiguous run of destinations."""
    sources = _paths("s", 3)
    destinations = _paths("t", 200)

    plan = distribute_multi(sources, destinations)

    assert plan.sizes == (67, 67, 66)
    assert [group.source for group in plan.groups] == sources
    assert plan.groups[0].destinations == tuple(destinations[:67])
    assert plan.groups[1].destinations == tuple(destinations[67:134])
    assert plan.groups[2].destinations == tuple(destinations[134:])
    assert [dest for _, dest in plan.pairs()] == destinations


def test_distribute_multi_with_more_sources_than_destinations() -> None:
    """Surplus sources receive nothing; every destination is still covered."""
    sources = _paths("s", 4)
    destinations = _paths("t", 2)

    plan = distribute_multi(sources, destinations)

    assert plan.sizes == (1, 1, 0, 0)
    assert len(plan) == 2
    assert list(plan.pairs()) == [
        (sources[0], destinations[0]),
        (sources[1], destinations[1]),
    ]


def test_distribute_multi_reports_missing_sources_before_destinations() -> None:
    """Empty source and destination lists have distinct messages."""
    with pytest.raises(EmptySetError, match="No source files found"):
        distribute_multi([], [])
    with pytest.raises(EmptySetError, match="No destination files found"):
        distribute_multi(_paths("s", 1), [])
