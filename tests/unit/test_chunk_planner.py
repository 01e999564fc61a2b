import pytest
from pydantic import ValidationError

from record_projection.config import ProjectionConfig
from record_projection.engine.chunker import ChunkPlanner


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, 1),
        (1, 1),
        (100, 1),
        (101, 2),
        (1000, 2),
        (1001, 3),
        (10000, 3),
        (10001, 4),
        (250000, 4),
    ],
)
def test_degree_follows_size_buckets(size: int, expected: int) -> None:
    assert ChunkPlanner().degree(size) == expected


@pytest.mark.parametrize("size", [0, 1, 7, 100, 101, 999, 1001, 10000, 10001, 40003])
def test_ranges_cover_payload_once_in_order(size: int) -> None:
    ranges = ChunkPlanner().plan(size)

    assert [rng.index for rng in ranges] == list(range(len(ranges)))
    assert ranges[0].start == 0
    assert ranges[-1].stop == size
    for previous, current in zip(ranges, ranges[1:]):
        assert previous.stop == current.start
    if size:
        assert all(len(rng) > 0 for rng in ranges)


def test_last_range_absorbs_remainder() -> None:
    ranges = ChunkPlanner().plan(1001)

    assert [(rng.start, rng.stop) for rng in ranges] == [(0, 333), (333, 666), (666, 1001)]


def test_empty_payload_plans_single_empty_range() -> None:
    ranges = ChunkPlanner().plan(0)

    assert len(ranges) == 1
    assert len(ranges[0]) == 0


def test_custom_thresholds() -> None:
    planner = ChunkPlanner(ProjectionConfig(degree_thresholds=(2, 4)))

    assert [planner.degree(n) for n in (1, 2, 3, 4, 5)] == [1, 1, 2, 2, 3]
    assert planner.config.max_degree == 3


@pytest.mark.parametrize("thresholds", [(0, 10), (10, 10), (100, 50)])
def test_invalid_thresholds_rejected(thresholds: tuple[int, ...]) -> None:
    with pytest.raises(ValidationError):
        ProjectionConfig(degree_thresholds=thresholds)


def test_negative_size_rejected() -> None:
    with pytest.raises(ValueError):
        ChunkPlanner().plan(-1)
