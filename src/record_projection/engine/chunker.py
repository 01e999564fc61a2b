"""Size-driven chunk planning for parallel projection."""

from __future__ import annotations

from bisect import bisect_left

from record_projection.config import ProjectionConfig
from record_projection.types import ChunkRange


class ChunkPlanner:
    """Splits a payload of `n` records into contiguous ordered ranges.

    The fan-out degree grows with the payload size. With the default
    thresholds `(100, 1000, 10000)`:

    - `n <= 100`: 1 chunk
    - `n <= 1000`: 2 chunks
    - `n <= 10000`: 3 chunks
    - otherwise: 4 chunks

    Every chunk but the last holds exactly `n // degree` records. The last
    chunk absorbs the remainder, so every index in `[0, n)` is covered once.
    """

    def __init__(self, config: ProjectionConfig | None = None) -> None:
        self.config = config or ProjectionConfig()

    def degree(self, payload_size: int) -> int:
        if payload_size <= 1:
            return 1
        return 1 + bisect_left(self.config.degree_thresholds, payload_size)

    def plan(self, payload_size: int) -> list[ChunkRange]:
        if payload_size < 0:
            raise ValueError("payload_size must be non-negative")
        delta = self.degree(payload_size)
        chunk_size = payload_size // delta
        ranges: list[ChunkRange] = []
        for index in range(delta):
            start = index * chunk_size
            stop = payload_size if index == delta - 1 else start + chunk_size
            ranges.append(ChunkRange(index=index, start=start, stop=stop))
        return ranges
