"""Order-preserving join of per-chunk outputs."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

from record_projection.types import ProjectedRecord


def aggregate(chunks: Sequence[Sequence[ProjectedRecord]]) -> tuple[ProjectedRecord, ...]:
    """Concatenate chunk outputs in ascending chunk index order."""
    return tuple(chain.from_iterable(chunks))
