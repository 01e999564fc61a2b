"""Shared domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

ProjectedRecord = dict[str, Any]


class RecordShape(str, Enum):
    """The two supported record shapes."""

    FIXED = "fixed"
    DYNAMIC = "dynamic"


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A requested field resolved against one record shape."""

    external_name: str
    internal_name: str


@dataclass(frozen=True, slots=True)
class ChunkRange:
    """Half-open index range `[start, stop)` of one parallel chunk."""

    index: int
    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start


@dataclass(slots=True)
class ProjectionTrace:
    """Trace record for one projection call."""

    trace_id: str
    timestamp_utc: str
    page: int
    records_in: int
    records_out: int
    fields_requested: list[str]
    fields_resolved: list[str]
    degree: int
    latency_ms: float
