"""Timing and per-call trace accounting for projections."""

from __future__ import annotations

import time
import uuid
from datetime import datetime, timezone

from record_projection.types import ProjectionTrace


class TraceStore:
    """In-memory trace storage for projection diagnostics."""

    def __init__(self) -> None:
        self._records: dict[str, ProjectionTrace] = {}

    def create_record(
        self,
        *,
        page: int,
        records_in: int,
        records_out: int,
        fields_requested: list[str],
        fields_resolved: list[str],
        degree: int,
        latency_ms: float,
    ) -> ProjectionTrace:
        trace_id = str(uuid.uuid4())
        record = ProjectionTrace(
            trace_id=trace_id,
            timestamp_utc=datetime.now(timezone.utc).isoformat(),
            page=page,
            records_in=records_in,
            records_out=records_out,
            fields_requested=fields_requested,
            fields_resolved=fields_resolved,
            degree=degree,
            latency_ms=latency_ms,
        )
        self._records[trace_id] = record
        return record

    def get(self, trace_id: str) -> ProjectionTrace:
        record = self._records.get(trace_id)
        if record is None:
            raise KeyError(f"Trace not found: {trace_id}")
        return record

    def list_recent(self, limit: int = 20) -> list[ProjectionTrace]:
        return list(self._records.values())[-limit:]

    def summary(self) -> dict[str, float | int]:
        """Aggregate projection metrics across recorded calls."""
        records = list(self._records.values())
        total = len(records)
        if total == 0:
            return {
                "total_calls": 0,
                "avg_latency_ms": 0.0,
                "p95_latency_ms": 0.0,
                "total_records_projected": 0,
            }

        latencies = sorted(record.latency_ms for record in records)
        p95_index = max(0, int((len(latencies) * 0.95) - 1))
        return {
            "total_calls": total,
            "avg_latency_ms": sum(latencies) / total,
            "p95_latency_ms": latencies[p95_index],
            "total_records_projected": sum(record.records_out for record in records),
        }


class Timer:
    """Wall-clock milliseconds spent inside the block.

    The engine times each projection call with it; the CLI also times file
    parsing so both figures can be printed side by side.
    """

    def __init__(self) -> None:
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed_ms / 1000.0
