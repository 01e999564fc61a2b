"""Projection engine: resolve -> plan -> parallel extract -> aggregate."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from record_projection.config import ProjectionConfig
from record_projection.engine.aggregator import aggregate
from record_projection.engine.chunker import ChunkPlanner
from record_projection.engine.worker import project_chunk
from record_projection.obs.tracing import Timer, TraceStore
from record_projection.result import PaginatedResult
from record_projection.schema.registry import SchemaRegistry, default_registry
from record_projection.schema.shapes import detect_shape
from record_projection.types import ProjectedRecord

logger = logging.getLogger(__name__)


class ProjectionEngine:
    """Narrows every record of a paginated result to a requested field set.

    Degradation rules:
    1. No fields requested, or an empty payload, yields an empty payload.
    2. A first record of unsupported shape yields an empty payload.
    3. Fields that do not resolve are dropped. If none resolve, every record
       still produces an (empty) projected record, so the payload length is
       kept. Only rule 1 or 2 shortens a non-empty payload.

    Each call fans out over its own short-lived thread pool, one task per
    planned chunk, and joins the chunk outputs by chunk index.
    """

    def __init__(
        self,
        config: ProjectionConfig | None = None,
        *,
        registry: SchemaRegistry | None = None,
        trace_store: TraceStore | None = None,
    ) -> None:
        self.config = config or ProjectionConfig()
        self.registry = registry or default_registry
        self.planner = ChunkPlanner(self.config)
        self.trace_store = trace_store

    def project(
        self, result: PaginatedResult[Any], fields: Sequence[str]
    ) -> PaginatedResult[ProjectedRecord]:
        payload = result.payload
        requested = list(fields)

        with Timer() as timer:
            projected, resolved, degree = self._project_payload(payload, requested)

        if self.trace_store is not None:
            self.trace_store.create_record(
                page=result.page,
                records_in=len(payload),
                records_out=len(projected),
                fields_requested=requested,
                fields_resolved=resolved,
                degree=degree,
                latency_ms=timer.elapsed_ms,
            )
        logger.debug(
            "projected %d/%d records with %d fields across %d chunks in %.3fms",
            len(projected),
            len(payload),
            len(resolved),
            degree,
            timer.elapsed_ms,
        )

        return PaginatedResult[ProjectedRecord].model_construct(
            page=result.page,
            records_per_page=result.records_per_page,
            payload=projected,
        )

    def _project_payload(
        self, payload: Sequence[Any], fields: list[str]
    ) -> tuple[tuple[ProjectedRecord, ...], list[str], int]:
        if not fields or not payload:
            logger.debug("empty projection: fields=%d payload=%d", len(fields), len(payload))
            return (), [], 0

        shape = detect_shape(payload[0], self.registry)
        if shape is None:
            logger.debug("unsupported record shape: %s", type(payload[0]).__qualname__)
            return (), [], 0

        descriptors = shape.resolve(fields)
        ranges = self.planner.plan(len(payload))
        logger.debug(
            "planned %s projection: %d descriptors, %d of at most %d chunks",
            shape.kind.value,
            len(descriptors),
            len(ranges),
            self.config.max_degree,
        )

        workers = len(ranges)
        if self.config.max_workers_per_call is not None:
            workers = min(workers, self.config.max_workers_per_call)

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="projection") as pool:
            futures = [
                pool.submit(project_chunk, payload[rng.start : rng.stop], shape, descriptors)
                for rng in ranges
            ]
            chunks = [future.result() for future in futures]

        return (
            aggregate(chunks),
            [descriptor.external_name for descriptor in descriptors],
            len(ranges),
        )


def project(
    result: PaginatedResult[Any],
    fields: Sequence[str],
    *,
    config: ProjectionConfig | None = None,
) -> PaginatedResult[ProjectedRecord]:
    """Project `result` onto `fields` with a default engine."""
    return ProjectionEngine(config).project(result, fields)
