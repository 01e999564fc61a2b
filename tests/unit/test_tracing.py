import pytest

from record_projection.obs.tracing import Timer, TraceStore


def _record(store: TraceStore, latency_ms: float, records_out: int = 3):
    return store.create_record(
        page=1,
        records_in=3,
        records_out=records_out,
        fields_requested=["id", "nope"],
        fields_resolved=["id"],
        degree=1,
        latency_ms=latency_ms,
    )


def test_trace_store_records_and_summarizes() -> None:
    store = TraceStore()
    first = _record(store, 2.0)
    _record(store, 4.0, records_out=0)

    assert store.get(first.trace_id).fields_resolved == ["id"]
    assert len(store.list_recent(limit=1)) == 1

    summary = store.summary()
    assert summary["total_calls"] == 2
    assert summary["avg_latency_ms"] == pytest.approx(3.0)
    assert summary["total_records_projected"] == 3


def test_empty_summary_and_missing_trace() -> None:
    store = TraceStore()

    assert store.summary()["total_calls"] == 0
    with pytest.raises(KeyError):
        store.get("missing")


def test_timer_measures_elapsed_time() -> None:
    with Timer() as timer:
        sum(range(1000))

    assert timer.elapsed_ms >= 0.0
    assert timer.elapsed_seconds == pytest.approx(timer.elapsed_ms / 1000.0)
