"""Configuration models for the projection engine."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ProjectionConfig(BaseModel):
    """Configures size-driven fan-out for projection calls."""

    degree_thresholds: tuple[int, ...] = Field(default=(100, 1000, 10000))
    max_workers_per_call: int | None = Field(default=None, ge=1)

    @field_validator("degree_thresholds")
    @classmethod
    def _strictly_increasing(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if value and value[0] < 1:
            raise ValueError("first degree threshold must be >= 1")
        if any(b <= a for a, b in zip(value, value[1:])):
            raise ValueError("degree thresholds must be strictly increasing")
        return value

    @property
    def max_degree(self) -> int:
        return len(self.degree_thresholds) + 1


class LoggingConfig(BaseModel):
    """Configures log verbosity and rendering."""

    verbose: bool = False
    log_json: bool = False
