"""Record projection package."""

from .config import LoggingConfig, ProjectionConfig
from .engine.projector import ProjectionEngine, project
from .result import PaginatedResult

__all__ = [
    "LoggingConfig",
    "PaginatedResult",
    "ProjectionConfig",
    "ProjectionEngine",
    "project",
]
