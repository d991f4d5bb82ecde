"""Project spec pipeline: sanitize → parse → normalize → persist, plus the three strategies."""

from .errors import (
    EmptyResponseError,
    NotFoundError,
    PipelineStage,
    SpecPipelineError,
    ValidationError,
)
from .normalizer import NormalizedProject, NormalizedSpec, NormalizedTask, normalize_spec
from .parser import parse_json, parse_llm_json
from .persister import persist_spec
from .repository import ProjectRepository, load_project, load_task
from .sanitizer import sanitize
from .strategies import (
    ChangeMetadata,
    StrategyContext,
    StrategyFactory,
    StrategyResult,
)

__all__ = [
    "EmptyResponseError",
    "NotFoundError",
    "PipelineStage",
    "SpecPipelineError",
    "ValidationError",
    "NormalizedProject",
    "NormalizedSpec",
    "NormalizedTask",
    "normalize_spec",
    "parse_json",
    "parse_llm_json",
    "persist_spec",
    "ProjectRepository",
    "load_project",
    "load_task",
    "sanitize",
    "ChangeMetadata",
    "StrategyContext",
    "StrategyFactory",
    "StrategyResult",
]
