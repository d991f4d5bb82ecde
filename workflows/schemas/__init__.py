"""Pydantic request/response schemas."""

from workflows.schemas.projects import (
    TaskResponse,
    ProjectResponse,
    StrategyRequest,
    ChangeMetadataResponse,
    StrategyResponse,
    StrategiesResponse,
    ProjectCreate,
    ProjectPatch,
    TaskCreate,
    TaskPatch,
)

__all__ = [
    "TaskResponse",
    "ProjectResponse",
    "StrategyRequest",
    "ChangeMetadataResponse",
    "StrategyResponse",
    "StrategiesResponse",
    "ProjectCreate",
    "ProjectPatch",
    "TaskCreate",
    "TaskPatch",
]
