from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from workflows.core import DESCRIPTION_MAX_CHARS, INT_COLUMN_MAX


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    project_id: str
    name: str
    description: Optional[str] = None
    assigned_to: Optional[str] = None
    sprint: Optional[int] = None
    created_at: Optional[datetime] = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    priority: Optional[str] = None
    backtech: Optional[str] = None
    fronttech: Optional[str] = None
    cloud_tech: Optional[str] = None
    sprints_quantity: Optional[int] = None
    end_date: Optional[str] = None
    tasks: list[TaskResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StrategyRequest(BaseModel):
    """Body of POST /projects/ai/{action}: user_input for create, project_id for predict/optimize."""

    user_input: Optional[str] = None
    project_id: Optional[str] = None
    additional_data: Optional[dict[str, Any]] = None


class ChangeMetadataResponse(BaseModel):
    tasks_added: int = 0
    tasks_removed: int = 0
    fields_updated: list[str] = Field(default_factory=list)


class StrategyResponse(BaseModel):
    """Result of a create/predict/optimize run: persisted project(s) and what changed."""

    action: str
    is_single: bool = True
    projects: list[ProjectResponse]
    metadata: ChangeMetadataResponse


class StrategiesResponse(BaseModel):
    strategies: list[str]


class _ProjectFields(BaseModel):
    """Shared optional fields for manual create/patch."""

    priority: Optional[str] = Field(None, max_length=255)
    backtech: Optional[str] = Field(None, max_length=255)
    fronttech: Optional[str] = Field(None, max_length=255)
    cloud_tech: Optional[str] = Field(None, max_length=255)
    sprints_quantity: Optional[int] = Field(None, ge=0, le=INT_COLUMN_MAX)
    end_date: Optional[str] = Field(None, max_length=255)


class ProjectCreate(_ProjectFields):
    name: str = Field(min_length=1, max_length=255)
    priority: str = Field(min_length=1, max_length=255)


class ProjectPatch(_ProjectFields):
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class _TaskFields(BaseModel):
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_CHARS)
    assigned_to: Optional[str] = Field(None, max_length=255)
    sprint: Optional[int] = Field(None, ge=0, le=INT_COLUMN_MAX)


class TaskCreate(_TaskFields):
    project_id: str
    name: str = Field(min_length=1, max_length=255)


class TaskPatch(_TaskFields):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
