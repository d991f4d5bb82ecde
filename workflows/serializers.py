"""Shared model-to-response serializers."""

from workflows.db.models import Project, Task
from workflows.schemas import (
    ChangeMetadataResponse,
    ProjectResponse,
    StrategyResponse,
    TaskResponse,
)
from workflows.services.spec import StrategyResult


def task_to_response(task: Task) -> TaskResponse:
    """Map Task model to TaskResponse."""
    return TaskResponse(
        id=task.id,
        project_id=task.project_id,
        name=task.name,
        description=task.description,
        assigned_to=task.assigned_to,
        sprint=task.sprint,
        created_at=task.created_at,
    )


def project_to_response(project: Project) -> ProjectResponse:
    """Map Project model (tasks loaded) to ProjectResponse."""
    return ProjectResponse(
        id=project.id,
        name=project.name,
        priority=project.priority,
        backtech=project.backtech,
        fronttech=project.fronttech,
        cloud_tech=project.cloud_tech,
        sprints_quantity=project.sprints_quantity,
        end_date=project.end_date,
        tasks=[task_to_response(t) for t in project.tasks or []],
        created_at=project.created_at,
        updated_at=project.updated_at,
    )


def strategy_result_to_response(result: StrategyResult) -> StrategyResponse:
    return StrategyResponse(
        action=result.action,
        is_single=result.is_single,
        projects=[project_to_response(p) for p in result.projects],
        metadata=ChangeMetadataResponse(
            tasks_added=result.metadata.tasks_added,
            tasks_removed=result.metadata.tasks_removed,
            fields_updated=list(result.metadata.fields_updated),
        ),
    )
