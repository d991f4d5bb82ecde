"""Manual project/task create and patch (no generation involved)."""

import logging

from workflows.db.models import Project, Task
from workflows.schemas import ProjectCreate, ProjectPatch, TaskCreate, TaskPatch
from workflows.services.spec import ProjectRepository

logger = logging.getLogger(__name__)


async def create_project(repo: ProjectRepository, body: ProjectCreate) -> Project:
    project = Project(
        name=body.name,
        priority=body.priority,
        backtech=body.backtech,
        fronttech=body.fronttech,
        cloud_tech=body.cloud_tech,
        sprints_quantity=body.sprints_quantity,
        end_date=body.end_date,
    )
    project.tasks = []
    await repo.save(project)
    logger.info("project created: id=%s", project.id)
    return project


def apply_project_patch(project: Project, body: ProjectPatch) -> None:
    """Apply patch fields to project (in place); None leaves a field as is."""
    if body.name is not None:
        project.name = body.name
    if body.priority is not None:
        project.priority = body.priority
    if body.backtech is not None:
        project.backtech = body.backtech
    if body.fronttech is not None:
        project.fronttech = body.fronttech
    if body.cloud_tech is not None:
        project.cloud_tech = body.cloud_tech
    if body.sprints_quantity is not None:
        project.sprints_quantity = body.sprints_quantity
    if body.end_date is not None:
        project.end_date = body.end_date


async def create_task(repo: ProjectRepository, project: Project, body: TaskCreate) -> Task:
    """Append a task to a loaded project and flush it."""
    task = Task(
        name=body.name,
        description=body.description,
        assigned_to=body.assigned_to,
        sprint=body.sprint,
    )
    project.tasks.append(task)
    await repo.save(project)
    return task


def apply_task_patch(task: Task, body: TaskPatch) -> None:
    """Apply patch fields to task (in place)."""
    if body.name is not None:
        task.name = body.name
    if body.description is not None:
        task.description = body.description
    if body.assigned_to is not None:
        task.assigned_to = body.assigned_to
    if body.sprint is not None:
        task.sprint = body.sprint
