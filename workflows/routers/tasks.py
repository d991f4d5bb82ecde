from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from workflows.db.models import Task
from workflows.dependencies import get_project_repository, get_task_or_404
from workflows.schemas import TaskCreate, TaskPatch, TaskResponse
from workflows.serializers import task_to_response
from workflows.services.crud import apply_task_patch, create_task
from workflows.services.spec import NotFoundError, ProjectRepository, load_project

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task_manually(
    body: TaskCreate,
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    try:
        project = await load_project(repo, body.project_id)
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    task = await create_task(repo, project, body)
    return task_to_response(task)


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
    project_id: Optional[str] = None,
):
    tasks = await repo.list_tasks(project_id)
    return [task_to_response(t) for t in tasks]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task: Annotated[Task, Depends(get_task_or_404)]):
    return task_to_response(task)


@router.patch("/{task_id}", response_model=TaskResponse)
async def patch_task(
    body: TaskPatch,
    task: Annotated[Task, Depends(get_task_or_404)],
):
    apply_task_patch(task, body)
    return task_to_response(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task: Annotated[Task, Depends(get_task_or_404)],
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    await repo.remove_all([task])
    return Response(status_code=status.HTTP_204_NO_CONTENT)
