from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from workflows.db.models import Project, Task
from workflows.db.session import async_session
from workflows.providers import ChatProvider, get_chat_provider
from workflows.services.spec import (
    NotFoundError,
    ProjectRepository,
    StrategyFactory,
    ValidationError,
    load_project,
    load_task,
)
from workflows.services.spec.strategies import SpecStrategy


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_project_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProjectRepository:
    return ProjectRepository(db)


def get_chat() -> ChatProvider:
    """Configured generation provider or 503 when none is configured."""
    try:
        return get_chat_provider()
    except RuntimeError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))


def get_known_action(action: str) -> str:
    """Path param action, 400 when it names no strategy. Checked before any provider is built."""
    try:
        StrategyFactory.validate_key(action)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return action


async def get_strategy(
    action: Annotated[str, Depends(get_known_action)],
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
    chat: Annotated[ChatProvider, Depends(get_chat)],
) -> SpecStrategy:
    return StrategyFactory(repo, chat).get_strategy(action)


async def get_project_or_404(
    project_id: str,
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> Project:
    """Load project (with tasks) by id or raise 404. Requires route path param project_id."""
    try:
        return await load_project(repo, project_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )


async def get_task_or_404(
    task_id: str,
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
) -> Task:
    """Load task by id or raise 404. Requires route path param task_id."""
    try:
        return await load_task(repo, task_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
