import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from workflows.db.models import Project
from workflows.dependencies import get_project_or_404, get_project_repository, get_strategy
from workflows.providers import ChatRateLimitError, ChatServiceError
from workflows.schemas import (
    ProjectCreate,
    ProjectPatch,
    ProjectResponse,
    StrategiesResponse,
    StrategyRequest,
    StrategyResponse,
)
from workflows.serializers import project_to_response, strategy_result_to_response
from workflows.services.crud import apply_project_patch, create_project
from workflows.services.spec import (
    EmptyResponseError,
    NotFoundError,
    ProjectRepository,
    SpecPipelineError,
    StrategyContext,
    StrategyFactory,
    ValidationError,
    load_project,
)
from workflows.services.spec.strategies import SpecStrategy

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    projects = await repo.list_with_tasks()
    return [project_to_response(p) for p in projects]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project_manually(
    body: ProjectCreate,
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    project = await create_project(repo, body)
    return project_to_response(project)


@router.get("/ai/strategies", response_model=StrategiesResponse)
async def list_strategies():
    return StrategiesResponse(strategies=StrategyFactory.available_strategies())


@router.post("/ai/{action}", response_model=StrategyResponse)
async def run_strategy(
    action: str,
    body: StrategyRequest,
    strategy: Annotated[SpecStrategy, Depends(get_strategy)],
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    """Run create / predict / optimize and return the persisted project(s)."""
    try:
        existing = None
        if body.project_id:
            existing = await load_project(repo, body.project_id)
        context = StrategyContext(
            user_input=body.user_input,
            existing_project=existing,
            additional_data=body.additional_data,
        )
        result = await strategy.execute(context)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        logger.info("%s rejected: %s", action, e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except EmptyResponseError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
    except SpecPipelineError as e:
        logger.exception("%s pipeline failed: %s", action, e)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    except ChatRateLimitError as e:
        raise HTTPException(status_code=429, detail=str(e))
    except ChatServiceError as e:
        logger.exception("%s generation failed: %s", action, e)
        raise HTTPException(status_code=503, detail=str(e))
    return strategy_result_to_response(result)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project: Annotated[Project, Depends(get_project_or_404)]):
    return project_to_response(project)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def patch_project(
    body: ProjectPatch,
    project: Annotated[Project, Depends(get_project_or_404)],
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    apply_project_patch(project, body)
    await repo.save(project)
    return project_to_response(project)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project: Annotated[Project, Depends(get_project_or_404)],
    repo: Annotated[ProjectRepository, Depends(get_project_repository)],
):
    await repo.delete_project(project)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
