from .spec import StrategyFactory, ProjectRepository
from .crud import create_project, apply_project_patch, create_task, apply_task_patch

__all__ = [
    "StrategyFactory",
    "ProjectRepository",
    "create_project",
    "apply_project_patch",
    "create_task",
    "apply_task_patch",
]
