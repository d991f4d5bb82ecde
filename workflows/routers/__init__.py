from .projects import router as projects_router
from .tasks import router as tasks_router

ROUTERS = (projects_router, tasks_router)

__all__ = [
    "ROUTERS",
    "projects_router",
    "tasks_router",
]
