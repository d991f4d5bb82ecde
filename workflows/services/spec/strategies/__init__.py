"""Project strategies (create / predict / optimize) and their factory."""

from .base import ChangeMetadata, SpecStrategy, StrategyContext, StrategyResult, project_snapshot
from .create import CreateProjectStrategy
from .factory import StrategyFactory
from .optimize import OptimizeProjectStrategy
from .predict import PredictProjectStrategy

__all__ = [
    "ChangeMetadata",
    "SpecStrategy",
    "StrategyContext",
    "StrategyResult",
    "project_snapshot",
    "CreateProjectStrategy",
    "PredictProjectStrategy",
    "OptimizeProjectStrategy",
    "StrategyFactory",
]
