from src.scoring_engine.models import (
    ComponentKind,
    GameComponent,
    LevelObjective,
    SimulationMetrics,
)
from src.scoring_engine.objective_evaluator import ObjectiveEvaluator
from src.scoring_engine.placement_scorer import PlacementScorer

__all__ = [
    "ComponentKind",
    "GameComponent",
    "LevelObjective",
    "ObjectiveEvaluator",
    "PlacementScorer",
    "SimulationMetrics",
]
