from src.game_manager.game_controller import GameController
from src.game_manager.game_state import (
    ComponentSpec,
    GameState,
    LevelConfig,
    SimulationState,
)
from src.game_manager.level_catalog import (
    COMPONENT_DEFINITIONS,
    LEVEL_FENWAY,
    LevelLoader,
)
from src.game_manager.placement_rules import PlacementRules, ValidationError
from src.game_manager.scheduler import (
    ImmediateScheduler,
    ManualScheduler,
    Scheduler,
    ThreadingScheduler,
)
from src.game_manager.tutor_dialogue import TutorDialogue

__all__ = [
    "COMPONENT_DEFINITIONS",
    "ComponentSpec",
    "GameController",
    "GameState",
    "ImmediateScheduler",
    "LEVEL_FENWAY",
    "LevelConfig",
    "LevelLoader",
    "ManualScheduler",
    "PlacementRules",
    "Scheduler",
    "SimulationState",
    "ThreadingScheduler",
    "TutorDialogue",
    "ValidationError",
]
