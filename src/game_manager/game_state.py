"""Game state data models - single source of truth for a play session."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from src.scoring_engine.models import (
    ComponentKind,
    GameComponent,
    LevelObjective,
    SimulationMetrics,
)


class SimulationState(str, Enum):
    IDLE = "IDLE"
    RUNNING = "RUNNING"
    COMPLETE_SUCCESS = "SUCCESS"
    COMPLETE_FAILURE = "FAILURE"


@dataclass(frozen=True)
class ComponentSpec:
    """Catalogue entry for a placeable kind."""

    name: str
    cost: int  # Research points
    description: str
    range: int  # Grid units, display only


@dataclass(frozen=True)
class LevelConfig:
    """Static level definition. Read-only at runtime."""

    id: str
    name: str
    description: str
    context: str  # "CITY", "CIRCUIT", "QUANTUM"
    grid_size: int
    budget: int
    available_components: List[ComponentKind]
    objectives: List[LevelObjective]
    map_image: str = ""

    def is_available(self, kind: ComponentKind) -> bool:
        return kind in self.available_components

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size


@dataclass
class GameState:
    """Complete state of one level being played."""

    level: LevelConfig
    catalog: Dict[ComponentKind, ComponentSpec]
    components: List[GameComponent] = field(default_factory=list)
    sim_state: SimulationState = SimulationState.IDLE
    metrics: SimulationMetrics = field(default_factory=SimulationMetrics.baseline)
    is_feedback_open: bool = False
    is_concept_open: bool = False

    def get_spent_budget(self) -> int:
        """Sum of catalogue costs of everything on the board."""
        return sum(self.catalog[c.kind].cost for c in self.components)

    def get_remaining_budget(self) -> int:
        """May go negative when pre-placed pieces exceed the budget."""
        return self.level.budget - self.get_spent_budget()

    def get_cost(self, kind: ComponentKind) -> int:
        return self.catalog[kind].cost

    def find_component(self, component_id: str) -> Optional[GameComponent]:
        for component in self.components:
            if component.id == component_id:
                return component
        return None

    def count_kind(self, kind: ComponentKind) -> int:
        return sum(1 for c in self.components if c.kind == kind)

    @property
    def is_board_locked(self) -> bool:
        """The board is only editable while idle."""
        return self.sim_state != SimulationState.IDLE

    @property
    def is_complete(self) -> bool:
        return self.sim_state in (
            SimulationState.COMPLETE_SUCCESS,
            SimulationState.COMPLETE_FAILURE,
        )
