"""Placement rule enforcement and board-action validation."""

from typing import Optional, Tuple

from src.game_manager.game_state import GameState
from src.scoring_engine.models import ComponentKind


class ValidationError(Exception):
    """Raised when a player action violates the game rules."""

    pass


class PlacementRules:
    """Enforces all board mutation rules."""

    def __init__(self, game_state: GameState):
        self.game_state = game_state

    def validate_placement(
        self, kind: ComponentKind, x: int, y: int
    ) -> Tuple[bool, Optional[str]]:
        """
        Validate if a new component may be placed.

        Returns:
            (is_valid, error_message) - (True, None) if valid
        """
        # Check 1: Board must be idle
        if self.game_state.is_board_locked:
            return False, (
                "Board is locked while simulation is "
                f"{self.game_state.sim_state.value}"
            )

        # Check 2: Kind offered in this level?
        level = self.game_state.level
        if not level.is_available(kind):
            return False, f"{kind.value} is not available in level {level.id}"

        # Check 3: On the grid
        if not level.in_bounds(x, y):
            return False, (
                f"Position ({x}, {y}) is outside the "
                f"{level.grid_size}x{level.grid_size} grid"
            )

        # Check 4: Affordable with what is left
        affordable, budget_error = self._validate_budget(kind)
        if not affordable:
            return False, budget_error

        return True, None

    def validate_removal(self, component_id: str) -> Tuple[bool, Optional[str]]:
        """Validate if a placed component may be removed."""
        if self.game_state.is_board_locked:
            return False, (
                "Board is locked while simulation is "
                f"{self.game_state.sim_state.value}"
            )

        if self.game_state.find_component(component_id) is None:
            return False, f"Component {component_id} not found on the board"

        return True, None

    def can_afford(self, kind: ComponentKind) -> bool:
        """Whether the remaining budget covers one more *kind*."""
        return self._validate_budget(kind)[0]

    def _validate_budget(self, kind: ComponentKind) -> Tuple[bool, Optional[str]]:
        remaining = self.game_state.get_remaining_budget()
        cost = self.game_state.get_cost(kind)
        if remaining >= cost:
            return True, None
        return False, (
            f"Cannot afford {kind.value}: costs {cost} RP, "
            f"{remaining} RP remaining"
        )
