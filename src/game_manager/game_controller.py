"""Game controller - orchestrates board edits, simulation runs and feedback."""

import logging
import uuid
from typing import Callable, Dict, List, Optional

from src.game_manager.config import (
    COMPONENT_ID_LENGTH,
    FEEDBACK_DELAY_SECONDS,
    SIMULATION_DELAY_SECONDS,
)
from src.game_manager.game_state import (
    ComponentSpec,
    GameState,
    LevelConfig,
    SimulationState,
)
from src.game_manager.level_catalog import COMPONENT_DEFINITIONS, LEVEL_FENWAY
from src.game_manager.placement_rules import PlacementRules, ValidationError
from src.game_manager.scheduler import ScheduledCall, Scheduler, ThreadingScheduler
from src.game_manager.tutor_dialogue import TutorDialogue
from src.scoring_engine.models import (
    ComponentKind,
    GameComponent,
    LevelObjective,
    SimulationMetrics,
)
from src.scoring_engine.objective_evaluator import ObjectiveEvaluator
from src.scoring_engine.placement_scorer import PlacementScorer

logger = logging.getLogger(__name__)

StateListener = Callable[[GameState], None]


class GameController:
    """Main controller for a single level.

    Owns the :class:`GameState` and is the only thing that mutates it.
    Coordinates PlacementRules (validation), PlacementScorer (metrics),
    ObjectiveEvaluator (objective display) and a Scheduler (pacing).
    """

    def __init__(
        self,
        level: Optional[LevelConfig] = None,
        scheduler: Optional[Scheduler] = None,
        catalog: Optional[Dict[ComponentKind, ComponentSpec]] = None,
        simulation_delay: float = SIMULATION_DELAY_SECONDS,
        feedback_delay: float = FEEDBACK_DELAY_SECONDS,
    ):
        self.game_state = GameState(
            level=level or LEVEL_FENWAY,
            catalog=dict(catalog or COMPONENT_DEFINITIONS),
        )
        self.scheduler = scheduler or ThreadingScheduler()
        self.rules = PlacementRules(self.game_state)
        self.scorer = PlacementScorer()
        self.evaluator = ObjectiveEvaluator()
        self.tutor = TutorDialogue(self.scheduler)
        self.simulation_delay = simulation_delay
        self.feedback_delay = feedback_delay
        self._listeners: List[StateListener] = []
        self._pending_feedback: Optional[ScheduledCall] = None

    # ------------------------------------------------------------------
    # Board edits
    # ------------------------------------------------------------------

    def add_component(
        self, kind: ComponentKind, x: int, y: int, rotation: int = 0
    ) -> GameComponent:
        """Validate and place a new component.

        Raises:
            ValidationError: If the board is locked, the kind is not offered
                in this level, the cell is off the grid, or the remaining
                budget cannot cover the piece.
        """
        is_valid, error_msg = self.rules.validate_placement(kind, x, y)
        if not is_valid:
            logger.warning("Invalid placement attempted: %s", error_msg)
            raise ValidationError(error_msg)

        component = GameComponent(
            id=self._new_component_id(),
            kind=kind,
            x=x,
            y=y,
            rotation=rotation,
        )
        self.game_state.components.append(component)

        logger.info(
            "Placed %s (%s) at (%d, %d); budget %d/%d RP",
            kind.value,
            component.id,
            x,
            y,
            self.game_state.get_spent_budget(),
            self.game_state.level.budget,
        )
        self._notify()
        return component

    def remove_component(self, component_id: str) -> GameComponent:
        """Remove a placed component by id.

        Raises:
            ValidationError: If the board is locked or the id is unknown.
        """
        is_valid, error_msg = self.rules.validate_removal(component_id)
        if not is_valid:
            logger.warning("Invalid removal attempted: %s", error_msg)
            raise ValidationError(error_msg)

        component = self.game_state.find_component(component_id)
        self.game_state.components.remove(component)

        logger.info("Removed %s (%s)", component.kind.value, component_id)
        self._notify()
        return component

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def run_simulation(self):
        """Lock the board and score it after the simulation delay.

        Raises:
            ValidationError: If a run is already in progress or the last
                result has not been reset.
        """
        if self.game_state.sim_state != SimulationState.IDLE:
            raise ValidationError(
                f"Cannot run simulation while {self.game_state.sim_state.value}"
            )

        self.game_state.sim_state = SimulationState.RUNNING
        logger.info(
            "Simulation started with %d components",
            len(self.game_state.components),
        )
        self._notify()

        # Snapshot now; the board is locked until the run completes anyway.
        snapshot = tuple(self.game_state.components)
        self.scheduler.call_later(
            self.simulation_delay, lambda: self._complete_simulation(snapshot)
        )

    def _complete_simulation(self, components):
        metrics = self.scorer.score(components)
        success = self.scorer.is_success(metrics)

        self.game_state.metrics = metrics
        self.game_state.sim_state = (
            SimulationState.COMPLETE_SUCCESS
            if success
            else SimulationState.COMPLETE_FAILURE
        )

        logger.info(
            "Simulation %s: coverage=%.1f%%, latency=%.0f ms, "
            "signal=%.0f dBm, power=%.0f W",
            "succeeded" if success else "failed",
            metrics.coverage_percent,
            metrics.latency,
            metrics.signal_strength,
            metrics.power_consumption,
        )
        self._notify()

        if not success:
            self._pending_feedback = self.scheduler.call_later(
                self.feedback_delay, self.open_feedback
            )

    def reset(self):
        """Return to IDLE with baseline metrics. Placed components stay.

        Raises:
            ValidationError: If a run is still in progress.
        """
        if self.game_state.sim_state == SimulationState.RUNNING:
            raise ValidationError("Cannot reset while simulation is RUNNING")

        if self._pending_feedback is not None:
            self._pending_feedback.cancel()
            self._pending_feedback = None

        self.game_state.sim_state = SimulationState.IDLE
        self.game_state.metrics = SimulationMetrics.baseline()
        logger.info("Simulation reset")
        self._notify()

    # ------------------------------------------------------------------
    # Feedback overlays
    # ------------------------------------------------------------------

    def open_feedback(self):
        """Show the tutor dialogue from its first step."""
        self._pending_feedback = None
        self.tutor.restart()
        self.game_state.is_feedback_open = True
        logger.info("Opened tutor feedback")
        self._notify()

    def close_feedback(self):
        self.game_state.is_feedback_open = False
        self._notify()

    def open_concept_card(self):
        """Swap the tutor dialogue for the concept card."""
        self.game_state.is_feedback_open = False
        self.game_state.is_concept_open = True
        self._notify()

    def close_concept_card(self):
        self.game_state.is_concept_open = False
        self._notify()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def components(self) -> List[GameComponent]:
        return list(self.game_state.components)

    @property
    def metrics(self) -> SimulationMetrics:
        return self.game_state.metrics

    @property
    def sim_state(self) -> SimulationState:
        return self.game_state.sim_state

    @property
    def current_objectives(self) -> List[LevelObjective]:
        """Level objectives evaluated against the current metrics."""
        return self.evaluator.evaluate(
            self.game_state.level.objectives, self.game_state.metrics
        )

    @property
    def spent_budget(self) -> int:
        return self.game_state.get_spent_budget()

    @property
    def remaining_budget(self) -> int:
        return self.game_state.get_remaining_budget()

    def can_afford(self, kind: ComponentKind) -> bool:
        return self.rules.can_afford(kind)

    def subscribe(self, listener: StateListener):
        """Register a callback invoked with the state after every change."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _new_component_id(self) -> str:
        while True:
            component_id = uuid.uuid4().hex[:COMPONENT_ID_LENGTH]
            if self.game_state.find_component(component_id) is None:
                return component_id

    def _notify(self):
        for listener in self._listeners:
            listener(self.game_state)
