"""Tests for the game controller - board edits, runs and feedback flow."""

import pytest

from src.game_manager.config import FEEDBACK_DELAY_SECONDS, SIMULATION_DELAY_SECONDS
from src.game_manager.game_controller import GameController
from src.game_manager.game_state import SimulationState
from src.game_manager.placement_rules import PlacementRules, ValidationError
from src.game_manager.scheduler import ImmediateScheduler, ManualScheduler
from src.scoring_engine.models import ComponentKind, GameComponent, SimulationMetrics
from src.scoring_engine.placement_scorer import PlacementScorer


# ── Helpers ──────────────────────────────────────────────────────────

def _place(ctrl, bs=0, ris=0, arrays=0):
    """Place pieces along the top row."""
    kinds = (
        [ComponentKind.BS_28GHZ] * bs
        + [ComponentKind.RIS_PANEL] * ris
        + [ComponentKind.PHASED_ARRAY] * arrays
    )
    return [ctrl.add_component(kind, i, 0) for i, kind in enumerate(kinds)]


def _run_to_completion(ctrl, scheduler):
    ctrl.run_simulation()
    scheduler.advance(SIMULATION_DELAY_SECONDS)


# ── Init ─────────────────────────────────────────────────────────────

class TestGameControllerInit:
    def test_starts_idle(self, controller):
        assert controller.sim_state == SimulationState.IDLE
        assert controller.components == []
        assert controller.metrics == SimulationMetrics.baseline()

    def test_creates_collaborators(self, controller):
        assert isinstance(controller.rules, PlacementRules)
        assert isinstance(controller.scorer, PlacementScorer)

    def test_defaults_to_fenway(self):
        ctrl = GameController(scheduler=ManualScheduler())
        assert ctrl.game_state.level.id == "2-1"

    def test_full_budget_available(self, controller):
        assert controller.spent_budget == 0
        assert controller.remaining_budget == 100


# ── Board edits ──────────────────────────────────────────────────────

class TestAddComponent:
    def test_returns_component(self, controller):
        comp = controller.add_component(ComponentKind.BS_28GHZ, 3, 4, rotation=90)
        assert isinstance(comp, GameComponent)
        assert (comp.kind, comp.x, comp.y, comp.rotation) == (
            ComponentKind.BS_28GHZ, 3, 4, 90,
        )
        assert comp.id

    def test_component_on_board(self, controller):
        comp = controller.add_component(ComponentKind.RIS_PANEL, 1, 1)
        assert controller.components == [comp]

    def test_ids_unique(self, controller):
        placed = _place(controller, bs=2, ris=2)
        assert len({c.id for c in placed}) == 4

    def test_budget_tracks_placements(self, controller):
        _place(controller, bs=2, ris=1)
        assert controller.spent_budget == 75
        assert controller.remaining_budget == 25

    def test_rejects_unaffordable(self, controller):
        _place(controller, bs=3)
        assert controller.can_afford(ComponentKind.RIS_PANEL) is False
        with pytest.raises(ValidationError, match="Cannot afford"):
            controller.add_component(ComponentKind.RIS_PANEL, 5, 5)
        assert len(controller.components) == 3

    def test_rejects_unavailable_kind(self, controller):
        with pytest.raises(ValidationError, match="not available"):
            controller.add_component(ComponentKind.OBSTACLE, 0, 0)

    def test_rejects_off_grid(self, controller):
        with pytest.raises(ValidationError, match="outside"):
            controller.add_component(ComponentKind.BS_28GHZ, 20, 0)


class TestRemoveComponent:
    def test_removes_by_id(self, controller):
        a, b = _place(controller, bs=1, ris=1)
        removed = controller.remove_component(a.id)
        assert removed == a
        assert controller.components == [b]

    def test_refunds_budget(self, controller):
        [bs] = _place(controller, bs=1)
        controller.remove_component(bs.id)
        assert controller.remaining_budget == 100

    def test_unknown_id(self, controller):
        with pytest.raises(ValidationError, match="not found"):
            controller.remove_component("missing")


# ── Simulation runs ──────────────────────────────────────────────────

class TestRunSimulation:
    def test_enters_running_and_waits(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        controller.run_simulation()
        assert controller.sim_state == SimulationState.RUNNING
        scheduler.advance(SIMULATION_DELAY_SECONDS - 0.5)
        assert controller.sim_state == SimulationState.RUNNING
        assert controller.metrics == SimulationMetrics.baseline()

    def test_success(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        assert controller.sim_state == SimulationState.COMPLETE_SUCCESS
        assert controller.metrics.coverage_percent == 98
        assert controller.metrics.power_consumption == 40

    def test_failure(self, controller, scheduler):
        _place(controller, bs=2)
        _run_to_completion(controller, scheduler)
        assert controller.sim_state == SimulationState.COMPLETE_FAILURE
        assert controller.metrics.coverage_percent == 75

    def test_empty_board_fails(self, controller, scheduler):
        _run_to_completion(controller, scheduler)
        assert controller.sim_state == SimulationState.COMPLETE_FAILURE
        assert controller.metrics.latency == 100

    def test_cannot_run_twice(self, controller):
        controller.run_simulation()
        with pytest.raises(ValidationError, match="RUNNING"):
            controller.run_simulation()

    def test_cannot_rerun_before_reset(self, controller, scheduler):
        _run_to_completion(controller, scheduler)
        with pytest.raises(ValidationError, match="FAILURE"):
            controller.run_simulation()

    def test_board_locked_while_running(self, controller):
        [bs] = _place(controller, bs=1)
        controller.run_simulation()
        with pytest.raises(ValidationError, match="locked"):
            controller.add_component(ComponentKind.RIS_PANEL, 2, 2)
        with pytest.raises(ValidationError, match="locked"):
            controller.remove_component(bs.id)

    def test_board_locked_after_result(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        with pytest.raises(ValidationError, match="locked"):
            controller.add_component(ComponentKind.RIS_PANEL, 2, 2)

    def test_latency_objective_not_part_of_verdict(self, controller, scheduler):
        _place(controller, bs=1)
        _run_to_completion(controller, scheduler)
        coverage, latency = controller.current_objectives
        assert latency.is_met is True
        assert coverage.is_met is False
        assert controller.sim_state == SimulationState.COMPLETE_FAILURE

    def test_immediate_scheduler_completes_synchronously(self):
        ctrl = GameController(scheduler=ImmediateScheduler())
        _place(ctrl, bs=2, ris=1)
        ctrl.run_simulation()
        assert ctrl.sim_state == SimulationState.COMPLETE_SUCCESS


# ── Objectives view ──────────────────────────────────────────────────

class TestCurrentObjectives:
    def test_baseline_objectives(self, controller):
        coverage, latency = controller.current_objectives
        assert coverage.current_value == 0
        assert coverage.is_met is False
        assert latency.current_value == 45
        assert latency.is_met is False

    def test_after_winning_run(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        assert [o.is_met for o in controller.current_objectives] == [True, True]

    def test_level_objectives_untouched(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        controller.current_objectives
        assert all(not o.is_met for o in controller.game_state.level.objectives)


# ── Reset ────────────────────────────────────────────────────────────

class TestReset:
    def test_restores_idle_and_baseline(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        controller.reset()
        assert controller.sim_state == SimulationState.IDLE
        assert controller.metrics == SimulationMetrics.baseline()

    def test_keeps_components(self, controller, scheduler):
        placed = _place(controller, bs=2)
        _run_to_completion(controller, scheduler)
        controller.reset()
        assert controller.components == placed

    def test_board_editable_after_reset(self, controller, scheduler):
        _place(controller, bs=2)
        _run_to_completion(controller, scheduler)
        controller.reset()
        controller.add_component(ComponentKind.RIS_PANEL, 9, 9)
        controller.run_simulation()
        scheduler.advance(SIMULATION_DELAY_SECONDS)
        assert controller.sim_state == SimulationState.COMPLETE_SUCCESS

    def test_rejected_while_running(self, controller):
        controller.run_simulation()
        with pytest.raises(ValidationError, match="Cannot reset"):
            controller.reset()

    def test_reset_cancels_pending_feedback(self, controller, scheduler):
        _run_to_completion(controller, scheduler)
        controller.reset()
        scheduler.run_all()
        assert controller.game_state.is_feedback_open is False


# ── Feedback flow ────────────────────────────────────────────────────

class TestFeedbackFlow:
    def test_failure_opens_feedback_after_delay(self, controller, scheduler):
        _place(controller, bs=2)
        _run_to_completion(controller, scheduler)
        assert controller.game_state.is_feedback_open is False
        scheduler.advance(FEEDBACK_DELAY_SECONDS)
        assert controller.game_state.is_feedback_open is True
        assert controller.tutor.current_step.step == 1

    def test_success_never_opens_feedback(self, controller, scheduler):
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        scheduler.run_all()
        assert controller.game_state.is_feedback_open is False
        assert scheduler.pending == 0

    def test_concept_card_replaces_feedback(self, controller, scheduler):
        _run_to_completion(controller, scheduler)
        scheduler.advance(FEEDBACK_DELAY_SECONDS)
        controller.open_concept_card()
        assert controller.game_state.is_feedback_open is False
        assert controller.game_state.is_concept_open is True
        controller.close_concept_card()
        assert controller.game_state.is_concept_open is False

    def test_close_feedback(self, controller, scheduler):
        _run_to_completion(controller, scheduler)
        scheduler.advance(FEEDBACK_DELAY_SECONDS)
        controller.close_feedback()
        assert controller.game_state.is_feedback_open is False

    def test_reopening_restarts_tutor(self, controller, scheduler):
        controller.open_feedback()
        controller.tutor.choose(1)  # correct on step 1
        scheduler.run_all()
        assert controller.tutor.current_step.step == 2
        controller.open_feedback()
        assert controller.tutor.current_step.step == 1


# ── Listeners ────────────────────────────────────────────────────────

class TestListeners:
    def test_notified_on_each_transition(self, controller, scheduler):
        seen = []
        controller.subscribe(lambda state: seen.append(state.sim_state))
        _place(controller, bs=2, ris=1)
        _run_to_completion(controller, scheduler)
        controller.reset()
        assert seen == [
            SimulationState.IDLE,
            SimulationState.IDLE,
            SimulationState.IDLE,
            SimulationState.RUNNING,
            SimulationState.COMPLETE_SUCCESS,
            SimulationState.IDLE,
        ]
