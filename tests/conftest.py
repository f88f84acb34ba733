"""Shared fixtures for the placement game test suite."""

import pytest

from src.game_manager.game_controller import GameController
from src.game_manager.level_catalog import LEVEL_FENWAY
from src.game_manager.scheduler import ManualScheduler
from src.scoring_engine.objective_evaluator import ObjectiveEvaluator
from src.scoring_engine.placement_scorer import PlacementScorer


# ------------------------------------------------------------------
# Stateless engine pieces
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def scorer():
    return PlacementScorer()


@pytest.fixture(scope="module")
def evaluator():
    return ObjectiveEvaluator()


# ------------------------------------------------------------------
# Controller wiring - virtual clock, no real delays
# ------------------------------------------------------------------

@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def controller(scheduler):
    """Controller on the Fenway level driven by a manual scheduler."""
    return GameController(level=LEVEL_FENWAY, scheduler=scheduler)
