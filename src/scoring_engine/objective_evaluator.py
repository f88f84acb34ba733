"""Objective evaluation against simulation metrics."""

import dataclasses
import operator
from typing import Callable, Dict, Iterable, List

from src.scoring_engine.models import LevelObjective, SimulationMetrics


def _at_least(current: float, target: float) -> bool:
    return current >= target


def _at_most_positive(current: float, target: float) -> bool:
    # A zero reading means "not measured yet", never a pass.
    return 0 < current <= target


COMPARATORS: Dict[str, Callable[[float, float], bool]] = {
    ">=": _at_least,
    "<=": _at_most_positive,
}


class ObjectiveEvaluator:
    """Populate ``current_value`` and ``is_met`` on level objectives.

    Each objective declares which metric it reads and how it compares, so
    the evaluator never dispatches on objective ids. The input objectives
    are left untouched; fresh copies are returned.
    """

    def evaluate(
        self,
        objectives: Iterable[LevelObjective],
        metrics: SimulationMetrics,
    ) -> List[LevelObjective]:
        return [self.evaluate_one(objective, metrics) for objective in objectives]

    @staticmethod
    def evaluate_one(
        objective: LevelObjective, metrics: SimulationMetrics
    ) -> LevelObjective:
        current = operator.attrgetter(objective.metric)(metrics)
        is_met = COMPARATORS[objective.comparison](current, objective.target_value)
        return dataclasses.replace(objective, current_value=current, is_met=is_met)
