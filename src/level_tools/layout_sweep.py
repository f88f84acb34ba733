"""Exhaustive layout sweep for level design.

Enumerates every combination of component counts a player could afford in a
level, scores each one and tabulates the outcome. Since scoring ignores
positions, counts per kind fully determine a layout's result.
"""

import itertools
import logging
from typing import Dict, Optional

import pandas as pd

from src.game_manager.game_state import ComponentSpec, LevelConfig
from src.game_manager.level_catalog import COMPONENT_DEFINITIONS
from src.level_tools.config import SWEEP_MAX_ZERO_COST_COUNT
from src.scoring_engine.models import ComponentKind
from src.scoring_engine.objective_evaluator import ObjectiveEvaluator
from src.scoring_engine.placement_scorer import PlacementScorer

logger = logging.getLogger(__name__)

METRIC_COLUMNS = [
    "coverage_percent",
    "signal_strength",
    "snr",
    "latency",
    "power_consumption",
]


def count_column(kind: ComponentKind) -> str:
    """Column name holding the count of *kind* in a sweep DataFrame."""
    return f"{kind.value.lower()}_count"


class LayoutSweep:
    """Tabulate every affordable layout of a level."""

    def __init__(
        self,
        level: LevelConfig,
        catalog: Optional[Dict[ComponentKind, ComponentSpec]] = None,
        max_zero_cost_count: int = SWEEP_MAX_ZERO_COST_COUNT,
    ):
        self.level = level
        self.catalog = catalog or COMPONENT_DEFINITIONS
        self.max_zero_cost_count = max_zero_cost_count
        self.scorer = PlacementScorer()
        self.evaluator = ObjectiveEvaluator()

    def sweep(self) -> pd.DataFrame:
        """Score every affordable combination of the level's kinds.

        Returns:
            DataFrame with one row per layout: a ``<kind>_count`` column per
            available kind, ``total_components``, ``cost``, ``remaining``,
            every metric, ``success`` and a ``met_<objective_id>`` column per
            objective. Sorted by cost, then component count.
        """
        kinds = list(self.level.available_components)
        ranges = [range(self._max_count(kind) + 1) for kind in kinds]

        rows = []
        for combo in itertools.product(*ranges):
            counts = dict(zip(kinds, combo))
            cost = sum(self.catalog[k].cost * n for k, n in counts.items())
            if cost > self.level.budget:
                continue
            rows.append(self._score_row(counts, cost))

        columns = (
            [count_column(k) for k in kinds]
            + ["total_components", "cost", "remaining"]
            + METRIC_COLUMNS
            + ["success"]
            + [f"met_{obj.id}" for obj in self.level.objectives]
        )
        df = pd.DataFrame(rows, columns=columns)
        df = df.sort_values(["cost", "total_components"], kind="stable")
        df = df.reset_index(drop=True)

        logger.info(
            "Swept level %s: %d affordable layouts, %d winning",
            self.level.id, len(df), int(df["success"].sum()),
        )
        return df

    def cheapest_winning_layout(
        self, sweep_df: Optional[pd.DataFrame] = None
    ) -> Optional[pd.Series]:
        """Lowest-cost successful layout, or None if the level is unsolvable."""
        df = self.sweep() if sweep_df is None else sweep_df
        winners = df[df["success"]]
        if winners.empty:
            logger.warning("Level %s has no winning layout within budget", self.level.id)
            return None
        return winners.sort_values(
            ["cost", "total_components"], kind="stable"
        ).iloc[0]

    def outcome_summary(self, sweep_df: Optional[pd.DataFrame] = None) -> pd.DataFrame:
        """Group layouts by outcome branch.

        Returns:
            One row per distinct (coverage, signal) result with the number of
            layouts reaching it and the cheapest cost that does.
        """
        df = self.sweep() if sweep_df is None else sweep_df
        return (
            df.groupby(["coverage_percent", "signal_strength"], as_index=False)
            .agg(layouts=("cost", "size"), min_cost=("cost", "min"))
            .sort_values("coverage_percent")
            .reset_index(drop=True)
        )

    def _max_count(self, kind: ComponentKind) -> int:
        cost = self.catalog[kind].cost
        if cost <= 0:
            return self.max_zero_cost_count
        return self.level.budget // cost

    def _score_row(self, counts: Dict[ComponentKind, int], cost: int) -> Dict:
        metrics = self.scorer.score_counts(
            bs_count=counts.get(ComponentKind.BS_28GHZ, 0),
            ris_count=counts.get(ComponentKind.RIS_PANEL, 0),
            array_count=counts.get(ComponentKind.PHASED_ARRAY, 0),
        )
        row = {count_column(k): n for k, n in counts.items()}
        row["total_components"] = sum(counts.values())
        row["cost"] = cost
        row["remaining"] = self.level.budget - cost
        for col in METRIC_COLUMNS:
            row[col] = getattr(metrics, col)
        row["success"] = self.scorer.is_success(metrics)
        for obj in self.evaluator.evaluate(self.level.objectives, metrics):
            row[f"met_{obj.id}"] = obj.is_met
        return row
