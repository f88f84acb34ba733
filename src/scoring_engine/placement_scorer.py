"""Placement scoring: maps a set of placed components to simulation metrics.

The score is a lookup on component counts, not a propagation model. Positions
and rotations are carried on each component but never consulted, so any two
boards holding the same kinds score identically.
"""

import logging
from collections import Counter
from typing import Dict, Iterable

from src.scoring_engine.config import (
    LATENCY_WITH_TRANSMITTER_MS,
    LATENCY_WITHOUT_TRANSMITTER_MS,
    MULTI_TRANSMITTER_RESULT,
    MULTI_TRANSMITTER_THRESHOLD,
    MULTI_TRANSMITTER_WITH_RIS_RESULT,
    NO_TRANSMITTER_RESULT,
    POWER_PER_TRANSMITTER_W,
    SINGLE_TRANSMITTER_RESULT,
    SNR_OFFSET_DB,
    SUCCESS_COVERAGE_THRESHOLD,
)
from src.scoring_engine.models import ComponentKind, GameComponent, SimulationMetrics

logger = logging.getLogger(__name__)


class PlacementScorer:
    """Score a board layout.

    The scorer is stateless and total: every input, including an empty
    board, produces a metrics record.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def score(self, components: Iterable[GameComponent]) -> SimulationMetrics:
        """Compute metrics for the placed *components*."""
        counts = self.count_by_kind(components)
        return self.score_counts(
            bs_count=counts[ComponentKind.BS_28GHZ],
            ris_count=counts[ComponentKind.RIS_PANEL],
            array_count=counts[ComponentKind.PHASED_ARRAY],
        )

    def score_counts(
        self,
        bs_count: int,
        ris_count: int = 0,
        array_count: int = 0,
    ) -> SimulationMetrics:
        """Compute metrics straight from per-kind counts.

        ``array_count`` is accepted for completeness; phased arrays do not
        change the outcome.
        """
        coverage, signal = self._select_branch(bs_count, ris_count)

        metrics = SimulationMetrics(
            signal_strength=signal,
            snr=signal + SNR_OFFSET_DB,
            latency=(
                LATENCY_WITH_TRANSMITTER_MS
                if bs_count > 0
                else LATENCY_WITHOUT_TRANSMITTER_MS
            ),
            power_consumption=POWER_PER_TRANSMITTER_W * bs_count,
            coverage_percent=coverage,
        )

        logger.debug(
            "Scored layout bs=%d ris=%d arrays=%d -> coverage=%.1f%% signal=%.1f dBm",
            bs_count, ris_count, array_count, coverage, signal,
        )
        return metrics

    @staticmethod
    def is_success(metrics: SimulationMetrics) -> bool:
        """Win condition. Only coverage counts."""
        return metrics.coverage_percent >= SUCCESS_COVERAGE_THRESHOLD

    @staticmethod
    def count_by_kind(components: Iterable[GameComponent]) -> Dict[ComponentKind, int]:
        """Count components per kind. Every kind is present in the result."""
        counts = Counter(component.kind for component in components)
        return {kind: counts.get(kind, 0) for kind in ComponentKind}

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _select_branch(bs_count: int, ris_count: int):
        if bs_count == 0:
            return NO_TRANSMITTER_RESULT
        if bs_count == 1:
            return SINGLE_TRANSMITTER_RESULT
        if bs_count >= MULTI_TRANSMITTER_THRESHOLD and ris_count == 0:
            return MULTI_TRANSMITTER_RESULT
        return MULTI_TRANSMITTER_WITH_RIS_RESULT
