"""Data models shared by the scoring engine and the game layer."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Optional

from src.scoring_engine.config import (
    DEFAULT_OBJECTIVE_COMPARISON,
    DEFAULT_OBJECTIVE_METRIC,
    OBJECTIVE_DEFAULTS,
    OBJECTIVE_COMPARISONS,
)


class ComponentKind(str, Enum):
    """Placeable RF component kinds."""

    BS_28GHZ = "BS_28GHZ"
    PHASED_ARRAY = "PHASED_ARRAY"
    RIS_PANEL = "RIS_PANEL"
    OBSTACLE = "OBSTACLE"  # Level design only


@dataclass(frozen=True)
class GameComponent:
    """A single placed component on the board."""

    id: str
    kind: ComponentKind
    x: int
    y: int
    rotation: int = 0
    power: Optional[float] = None  # dBm
    locked: bool = False


@dataclass(frozen=True)
class SimulationMetrics:
    """Result of one scoring run."""

    signal_strength: float  # dBm
    snr: float  # dB
    latency: float  # ms
    power_consumption: float  # W
    coverage_percent: float

    @classmethod
    def baseline(cls) -> "SimulationMetrics":
        """Metrics shown before the first run and after a reset."""
        return cls(
            signal_strength=-110.0,
            snr=5.0,
            latency=45.0,
            power_consumption=0.0,
            coverage_percent=0.0,
        )


METRIC_FIELDS = tuple(f.name for f in fields(SimulationMetrics))


@dataclass(frozen=True)
class LevelObjective:
    """A target condition shown to the player.

    ``metric`` names the :class:`SimulationMetrics` field the objective reads
    and ``comparison`` is either ``">="`` or ``"<="``. Both are fixed when the
    level is defined; left as None they come from ``OBJECTIVE_DEFAULTS`` for
    the objective's id, else latency with ``"<="``. ``current_value`` and
    ``is_met`` are only ever set on copies returned by the evaluator.
    """

    id: str
    description: str
    target_value: float
    unit: str
    metric: Optional[str] = None
    comparison: Optional[str] = None
    current_value: float = 0.0
    is_met: bool = False

    def __post_init__(self):
        default_metric, default_comparison = OBJECTIVE_DEFAULTS.get(
            self.id, (DEFAULT_OBJECTIVE_METRIC, DEFAULT_OBJECTIVE_COMPARISON)
        )
        if self.metric is None:
            object.__setattr__(self, "metric", default_metric)
        if self.comparison is None:
            object.__setattr__(self, "comparison", default_comparison)

        if self.metric not in METRIC_FIELDS:
            raise ValueError(
                f"Objective {self.id!r} reads unknown metric {self.metric!r}. "
                f"Must be one of: {METRIC_FIELDS}"
            )
        if self.comparison not in OBJECTIVE_COMPARISONS:
            raise ValueError(
                f"Objective {self.id!r} has invalid comparison "
                f"{self.comparison!r}. Must be one of: {OBJECTIVE_COMPARISONS}"
            )
