"""Component catalogue, built-in levels and level-file loading."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from src.game_manager.config import LEVELS_DIR, VALID_LEVEL_CONTEXTS
from src.game_manager.game_state import ComponentSpec, LevelConfig
from src.scoring_engine.models import ComponentKind, LevelObjective

logger = logging.getLogger(__name__)


COMPONENT_DEFINITIONS: Dict[ComponentKind, ComponentSpec] = {
    ComponentKind.BS_28GHZ: ComponentSpec(
        name="28 GHz Base Station",
        cost=30,
        description="Standard mmWave transmitter. High speed, low penetration.",
        range=5,
    ),
    ComponentKind.PHASED_ARRAY: ComponentSpec(
        name="Phased Array",
        cost=45,
        description="Steerable beam antenna. Focused gain, higher cost.",
        range=8,
    ),
    ComponentKind.RIS_PANEL: ComponentSpec(
        name="RIS Panel",
        cost=15,
        description=(
            "Reconfigurable Intelligent Surface. "
            "Reflects signals around obstacles."
        ),
        range=3,
    ),
    ComponentKind.OBSTACLE: ComponentSpec(
        name="Obstacle",
        cost=0,
        description="Building or structure blocking RF signals.",
        range=0,
    ),
}


LEVEL_FENWAY = LevelConfig(
    id="2-1",
    name="Fenway Park Challenge",
    description=(
        "Deploy 6G infrastructure to ensure seamless connectivity for "
        "IMS2026 attendees at the stadium."
    ),
    context="CITY",
    grid_size=20,
    budget=100,
    available_components=[
        ComponentKind.BS_28GHZ,
        ComponentKind.PHASED_ARRAY,
        ComponentKind.RIS_PANEL,
    ],
    objectives=[
        LevelObjective(
            id="obj_coverage",
            description="Coverage Area",
            target_value=95,
            unit="%",
            metric="coverage_percent",
            comparison=">=",
        ),
        LevelObjective(
            id="obj_latency",
            description="Max Latency",
            target_value=10,
            unit="ms",
            metric="latency",
            comparison="<=",
        ),
    ],
    map_image="https://picsum.photos/800/600",
)

BUILTIN_LEVELS: Dict[str, LevelConfig] = {LEVEL_FENWAY.id: LEVEL_FENWAY}


class LevelLoader:
    """Loads level definitions from JSON, falling back to built-in levels."""

    REQUIRED_KEYS = {
        "id", "name", "grid_size", "budget",
        "available_components", "objectives",
    }
    REQUIRED_OBJECTIVE_KEYS = {"id", "description", "target_value", "unit"}

    def __init__(self, levels_dir: Optional[Path] = None):
        self.levels_dir = levels_dir or LEVELS_DIR

    def load_level(self, level_id: str) -> LevelConfig:
        """Load a level by id.

        A file ``level_<id>.json`` in ``levels_dir`` takes precedence over
        a built-in level with the same id.

        Raises:
            FileNotFoundError: If neither a file nor a built-in level exists.
            ValueError: If the level file is malformed.
        """
        level_file = self.levels_dir / f"level_{level_id}.json"
        if level_file.exists():
            return self.load_level_file(level_file)

        if level_id in BUILTIN_LEVELS:
            logger.debug("Using built-in level %s", level_id)
            return BUILTIN_LEVELS[level_id]

        raise FileNotFoundError(
            f"No level definition found for {level_id!r} "
            f"(looked for {level_file})"
        )

    def load_level_file(self, level_file: Path) -> LevelConfig:
        """Parse and validate a single level JSON file."""
        with open(level_file, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Corrupt level file {level_file}: {e}") from e

        level = self.level_from_dict(data)
        logger.info(
            "Loaded level %s (%s) from %s: budget=%d, %d objectives",
            level.id, level.name, level_file, level.budget, len(level.objectives),
        )
        return level

    def level_from_dict(self, data: Dict) -> LevelConfig:
        """Build a :class:`LevelConfig` from its JSON form."""
        missing = self.REQUIRED_KEYS - set(data.keys())
        if missing:
            raise ValueError(f"Level definition missing required keys: {missing}")

        context = data.get("context", "CITY")
        if context not in VALID_LEVEL_CONTEXTS:
            raise ValueError(
                f"Invalid level context '{context}'. "
                f"Must be one of: {VALID_LEVEL_CONTEXTS}"
            )

        try:
            grid_size = int(data["grid_size"])
            budget = int(data["budget"])
        except (TypeError, ValueError) as e:
            raise ValueError(f"grid_size and budget must be integers: {e}") from e

        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        if budget < 0:
            raise ValueError(f"budget cannot be negative, got {budget}")

        try:
            kinds = [ComponentKind(k) for k in data["available_components"]]
        except ValueError as e:
            raise ValueError(f"Unknown component kind in level: {e}") from e

        objectives = []
        for obj in data["objectives"]:
            obj_missing = self.REQUIRED_OBJECTIVE_KEYS - set(obj.keys())
            if obj_missing:
                raise ValueError(
                    f"Objective {obj.get('id', '?')} missing keys: {obj_missing}"
                )
            objectives.append(
                LevelObjective(
                    id=obj["id"],
                    description=obj["description"],
                    target_value=obj["target_value"],
                    unit=obj["unit"],
                    **{k: obj[k] for k in ("metric", "comparison") if k in obj},
                )
            )

        return LevelConfig(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            context=context,
            grid_size=grid_size,
            budget=budget,
            available_components=kinds,
            objectives=objectives,
            map_image=data.get("map_image", ""),
        )

    @staticmethod
    def level_to_dict(level: LevelConfig) -> Dict:
        """Serialise a level to the JSON form read by :meth:`level_from_dict`."""
        return {
            "id": level.id,
            "name": level.name,
            "description": level.description,
            "context": level.context,
            "grid_size": level.grid_size,
            "budget": level.budget,
            "map_image": level.map_image,
            "available_components": [k.value for k in level.available_components],
            "objectives": [
                {
                    "id": obj.id,
                    "description": obj.description,
                    "target_value": obj.target_value,
                    "unit": obj.unit,
                    "metric": obj.metric,
                    "comparison": obj.comparison,
                }
                for obj in level.objectives
            ],
        }
