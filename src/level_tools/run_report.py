"""Sweep a level's affordable layouts and write the table to CSV.

Usage:
    python -m src.level_tools.run_report [level_id] [output_dir]

Examples:
    python -m src.level_tools.run_report 2-1
    python -m src.level_tools.run_report 2-1 /tmp/reports
"""

import logging
import sys
from pathlib import Path

from src.game_manager.config import DEFAULT_LEVEL_ID
from src.game_manager.level_catalog import LevelLoader
from src.level_tools.config import REPORTS_DIR
from src.level_tools.layout_sweep import LayoutSweep, count_column
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def run_report(
    level_id: str = DEFAULT_LEVEL_ID,
    output_dir: Path | None = None,
    levels_dir: Path | None = None,
) -> Path:
    """Sweep *level_id* and write ``sweep_<level_id>.csv``.

    Args:
        level_id: Level to analyse (file or built-in).
        output_dir: Directory for the CSV. Defaults to ``data/reports/``.
        levels_dir: Directory holding level JSON files.

    Returns:
        Path to the generated CSV file.

    Raises:
        FileNotFoundError: If the level cannot be found.
    """
    if output_dir is None:
        output_dir = REPORTS_DIR

    level = LevelLoader(levels_dir).load_level(level_id)
    logger.info("Sweeping level %s (%s), budget %d RP", level.id, level.name, level.budget)

    sweeper = LayoutSweep(level)
    df = sweeper.sweep()

    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = output_dir / f"sweep_{level.id}.csv"
    df.to_csv(output_file, index=False)

    logger.info("Report complete! Output: %s", output_file)
    logger.info("  Layouts: %d, winning: %d", len(df), int(df["success"].sum()))

    for _, row in sweeper.outcome_summary(df).iterrows():
        logger.info(
            "  coverage %5.1f%% / %4.0f dBm: %d layouts, from %d RP",
            row["coverage_percent"], row["signal_strength"],
            row["layouts"], row["min_cost"],
        )

    best = sweeper.cheapest_winning_layout(df)
    if best is not None:
        logger.info(
            "  Cheapest win: %s for %d RP",
            ", ".join(
                f"{kind.value}={int(best[count_column(kind)])}"
                for kind in level.available_components
            ),
            best["cost"],
        )

    return output_file


if __name__ == "__main__":
    setup_logging()

    level_id = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_LEVEL_ID
    output_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        output = run_report(level_id, output_dir)
        print(f"Report complete: {output}")
    except Exception:
        logger.exception("Report failed")
        sys.exit(1)
