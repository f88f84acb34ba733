from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

REPORTS_DIR = PROJECT_ROOT / "data" / "reports"

# Zero-cost kinds are unbounded by budget; cap how many are tried.
SWEEP_MAX_ZERO_COST_COUNT = 3
