from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
LEVELS_DIR = PROJECT_ROOT / "data" / "levels"

# Presentation pacing (seconds)
SIMULATION_DELAY_SECONDS = 2.0
FEEDBACK_DELAY_SECONDS = 1.0
TUTOR_ADVANCE_DELAY_SECONDS = 2.5

# Default level settings
DEFAULT_LEVEL_ID = "2-1"
DEFAULT_GRID_SIZE = 20
VALID_LEVEL_CONTEXTS = {"CITY", "CIRCUIT", "QUANTUM"}

# Length of generated component ids
COMPONENT_ID_LENGTH = 9

# Logging
LOGS_DIR = PROJECT_ROOT / "logs"
LOG_FILE_NAME = "placement_game.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
