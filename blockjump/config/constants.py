"""
Centralized constants for blockjump.

Search weights, thresholds, key combinations and file locations live here so
the catalog, index and UI layers agree on them.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

BLOCKJUMP_CONFIG_DIR = Path(
    os.environ.get("BLOCKJUMP_CONFIG_DIR", str(Path.home() / ".config" / "blockjump"))
)
CONFIG_FILE_NAME = "config.yaml"
LOG_FILE_NAME = "blockjump.log"
KEY_EVENTS_LOG_FILE_NAME = "key_events.log"

# Bundled sample catalog
DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_BLOCKS_PATH = DATA_DIR / "blocks.json"
DEFAULT_PATTERNS_PATH = DATA_DIR / "patterns.json"

# =============================================================================
# ENTRY DISPLAY DEFAULTS
# =============================================================================

PLACEHOLDER_TITLE = "Title"
PLACEHOLDER_DESCRIPTION = "Description"

# =============================================================================
# SEARCH RANKING
# =============================================================================

# Relative weight of each indexed field; title must stay the heaviest
FIELD_WEIGHTS = {
    "title": 1.0,
    "description": 0.7,
    "name": 0.7,
}

SUBSTRING_BASE_SCORE = 0.9  # Exact substring hit, before the length bonus
SUBSTRING_LENGTH_BONUS = 0.1  # Scaled by len(query) / len(field)
FUZZY_SCORE_CAP = 0.85  # Fuzzy hits never outrank substring hits

# Results scoring above this are dropped (0 = perfect, 1 = no match)
DEFAULT_SCORE_THRESHOLD = 0.45

# =============================================================================
# KEYBOARD
# =============================================================================

DEFAULT_TOGGLE_KEYS = ("ctrl+j",)
DEFAULT_CLOSE_KEYS = ("escape",)

# =============================================================================
# LOG ROTATION
# =============================================================================

MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB
LOG_BACKUP_COUNT = 2
