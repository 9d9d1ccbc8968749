"""
Centralized constants for termsplit.

Slot counts, the slot-to-rotation lookup table and config locations live
here so the engine and the UI glue agree on them.
"""

import os
from pathlib import Path
from typing import Any, List

from termsplit.exceptions import ConfigurationError

# =============================================================================
# PATHS
# =============================================================================

TERMSPLIT_CONFIG_DIR = Path(
    os.environ.get("TERMSPLIT_CONFIG_DIR", Path.home() / ".config" / "termsplit")
)

# =============================================================================
# SPLIT POSITIONS
# =============================================================================

# default, right, bottom, left
SPLIT_POSITION_COUNT = 4

# CSS classes that rotate a split's header icon to match its position.
# WARNING: must stay parallel to SplitPosition (left -> 270 degrees).
DEFAULT_ROTATION_CLASSES = ("", "rotate-90", "rotate-180", "rotate-270")


def validate_rotation_classes(rotation_classes: Any) -> List[str]:
    """Check a rotation table has one entry per split position.

    Returns:
        A fresh list copy of the table

    Raises:
        ConfigurationError: if the table is not a list/tuple of
            SPLIT_POSITION_COUNT entries
    """
    if (
        not isinstance(rotation_classes, (list, tuple))
        or len(rotation_classes) != SPLIT_POSITION_COUNT
    ):
        raise ConfigurationError(
            f"rotation_classes must list exactly {SPLIT_POSITION_COUNT} entries",
            setting="split_layout.rotation_classes",
            value=rotation_classes,
        )
    return list(rotation_classes)


validate_rotation_classes(DEFAULT_ROTATION_CLASSES)

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "TERMSPLIT_CONFIG_DIR": {
        "description": "Directory holding ui_config.json",
        "default": str(Path.home() / ".config" / "termsplit"),
        "valid_values": None,
    },
    "TERMSPLIT_STRICT_POSITIONS": {
        "description": "Raise on occupancy contract violations instead of corrupting state",
        "default": "true",
        "valid_values": ["true", "false", "1", "0"],
    },
}
