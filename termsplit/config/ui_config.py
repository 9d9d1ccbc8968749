"""
termsplit UI Configuration.

Handles persistence of UI preferences for split layouts.
Config is stored in ~/.config/termsplit/ui_config.json
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, TypedDict

from ..exceptions import ConfigurationError
from .constants import (
    DEFAULT_ROTATION_CLASSES,
    ENV_VAR_DEFINITIONS,
    TERMSPLIT_CONFIG_DIR,
    validate_rotation_classes,
)

logger = logging.getLogger(__name__)

STRICT_ENV_VAR = "TERMSPLIT_STRICT_POSITIONS"


class SplitLayoutConfig(TypedDict):
    """Split layout preferences."""

    strict: bool
    rotation_classes: list[str]


DEFAULT_SPLIT_LAYOUT: SplitLayoutConfig = {
    "strict": True,
    "rotation_classes": list(DEFAULT_ROTATION_CLASSES),
}

DEFAULT_CONFIG: dict[str, Any] = {
    "split_layout": copy.deepcopy(DEFAULT_SPLIT_LAYOUT),
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/termsplit/ui_config.json
    """
    TERMSPLIT_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return TERMSPLIT_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if isinstance(config, dict):
                # Merge with defaults to handle missing keys
                return copy.deepcopy({**DEFAULT_CONFIG, **config})
            logger.warning(f"Ignoring non-object UI config at {path}")
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not read UI config {path}: {e}")
    return copy.deepcopy(DEFAULT_CONFIG)


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        # Config is non-critical
        logger.warning(f"Could not save UI config {path}: {e}")


def _strict_from_env() -> bool | None:
    value = os.environ.get(STRICT_ENV_VAR)
    if value is None:
        return None
    valid_values = ENV_VAR_DEFINITIONS[STRICT_ENV_VAR]["valid_values"]
    if value.lower() not in valid_values:
        raise ConfigurationError(
            f"Invalid value '{value}' for {STRICT_ENV_VAR}. Valid values: {valid_values}",
            setting=STRICT_ENV_VAR,
        )
    return value.lower() in ("true", "1")


def get_split_layout_config() -> SplitLayoutConfig:
    """Get split layout configuration, merged with defaults.

    The TERMSPLIT_STRICT_POSITIONS environment variable overrides the
    persisted ``strict`` flag. The rotation table is returned as stored;
    use get_rotation_classes() for a validated copy.

    Raises:
        ConfigurationError: if TERMSPLIT_STRICT_POSITIONS holds an invalid value
    """
    raw = load_ui_config().get("split_layout", {})
    if not isinstance(raw, dict):
        raw = {}
    layout: SplitLayoutConfig = copy.deepcopy({**DEFAULT_SPLIT_LAYOUT, **raw})  # type: ignore[typeddict-item]

    env_strict = _strict_from_env()
    if env_strict is not None:
        layout["strict"] = env_strict
    layout["strict"] = bool(layout["strict"])
    return layout


def set_split_layout_config(layout: SplitLayoutConfig) -> None:
    """Persist split layout configuration."""
    config = load_ui_config()
    config["split_layout"] = copy.deepcopy(dict(layout))
    save_ui_config(config)


def is_strict() -> bool:
    """Whether occupancy transitions should raise on contract violations."""
    return get_split_layout_config()["strict"]


def get_rotation_classes() -> list[str]:
    """Icon rotation classes, one per split position.

    Raises:
        ConfigurationError: if the stored table does not have one entry
            per split position
    """
    return validate_rotation_classes(get_split_layout_config()["rotation_classes"])
