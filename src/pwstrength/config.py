# SPDX-License-Identifier: MIT
"""
Configuration loader for pwstrength.

Classification thresholds are fixed; configuration only covers how
results are presented and gated.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from pwstrength.classify.labels import LABELS
from pwstrength.core.exceptions import PWStrengthConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".pwstrength.yml", ".pwstrength.yaml")
CATEGORY_NAMES = ("weak", "medium", "strong")
OUTPUT_FORMATS = ("text", "json")
KNOWN_KEYS = ("locale", "labels", "format", "fail_below")


def load_config(config_path: Optional[str] = None, search_dir: str = ".") -> Dict[str, Any]:
    """
    Load configuration following the search order.

    Args:
        config_path: Explicit config path from the --config CLI flag
        search_dir: Directory searched for .pwstrength.yml/.pwstrength.yaml

    Returns:
        Dictionary containing the configuration with defaults applied

    Raises:
        PWStrengthConfigError: If the config is malformed or an explicitly
            provided config file is missing
    """
    # 1. Explicit --config
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise PWStrengthConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        config = _load_yaml_config(config_abs_path)
        logger.info("Loaded config: %s", config_abs_path)
        return config

    # 2. .pwstrength.yml or .pwstrength.yaml in the search directory
    search_path = Path(search_dir).resolve()
    for config_name in CONFIG_FILENAMES:
        config_file = search_path / config_name
        if config_file.exists():
            config = _load_yaml_config(config_file)
            logger.info("Loaded config: %s", config_file)
            return config

    # 3. Built-in defaults
    logger.info("Using default config")
    return get_default_config()


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate a YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PWStrengthConfigError(
            f"Failed to parse config file: {e}", config_path=str(config_path)
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise PWStrengthConfigError(
            f"Failed to read config file: {e}", config_path=str(config_path)
        ) from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise PWStrengthConfigError(
            "Config must be a dictionary", config_path=str(config_path)
        )

    try:
        _validate_config(config)
    except PWStrengthConfigError as e:
        e.config_path = str(config_path)
        raise

    return _apply_defaults(config)


def _validate_config(config: Dict[str, Any]) -> None:
    """Validate configuration keys and values."""
    for key in config:
        if key not in KNOWN_KEYS:
            raise PWStrengthConfigError(f"Unknown config key: {key}", section=str(key))

    locale = config.get("locale")
    if locale is not None and (not isinstance(locale, str) or locale not in LABELS):
        raise PWStrengthConfigError(
            f"Unsupported locale: {locale} (expected one of {', '.join(LABELS)})",
            section="locale",
        )

    labels = config.get("labels")
    if labels is not None:
        if not isinstance(labels, dict):
            raise PWStrengthConfigError("labels must be a dictionary", section="labels")
        for name, value in labels.items():
            if name not in CATEGORY_NAMES:
                raise PWStrengthConfigError(f"Unknown category in labels: {name}", section="labels")
            if not isinstance(value, str) or not value:
                raise PWStrengthConfigError(
                    f"Label for {name} must be a non-empty string", section="labels"
                )

    output_format = config.get("format")
    if output_format is not None and (
        not isinstance(output_format, str) or output_format not in OUTPUT_FORMATS
    ):
        raise PWStrengthConfigError(f"Unsupported format: {output_format}", section="format")

    fail_below = config.get("fail_below")
    if fail_below is not None and str(fail_below).lower() not in CATEGORY_NAMES:
        raise PWStrengthConfigError(f"Unknown category: {fail_below}", section="fail_below")


def _apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to configuration."""
    if config.get("locale") is None:
        config["locale"] = "en"

    if config.get("labels") is None:
        config["labels"] = {}

    if config.get("format") is None:
        config["format"] = "text"

    if config.get("fail_below") is not None:
        config["fail_below"] = str(config["fail_below"]).lower()
    else:
        config["fail_below"] = None

    return config


def get_default_config() -> Dict[str, Any]:
    """
    Get the default configuration.

    Returns:
        Dictionary with default settings
    """
    return {
        "locale": "en",
        "labels": {},
        "format": "text",
        "fail_below": None,
    }


def create_default_config_template() -> str:
    """
    Create a minimal .pwstrength.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    return """# pwstrength configuration
# Classification thresholds are fixed; these settings only affect output.

# Built-in label set: en (Weak/Medium/Strong) or pt (Fraca/Média/Forte)
locale: en

# Per-category label overrides
labels: {}
  # weak: "Too weak"
  # medium: "OK"
  # strong: "Great"

# Output format for `pwstrength check`: text or json
format: text

# Exit with status 1 when any password is below this category
# (weak, medium, strong); leave empty to disable
fail_below:
"""
