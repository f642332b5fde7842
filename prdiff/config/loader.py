"""Configuration loading.

An explicit path must exist. Without one, ``.prdiff.json`` in the working
directory is used when present; otherwise the Pydantic defaults apply.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from prdiff.config.schema import PrdiffConfig
from prdiff.core.errors import ConfigError

logger = logging.getLogger(__name__)

LOCAL_CONFIG_NAME = ".prdiff.json"


def load_config(path: Path | None = None, cwd: Path | None = None) -> PrdiffConfig:
    """Load configuration from a file, or fall back to defaults.

    Args:
        path: Explicit config file path. Must exist if given.
        cwd: Directory searched for ``.prdiff.json``. Defaults to Path.cwd().

    Returns:
        Validated PrdiffConfig.

    Raises:
        ConfigError: If the file is missing (explicit path only), unreadable,
            not a JSON object, or fails validation.
    """
    if path is None:
        path = (cwd or Path.cwd()) / LOCAL_CONFIG_NAME
        if not path.is_file():
            logger.debug("No %s found, using defaults", path)
            return PrdiffConfig()

    data = _read_config_object(path)
    logger.debug("Config loaded from: %s", path)

    try:
        return PrdiffConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e


def _read_config_object(path: Path) -> dict[str, Any]:
    """Read a config file as a JSON object; a blank file is ``{}``."""
    try:
        content = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if not content.strip():
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a JSON object, got {type(data).__name__}")
    return data
