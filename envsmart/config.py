"""Configuration loading for envsmart.

Settings are layered: defaults, then an optional ``envsmart.yaml`` in the
working directory, then the ``ENVSMART_SOURCE_FILE`` environment variable,
then explicit overrides (CLI flags).
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from envsmart.exceptions import ConfigError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "envsmart.yaml"
DEFAULT_SOURCE_FILE = ".env"
SOURCE_FILE_ENV_VAR = "ENVSMART_SOURCE_FILE"
LOG_LEVELS = ("debug", "info", "warn", "error")


@dataclass
class EnvSmartConfig:
    """Resolved envsmart settings."""
    source_file: Path = Path(DEFAULT_SOURCE_FILE)
    log_level: str = "info"


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )

    known = {f.name for f in fields(EnvSmartConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {unknown}")

    return data


def _apply(config: EnvSmartConfig, values: Dict[str, Any]) -> None:
    for key, value in values.items():
        if value is None:
            continue
        if key == 'source_file':
            config.source_file = Path(str(value))
        elif key == 'log_level':
            level = str(value).lower()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Invalid log_level '{value}'. Expected one of {LOG_LEVELS}")
            config.log_level = level


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None
) -> EnvSmartConfig:
    """
    Build the effective configuration.

    Args:
        config_path: Explicit YAML config file. When omitted, ``envsmart.yaml``
            in the working directory is used if it exists.
        overrides: Values that win over every other layer (None values ignored)

    Returns:
        EnvSmartConfig with all layers applied

    Raises:
        ConfigError: If the config file is unreadable, malformed or holds unknown keys
        FileNotFoundError: If an explicit config_path does not exist
    """
    config = EnvSmartConfig()

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
    else:
        path = Path(DEFAULT_CONFIG_FILE)

    if path.exists():
        logger.debug(f"Reading config file: {path}")
        _apply(config, _read_config_file(path))

    env_source = os.environ.get(SOURCE_FILE_ENV_VAR)
    if env_source:
        _apply(config, {'source_file': env_source})

    if overrides:
        _apply(config, overrides)

    return config
