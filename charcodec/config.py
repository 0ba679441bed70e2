"""
YAML configuration for the charcodec command line tools
"""

import copy
import logging
import yaml
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'codec': {
        'wrap_special': True,
    },
    'display': {
        'separator': ', ',
        'show_breakdown': False,
    },
    'parsing': {
        'separator': ',',
    },
    'dataset': {
        'context_window': 32,
        'stride': 16,
    },
}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used"""


def _merge(base: dict, override: dict) -> dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[str] = None) -> dict:
    """Load configuration from a YAML file layered over the defaults"""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file {config_path} not found")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file loads as None
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration file {config_path} must contain a mapping")

    logger.debug("Loaded configuration from %s", config_path)
    return _merge(config, loaded)
