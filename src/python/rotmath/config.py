"""
===============================================================================
ROTMATH - Configuration
===============================================================================
Loads the YAML configuration used by the command line front end and checks
it against the known sections. Missing keys fall back to DEFAULT_CONFIG.

Example (config/rotmath.yaml):

    logging:
      level: INFO
    output:
      angle_units: degrees
      precision: 6
    scalar:
      type: single
===============================================================================
"""

import copy
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    'logging': {
        'level': 'WARNING',
        'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    },
    'output': {
        'angle_units': 'radians',
        'precision': 8,
    },
    'scalar': {
        'type': 'double',
    },
}

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
ANGLE_UNITS = ('radians', 'degrees')
SCALAR_TYPES = ('double', 'single')
MAX_PRECISION = 17


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(config: dict) -> None:
    """
    Check a configuration mapping against the known schema.

    Args:
        config: Fully merged configuration dictionary

    Raises:
        ValueError: naming the first offending key
    """
    for section, values in config.items():
        if section not in DEFAULT_CONFIG:
            raise ValueError(f"Unknown configuration section: '{section}'")
        if not isinstance(values, dict):
            raise ValueError(f"Configuration section '{section}' must be a mapping")
        for key in values:
            if key not in DEFAULT_CONFIG[section]:
                raise ValueError(f"Unknown configuration key: '{section}.{key}'")

    level = config['logging']['level']
    if str(level).upper() not in LOG_LEVELS:
        raise ValueError(
            f"logging.level must be one of {LOG_LEVELS}, got '{level}'"
        )
    if not isinstance(config['logging']['format'], str):
        raise ValueError("logging.format must be a string")

    units = config['output']['angle_units']
    if units not in ANGLE_UNITS:
        raise ValueError(
            f"output.angle_units must be one of {ANGLE_UNITS}, got '{units}'"
        )

    precision = config['output']['precision']
    if (isinstance(precision, bool) or not isinstance(precision, int)
            or not 0 <= precision <= MAX_PRECISION):
        raise ValueError(
            f"output.precision must be an integer in [0, {MAX_PRECISION}], "
            f"got {precision!r}"
        )

    scalar_type = config['scalar']['type']
    if scalar_type not in SCALAR_TYPES:
        raise ValueError(
            f"scalar.type must be one of {SCALAR_TYPES}, got '{scalar_type}'"
        )


def load_config(config_path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to YAML config. None returns the defaults.

    Returns:
        Dictionary of configuration parameters, defaults filled in

    Raises:
        OSError: if the file cannot be read
        ValueError: if the document is not a mapping or fails validation
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    logger.info("Loading configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(
            f"Configuration root must be a mapping, got {type(loaded).__name__}"
        )

    config = _merge(DEFAULT_CONFIG, loaded)
    validate_config(config)
    return config
