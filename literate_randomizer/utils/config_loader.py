"""
Configuration loader for literate_randomizer.

Configuration lives in YAML files under the project's configs/ directory:
    - configs/literate_randomizer_{environment}.yaml (checked first)
    - configs/literate_randomizer.yaml (fallback)

Values from the file are merged over DEFAULT_CONFIG, and an explicit config
dict passed by the caller is merged over both.
"""

import copy
import logging
import os

import yaml

from literate_randomizer.errors import ConfigurationError
from literate_randomizer.markov_chain.text_generator import to_count
from literate_randomizer.markov_chain.weighted_sampler import (
    DEFAULT_PUNCTUATION_DISTRIBUTION,
    validate_punctuation_distribution,
)

CONFIG_DIR_NAME = "configs"
CONFIG_FILE_PREFIX = "literate_randomizer"

DEFAULT_CONFIG = {
    "punctuation_distribution": list(DEFAULT_PUNCTUATION_DISTRIBUTION),
    "source_material_file": None,
    "defaults": {
        "words": [3, 15],
        "sentences": [5, 15],
        "paragraphs": [3, 5],
        "join": "\n\n",
    },
    "logging": {
        "console_level": "WARNING",
        "console_json": True,
        "log_file": None,
    },
}

SECTION_KEYS = {
    "defaults": {"words", "sentences", "paragraphs", "join"},
    "logging": {"console_level", "console_json", "log_file"},
}


def find_config_dir(start_dir=None):
    """
    Walk up from `start_dir` until a configs/ directory is found.

    Args:
        start_dir (str, optional): Directory to start from, defaults to this
                                   module's directory.

    Returns:
        str or None: Path of the configs directory, None if there is none.
    """
    current_dir = os.path.abspath(start_dir or os.path.dirname(__file__))

    # Stop at filesystem root
    while True:
        candidate = os.path.join(current_dir, CONFIG_DIR_NAME)
        if os.path.isdir(candidate):
            return candidate
        parent = os.path.dirname(current_dir)
        if parent == current_dir:
            return None
        current_dir = parent


def read_config_file(path, logger=None):
    """
    Read one YAML config file.

    Returns:
        dict or None: Parsed mapping, None when the file is unreadable or
                      malformed (a warning is logged).
    """
    logger = logger or logging.getLogger(__name__)
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Error loading config from {path}: {e}")
        return None

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    logger.info("Config loaded", extra={"metrics": {"config_path": path}})
    return config


def merge_config(base, override):
    """Merge `override` over `base`, one level deep for the known sections."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if key not in DEFAULT_CONFIG:
            raise ConfigurationError(f"Unknown configuration key: {key}")
        if key in SECTION_KEYS:
            if not isinstance(value, dict):
                raise ConfigurationError(f"Configuration section '{key}' must be a mapping")
            unknown = set(value) - SECTION_KEYS[key]
            if unknown:
                raise ConfigurationError(
                    f"Unknown keys in '{key}': {', '.join(sorted(unknown))}")
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def validate_config(config):
    """
    Check value types and ranges.

    Raises:
        ConfigurationError: For invalid punctuation, paths or logging values.
        InvalidRangeError: For invalid default counts.
    """
    validate_punctuation_distribution(config["punctuation_distribution"])

    source_file = config["source_material_file"]
    if source_file is not None and not isinstance(source_file, str):
        raise ConfigurationError("source_material_file must be a path string")

    defaults = config["defaults"]
    for name in ("words", "sentences", "paragraphs"):
        to_count(defaults[name], name)
    if not isinstance(defaults["join"], str):
        raise ConfigurationError("defaults.join must be a string")

    level = config["logging"]["console_level"]
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int) or isinstance(level, bool):
        raise ConfigurationError(
            f"Unknown logging level: {config['logging']['console_level']}")
    config["logging"]["console_level"] = level

    return config


def load_config(environment="development", config=None, config_dir=None, logger=None):
    """
    Load the effective configuration.

    Args:
        environment (str): Selects literate_randomizer_{environment}.yaml
        config (dict, optional): Explicit overrides, applied last
        config_dir (str, optional): Directory to read instead of searching
        logger (logging.Logger, optional): Logger for load events

    Returns:
        dict: The merged and validated configuration
    """
    merged = copy.deepcopy(DEFAULT_CONFIG)
    config_dir = config_dir or find_config_dir()

    if config_dir:
        env_config_path = os.path.join(config_dir, f"{CONFIG_FILE_PREFIX}_{environment}.yaml")
        default_config_path = os.path.join(config_dir, f"{CONFIG_FILE_PREFIX}.yaml")

        for path in (env_config_path, default_config_path):
            if os.path.exists(path):
                file_config = read_config_file(path, logger=logger)
                if file_config is not None:
                    merged = merge_config(merged, file_config)
                    break

    merged = merge_config(merged, config)
    return validate_config(merged)
