"""
Configuration loader for YAML-based game configurations.
"""

import yaml
from dataclasses import fields, replace
from pathlib import Path
from typing import Optional

from .game_config import GameConfig, default_config


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        GameConfig instance with values from YAML file

    Raises:
        FileNotFoundError: If the config file doesn't exist
        yaml.YAMLError: If the YAML file is invalid
        ValueError: If a value is out of range
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        return replace(default_config)

    known_keys = {f.name for f in fields(GameConfig)}
    values = {}
    for key, value in config_dict.items():
        if key in known_keys:
            values[key] = value
        else:
            # Warn about unknown keys but don't fail
            print(f"Warning: Unknown config key '{key}' in YAML file")

    # YAML keys are strings when quoted; seats are ints
    if values.get("agent_types"):
        values["agent_types"] = {int(seat): agent for seat, agent in values["agent_types"].items()}

    # Validation runs in GameConfig.__post_init__
    return GameConfig(**values)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load configuration from YAML file or return a copy of the default.

    Args:
        config_path: Optional path to YAML config file. If None, returns default config.

    Returns:
        GameConfig instance
    """
    if config_path is None:
        return replace(default_config)

    return load_config_from_yaml(config_path)
