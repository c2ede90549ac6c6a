"""
config_loader.py
================
This module handles the loading and validation of the YAML configuration
file that controls logging and target batching.

Responsibilities:
    - Locate the config file (default: ./config.yaml)
    - Load and parse YAML content safely
    - Validate keys and value types
    - Merge the result over built-in defaults
"""

import os
import yaml

DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULTS = {
    "log_dir": "logs",
    "log_level": "INFO",
    "batch_size": 50,
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


class ConfigLoader:
    """
    Loads and validates the ScopeCheck YAML configuration.
    """

    def __init__(self, config_path: str = None):
        """
        Initialize the loader.
        :param config_path: Explicit path to a YAML file. When omitted,
                            ./config.yaml is used if present, otherwise defaults.
        """
        self.explicit = config_path is not None
        self.config_path = config_path or DEFAULT_CONFIG_PATH

    # ----------------------------------------------------------------------
    def _validate_config_structure(self, config_data, config_file: str):
        """
        Validate the YAML structure: a mapping of known keys with the right types.
        """
        if not isinstance(config_data, dict):
            raise ValueError(
                f"Config '{config_file}' must be a mapping, got {type(config_data).__name__}"
            )

        unknown = sorted(set(config_data) - set(DEFAULTS))
        if unknown:
            raise ValueError(
                f"Config '{config_file}' has unknown key(s): {', '.join(map(str, unknown))}"
            )

        if "log_dir" in config_data and not isinstance(config_data["log_dir"], str):
            raise ValueError(f"'log_dir' in {config_file} must be a string")

        if "log_level" in config_data:
            level = config_data["log_level"]
            if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
                raise ValueError(
                    f"'log_level' in {config_file} must be one of {sorted(_LOG_LEVELS)}, got {level!r}"
                )

        if "batch_size" in config_data:
            size = config_data["batch_size"]
            # bool is a subclass of int
            if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
                raise ValueError(
                    f"'batch_size' in {config_file} must be a positive integer, got {size!r}"
                )

        return True

    # ----------------------------------------------------------------------
    def load(self) -> dict:
        """
        Load the configuration and merge it over DEFAULTS.
        An empty file yields the defaults.
        """
        config = dict(DEFAULTS)

        if not os.path.exists(self.config_path):
            if self.explicit:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            return config

        with open(self.config_path, "r") as file:
            try:
                config_data = yaml.safe_load(file)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML format in {self.config_path}: {e}")

        if config_data is None:
            return config

        self._validate_config_structure(config_data, self.config_path)
        config.update(config_data)
        config["log_level"] = config["log_level"].upper()
        return config
