"""
Config Loader

Loads analysis configuration from an optional YAML file and the environment.
Precedence: defaults < YAML file < environment < explicit overrides.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "DAG"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AnalysisConfig(BaseModel):
    """Configuration for one analysis run"""
    input_path: Path
    show_nodes: bool = True
    output_format: Literal["text", "json"] = "text"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}; expected one of {', '.join(_LOG_LEVELS)}")
        return level


class ConfigLoader:
    """
    Builds an AnalysisConfig from YAML, environment and overrides.

    Environment variables:
        DAG_INPUT_PATH: Path of the tangle description file
        DAG_SHOW_NODES: "1"/"true" to print the node dump
        DAG_OUTPUT_FORMAT: "text" or "json"
        DAG_LOG_LEVEL: Logging level name

    Example usage:
        loader = ConfigLoader(Path("analysis.yaml"))
        config = loader.load({"output_format": "json"})
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize loader.

        Args:
            config_path: Optional YAML file with AnalysisConfig fields
        """
        self.config_path = config_path
        logger.debug(f"Initialized ConfigLoader with config_path: {config_path}")

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> AnalysisConfig:
        """
        Load and validate the configuration.

        Args:
            overrides: Values taking precedence over file and environment
                       (None values are ignored)

        Returns:
            Validated AnalysisConfig

        Raises:
            ValueError: If the file cannot be loaded or validation fails
        """
        raw: Dict[str, Any] = {}

        if self.config_path is not None:
            raw.update(self._load_yaml(self.config_path))

        raw.update(self._load_env())

        if overrides:
            raw.update({k: v for k, v in overrides.items() if v is not None})

        try:
            config = AnalysisConfig(**raw)
        except ValidationError as e:
            raise ValueError(f"Invalid analysis configuration: {e}")

        logger.debug(f"Loaded config: {config}")
        return config

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ValueError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {path}: {e}")
            raise ValueError(f"Failed to load {path}: {e}")

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        logger.info(f"Loaded config file {path.name}: {sorted(raw)}")
        return raw

    @staticmethod
    def _load_env(prefix: str = ENV_PREFIX) -> Dict[str, Any]:
        """Collect config values from environment variables"""
        values: Dict[str, Any] = {}
        for field_name in AnalysisConfig.model_fields:
            value = os.getenv(f"{prefix}_{field_name.upper()}")
            if value is not None:
                values[field_name] = value
        return values
