"""
Pipeline configuration management.

Loads pipeline settings from a YAML file, applies environment overrides
and validates the result into a PipelineConfig.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from csv_automation.core.models import PipelineConfig

ENV_PREFIX = "CSV_BOT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class PipelineConfigLoader:
    """
    Loads pipeline settings.

    Precedence, lowest first: model defaults, YAML file, environment
    variables prefixed with ``CSV_BOT_`` (optionally read from a .env file).

    Expected YAML format:
    ```yaml
    pipeline:
      input_dir: ./data/input
      output_dir: ./data/output
      remove_duplicates: true
      auto_archive: true
      delimiter: ","
      encoding: utf-8
      retry_attempts: 3
      process_interval_seconds: 60
    ```
    """

    def __init__(self, config_path: str | Path | None = None, env_file: str | Path | None = None):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the YAML configuration file (optional)
            env_file: Path to a .env file with CSV_BOT_* variables (optional)
        """
        self.config_path = Path(config_path) if config_path else None
        if self.config_path and not self.config_path.exists():
            raise FileNotFoundError(f"Pipeline configuration file not found: {config_path}")

        self.env_file = Path(env_file) if env_file else None
        if self.env_file and not self.env_file.exists():
            raise FileNotFoundError(f"Environment file not found: {env_file}")

    def load(self, overrides: dict[str, Any] | None = None) -> PipelineConfig:
        """
        Load, merge and validate the configuration.

        Args:
            overrides: Values that win over every other source (e.g. CLI flags)

        Returns:
            Validated PipelineConfig

        Raises:
            ValueError: If the file is not valid YAML or its structure is invalid
            pydantic.ValidationError: If a setting fails validation
        """
        settings: dict[str, Any] = {}
        settings.update(self._load_file())
        settings.update(self._load_env())
        settings.update({k: v for k, v in (overrides or {}).items() if v is not None})

        return PipelineConfig(**settings)

    def _load_file(self) -> dict[str, Any]:
        if not self.config_path:
            return {}

        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not config:
            return {}

        if not isinstance(config, dict) or "pipeline" not in config:
            raise ValueError("Configuration file must contain 'pipeline' section")

        section = config["pipeline"] or {}
        if not isinstance(section, dict):
            raise ValueError("'pipeline' section must be a mapping")

        unknown = set(section) - set(PipelineConfig.model_fields)
        if unknown:
            raise ValueError(f"Unknown pipeline settings: {', '.join(sorted(unknown))}")

        return section

    def _load_env(self) -> dict[str, Any]:
        if self.env_file:
            # Existing environment variables win over the file
            load_dotenv(self.env_file, override=False)

        settings: dict[str, Any] = {}
        for field_name, field in PipelineConfig.model_fields.items():
            raw = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if raw is None:
                continue
            if field.annotation is bool:
                settings[field_name] = _parse_bool(raw, field_name)
            else:
                settings[field_name] = raw
        return settings


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{field_name.upper()} must be a boolean, got {raw!r}")
