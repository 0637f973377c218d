"""Pydantic configuration for chart labels, loadable from YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from loguru import logger
from pydantic import BaseModel, field_validator

from chart_label.exceptions import ConfigError
from chart_label.label_config import LabelConfig
from chart_label.styling import LabelType

DEFAULT_CONFIG_PATH = Path("chart_label.yaml")


class LabelSettings(BaseModel):
    """Initial label configuration -- immutable after creation."""

    model_config = {"frozen": True, "extra": "forbid"}

    title: str = ""
    delimiter: str = " "
    show_legend: bool = False
    value_format: str = "%.01f"
    label_type: LabelType = LabelType.TITLE
    appearance: Literal["light", "dark"] = "light"

    @field_validator("value_format")
    @classmethod
    def validate_value_format(cls, v: str) -> str:
        try:
            v % 0.0
        except (TypeError, ValueError) as e:
            raise ValueError(f"value_format {v!r} cannot format a number: {e}") from e
        return v

    def build_config(self) -> LabelConfig:
        """Create a fresh observable ``LabelConfig`` from these settings."""
        return LabelConfig(
            title=self.title,
            delimiter=self.delimiter,
            show_legend=self.show_legend,
        )

    @classmethod
    def from_yaml(cls, config_path: Path = DEFAULT_CONFIG_PATH, **overrides) -> LabelSettings:
        """Load from YAML, merge overrides (highest priority)."""
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.debug("No config at {path}, using defaults", path=config_path)
            data = {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {config_path}")
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**data)
        except Exception as e:
            raise ConfigError(f"Configuration error: {e}") from e
