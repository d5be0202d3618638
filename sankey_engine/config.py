"""
Configuration for the Sankey flow engine.

Values come from defaults, an optional JSON file, an optional dict, and
environment overrides of the form SANKEY_{SECTION}_{FIELD}, e.g.
SANKEY_ENGINE_MAX_BREAK_ITERATIONS=500 or SANKEY_LOGGING_LEVEL=DEBUG.
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from .models import ValueType

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class EngineConfig(BaseModel):
    """Flow aggregation and cycle resolution"""

    max_transfer_details: Optional[int] = Field(
        default=None,
        description="Cap on transfer detail records kept per flow (None keeps all)",
        ge=0,
    )
    max_break_iterations: Optional[int] = Field(
        default=None,
        description="Upper bound on cycle-breaking iterations (None is unbounded)",
        ge=1,
    )
    default_value_type: ValueType = Field(
        default=ValueType.SUM, description="Metric used when a caller gives none"
    )


class DisplayConfig(BaseModel):
    """Filters layered on top of an engine result"""

    minimum_flow_value: Optional[float] = Field(
        default=None, description="Hide links below this value", ge=0.0
    )
    show_self_loops: bool = Field(default=False, description="Keep source == target links")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="loguru level for the stderr sink")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v):
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v}, expected one of {sorted(LOG_LEVELS)}")
        return v


class SankeyConfig(BaseModel):
    """Master configuration container"""

    engine: EngineConfig = Field(default_factory=EngineConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _coerce_env_value(value: str):
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("none", "null", ""):
        return None
    if value.isdigit() or (value.startswith("-") and value[1:].isdigit()):
        return int(value)
    try:
        return float(value)
    except ValueError:
        return value


def _env_overrides(environ) -> Dict[str, Dict]:
    overrides: Dict[str, Dict] = {}
    for env_var, value in environ.items():
        if not env_var.startswith("SANKEY_"):
            continue
        parts = env_var.split("_")[1:]
        if len(parts) < 2:
            continue
        section = parts[0].lower()
        field = "_".join(parts[1:]).lower()
        overrides.setdefault(section, {})[field] = _coerce_env_value(value)
    return overrides


def load_config(
    config_path: Optional[Path] = None,
    config_data: Optional[Dict] = None,
    environ: Optional[Dict[str, str]] = None,
) -> SankeyConfig:
    """
    Load configuration with environment variable overrides and optional config file.

    Falls back to defaults (with a warning) when the merged values do not validate.
    """
    config_dict: Dict = {}

    if config_path and config_path.exists():
        try:
            with open(config_path, "r") as f:
                config_dict = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {config_path}: {e}")

    if config_data:
        for section, fields in config_data.items():
            config_dict.setdefault(section, {}).update(fields)

    env = os.environ if environ is None else environ
    for section, fields in _env_overrides(env).items():
        config_dict.setdefault(section, {}).update(fields)

    try:
        return SankeyConfig(**config_dict)
    except ValueError as e:
        logger.warning(f"Configuration validation failed: {e}")
        logger.warning("Using default configuration...")
        return SankeyConfig()


# Global configuration instance
config = load_config()
