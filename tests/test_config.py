"""Tests for configuration loading and environment overrides."""

import json

import pytest
from pydantic import ValidationError

from sankey_engine.config import (
    DisplayConfig, EngineConfig, LoggingConfig, SankeyConfig, load_config
)
from sankey_engine.models import ValueType


class TestDefaults:
    def test_defaults(self):
        config = SankeyConfig()
        assert config.engine.max_transfer_details is None
        assert config.engine.max_break_iterations is None
        assert config.engine.default_value_type is ValueType.SUM
        assert config.display.minimum_flow_value is None
        assert config.display.show_self_loops is False
        assert config.logging.level == "INFO"

    def test_bounds(self):
        with pytest.raises(ValidationError):
            EngineConfig(max_break_iterations=0)
        with pytest.raises(ValidationError):
            EngineConfig(max_transfer_details=-1)
        with pytest.raises(ValidationError):
            DisplayConfig(minimum_flow_value=-5)

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestLoadConfig:
    def test_no_sources(self):
        assert load_config(environ={}) == SankeyConfig()

    def test_env_overrides(self):
        config = load_config(environ={
            "SANKEY_ENGINE_MAX_BREAK_ITERATIONS": "500",
            "SANKEY_ENGINE_DEFAULT_VALUE_TYPE": "count",
            "SANKEY_DISPLAY_MINIMUM_FLOW_VALUE": "2.5",
            "SANKEY_DISPLAY_SHOW_SELF_LOOPS": "true",
            "SANKEY_LOGGING_LEVEL": "debug",
            "UNRELATED_VARIABLE": "ignored",
        })
        assert config.engine.max_break_iterations == 500
        assert config.engine.default_value_type is ValueType.COUNT
        assert config.display.minimum_flow_value == 2.5
        assert config.display.show_self_loops is True
        assert config.logging.level == "DEBUG"

    def test_config_data(self):
        config = load_config(config_data={"engine": {"max_transfer_details": 10}}, environ={})
        assert config.engine.max_transfer_details == 10

    def test_file_then_data_then_env(self, tmp_path):
        path = tmp_path / "sankey.json"
        path.write_text(json.dumps({
            "engine": {"max_transfer_details": 5, "max_break_iterations": 50},
            "display": {"minimum_flow_value": 1.0},
        }))
        config = load_config(
            config_path=path,
            config_data={"engine": {"max_break_iterations": 60}},
            environ={"SANKEY_DISPLAY_MINIMUM_FLOW_VALUE": "3"},
        )
        assert config.engine.max_transfer_details == 5
        assert config.engine.max_break_iterations == 60
        assert config.display.minimum_flow_value == 3

    def test_missing_file_ignored(self, tmp_path):
        assert load_config(config_path=tmp_path / "missing.json", environ={}) == SankeyConfig()

    def test_malformed_file_ignored(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        assert load_config(config_path=path, environ={}) == SankeyConfig()

    def test_invalid_values_fall_back_to_defaults(self):
        config = load_config(environ={"SANKEY_ENGINE_MAX_BREAK_ITERATIONS": "-3"})
        assert config == SankeyConfig()
