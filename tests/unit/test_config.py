"""
Unit tests for configuration management.
"""

import pytest
from unittest.mock import patch
import os

from indentlint.config import IndentOptions, IndentUnit, Settings


def test_settings_loads_from_environment():
    """Test that settings can be loaded from environment variables."""
    with patch.dict(os.environ, {
        'INDENTLINT_LOG_LEVEL': 'DEBUG',
        'INDENTLINT_INDENT_SIZE': '2',
        'INDENTLINT_INDENT_UNIT': 'spaces',
    }):
        settings = Settings()

        assert settings.log_level == 'DEBUG'
        assert settings.indent_size == 2
        assert settings.indent_options() == IndentOptions(indent_size=2)


def test_settings_has_default_values():
    """Test that settings have appropriate default values."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

        assert settings.log_level == 'INFO'
        assert settings.indent_size == 4
        assert settings.indent_options().effective_size == 4


def test_settings_with_malformed_unit_fall_back():
    with patch.dict(os.environ, {'INDENTLINT_INDENT_UNIT': 'bananas'}):
        settings = Settings(_env_file=None)

        assert settings.indent_options() == IndentOptions()


def test_tabs_force_unit_size_one():
    options = IndentOptions.from_options({"indentSize": 8, "indentUnit": "tabs"})

    assert options.indent_unit == IndentUnit.TABS
    assert options.effective_size == 1


@pytest.mark.parametrize("size", [0, -1, "8", None, True])
def test_tabs_ignore_indent_size(size):
    options = IndentOptions.from_options({"indentUnit": "tabs", "indentSize": size})

    assert options.indent_unit == IndentUnit.TABS
    assert options.effective_size == 1


def test_settings_with_tabs_ignore_size():
    with patch.dict(os.environ, {'INDENTLINT_INDENT_UNIT': 'tabs', 'INDENTLINT_INDENT_SIZE': '0'}):
        settings = Settings(_env_file=None)

        assert settings.indent_options().effective_size == 1


def test_absent_options_use_defaults():
    options = IndentOptions.from_options(None)

    assert options.indent_size == 4
    assert options.indent_unit == IndentUnit.SPACES


@pytest.mark.parametrize("options", [
    {"indentSize": 0},
    {"indentSize": -2},
    {"indentSize": "4"},
    {"indentSize": True},
    {"indentUnit": "columns"},
    "four spaces",
])
def test_malformed_options_fall_back_to_defaults(options):
    assert IndentOptions.from_options(options) == IndentOptions()


def test_snake_case_option_keys():
    options = IndentOptions.from_options({"indent_size": 3, "indent_unit": "spaces"})

    assert options.effective_size == 3


@pytest.mark.parametrize("indent,expected_size,expected_unit", [
    (["error", 2], 2, IndentUnit.SPACES),
    (["warn", "tabs"], 1, IndentUnit.TABS),
    (["error", "spaces"], 4, IndentUnit.SPACES),
    (["error", 0], 4, IndentUnit.SPACES),
    (["error"], 4, IndentUnit.SPACES),
    ("error", 4, IndentUnit.SPACES),
])
def test_rules_configuration(indent, expected_size, expected_unit):
    options = IndentOptions.from_rules({"rules": {"indent": indent}})

    assert options.effective_size == expected_size
    assert options.indent_unit == expected_unit


def test_rules_configuration_without_indent_rule():
    assert IndentOptions.from_rules({"rules": {"quotes": ["error", "double"]}}) == IndentOptions()
    assert IndentOptions.from_rules({}) == IndentOptions()
    assert IndentOptions.from_rules(None) == IndentOptions()
