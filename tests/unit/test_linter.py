"""
Unit tests for the IndentLinter service.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from indentlint.models import DEFAULT_PROFILE, GrammarProfile
from indentlint.config import IndentUnit, Settings
from indentlint.services.linter import IndentLinter, create_indent_linter
from plugins.java import JavaPlugin
from plugins.manager import PluginManager
from tree_helpers import block, build, call, function, if_stmt


@pytest.fixture
def mock_plugin():
    """Create a mock language plugin returning a misindented tree."""
    plugin = MagicMock()
    plugin.language_name = "solidity"
    plugin.file_extensions = [".sol"]
    plugin.grammar_profile = DEFAULT_PROFILE
    plugin.parse_file = AsyncMock(return_value=build(
        function(1, 0, block((1, 13), call(2, 6), close_at=(3, 0))),
    ))
    return plugin


@pytest.fixture
def plugin_manager(mock_plugin):
    manager = MagicMock()
    manager.get_plugin_for_file.side_effect = (
        lambda path: mock_plugin if path.endswith(".sol") else None
    )
    return manager


@pytest.mark.asyncio
async def test_lint_reports_diagnostics(plugin_manager, mock_plugin):
    linter = IndentLinter(plugin_manager)

    diagnostics = await linter.lint("Token.sol", "source")

    mock_plugin.parse_file.assert_awaited_once_with("Token.sol", "source")
    assert [(d.line, d.column, d.message) for d in diagnostics] == [
        (2, 6, "Expected indentation of 4 spaces but found 6"),
    ]


@pytest.mark.asyncio
async def test_lint_uses_configured_indent(plugin_manager):
    linter = IndentLinter(plugin_manager, {"rules": {"indent": ["error", 2]}})

    diagnostics = await linter.lint("Token.sol", "source")

    assert diagnostics[0].message == "Expected indentation of 2 spaces but found 6"


@pytest.mark.asyncio
async def test_lint_skips_unhandled_file(plugin_manager, mock_plugin):
    linter = IndentLinter(plugin_manager)

    assert await linter.lint("script.py", "print()") == []
    mock_plugin.parse_file.assert_not_called()


@pytest.mark.asyncio
async def test_parse_errors_propagate(plugin_manager, mock_plugin):
    mock_plugin.parse_file.side_effect = ValueError("Failed to parse")
    linter = IndentLinter(plugin_manager)

    with pytest.raises(ValueError, match="Failed to parse"):
        await linter.lint("Token.sol", "source")


@pytest.mark.asyncio
async def test_parse_file_without_plugin_raises(plugin_manager):
    linter = IndentLinter(plugin_manager)

    with pytest.raises(ValueError, match="No plugin found"):
        await linter.parse_file("script.py", "print()")


def test_check_tree_uses_plugin_grammar_profile(plugin_manager):
    tree = build(function(1, 0, block(
        (1, 13),
        if_stmt(2, 4, call(3, 12)),
        close_at=(4, 0),
    )))
    linter = IndentLinter(plugin_manager)

    assert [(d.line, d.message) for d in linter.check_tree(tree)] == [
        (3, "Expected indentation of 8 spaces but found 12"),
    ]

    # Slot 2 holds the condition and slot 6 does not exist.
    plugin = MagicMock()
    plugin.grammar_profile = GrammarProfile(if_then=2, if_else=6)
    assert linter.check_tree(tree, plugin) == []


@pytest.mark.asyncio
async def test_lint_with_registered_java_plugin():
    manager = PluginManager()
    manager.register_plugin(JavaPlugin())
    linter = IndentLinter(manager)

    diagnostics = await linter.lint("src/Foo.java", "class Foo {\n  int x;\n}\n")

    assert [(d.line, d.column, d.message) for d in diagnostics] == [
        (2, 2, "Expected indentation of 4 spaces but found 2"),
    ]


@pytest.mark.asyncio
async def test_linter_defaults_to_settings_indent():
    manager = PluginManager()
    manager.register_plugin(JavaPlugin())
    source = "class A {\n  void f() {\n  }\n}\n"

    with patch("indentlint.services.linter.settings", Settings(_env_file=None, indent_size=2)):
        linter = IndentLinter(manager)

    assert linter.options.effective_size == 2
    assert await linter.lint("A.java", source) == []


def test_explicit_config_overrides_settings(plugin_manager):
    with patch("indentlint.services.linter.settings", Settings(_env_file=None, indent_size=2)):
        linter = IndentLinter(plugin_manager, {"indentSize": 8})

    assert linter.options.effective_size == 8


def test_create_indent_linter_uses_settings():
    app_settings = Settings(_env_file=None, log_level="WARNING", indent_unit="tabs")

    with patch("indentlint.services.linter.settings", app_settings), \
            patch("indentlint.services.linter.setup_logging") as mock_setup_logging:
        linter = create_indent_linter()

    mock_setup_logging.assert_called_once_with("WARNING")
    assert linter.options.indent_unit == IndentUnit.TABS
    assert linter.plugin_manager.get_plugin_for_file("src/Foo.java").language_name == "java"


def test_create_indent_linter_skips_plugins_without_front_end(tmp_path):
    other_dir = tmp_path / "cobol"
    other_dir.mkdir()
    (other_dir / "config.yaml").write_text("name: cobol\nversion: 1.0.0\nfile_extensions: [.cbl]\n")

    with patch("indentlint.services.linter.setup_logging"):
        linter = create_indent_linter(plugins_dir=tmp_path)

    assert linter.plugin_manager.list_supported_languages() == []
