"""
Indentation linting service.

This module provides the IndentLinter class that uses language plugins to
parse source text and runs the indentation rule over the resulting tree.
"""

import time
from pathlib import Path
from typing import Dict, List, Optional, Type

from indentlint.analyzers.indent_checker import ConfigLike, IndentChecker
from indentlint.config import settings
from indentlint.models import Diagnostic, SyntaxTree
from indentlint.services.reporter import DiagnosticCollector
from indentlint.utils.logging import get_logger, log_check_summary, log_error_with_context, setup_logging
import plugins
from plugins.base import LanguagePlugin
from plugins.java import JavaPlugin
from plugins.manager import PluginManager

logger = get_logger(__name__, rule="indent")

PLUGINS_DIR = Path(plugins.__file__).parent

PLUGIN_CLASSES: Dict[str, Type[LanguagePlugin]] = {
    "java": JavaPlugin,
}


class IndentLinter:
    """
    Lints source text for indentation consistency.

    Selects a language plugin by file extension, parses the content into a
    syntax tree and checks it with a fresh ``IndentChecker``.
    """

    def __init__(self, plugin_manager: PluginManager, config: ConfigLike = None):
        """
        Initialize the linter.

        Args:
            plugin_manager: PluginManager with the language plugins to use
            config: Indent options, options object or rules configuration;
                defaults to the options in application settings
        """
        self.plugin_manager = plugin_manager
        if config is None:
            config = settings.indent_options()
        self.options = IndentChecker.parse_config(config)

    async def lint(self, file_path: str, content: str) -> List[Diagnostic]:
        """
        Lint one source file.

        Args:
            file_path: Path of the file, used for plugin selection and logging
            content: Source text

        Returns:
            Diagnostics in report order; empty if no plugin handles the file

        Raises:
            ValueError: If the plugin cannot parse the content
        """
        plugin = self.plugin_manager.get_plugin_for_file(file_path)
        if not plugin:
            logger.warning(f"No plugin found for {file_path}, skipping")
            return []

        started = time.perf_counter()
        tree = await self.parse_file(file_path, content, plugin)
        diagnostics = self.check_tree(tree, plugin)

        file_logger = logger.with_context(language=plugin.language_name)
        log_check_summary(
            file_logger,
            file_path,
            len(diagnostics),
            duration_ms=(time.perf_counter() - started) * 1000,
        )
        return diagnostics

    async def parse_file(
        self,
        file_path: str,
        content: str,
        plugin: Optional[LanguagePlugin] = None,
    ) -> SyntaxTree:
        """
        Parse file content into a syntax tree.

        Args:
            file_path: Path to the file
            content: File content as string
            plugin: Optional LanguagePlugin instance (auto-detected if not provided)

        Returns:
            SyntaxTree of the parsed content

        Raises:
            ValueError: If no plugin is found for the file or parsing fails
        """
        if plugin is None:
            plugin = self.plugin_manager.get_plugin_for_file(file_path)
            if not plugin:
                raise ValueError(f"No plugin found for file: {file_path}")

        try:
            tree = await plugin.parse_file(file_path, content)
            logger.debug(f"Successfully parsed {file_path}")
            return tree
        except Exception as e:
            log_error_with_context(logger, f"Failed to parse {file_path}", e, file_path=file_path)
            raise

    def check_tree(self, tree: SyntaxTree, plugin: Optional[LanguagePlugin] = None) -> List[Diagnostic]:
        """
        Check an already parsed tree.

        Args:
            tree: Syntax tree of one source unit
            plugin: Plugin whose grammar profile applies (default profile if None)

        Returns:
            Diagnostics in report order
        """
        collector = DiagnosticCollector()
        profile = plugin.grammar_profile if plugin is not None else None

        IndentChecker(collector, self.options, profile).check(tree)
        return collector.diagnostics


def create_indent_linter(config: ConfigLike = None, plugins_dir: Path = PLUGINS_DIR) -> IndentLinter:
    """
    Create a linter with logging configured and the bundled plugins registered.

    Args:
        config: Indent configuration; defaults to application settings
        plugins_dir: Directory scanned for plugin configurations

    Returns:
        IndentLinter instance
    """
    setup_logging(settings.log_level)

    plugin_manager = PluginManager()
    for name, config_path in plugin_manager.discover_plugin_configs(plugins_dir).items():
        plugin_class = PLUGIN_CLASSES.get(name)
        if plugin_class is None:
            logger.warning(f"No front end available for plugin '{name}'")
            continue
        plugin_manager.register_plugin(plugin_class(config_path=config_path))

    logger.info(f"Indent linter ready for {plugin_manager.list_supported_languages()}")
    return IndentLinter(plugin_manager, config)
