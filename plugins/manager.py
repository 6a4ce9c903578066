"""
Registry of language front-end plugins.

Plugins are selected by file extension. Each plugin directory carries a
config.yaml with at least a name, a version and its file extensions.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from plugins.base import LanguagePlugin

logger = logging.getLogger(__name__)

REQUIRED_CONFIG_FIELDS = ['name', 'version', 'file_extensions']


class PluginManager:
    """Maps languages and file extensions to registered plugins."""

    def __init__(self):
        self._plugins: Dict[str, LanguagePlugin] = {}
        self._extension_map: Dict[str, str] = {}
        self._config_cache: Dict[str, Dict[str, Any]] = {}

    def register_plugin(self, plugin: LanguagePlugin) -> None:
        """
        Register a plugin for its language and every extension it claims.

        A later registration for the same language or extension replaces the
        earlier one.
        """
        language_name = plugin.language_name
        if language_name in self._plugins:
            logger.warning(f"Replacing plugin for language '{language_name}'")
        self._plugins[language_name] = plugin

        self._extension_map.update({ext: language_name for ext in plugin.file_extensions})
        logger.info(f"Registered '{language_name}' plugin for {plugin.file_extensions}")

    def get_plugin_for_file(self, file_path: str) -> Optional[LanguagePlugin]:
        """Plugin registered for the file's extension, or None."""
        language = self._extension_map.get(Path(file_path).suffix)
        if language is None:
            logger.debug(f"No plugin handles {file_path}")
            return None
        return self._plugins[language]

    def list_supported_languages(self) -> List[str]:
        return list(self._plugins)

    def load_plugin_config(self, config_path: Path) -> Dict[str, Any]:
        """
        Load and validate a plugin's config.yaml. Results are cached per path.

        Args:
            config_path: Path to the plugin's config.yaml

        Returns:
            Dictionary containing plugin configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If a required field is missing
            yaml.YAMLError: If the file is malformed
        """
        cache_key = str(config_path)
        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        if not config_path.exists():
            raise FileNotFoundError(f"Plugin configuration not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Malformed plugin configuration {config_path}: {e}")
            raise

        missing = [field for field in REQUIRED_CONFIG_FIELDS if field not in config]
        if missing:
            raise ValueError(f"Missing required field(s) {missing} in {config_path}")

        self._config_cache[cache_key] = config
        return config

    def discover_plugin_configs(self, plugins_dir: Path) -> Dict[str, Path]:
        """
        Find the valid config.yaml of every plugin directory.

        Directories without a config.yaml are skipped; configurations that
        fail to load are logged and skipped.

        Args:
            plugins_dir: Directory containing one subdirectory per plugin

        Returns:
            Plugin name -> config path, in directory name order
        """
        if not plugins_dir.exists():
            logger.warning(f"Plugins directory not found: {plugins_dir}")
            return {}

        found: Dict[str, Path] = {}
        for config_path in sorted(plugins_dir.glob("*/config.yaml")):
            try:
                config = self.load_plugin_config(config_path)
            except (ValueError, yaml.YAMLError) as e:
                logger.error(f"Skipping plugin in {config_path.parent}: {e}")
                continue

            logger.info(f"Found plugin configuration: {config['name']} v{config['version']}")
            found[config['name']] = config_path

        return found
