"""
Language plugin architecture for indentation checking.

This package provides the plugin system for language front ends, including
the base plugin interface and plugin manager.
"""

from plugins.base import LanguagePlugin
from plugins.manager import PluginManager

__all__ = ['LanguagePlugin', 'PluginManager']
