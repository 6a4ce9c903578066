"""
Java language plugin for indentation checking.

This plugin provides the tree-sitter based Java front end.
"""

from plugins.java.plugin import JavaPlugin

__all__ = ['JavaPlugin']
