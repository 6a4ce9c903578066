"""Indentation analysis: block view, indent resolution, validators and the checker."""

from indentlint.analyzers.indent_checker import IndentChecker, check_tree

__all__ = ["IndentChecker", "check_tree"]
