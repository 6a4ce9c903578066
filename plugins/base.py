"""
Base interface for language front-end plugins.

This module defines the abstract base class that all language plugins must
implement to turn source text into the syntax tree the indent checker walks.
"""

from abc import ABC, abstractmethod
from typing import List

from indentlint.models import DEFAULT_PROFILE, GrammarProfile, SyntaxTree


class LanguagePlugin(ABC):
    """Base interface for language front-end plugins."""

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the language name (e.g., 'java', 'solidity')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return supported file extensions (e.g., ['.java'])."""
        pass

    @property
    def grammar_profile(self) -> GrammarProfile:
        """
        Return the child-slot positions of controlled statements in this
        language's trees. Defaults to the ANTLR Solidity grammar shape.
        """
        return DEFAULT_PROFILE

    @abstractmethod
    async def parse_file(self, file_path: str, content: str) -> SyntaxTree:
        """
        Parse file content into a syntax tree.

        Args:
            file_path: Path to the file being parsed
            content: File content as string

        Returns:
            SyntaxTree whose root is the source unit

        Raises:
            ValueError: If the file cannot be parsed
        """
        pass
