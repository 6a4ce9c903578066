"""
Application configuration management.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_INDENT_SIZE = 4


class IndentUnit(str, Enum):
    """Character used for one indentation step."""

    SPACES = "spaces"
    TABS = "tabs"


class IndentOptions(BaseModel):
    """Indentation options recognized by the indent checker."""

    indent_size: int = Field(DEFAULT_INDENT_SIZE, description="Columns per indentation level")
    indent_unit: IndentUnit = Field(IndentUnit.SPACES, description="Spaces or tabs")

    @field_validator("indent_size")
    @classmethod
    def _positive_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("indent_size must be a positive integer")
        return value

    @property
    def effective_size(self) -> int:
        """Size of one indentation step; a tab always counts as one column."""
        if self.indent_unit == IndentUnit.TABS:
            return 1
        return self.indent_size

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]) -> "IndentOptions":
        """
        Build options from an ``{indentSize, indentUnit}`` object.

        Tabs ignore the size. Absent or malformed options fall back to the
        defaults (4 spaces).
        """
        if not isinstance(options, Mapping):
            return cls()

        size = options.get("indentSize", options.get("indent_size", DEFAULT_INDENT_SIZE))
        unit = options.get("indentUnit", options.get("indent_unit", IndentUnit.SPACES))
        if unit == IndentUnit.TABS:
            return cls(indent_size=1, indent_unit=IndentUnit.TABS)

        if isinstance(size, bool) or not isinstance(size, int):
            logger.debug(f"Ignoring malformed indent size {size!r}, using defaults")
            return cls()

        try:
            return cls(indent_size=size, indent_unit=unit)
        except ValidationError as e:
            logger.debug(f"Ignoring malformed indent options {dict(options)!r}: {e}")
            return cls()

    @classmethod
    def from_rules(cls, config: Optional[Mapping[str, Any]]) -> "IndentOptions":
        """
        Build options from a rules configuration such as
        ``{"rules": {"indent": ["error", 2]}}`` or ``["error", "tabs"]``.
        """
        rules = config.get("rules") if isinstance(config, Mapping) else None
        indent = rules.get("indent") if isinstance(rules, Mapping) else None
        if not isinstance(indent, (list, tuple)) or len(indent) != 2:
            return cls()

        value = indent[1]
        if value == IndentUnit.TABS.value:
            return cls(indent_size=1, indent_unit=IndentUnit.TABS)
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return cls(indent_size=value, indent_unit=IndentUnit.SPACES)
        return cls()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INDENTLINT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    log_level: str = "INFO"

    # Indentation defaults
    indent_size: int = DEFAULT_INDENT_SIZE
    indent_unit: str = IndentUnit.SPACES.value

    def indent_options(self) -> IndentOptions:
        """Indent options from settings, falling back to defaults when malformed."""
        return IndentOptions.from_options({
            "indentSize": self.indent_size,
            "indentUnit": self.indent_unit,
        })


# Global settings instance
settings = Settings()
