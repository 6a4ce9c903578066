"""Data models for the indentation linter."""

from .diagnostic import Diagnostic, DiagnosticSeverity, IndentCorrection
from .grammar import DEFAULT_PROFILE, GrammarProfile
from .syntax import (
    EOF_TEXT,
    EOF_TYPE,
    HIDDEN_CHANNEL,
    SIGNIFICANT_CHANNEL,
    NodeKind,
    ParseNode,
    SyntaxNode,
    SyntaxTree,
    Token,
)

__all__ = [
    # Syntax models
    "NodeKind",
    "Token",
    "ParseNode",
    "SyntaxNode",
    "SyntaxTree",
    "SIGNIFICANT_CHANNEL",
    "HIDDEN_CHANNEL",
    "EOF_TYPE",
    "EOF_TEXT",
    # Grammar models
    "GrammarProfile",
    "DEFAULT_PROFILE",
    # Diagnostic models
    "Diagnostic",
    "DiagnosticSeverity",
    "IndentCorrection",
]
