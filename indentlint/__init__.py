"""Indentation consistency checking for brace-structured source code."""

__version__ = "0.1.0"
