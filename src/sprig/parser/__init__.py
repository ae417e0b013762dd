# src/sprig/parser/__init__.py
"""
Parser package for the sprig language.
"""

from .parser import Parser, Precedence, parse, precedences

__all__ = ["Parser", "Precedence", "parse", "precedences"]
