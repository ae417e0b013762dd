# src/sprig/__init__.py
"""
Sprig: a Pratt parser for a small let/return expression language.
"""

__version__ = "0.1.0"

from .lexer import Lexer, TokenStream
from .parser import Parser, parse
from .errors import SprigError, SprigSyntaxError

__all__ = ["Lexer", "TokenStream", "Parser", "parse", "SprigError", "SprigSyntaxError", "__version__"]
