# src/scryptlang/parser/__init__.py
"""
Parser module for the Scrypt language.
"""

from .parser import Parser, parse, precedences

__all__ = ["Parser", "parse", "precedences"]
