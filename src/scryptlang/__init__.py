# src/scryptlang/__init__.py
"""Scrypt: a small dynamically-typed scripting language.

Typical use::

    from scryptlang import run
    run("x = [1, 2]; push(x, 3); print len(x);")
"""
from .lexer import Lexer, tokenize
from .parser import Parser, parse
from .evaluator import Evaluator, evaluate
from .environment import Environment
from .formatter import format_program
from .error_reporter import ScryptError, ScryptSyntaxError, ScryptRuntimeError

__version__ = "0.1.0"


def run(source_code, output=None, env=None):
    """Parse and evaluate ``source_code``; printed lines go to ``output``."""
    return evaluate(parse(source_code), env=env, output=output)


__all__ = [
    "Lexer", "tokenize", "Parser", "parse", "Evaluator", "evaluate", "Environment",
    "format_program", "ScryptError", "ScryptSyntaxError", "ScryptRuntimeError", "run",
]
