# src/scryptlang/evaluator/__init__.py
from .core import Evaluator, evaluate
from .utils import NULL, TRUE, FALSE

__all__ = ['Evaluator', 'evaluate', 'NULL', 'TRUE', 'FALSE']
