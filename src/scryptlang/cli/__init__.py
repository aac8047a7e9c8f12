# src/scryptlang/cli/__init__.py
