# src/scryptlang/config.py
"""Runtime configuration for the interpreter.

Settings are read once from the environment and may be flipped at runtime
(the CLI does this for ``--debug``/``--verbose``)::

    from scryptlang.config import config
    config.enable_debug_logs = True
"""
import os

_LEVELS = {"minimal": 0, "normal": 1, "verbose": 2}


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class ScryptConfig:
    def __init__(self):
        self.enable_debug_logs = _env_flag("SCRYPT_DEBUG")
        self.debug_level = os.environ.get("SCRYPT_DEBUG_LEVEL", "normal")
        if self.debug_level not in _LEVELS:
            self.debug_level = "normal"

    def should_log(self, level="normal"):
        """Return True when a message at ``level`` should be emitted."""
        if not self.enable_debug_logs:
            return False
        if level == "debug":
            level = "verbose"
        return _LEVELS.get(level, 1) <= _LEVELS[self.debug_level]

    def set_debug(self, enabled, level=None):
        self.enable_debug_logs = bool(enabled)
        if level is not None:
            if level not in _LEVELS:
                raise ValueError(f"unknown debug level: {level}")
            self.debug_level = level

    def __repr__(self):
        return (f"ScryptConfig(enable_debug_logs={self.enable_debug_logs}, "
                f"debug_level={self.debug_level!r})")


config = ScryptConfig()
