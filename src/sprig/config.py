# src/sprig/config.py
"""Runtime settings shared by the parser and the CLI."""

import os

_LEVELS = {"none": 0, "minimal": 1, "normal": 2, "verbose": 3}


class Config:
    # Integer literals must fit a signed 64-bit value
    max_int = 2 ** 63 - 1

    def __init__(self, debug_level=None):
        self._debug_level = "none"
        self.debug_level = debug_level or os.environ.get("SPRIG_DEBUG", "none")

    @property
    def debug_level(self):
        return self._debug_level

    @debug_level.setter
    def debug_level(self, level):
        level = str(level).strip().lower()
        if level not in _LEVELS:
            raise ValueError(f"Unknown debug level {level!r}; expected one of {', '.join(_LEVELS)}")
        self._debug_level = level

    @property
    def enable_debug_logs(self):
        return self._debug_level != "none"

    def should_log(self, level="normal"):
        """True when messages of ``level`` pass the configured debug level."""
        if level == "debug":
            level = "verbose"
        return _LEVELS[self._debug_level] >= _LEVELS.get(level, _LEVELS["verbose"])


config = Config()
