"""
Configuration for the demonstration run.
"""

from __future__ import annotations

import logging


class DemoConfig:
    """Configuration for the scenario driver."""

    def __init__(
        self,
        warrior_name: str = "Aragorn",
        mage_name: str = "Gandalf",
        log_level: str = "WARNING",
    ):
        self.warrior_name = warrior_name
        self.mage_name = mage_name
        self.log_level = log_level

    @property
    def logging_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level
