"""
Heroes demonstration entry point.

Run: python -m heroes
"""

import logging

from heroes_engine.core.config import DemoConfig
from heroes.scenarios import run_all


def main() -> None:
    config = DemoConfig()
    logging.basicConfig(level=config.logging_level)
    run_all(config)


if __name__ == "__main__":
    main()
