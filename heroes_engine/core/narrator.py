"""
Narrator - writes narrative lines to the console.

Every visible line of the demonstration goes through a Narrator so that
output ordering stays in one place and diagnostics (logging, stderr)
never interleave with the story.

Usage:
    from heroes_engine.core.narrator import narrate

    narrate(f"{character.name} equips {self.item_name}.")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class Narrator:
    """
    Writes one line per call to a text stream.

    Attributes:
        stream: Target stream (None = current sys.stdout)
    """

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """Get the output stream, resolving stdout at call time."""
        return self._stream if self._stream is not None else sys.stdout

    def say(self, line: str = "") -> None:
        """
        Write a single line.

        Args:
            line: Text without trailing newline
        """
        logger.debug("narrate: %s", line)
        self.stream.write(line + "\n")


# Shared narrator used by characters, items and inventories
_narrator = Narrator()


def get_narrator() -> Narrator:
    """Get the shared narrator."""
    return _narrator


def set_narrator(narrator: Narrator) -> Narrator:
    """
    Replace the shared narrator.

    Returns:
        The previously installed narrator
    """
    global _narrator
    previous = _narrator
    _narrator = narrator
    return previous


def narrate(line: str = "") -> None:
    """Write a line through the shared narrator."""
    _narrator.say(line)
