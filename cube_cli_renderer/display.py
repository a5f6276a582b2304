#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import sys

from .errors import DisplayError

# Erase the screen, then move the cursor home
CLEAR_SCREEN = "\033[2J\033[H"


class TerminalDisplay:
    """
    Writes frames to a text stream (stdout by default) using ANSI escapes
    to clear the screen first. Any failure to write is a DisplayError.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def clear(self):
        self._write(CLEAR_SCREEN)

    def write(self, text: str):
        self._write(text)
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise DisplayError(f"could not flush display: {e}") from e

    def _write(self, text: str):
        try:
            self.stream.write(text)
        except (OSError, ValueError) as e:
            raise DisplayError(f"could not write to display: {e}") from e


class MemoryDisplay:
    """Keeps emitted frames in memory. Used for headless runs and tests."""

    def __init__(self):
        self.frames = []
        self.clears = 0

    def clear(self):
        self.clears += 1

    def write(self, text: str):
        self.frames.append(text)

    @property
    def last_frame(self):
        return self.frames[-1] if self.frames else None
