#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/framebuffer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import numpy as np

from .errors import ConfigError

LIT = '.'
UNLIT = ' '


class FrameBuffer:
    """
    Fixed-size grid of on/off cells plus the text of the last serialized frame.

    Cells are stored row-major in a flat bool array (index = x + y * width).
    Writes outside the grid are ignored: projection and rasterization
    routinely produce coordinates on or past the border and clipping must
    never stop the pipeline.
    """
    __slots__ = ('width', 'height', 'cells', 'text')

    def __init__(self, width: int, height: int):
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigError(f"FrameBuffer {name} must be a positive integer, got {value!r}")
        self.width, self.height = width, height
        self.cells = np.zeros(width * height, dtype=bool)
        self.text = ''

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, value: bool = True):
        if not self.in_bounds(x, y):
            return
        self.cells[x + y * self.width] = value

    def get(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return bool(self.cells[x + y * self.width])

    def clear(self):
        self.cells.fill(False)

    def lit_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def serialize(self) -> str:
        """
        Rebuild `text` from the cells and return it.

        One line per row in increasing y, `width` characters each
        ('.' lit, ' ' unlit), every line newline terminated.
        """
        rows = np.where(self.cells, LIT, UNLIT).reshape(self.height, self.width)
        self.text = ''.join(''.join(row) + '\n' for row in rows)
        return self.text

    def emit(self, display):
        """Clear the display and write the last serialized frame to it."""
        display.clear()
        display.write(self.text)
