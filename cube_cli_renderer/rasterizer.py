#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from typing import Iterator, Tuple

from .framebuffer import FrameBuffer


def line_points(start, end) -> Iterator[Tuple[int, int]]:
    """
    Yields every cell of the line from `start` to `end`, both inclusive,
    using integer-error Bresenham stepping in all octants.

    Each step moves at most one cell in x and one in y, so the line has no
    gaps. x and y are stepped independently in the same iteration, which
    gives the diagonal moves.
    """
    x0, y0 = start
    x1, y1 = end

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    # Halve with truncation toward zero, -dy // 2 would round odd dy down
    err = dx // 2 if dx > dy else -(dy // 2)

    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = err
        if e2 > -dx:
            err -= dy
            x += sx
        if e2 < dy:
            err += dx
            y += sy


def draw_line(canvas: FrameBuffer, start, end):
    """
    Lights the cells of the line between two screen points.
    Cells off the buffer are skipped; the line may leave and re-enter.
    """
    for x, y in line_points(start, end):
        canvas.set(x, y, True)
