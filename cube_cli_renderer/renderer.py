#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import logging
from typing import NamedTuple

from .camera import Camera
from .framebuffer import FrameBuffer
from .math_utils import rotate_point
from .rasterizer import draw_line
from .scene import Scene

logger = logging.getLogger(__name__)


class FrameStats(NamedTuple):
    visible_vertices: int
    drawn_edges: int
    lit_cells: int


class Renderer:
    """
    Draws one frame of a scene into a FrameBuffer.

    render(canvas, scene, camera) returns the serialized frame; it does not
    emit it, so a single frame can be produced for any angle without a
    terminal.
    """

    def __init__(self):
        self.last_stats = None

    def render(self, canvas: FrameBuffer, scene: Scene, camera: Camera) -> str:
        """
        Pipeline:
          1. Clear the canvas
          2. Rotate every vertex by (angle, 0, angle)
          3. Project the rotated vertices (None where not visible)
          4. Draw every edge with both endpoints visible
          5. Serialize the canvas
        """
        canvas.clear()
        W, H = canvas.width, canvas.height

        angles = scene.rotation()
        rotated = [rotate_point(v, angles) for v in scene.mesh.vertices]

        # Index-aligned with the vertex list so edges keep their endpoints
        projected = [camera.project(p, W, H) for p in rotated]

        drawn = 0
        for a, b in scene.mesh.edges:
            p0, p1 = projected[a], projected[b]
            if p0 is None or p1 is None:
                continue
            draw_line(canvas, p0, p1)
            drawn += 1

        text = canvas.serialize()

        self.last_stats = FrameStats(
            visible_vertices=sum(1 for p in projected if p is not None),
            drawn_edges=drawn,
            lit_cells=canvas.lit_count(),
        )
        logger.debug("angle=%.4f vertices=%d/%d edges=%d/%d lit=%d",
                     scene.angle, self.last_stats.visible_vertices, len(projected),
                     drawn, len(scene.mesh.edges), self.last_stats.lit_cells)
        return text
