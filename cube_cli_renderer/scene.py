#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from typing import Optional

from .math_utils import vec3, wrap_angle
from .mesh import Wireframe


class Scene:
    """
    Animation state: the mesh being spun and its current angle.

    The same angle drives rotation about X and Z; Y stays at 0. The angle is
    kept in [0, 2*pi) so it never grows without bound.
    """

    def __init__(self, mesh: Optional[Wireframe] = None, angle: float = 0.0):
        self.mesh = mesh if mesh is not None else Wireframe.cube()
        self.angle = wrap_angle(float(angle))

    def rotation(self):
        """Euler angles (x, y, z) for the current frame."""
        return vec3(self.angle, 0.0, self.angle)

    def advance(self, increment: float):
        self.angle = wrap_angle(self.angle + increment)
