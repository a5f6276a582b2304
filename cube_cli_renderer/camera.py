#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math
from typing import Optional, Tuple

import numpy as np

ScreenPoint = Tuple[int, int]


def project_point(point, camera_position, display_surface_z: float,
                  width: int, height: int) -> Optional[ScreenPoint]:
    """
    Pinhole projection of a world-space point to integer screen coordinates.

    The point is moved into camera space, divided by its depth and scaled
    onto a plane `display_surface_z` in front of the camera, where the
    device range [-1, 1] spans the whole screen. Screen row 0 is the top,
    so device +Y is flipped.

    Returns None when the point is at or behind the camera plane, or lands
    outside the screen. That is a normal outcome during rotation, not an
    error.
    """
    px, py, pz = np.asarray(point, dtype=np.float64) - np.asarray(camera_position, dtype=np.float64)
    if pz <= 0.0:
        return None

    scale = display_surface_z / pz
    proj_x = scale * px
    proj_y = scale * py

    fx = (proj_x + 1.0) * 0.5 * width
    fy = (1.0 - (proj_y + 1.0) * 0.5) * height
    # A depth close to zero can overflow to inf (or nan for 0 * inf)
    if not (math.isfinite(fx) and math.isfinite(fy)):
        return None

    screen_x = math.floor(fx)
    screen_y = math.floor(fy)

    if 0 <= screen_x < width and 0 <= screen_y < height:
        return screen_x, screen_y
    return None


class Camera:
    """
    Fixed viewpoint: a world-space position looking down +Z, and the
    distance of the projection plane in front of it.
    """
    __slots__ = ('position', 'display_surface_z')

    def __init__(self, position=(0.0, 2.0, -5.0), display_surface_z: float = 1.0):
        self.position = np.array(position, dtype=np.float64)
        self.display_surface_z = float(display_surface_z)

    @classmethod
    def from_config(cls, config) -> 'Camera':
        return cls(config.camera_position, config.display_surface_z)

    def project(self, point, width: int, height: int) -> Optional[ScreenPoint]:
        return project_point(point, self.position, self.display_surface_z, width, height)

    def __repr__(self):
        x, y, z = self.position
        return f"Camera(({x:.2f}, {y:.2f}, {z:.2f}), surface_z={self.display_surface_z:.2f})"
