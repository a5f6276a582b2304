#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math

import numpy as np

TWO_PI = 2.0 * math.pi


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """3-component float vector."""
    return np.array((x, y, z), dtype=np.float64)


def rotation_x(rad: float) -> np.ndarray:
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array((
        (1.0, 0.0, 0.0),
        (0.0, c, -s),
        (0.0, s, c),
    ))


def rotation_y(rad: float) -> np.ndarray:
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array((
        (c, 0.0, s),
        (0.0, 1.0, 0.0),
        (-s, 0.0, c),
    ))


def rotation_z(rad: float) -> np.ndarray:
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array((
        (c, -s, 0.0),
        (s, c, 0.0),
        (0.0, 0.0, 1.0),
    ))


def rotation_matrix(angles) -> np.ndarray:
    """Combined Euler rotation Rx @ Ry @ Rz (Z is applied to a point first)."""
    ax, ay, az = angles
    return rotation_x(ax) @ rotation_y(ay) @ rotation_z(az)


def rotate_point(point, angles) -> np.ndarray:
    """Rotate a point by (x, y, z) Euler angles in radians.

    Equivalent to Rx(Ry(Rz(point))). The order is fixed; swapping it
    changes the animation.
    """
    return rotation_matrix(angles) @ np.asarray(point, dtype=np.float64)


def wrap_angle(angle: float) -> float:
    """
    Reduce an angle into [0, 2*pi).

    The common case of a small step past 2*pi subtracts exactly 2*pi once;
    anything further out is reduced with fmod.
    """
    if not math.isfinite(angle):
        raise ValueError(f"angle must be finite, got {angle!r}")
    if angle >= TWO_PI:
        angle -= TWO_PI
        if angle >= TWO_PI:
            angle = math.fmod(angle, TWO_PI)
    elif angle < 0.0:
        angle += TWO_PI
        if angle < 0.0:
            angle = math.fmod(angle, TWO_PI) + TWO_PI
    # Adding 2*pi to a tiny negative value rounds up to 2*pi itself
    if angle >= TWO_PI:
        angle = 0.0
    return angle
