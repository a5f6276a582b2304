#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import math
from dataclasses import dataclass
from typing import Tuple

from .errors import ConfigError


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline.

    Defaults are the reference configuration: a 160x80 frame, camera at
    (0, 2, -5) looking down +Z at a projection plane 1.0 away, 0.01 rad of
    rotation per frame and a 10 ms delay between frames.
    """
    width: int = 160
    height: int = 80
    camera_position: Tuple[float, float, float] = (0.0, 2.0, -5.0)
    display_surface_z: float = 1.0
    angle_increment: float = 0.01
    frame_delay: float = 0.010  # seconds
    # Subtract render time from the delay instead of sleeping a fixed amount
    pace_frames: bool = False

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Reject configurations the pipeline cannot run with."""
        for name in ('width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

        try:
            position = tuple(float(c) for c in self.camera_position)
        except (TypeError, ValueError):
            raise ConfigError(
                f"camera_position must be three numbers, got {self.camera_position!r}")
        if len(position) != 3:
            raise ConfigError(
                f"camera_position must be three numbers, got {self.camera_position!r}")
        if not all(math.isfinite(c) for c in position):
            raise ConfigError(f"camera_position must be finite, got {position!r}")
        self.camera_position = position

        for name in ('display_surface_z', 'angle_increment', 'frame_delay'):
            value = getattr(self, name)
            if (isinstance(value, bool) or not isinstance(value, (int, float))
                    or not math.isfinite(value)):
                raise ConfigError(f"{name} must be a finite number, got {value!r}")

        if self.display_surface_z <= 0:
            raise ConfigError(
                f"display_surface_z must be positive, got {self.display_surface_z}")
        if self.frame_delay < 0:
            raise ConfigError(f"frame_delay must not be negative, got {self.frame_delay}")
