#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import logging
import time
from typing import Optional

from .camera import Camera
from .config import RenderConfig
from .display import TerminalDisplay
from .framebuffer import FrameBuffer
from .renderer import Renderer
from .scene import Scene

logger = logging.getLogger(__name__)


class AnimationLoop:
    """
    Owns the frame buffer, scene and camera and runs the render cycle:
    render, emit, advance the angle, delay, repeat.

    The display and the delay function are injected so single cycles can be
    driven without a terminal or real sleeping.
    """

    def __init__(self, config: Optional[RenderConfig] = None, display=None, sleep=time.sleep,
                 clock=time.monotonic, scene: Optional[Scene] = None):
        self.config = config if config is not None else RenderConfig()
        self.display = display if display is not None else TerminalDisplay()
        self.sleep = sleep
        self.clock = clock

        self.canvas = FrameBuffer(self.config.width, self.config.height)
        self.camera = Camera.from_config(self.config)
        self.scene = scene if scene is not None else Scene()
        self.renderer = Renderer()
        self.frame_count = 0

    def step(self) -> str:
        """Run one full cycle. Returns the frame that was emitted."""
        start_time = self.clock()

        text = self.renderer.render(self.canvas, self.scene, self.camera)
        self.canvas.emit(self.display)
        self.frame_count += 1

        self.scene.advance(self.config.angle_increment)

        delay = self.config.frame_delay
        if self.config.pace_frames:
            delay = max(0.0, delay - (self.clock() - start_time))
        self.sleep(delay)
        return text

    def run(self, max_frames: Optional[int] = None):
        """Cycle until interrupted, or until `max_frames` frames were emitted."""
        logger.info("Starting animation: %dx%d, %r, %.3f rad/frame, %.1f ms delay",
                    self.canvas.width, self.canvas.height, self.camera,
                    self.config.angle_increment, self.config.frame_delay * 1000)
        while max_frames is None or self.frame_count < max_frames:
            self.step()
        logger.info("Stopped after %d frames", self.frame_count)
