#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

from .errors import RendererError, ConfigError, DisplayError
from .config import RenderConfig
from .math_utils import vec3, rotate_point, rotation_matrix, wrap_angle
from .framebuffer import FrameBuffer
from .camera import Camera, project_point
from .rasterizer import draw_line, line_points
from .mesh import Wireframe
from .scene import Scene
from .display import TerminalDisplay, MemoryDisplay
from .renderer import Renderer, FrameStats
from .animation import AnimationLoop
