#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#


class RendererError(Exception):
    """Base class for all renderer failures."""


class ConfigError(RendererError, ValueError):
    """Invalid start-up configuration (rejected before the loop starts)."""


class DisplayError(RendererError):
    """The display could not be cleared or written. Always fatal."""
