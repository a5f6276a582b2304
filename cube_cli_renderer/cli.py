#
# PROJECT: cube-cli-renderer
# MODULE: cube_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import argparse
import logging
import sys

from .animation import AnimationLoop
from .config import RenderConfig
from .errors import ConfigError, DisplayError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DISPLAY_ERROR = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                          Reference cube, 160x80, runs until Ctrl-C
  %(prog)s --width 80 --height 40   Smaller frame
  %(prog)s --speed 0.05 --delay 30  Faster spin, ~30 fps
  %(prog)s --frames 100 -v          Stop after 100 frames, debug log on stderr
"""
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(
        description="Spinning wireframe cube rendered as ASCII art",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=defaults.width,
                        help=f"Frame width in characters (default: {defaults.width})")
    parser.add_argument("--height", type=int, default=defaults.height,
                        help=f"Frame height in lines (default: {defaults.height})")
    parser.add_argument("--speed", type=float, default=defaults.angle_increment,
                        help=f"Rotation per frame in radians (default: {defaults.angle_increment})")
    parser.add_argument("--delay", type=float, default=defaults.frame_delay * 1000,
                        help=f"Delay between frames in ms (default: {defaults.frame_delay * 1000:g})")
    parser.add_argument("--pace", action="store_true",
                        help="Subtract render time from the delay")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames (default: run forever)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log per-frame statistics to stderr")
    return parser.parse_args(argv)


def setup_logging(verbose: bool):
    # Frames go to stdout, keep the log on stderr
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv=None, display=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = RenderConfig(
            width=args.width,
            height=args.height,
            angle_increment=args.speed,
            frame_delay=args.delay / 1000.0,
            pace_frames=args.pace,
        )
        loop = AnimationLoop(config, display=display)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_CONFIG_ERROR

    try:
        loop.run(max_frames=args.frames)
    except KeyboardInterrupt:
        logger.info("Interrupted after %d frames", loop.frame_count)
    except DisplayError as e:
        logger.error("Display failed after %d frames: %s", loop.frame_count, e)
        return EXIT_DISPLAY_ERROR
    return EXIT_OK
