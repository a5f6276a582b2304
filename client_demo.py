#!/usr/bin/env python3
#
# PROJECT: cube-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-16
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from cube_cli_renderer.cli import main


if __name__ == "__main__":
    sys.exit(main())
