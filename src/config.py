"""Render defaults for the command-line demo.

Everything the CLI does not get from its arguments is read from here.
"""
import math
import os


class RenderConfig:
    """Image and output settings."""

    # Image size in pixels
    WIDTH = 320
    HEIGHT = 160

    # Horizontal field of view (radians)
    FIELD_OF_VIEW = math.pi / 3

    # .ppm is written as plain text, any other extension goes through Pillow
    OUTPUT_PATH = "render.png"

    # Reinhard tone mapping instead of plain clamping
    TONE_MAP = False

    # Logging
    LOG_LEVEL = os.environ.get("RAYTRACE_LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
