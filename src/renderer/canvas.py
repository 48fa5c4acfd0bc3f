# renderer/canvas.py
import logging
import os
import numpy as np
from PIL import Image
from core.color import Color
from renderer.tone_mapping import clamp_to_8bit, reinhard_tone_mapping

logger = logging.getLogger(__name__)


class Canvas:
    """
    A width x height grid of linear colors, black on creation.
    Pixels are stored row-major in a (height, width, 3) float array.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def write_pixel(self, x: int, y: int, color: Color):
        # Out-of-range writes are dropped so callers can draw without clipping.
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = (color.r, color.g, color.b)

    def pixel_at(self, x: int, y: int) -> Color:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        r, g, b = self.pixels[y, x]
        return Color(r, g, b)

    def to_bytes_array(self, tone_map: bool = False) -> np.ndarray:
        if tone_map:
            return reinhard_tone_mapping(self.pixels)
        return clamp_to_8bit(self.pixels)

    def to_ppm(self) -> str:
        """
        Serializes the canvas as plain-text PPM (P3), one pixel per line.
        """
        lines = [f"P3\n{self.width} {self.height}\n255"]
        for r, g, b in self.to_bytes_array().reshape(-1, 3):
            lines.append(f"{r} {g} {b}")
        return "\n".join(lines) + "\n"

    def to_image(self, tone_map: bool = False) -> Image.Image:
        return Image.fromarray(self.to_bytes_array(tone_map))

    def save(self, path: str, tone_map: bool = False):
        """
        Writes .ppm files as P3 text and any other extension through Pillow.
        """
        if os.path.splitext(path)[1].lower() == ".ppm" and not tone_map:
            with open(path, "w", encoding="ascii") as fh:
                fh.write(self.to_ppm())
        else:
            self.to_image(tone_map).save(path)
        logger.info("Saved %dx%d image to %s", self.width, self.height, path)
