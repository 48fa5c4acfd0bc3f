# camera/camera.py
import logging
import math
from typing import Optional
from core.matrix import MATRIX_SIZE, Matrix
from core.point import Point
from core.ray import Ray
from renderer.canvas import Canvas

logger = logging.getLogger(__name__)


class Camera:
    """
    Pinhole camera looking down -z from the origin of its own space, with the
    image plane one unit in front. The transform (usually a view_transform)
    orients the world relative to the camera.
    """

    def __init__(self, hsize: int, vsize: int, field_of_view: float,
                 transform: Optional[Matrix] = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else Matrix.identity()
        self.update_camera()

    def update_camera(self):
        """Recomputes the half extents of the image plane and the pixel size."""
        half_view = math.tan(self.field_of_view / 2)
        aspect = self.hsize / self.vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / self.hsize

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, matrix: Matrix):
        if matrix.size != MATRIX_SIZE:
            raise ValueError(f"camera transform must be {MATRIX_SIZE}x{MATRIX_SIZE}, got {matrix.size}x{matrix.size}")
        inverse = matrix.invert()
        if inverse is None:
            logger.warning("Camera transform %r is not invertible; using identity", matrix)
            inverse = Matrix.identity()
        self._transform = matrix
        self._inverse = inverse

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """Returns the world-space ray through the center of pixel (px, py)."""
        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size

        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = self._inverse * Point(world_x, world_y, -1)
        origin = self._inverse * Point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world) -> Canvas:
        """Traces one ray per pixel through the world into a new canvas."""
        image = Canvas(self.hsize, self.vsize)
        logger.info("Rendering %dx%d image of %d objects, %d lights",
                    self.hsize, self.vsize, len(world.objects), len(world.light_sources))
        for y in range(self.vsize):
            for x in range(self.hsize):
                image.write_pixel(x, y, world.color_at(self.ray_for_pixel(x, y)))
            if logger.isEnabledFor(logging.DEBUG) and (y + 1) % 50 == 0:
                logger.debug("Rendered %d/%d rows", y + 1, self.vsize)
        return image
