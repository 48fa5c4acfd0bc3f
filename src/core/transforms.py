# core/transforms.py
import math
from typing import Optional
import numpy as np
from core.matrix import Matrix, MATRIX_SIZE


def translate(tx: float, ty: float, tz: float) -> Matrix:
    m = np.identity(MATRIX_SIZE)
    m[0, 3] = tx
    m[1, 3] = ty
    m[2, 3] = tz
    return Matrix(m)


def scale(sx: float, sy: float, sz: float) -> Matrix:
    m = np.identity(MATRIX_SIZE)
    m[0, 0] = sx
    m[1, 1] = sy
    m[2, 2] = sz
    return Matrix(m)


def rotate_x(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    m = np.identity(MATRIX_SIZE)
    m[1, 1] = cos
    m[1, 2] = -sin
    m[2, 1] = sin
    m[2, 2] = cos
    return Matrix(m)


def rotate_y(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    m = np.identity(MATRIX_SIZE)
    m[0, 0] = cos
    m[0, 2] = sin
    m[2, 0] = -sin
    m[2, 2] = cos
    return Matrix(m)


def rotate_z(radians: float) -> Matrix:
    cos, sin = math.cos(radians), math.sin(radians)
    m = np.identity(MATRIX_SIZE)
    m[0, 0] = cos
    m[0, 1] = -sin
    m[1, 0] = sin
    m[1, 1] = cos
    return Matrix(m)


def shear(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Each component moves in proportion to the other two, e.g. xy moves x in
    proportion to y.
    """
    m = np.identity(MATRIX_SIZE)
    m[0, 1] = xy
    m[0, 2] = xz
    m[1, 0] = yx
    m[1, 2] = yz
    m[2, 0] = zx
    m[2, 1] = zy
    return Matrix(m)


def view_transform(from_, to, up) -> Matrix:
    """
    Orients the world relative to an eye at `from_` looking at `to`.

    Parameters:
        from_: eye position
        to: point the eye looks at
        up: approximate up direction, need not be exactly perpendicular
    """
    forward = (to - from_).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)

    orientation = Matrix([
        [left.x, left.y, left.z, 0.0],
        [true_up.x, true_up.y, true_up.z, 0.0],
        [-forward.x, -forward.y, -forward.z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    return orientation * translate(-from_.x, -from_.y, -from_.z)


class TransformChain:
    """
    Accumulates named transforms for a value. Every call left-multiplies the
    accumulated matrix, so transforms apply in the order they are written.
    """

    def __init__(self, matrix: Matrix, target=None):
        self.matrix = matrix
        self.target = target

    def _then(self, m: Matrix) -> "TransformChain":
        return TransformChain(m * self.matrix, self.target)

    def translate(self, x: float, y: float, z: float) -> "TransformChain":
        return self._then(translate(x, y, z))

    def scale(self, x: float, y: float, z: float) -> "TransformChain":
        return self._then(scale(x, y, z))

    def rotate_x(self, radians: float) -> "TransformChain":
        return self._then(rotate_x(radians))

    def rotate_y(self, radians: float) -> "TransformChain":
        return self._then(rotate_y(radians))

    def rotate_z(self, radians: float) -> "TransformChain":
        return self._then(rotate_z(radians))

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> "TransformChain":
        return self._then(shear(xy, xz, yx, yz, zx, zy))

    def transform(self):
        """
        Applies the composed matrix to the target in a single multiplication.
        """
        if self.target is None:
            raise ValueError("transform chain has no target; use .matrix instead")
        return self.target.transform(self.matrix)


def chain(target: Optional[object] = None) -> TransformChain:
    """
    Starts an empty chain, e.g. chain().scale(2, 2, 2).translate(0, 1, 0).matrix
    """
    return TransformChain(Matrix.identity(), target)


class Transformable:
    """
    Mixin for values that can be moved by a Matrix. Subclasses implement
    transform(matrix); the named methods start a TransformChain.
    """

    def transform(self, matrix: Matrix):
        raise NotImplementedError("transform() must be implemented by subclasses.")

    def translate(self, x: float, y: float, z: float) -> TransformChain:
        return chain(self).translate(x, y, z)

    def scale(self, x: float, y: float, z: float) -> TransformChain:
        return chain(self).scale(x, y, z)

    def rotate_x(self, radians: float) -> TransformChain:
        return chain(self).rotate_x(radians)

    def rotate_y(self, radians: float) -> TransformChain:
        return chain(self).rotate_y(radians)

    def rotate_z(self, radians: float) -> TransformChain:
        return chain(self).rotate_z(radians)

    def shear(self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> TransformChain:
        return chain(self).shear(xy, xz, yx, yz, zx, zy)
