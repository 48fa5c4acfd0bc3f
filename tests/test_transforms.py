"""Tests for the named transforms, view_transform and transform chains."""

import math

import pytest

from core.matrix import Matrix
from core.point import Point
from core.transforms import (chain, rotate_x, rotate_y, rotate_z, scale, shear,
                             translate, view_transform)
from core.vector import Vector

HALF = math.sqrt(2) / 2


class TestTransforms:
    def test_translate_moves_points(self):
        t = translate(5, -3, 2)
        assert t * Point(-3, 4, 5) == Point(2, 1, 7)
        assert t.invert() * Point(-3, 4, 5) == Point(-8, 7, 3)

    def test_translate_does_not_move_vectors(self):
        v = Vector(-3, 4, 5)
        assert translate(5, -3, 2) * v == v

    def test_scale(self):
        t = scale(2, 3, 4)
        assert t * Point(-4, 6, 8) == Point(-8, 18, 32)
        assert t * Vector(-4, 6, 8) == Vector(-8, 18, 32)
        assert t.invert() * Vector(-4, 6, 8) == Vector(-2, 2, 2)

    def test_reflection_is_negative_scale(self):
        assert scale(-1, 1, 1) * Point(2, 3, 4) == Point(-2, 3, 4)

    def test_rotate_x(self):
        p = Point(0, 1, 0)
        assert rotate_x(math.pi / 4) * p == Point(0, HALF, HALF)
        assert rotate_x(math.pi / 2) * p == Point(0, 0, 1)
        assert rotate_x(math.pi / 4).invert() * p == Point(0, HALF, -HALF)

    def test_rotate_y(self):
        p = Point(0, 0, 1)
        assert rotate_y(math.pi / 4) * p == Point(HALF, 0, HALF)
        assert rotate_y(math.pi / 2) * p == Point(1, 0, 0)

    def test_rotate_z(self):
        p = Point(0, 1, 0)
        assert rotate_z(math.pi / 4) * p == Point(-HALF, HALF, 0)
        assert rotate_z(math.pi / 2) * p == Point(-1, 0, 0)

    @pytest.mark.parametrize("args, expected", [
        ((1, 0, 0, 0, 0, 0), Point(5, 3, 4)),
        ((0, 1, 0, 0, 0, 0), Point(6, 3, 4)),
        ((0, 0, 1, 0, 0, 0), Point(2, 5, 4)),
        ((0, 0, 0, 1, 0, 0), Point(2, 7, 4)),
        ((0, 0, 0, 0, 1, 0), Point(2, 3, 6)),
        ((0, 0, 0, 0, 0, 1), Point(2, 3, 7)),
    ])
    def test_shear(self, args, expected):
        assert shear(*args) * Point(2, 3, 4) == expected

    def test_individual_transforms_in_sequence(self):
        p = Point(1, 0, 1)
        p2 = rotate_x(math.pi / 2) * p
        assert p2 == Point(1, -1, 0)
        p3 = scale(5, 5, 5) * p2
        assert p3 == Point(5, -5, 0)
        assert translate(10, 5, 7) * p3 == Point(15, 0, 7)

    def test_chained_transforms_apply_in_written_order(self):
        p = Point(1, 0, 1).rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7).transform()
        assert isinstance(p, Point)
        assert p == Point(15, 0, 7)

    def test_chain_matrix_matches_reverse_product(self):
        m = chain().rotate_x(math.pi / 2).scale(5, 5, 5).translate(10, 5, 7).matrix
        assert m == translate(10, 5, 7) * scale(5, 5, 5) * rotate_x(math.pi / 2)

    def test_chain_without_target_has_no_transform(self):
        with pytest.raises(ValueError):
            chain().scale(2, 2, 2).transform()

    def test_chain_builds_object_transform(self):
        m = chain().scale(2, 2, 2).translate(1, 0, 0).matrix
        assert m * Point(1, 1, 1) == Point(3, 2, 2)

    def test_view_transform_default_orientation(self):
        t = view_transform(Point(0, 0, 0), Point(0, 0, -1), Vector(0, 1, 0))
        assert t == Matrix.identity()

    def test_view_transform_looking_down_positive_z(self):
        t = view_transform(Point(0, 0, 0), Point(0, 0, 1), Vector(0, 1, 0))
        assert t == scale(-1, 1, -1)

    def test_view_transform_moves_the_world(self):
        t = view_transform(Point(0, 0, 8), Point(0, 0, 0), Vector(0, 1, 0))
        assert t == translate(0, 0, -8)

    def test_arbitrary_view_transform(self):
        t = view_transform(Point(1, 3, 2), Point(4, -2, 8), Vector(1, 1, 0))
        assert t == Matrix([
            [-0.50709, 0.50709, 0.67612, -2.36643],
            [0.76772, 0.60609, 0.12122, -2.82843],
            [-0.35857, 0.59761, -0.71714, 0.00000],
            [0.00000, 0.00000, 0.00000, 1.00000],
        ])
