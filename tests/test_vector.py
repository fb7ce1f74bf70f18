"""Tests for homogeneous points and vectors."""

import math

import pytest

from core.errors import HomogeneousTagError
from core.fuzzy import EPSILON, f64_fuzzy_eq, fuzzy_eq
from core.vector import Point, ThreePart, Vector, cross, dot


class TestThreePart:
    """Homogeneous storage."""

    def test_point_and_vector_tags(self):
        assert Point(4.3, -4.2, 3.1).w == 1.0
        assert Vector(4.3, -4.2, 3.1).w == 0.0

    def test_immutable(self):
        part = ThreePart(1.0, 2.0, 3.0, 1.0)
        with pytest.raises(AttributeError):
            part.a = 5.0

    def test_fuzzy_equality(self):
        assert ThreePart(1.0, 2.0, 3.0, 0.0) == ThreePart(1.0 + EPSILON / 10, 2.0, 3.0, 0.0)
        assert ThreePart(1.0, 2.0, 3.0, 0.0) != ThreePart(1.0 + EPSILON * 10, 2.0, 3.0, 0.0)

    def test_iterates_in_order(self):
        assert list(ThreePart(1.0, 2.0, 3.0, 1.0)) == [1.0, 2.0, 3.0, 1.0]


class TestFuzzy:
    def test_scalar_comparison(self):
        assert f64_fuzzy_eq(0.1 + 0.2, 0.3)
        assert not f64_fuzzy_eq(0.1, 0.2)

    def test_delegates_to_objects(self):
        assert fuzzy_eq(Vector(1.0, 0.0, 0.0), Vector(1.0, 0.0, 1e-7))


class TestPoint:
    def test_point_plus_vector_is_point(self):
        result = Point(3.0, -2.0, 5.0) + Vector(-2.0, 3.0, 1.0)
        assert isinstance(result, Point)
        assert result == Point(1.0, 1.0, 6.0)

    def test_point_minus_point_is_vector(self):
        result = Point(3.0, 2.0, 1.0) - Point(5.0, 6.0, 7.0)
        assert isinstance(result, Vector)
        assert result == Vector(-2.0, -4.0, -6.0)

    def test_point_minus_vector_is_point(self):
        assert Point(3.0, 2.0, 1.0) - Vector(5.0, 6.0, 7.0) == Point(-2.0, -4.0, -6.0)

    def test_point_plus_point_is_rejected(self):
        with pytest.raises(TypeError):
            Point(1.0, 0.0, 0.0) + Point(0.0, 1.0, 0.0)

    def test_origin(self):
        assert Point.origin() == Point(0.0, 0.0, 0.0)

    def test_point_and_vector_never_equal(self):
        assert Point(1.0, 2.0, 3.0) != Vector(1.0, 2.0, 3.0)


class TestVector:
    def test_arithmetic(self):
        v = Vector(1.0, -2.0, 3.0)
        assert v + Vector(1.0, 1.0, 1.0) == Vector(2.0, -1.0, 4.0)
        assert v - Vector(1.0, 1.0, 1.0) == Vector(0.0, -3.0, 2.0)
        assert v * 3.5 == Vector(3.5, -7.0, 10.5)
        assert 2 * v == Vector(2.0, -4.0, 6.0)
        assert v / 2 == Vector(0.5, -1.0, 1.5)
        assert -v == Vector(-1.0, 2.0, -3.0)

    def test_magnitude(self):
        assert Vector(1.0, 0.0, 0.0).magnitude() == 1.0
        assert Vector(1.0, 2.0, 3.0).magnitude() == pytest.approx(math.sqrt(14.0))
        assert Vector(-1.0, -2.0, -3.0).sqr_magnitude() == pytest.approx(14.0)

    def test_normalize(self):
        assert Vector(4.0, 0.0, 0.0).normalize() == Vector(1.0, 0.0, 0.0)
        assert Vector(1.0, 2.0, 3.0).normalize().magnitude() == pytest.approx(1.0)

    def test_normalize_zero_vector_stays_zero(self):
        assert Vector.zero().normalize() == Vector(0.0, 0.0, 0.0)

    def test_dot_and_cross(self):
        a = Vector(1.0, 2.0, 3.0)
        b = Vector(2.0, 3.0, 4.0)
        assert a.dot(b) == pytest.approx(20.0)
        assert dot(a, b) == pytest.approx(20.0)
        assert a.cross(b) == Vector(-1.0, 2.0, -1.0)
        assert cross(b, a) == Vector(1.0, -2.0, 1.0)

    def test_reflect_across_flat_normal(self):
        reflected = Vector(1.0, -1.0, 0.0).reflect_across(Vector(0.0, 1.0, 0.0))
        assert reflected == Vector(1.0, 1.0, 0.0)

    def test_reflect_across_slanted_normal(self):
        normal = Vector(1.0, 1.0, 0.0).normalize()
        assert Vector(0.0, -1.0, 0.0).reflect_across(normal) == Vector(1.0, 0.0, 0.0)


class TestTypeRules:
    def test_tags_are_checked(self):
        assert Point.from_part(ThreePart(1.0, 2.0, 3.0, 1.0)) == Point(1.0, 2.0, 3.0)
        assert Vector.from_part(ThreePart(1.0, 2.0, 3.0, 0.0)) == Vector(1.0, 2.0, 3.0)
        with pytest.raises(HomogeneousTagError):
            Point.from_part(ThreePart(1.0, 2.0, 3.0, 0.0))
        with pytest.raises(HomogeneousTagError):
            Vector.from_part(ThreePart(1.0, 2.0, 3.0, 1.0))

    def test_products_of_vectors_need_named_methods(self):
        with pytest.raises(TypeError):
            Vector(1.0, 0.0, 0.0) * Vector(0.0, 1.0, 0.0)
        with pytest.raises(TypeError):
            Vector(1.0, 0.0, 0.0) / Vector(0.0, 1.0, 0.0)
