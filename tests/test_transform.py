"""Tests for transformed bodies and normal transformation."""

import math

import pytest

from core.errors import SingularMatrixError
from core.matrix import Matrix4
from core.ray import Ray
from core.vector import Point, Vector
from geometry.sphere import RawSphere, Sphere
from geometry.transform import TransformedBody


@pytest.fixture
def skewed_sphere():
    """Non-uniform scale, shear and rotation all at once."""
    return Sphere(
        Matrix4.rotation_y(0.7)
        * Matrix4.shear(0.3, 0.0, 0.0, 0.0, 0.2, 0.0)
        * Matrix4.scale(3.0, 0.5, 1.0)
    )


class TestTransformedBody:
    def test_caches_inverse_and_normal_matrix(self):
        transform = Matrix4.translate(1.0, 2.0, 3.0) * Matrix4.scale(2.0, 2.0, 2.0)
        body = TransformedBody(transform, RawSphere())
        assert body.transformation * body.inverse_transformation == Matrix4.identity()
        assert body.transpose_inverse_transformation == body.inverse_transformation.transpose().fix_transform()

    def test_identity_by_default(self):
        assert TransformedBody(None, RawSphere()).transformation == Matrix4.identity()

    def test_singular_transform_is_rejected(self):
        with pytest.raises(SingularMatrixError):
            Sphere(Matrix4.scale(1.0, 0.0, 1.0))

    def test_singular_transform_is_a_value_error(self):
        body = Sphere()
        with pytest.raises(ValueError):
            body.set_transformation(Matrix4.scale(0.0, 0.0, 0.0))

    def test_set_transformation_replaces_cache(self, forward_ray):
        body = Sphere()
        body.set_transformation(Matrix4.translate(0.0, 0.0, 1.0))
        assert [i.t for i in body.intersect(forward_ray)] == [pytest.approx(5.0), pytest.approx(7.0)]

    def test_material_is_delegated(self):
        raw = RawSphere()
        assert TransformedBody(Matrix4.identity(), raw).get_material() is raw.get_material()


class TestNestedTransforms:
    def test_transform_of_transformed_body(self, forward_ray):
        outer = TransformedBody(Matrix4.translate(0.0, 0.0, 5.0), Sphere(Matrix4.scale_uniform(2.0)))
        hits = outer.intersect(forward_ray)
        assert [i.t for i in hits] == [pytest.approx(8.0), pytest.approx(12.0)]
        assert all(i.object is outer for i in hits)
        assert hits.hit().world_normal == Vector(0.0, 0.0, -1.0)
        assert hits.hit().world_pos == Point(0.0, 0.0, 3.0)


class TestTransformedNormals:
    @pytest.mark.parametrize("dx, dy", [
        (0.0, 0.0), (0.01, 0.0), (-0.01, 0.02), (0.02, -0.01), (0.03, 0.02),
    ])
    def test_normals_are_unit_and_face_the_ray(self, skewed_sphere, dx, dy):
        ray = Ray(Point(0.0, 0.0, -10.0), Vector(dx, dy, 1.0))
        hit = skewed_sphere.intersect(ray).hit()
        assert hit is not None
        normal = hit.world_normal
        assert normal.magnitude() == pytest.approx(1.0)
        assert normal.normalize() == normal
        assert normal.dot(ray.direction) < 0.0

    def test_normal_is_perpendicular_to_surface(self, skewed_sphere):
        # Two nearby surface points span a tangent direction
        ray_a = Ray(Point(0.0, 0.0, -10.0), Vector(0.0, 0.0, 1.0))
        ray_b = Ray(Point(0.0, 0.0, -10.0), Vector(1e-4, 0.0, 1.0))
        hit_a = skewed_sphere.intersect(ray_a).hit()
        hit_b = skewed_sphere.intersect(ray_b).hit()
        tangent = (hit_b.world_pos - hit_a.world_pos).normalize()
        assert hit_a.world_normal.dot(tangent) == pytest.approx(0.0, abs=1e-2)

    def test_rotation_normal(self):
        sphere = Sphere(Matrix4.rotation_y(math.pi / 2))
        assert sphere.normal(Point(1.0, 0.0, 0.0)) == Vector(1.0, 0.0, 0.0)
