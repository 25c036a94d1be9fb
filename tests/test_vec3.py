import math

import pytest

from spacenerds.vec3 import (
    Vec3,
    heading_mark_to_vec3,
    normalize_euler_0_2pi,
    plane_vector_u_and_v_from_normal,
    sphere_line_segment_intersection,
    vec3_to_heading_mark,
)


def close(a, b, tol=1e-9):
    return all(math.isclose(p, q, abs_tol=tol) for p, q in zip(a, b))


def test_add_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(-4.0, 0.5, 7.0)
    total = a + b
    assert total == Vec3(-2.5, -1.5, 10.25)
    back = total - b
    assert tuple(back) == pytest.approx(tuple(a))


def test_mul_and_neg():
    a = Vec3(1.0, -2.0, 3.0)
    assert a * -1 == -a
    assert 2 * a == a + a


def test_cross_is_perpendicular():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert math.isclose(c.dot(a), 0.0, abs_tol=1e-9)
    assert math.isclose(c.dot(b), 0.0, abs_tol=1e-9)
    assert close(b.cross(a), -c)


def test_len2_and_magnitude():
    a = Vec3(3.0, 4.0, 12.0)
    assert a.len2() == a.dot(a)
    assert math.isclose(a.magnitude() ** 2, a.len2())


def test_normalized_has_unit_length():
    a = Vec3(3.0, -7.0, 2.0)
    n = a.normalized()
    assert math.isclose(n.magnitude(), 1.0)
    assert math.isclose(n.dot(a), a.magnitude())


def test_normalized_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().normalized()


def test_dist_symmetric():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-1.0, 5.0, 0.0)
    assert math.isclose(a.dist(b), b.dist(a))
    assert math.isclose(a.dist(b), (a - b).magnitude())


def test_lerp_endpoints():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-5.0, 8.0, 0.5)
    assert a.lerp(b, 0.0) == a
    assert close(a.lerp(b, 1.0), b)
    mid = a.lerp(b, 0.5)
    assert math.isclose(mid.dist(a), mid.dist(b))


def test_normalize_euler_range():
    for a in (-0.1, -7.0, -20.5):
        r = normalize_euler_0_2pi(a)
        assert 0 <= r < 2 * math.pi
        assert math.isclose(math.cos(r), math.cos(a), abs_tol=1e-9)


def test_normalize_euler_keeps_positive():
    assert normalize_euler_0_2pi(1.25) == 1.25


@pytest.mark.parametrize(
    "r,heading,mark",
    [(10.0, 0.5, 0.3), (2.0, 4.0, -1.0), (1.0, 3.0, 0.0)],
)
def test_heading_mark_round_trip(r, heading, mark):
    v = heading_mark_to_vec3(r, heading, mark)
    r2, h2, m2 = vec3_to_heading_mark(v)
    assert math.isclose(r2, r)
    assert math.isclose(h2, heading)
    assert math.isclose(m2, mark, abs_tol=1e-9)


def test_zero_vector_mark():
    r, _, mark = vec3_to_heading_mark(Vec3())
    assert r == 0.0
    assert mark == 0.0


def test_sphere_segment_through_center():
    center = Vec3(1.0, 2.0, 3.0)
    radius = 5.0
    v0 = center + Vec3(-20.0, 0.0, 0.0)
    v1 = center + Vec3(20.0, 1.0, 0.0)
    result = sphere_line_segment_intersection(v0, v1, center, radius)
    assert result is not None
    a, b = result
    assert math.isclose(a.dist(center), radius)
    assert math.isclose(b.dist(center), radius)


def test_sphere_segment_inside():
    center = Vec3()
    v0 = Vec3(0.1, 0.2, 0.0)
    v1 = Vec3(-0.3, 0.1, 0.2)
    assert sphere_line_segment_intersection(v0, v1, center, 10.0) == (v0, v1)


def test_sphere_segment_partial():
    center = Vec3()
    v0 = Vec3(0.0, 0.0, 0.0)
    v1 = Vec3(0.0, 0.0, 30.0)
    a, b = sphere_line_segment_intersection(v0, v1, center, 10.0)
    assert a == v0
    assert math.isclose(b.magnitude(), 10.0)


def test_sphere_segment_miss():
    center = Vec3()
    assert sphere_line_segment_intersection(
        Vec3(20.0, 20.0, 0.0), Vec3(30.0, 20.0, 0.0), center, 5.0
    ) is None
    assert sphere_line_segment_intersection(
        Vec3(20.0, 0.0, 0.0), Vec3(30.0, 0.0, 0.0), center, 5.0
    ) is None


@pytest.mark.parametrize("n", [Vec3(0.0, 0.0, 1.0), Vec3(1.0, 1.0, 0.5).normalized()])
def test_plane_vectors_orthonormal(n):
    u, v = plane_vector_u_and_v_from_normal(n)
    assert math.isclose(u.magnitude(), 1.0)
    assert math.isclose(v.magnitude(), 1.0)
    assert math.isclose(u.dot(v), 0.0, abs_tol=1e-9)
    assert math.isclose(u.dot(n), 0.0, abs_tol=1e-9)
    assert math.isclose(v.dot(n), 0.0, abs_tol=1e-9)