import math

import pytest

from lcurvekit.elements import LcurveError, Point, Vec3
from lcurvekit.radius import comp_radius1, comp_radius2


def _sphere(centre, radius, n=8):
    points = []
    for i in range(n):
        theta = math.pi * (i + 0.5) / n
        for j in range(2 * n):
            phi = math.pi * j / n
            normal = Vec3(
                math.sin(theta) * math.cos(phi),
                math.sin(theta) * math.sin(phi),
                math.cos(theta),
            )
            area = 0.01 * (1.0 + 0.1 * j)
            points.append(Point(posn=centre + radius * normal, dirn=normal, area=area))
    return points


@pytest.mark.parametrize("radius", [0.05, 0.2, 0.37])
def test_radius1_of_sphere(radius):
    assert comp_radius1(_sphere(Vec3(), radius)) == pytest.approx(radius)


@pytest.mark.parametrize("radius", [0.1, 0.3])
def test_radius2_of_sphere(radius):
    assert comp_radius2(_sphere(Vec3(1.0, 0.0, 0.0), radius)) == pytest.approx(radius)


def test_radius_lies_between_extremes():
    star = _sphere(Vec3(), 0.1) + _sphere(Vec3(), 0.2)
    r = comp_radius1(star)
    assert 0.1 < r < 0.2


def test_radius_scales_with_size():
    small = comp_radius1(_sphere(Vec3(), 0.1))
    large = comp_radius1(_sphere(Vec3(), 0.3))
    assert large == pytest.approx(3.0 * small)


def test_star2_grid_measured_from_its_own_centre():
    star = _sphere(Vec3(1.0, 0.0, 0.0), 0.25)
    assert comp_radius2(star) == pytest.approx(0.25)
    assert comp_radius1(star) != pytest.approx(0.25)


def test_empty_grid_raises():
    with pytest.raises(LcurveError):
        comp_radius1([])
    with pytest.raises(LcurveError):
        comp_radius2([])