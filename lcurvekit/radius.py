"""Volume-averaged radii of the stars from their surface grids."""

from __future__ import annotations

from typing import Iterable

from .elements import LcurveError, Point, Vec3

_CENTRE1 = Vec3(0.0, 0.0, 0.0)
_CENTRE2 = Vec3(1.0, 0.0, 0.0)


def _volume_averaged_radius(star: Iterable[Point], centre: Vec3) -> float:
    sum_solid_angle = 0.0
    sum_volume = 0.0
    count = 0
    for pt in star:
        vec = pt.posn - centre
        r = vec.length()
        rcosa = pt.dirn.dot(vec)
        # solid angle and three times the volume of each element
        sum_solid_angle += pt.area * rcosa / r**3
        sum_volume += pt.area * rcosa
        count += 1
    if count == 0 or sum_solid_angle == 0.0:
        raise LcurveError("cannot compute a radius from an empty grid")
    return (sum_volume / sum_solid_angle) ** (1.0 / 3.0)


def comp_radius1(star1: Iterable[Point]) -> float:
    """Volume-averaged R1/a for star 1, centred on the origin."""
    return _volume_averaged_radius(star1, _CENTRE1)


def comp_radius2(star2: Iterable[Point]) -> float:
    """Volume-averaged R2/a for star 2, centred at (1, 0, 0)."""
    return _volume_averaged_radius(star2, _CENTRE2)