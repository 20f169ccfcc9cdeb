"""Eclipses of points by a cylindrically symmetric, flared accretion disc.

The line of sight towards a point, taken over all orbital phases, sweeps out
a cone (the line-of-sight cone). Because the disc is symmetric about the z
axis, each eclipse question reduces to how the circle cut by that cone in
some plane z = const meets a rim circle of the disc lying in the same plane.
"""

from __future__ import annotations

import math
from enum import Enum

from .constants import PI, TWOPI
from .elements import Vec3


class RocheError(RuntimeError):
    """Error raised by the Roche geometry code."""


class Circle(Enum):
    """Ways in which the line-of-sight cone can meet a circle about the z axis."""

    #: the cone starts at or above the circle
    ABOVE = "above"
    #: the cone's circle lies wholly inside the circle
    INSIDE = "inside"
    #: the cone's circle wholly encloses the circle
    OUTSIDE = "outside"
    #: the two circles are disjoint
    SEPARATE = "separate"
    #: the two circles cross
    CROSSING = "crossing"


def cut_phase(rxy: float, rcone: float, radius: float) -> float:
    """Half phase range over which a cone circle of radius ``rcone``, centred
    ``rxy`` from the axis, lies inside a circle of radius ``radius``.

    The circles must genuinely cross; otherwise :class:`RocheError` is raised.
    """
    if rxy + rcone <= radius:
        raise RocheError("rxy + rcone <= radius")
    if rxy >= radius + rcone:
        raise RocheError("rxy >= radius + rcone")
    if rcone >= radius + rxy:
        raise RocheError("rcone >= radius + rxy")
    cosine = (rxy * rxy + rcone * rcone - radius * radius) / (2.0 * rcone * rxy)
    return math.acos(cosine) / TWOPI


def circle_eclipse(
    rxy: float, z: float, zcirc: float, radius: float, tani: float
) -> tuple[Circle, float | None]:
    """Classify how the line-of-sight cone of a point meets a circle.

    Returns the outcome and, for :attr:`Circle.CROSSING` only, the crossing
    phase (``None`` otherwise).
    """
    if z >= zcirc:
        return Circle.ABOVE, None

    rcone = tani * (zcirc - z)

    if rcone >= rxy + radius:
        return Circle.OUTSIDE, None
    if rxy >= rcone + radius:
        return Circle.SEPARATE, None
    if rxy + rcone <= radius:
        return Circle.INSIDE, None
    return Circle.CROSSING, cut_phase(rxy, rcone, radius)


def _appear_phase(
    rxy: float, z: float, tani: float, rims: list[tuple[float, float]]
) -> float:
    """Half phase range over which the point is seen through the disc's hole,
    given the rims (height, radius) the line of sight must pass, in order.
    Returns -1 when it is never seen that way."""
    appear = -1.0
    for number, (zcirc, radius) in enumerate(rims):
        result, phase = circle_eclipse(rxy, z, zcirc, radius, tani)
        if number == 0:
            if result is Circle.INSIDE:
                appear = 0.5
            elif result is Circle.CROSSING:
                appear = phase
        elif appear > 0:
            if result is Circle.CROSSING:
                appear = min(appear, phase)
            elif result is not Circle.INSIDE:
                appear = -1.0
        if appear <= 0:
            break
    return appear


def _wrap(phase: float) -> float:
    return phase - math.floor(phase)


def disc_eclipse(
    iangle: float,
    rdisc1: float,
    rdisc2: float,
    beta: float,
    height: float,
    r: Vec3,
) -> list[tuple[float, float]]:
    """Phase ranges over which a flared disc eclipses the point ``r``.

    ``iangle`` is the inclination in degrees, ``rdisc1`` and ``rdisc2`` the
    inner and outer disc radii, ``height`` the disc height at unit radius and
    ``beta`` the flaring exponent (height scales as radius**beta; must be
    >= 1). Each returned pair is (ingress, egress), with ingress in [0, 1)
    and egress later by at most about one cycle. An empty list means no
    eclipse.
    """
    if beta < 1:
        raise RocheError("disc_eclipse: beta must be >= 1")

    angle = PI / 180.0 * iangle
    sini = math.sin(angle)
    cosi = math.cos(angle)

    hout = height * rdisc2**beta

    # too high ever to be eclipsed whatever the inclination
    if r.z >= hout:
        return []

    # exactly edge-on: only the curved outer edge matters
    if cosi == 0.0:
        if abs(r.z) >= hout:
            return []
        rxy = math.sqrt(r.x * r.x + r.y * r.y)
        if rxy <= rdisc2:
            return [(0.0, 1.0)]
        subtend = math.asin(rdisc2 / rxy) / TWOPI
        pcen = math.atan2(r.y, -r.x) / TWOPI
        ingress = _wrap(pcen - subtend)
        return [(ingress, ingress + 2.0 * subtend)]

    rxy = math.sqrt(r.x * r.x + r.y * r.y)

    # inside the disc itself
    if rdisc1 < rxy < rdisc2 and abs(r.z) < height * rxy**beta:
        return [(0.0, 1.1)]

    tani = sini / cosi

    if rxy < rdisc2 and r.z >= height * max(rdisc1, rxy) ** beta:
        # roughly conical region above the disc: only the outer edge can occult
        result, phase = circle_eclipse(rxy, r.z, hout, rdisc2, tani)
        if result is Circle.OUTSIDE:
            return [(0.0, 1.1)]
        if result is Circle.CROSSING:
            phi0 = math.atan2(r.y, -r.x) / TWOPI
            ingress = _wrap(phi0 + phase)
            return [(ingress, ingress + 1.0 - 2.0 * phase)]
        return []

    # cone circle in the plane of the lower outer rim
    rcone_lo = max(0.0, tani * (-hout - r.z))
    if rcone_lo >= rxy + rdisc2:
        return []

    # cone circle in the plane of the upper outer rim
    rcone_hi = tani * (hout - r.z)
    if rxy >= rcone_hi + rdisc2:
        return []

    # Half-range of eclipse, ignoring the hole in the middle of the disc.
    if rxy + rcone_lo <= rdisc2:
        eclipse_phase = 0.5
    elif rxy <= rdisc2:
        eclipse_phase = cut_phase(rxy, rcone_lo, rdisc2)
    else:
        rxy_sq = rxy * rxy
        rdisc2_sq = rdisc2 * rdisc2
        if rcone_hi**2 + rdisc2_sq >= rxy_sq and rcone_lo**2 + rdisc2_sq <= rxy_sq:
            # curved outer rim sets the limit
            eclipse_phase = math.asin(rdisc2 / rxy) / TWOPI
        elif rcone_hi**2 + rdisc2_sq < rxy_sq:
            eclipse_phase = cut_phase(rxy, rcone_hi, rdisc2)
        else:
            eclipse_phase = cut_phase(rxy, rcone_lo, rdisc2)

    # Half-range over which the point shows through the hole, if any.
    hin = height * rdisc1**beta
    if r.z < -hout:
        rims = [(-hout, rdisc2), (-hin, rdisc1), (hin, rdisc1), (hout, rdisc2)]
    elif rxy < rdisc1 and r.z < -hin:
        rims = [(-hin, rdisc1), (hin, rdisc1), (hout, rdisc2)]
    elif rxy < rdisc1 and r.z < hin:
        rims = [(hin, rdisc1), (hout, rdisc2)]
    else:
        rims = []
    appear_phase = _appear_phase(rxy, r.z, tani, rims) if rims else -1.0

    phi0 = math.atan2(r.y, -r.x) / TWOPI

    if appear_phase <= 0:
        ingress = _wrap(phi0 - eclipse_phase)
        return [(ingress, ingress + 2.0 * eclipse_phase)]
    if appear_phase < eclipse_phase:
        width = eclipse_phase - appear_phase
        first = _wrap(phi0 - eclipse_phase)
        second = _wrap(phi0 + appear_phase)
        return [(first, first + width), (second, second + width)]
    return []