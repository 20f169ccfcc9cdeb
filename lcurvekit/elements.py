"""Basic building blocks of the light-curve model: vectors, surface elements,
grid interpolation, limb darkening and physical parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class LcurveError(RuntimeError):
    """Error raised by the light-curve modelling code."""


@dataclass(frozen=True)
class Vec3:
    """A Cartesian 3-vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def __rmul__(self, factor: float) -> Vec3:
        return self.__mul__(factor)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)


@dataclass
class Point:
    """A surface element: position, outward direction, area, gravity,
    eclipse phase ranges and brightness times area."""

    posn: Vec3 = field(default_factory=Vec3)
    dirn: Vec3 = field(default_factory=Vec3)
    area: float = 0.0
    gravity: float = 1.0
    eclipse: list[tuple[float, float]] = field(default_factory=list)
    flux: float = 0.0

    def visible(self, phase: float) -> bool:
        """True unless the element is eclipsed at the given phase."""
        phi = phase - math.floor(phase)
        return not any(
            (ingress <= phi <= egress) or phi <= egress - 1.0
            for ingress, egress in self.eclipse
        )


@dataclass
class Ginterp:
    """Parameters for switching between fine and coarse grids."""

    phase1: float
    phase2: float
    scale11: float = 1.0
    scale12: float = 1.0
    scale21: float = 1.0
    scale22: float = 1.0

    def scale1(self, phase: float) -> float:
        """Scale factor for star 1 at a given phase."""
        pnorm = phase - math.floor(phase)
        if pnorm <= self.phase1 or pnorm >= 1.0 - self.phase1:
            return 1.0
        return (
            self.scale11 * (1.0 - self.phase1 - pnorm)
            + self.scale12 * (pnorm - self.phase1)
        ) / (1.0 - 2.0 * self.phase1)

    def scale2(self, phase: float) -> float:
        """Scale factor for star 2 at a given phase."""
        pnorm = phase - math.floor(phase)
        if self.phase2 <= pnorm <= 1.0 - self.phase2:
            return 1.0
        if pnorm < 0.5:
            return (
                self.scale22 * (self.phase2 - pnorm)
                + self.scale21 * (pnorm + self.phase2)
            ) / (2.0 * self.phase2)
        return (
            self.scale21 * (1.0 + self.phase2 - pnorm)
            + self.scale22 * (pnorm - 1.0 + self.phase2)
        ) / (2.0 * self.phase2)

    def grid_type(self, phase: float) -> int:
        """1: fine star 1, coarse star 2; 2: both coarse; 3: coarse star 1, fine star 2."""
        pnorm = phase - math.floor(phase)
        if pnorm <= self.phase1 or pnorm >= 1.0 - self.phase1:
            return 1
        if (self.phase1 < pnorm < self.phase2) or (
            1.0 - self.phase2 < pnorm < 1.0 - self.phase1
        ):
            return 2
        return 3


class LDCType(Enum):
    """Limb-darkening law."""

    POLY = "poly"
    CLARET = "claret"


@dataclass(frozen=True)
class LDC:
    """Four-coefficient limb darkening with a critical mu cut-off."""

    ldc1: float = 0.0
    ldc2: float = 0.0
    ldc3: float = 0.0
    ldc4: float = 0.0
    mucrit: float = 0.0
    ltype: LDCType = LDCType.POLY

    def imu(self, mu: float) -> float:
        """Specific intensity relative to disc centre at direction cosine mu."""
        if mu <= 0:
            return 0.0
        mu = min(mu, 1.0)
        ommu = 1.0 - mu
        im = 1.0
        if self.ltype is LDCType.POLY:
            im -= ommu * (
                self.ldc1 + ommu * (self.ldc2 + ommu * (self.ldc3 + ommu * self.ldc4))
            )
        elif self.ltype is LDCType.CLARET:
            im -= self.ldc1 + self.ldc2 + self.ldc3 + self.ldc4
            msq = math.sqrt(mu)
            im += msq * (
                self.ldc1 + msq * (self.ldc2 + msq * (self.ldc3 + msq * self.ldc4))
            )
        return im

    def see(self, mu: float) -> bool:
        """Whether mu lies above the critical value."""
        return mu > self.mucrit


@dataclass
class Pparam:
    """A physical parameter: value, variation range, derivative step,
    whether it varies and whether it is defined."""

    value: float = 0.0
    range: float = 0.0
    dstep: float = 0.0
    vary: bool = False
    defined: bool = False

    def __float__(self) -> float:
        return float(self.value)


def _parse_float(token: str) -> float:
    return float(token)


def _parse_flag(token: str) -> bool:
    number = int(token)
    if number not in (0, 1):
        raise ValueError(f"flag must be 0 or 1, not {token!r}")
    return bool(number)


def parse_pparam(entry: str) -> Pparam:
    """Parse 'value range dstep vary [defined]'; defined defaults to true."""
    tokens = entry.split()
    try:
        value, prange, dstep = (_parse_float(tok) for tok in tokens[:3])
        vary = _parse_flag(tokens[3])
    except (ValueError, IndexError):
        raise LcurveError(f"Pparam: could not read entry = {entry}") from None
    defined = True
    if len(tokens) > 4:
        try:
            defined = _parse_flag(tokens[4])
        except ValueError:
            defined = True
    return Pparam(value, prange, dstep, vary, defined)


def parse_pparam_strict(entry: str) -> Pparam:
    """Parse exactly 'value range dstep vary defined'."""
    tokens = entry.split()
    if len(tokens) > 5:
        raise LcurveError(
            "Pparam: too many values in entry = "
            f"(need to be 'value range dstep vary defined'){entry}"
        )
    try:
        value, prange, dstep = (_parse_float(tok) for tok in tokens[:3])
        vary = _parse_flag(tokens[3])
        defined = _parse_flag(tokens[4])
    except (ValueError, IndexError):
        raise LcurveError(
            "Pparam: too little values in entry "
            f"(need to be 'value range dstep vary defined') = {entry}"
        ) from None
    return Pparam(value, prange, dstep, vary, defined)