"""Derivative-free simplex minimisation and derivative-aided line minimisation."""

from __future__ import annotations

import math
import warnings
from typing import Callable, Sequence

Vertex = list[float]


class MinimiseError(RuntimeError):
    """Error raised by the minimisation routines."""


def _column_sums(vertices: list[Vertex]) -> list[float]:
    return [math.fsum(column) for column in zip(*vertices)]


def amoeba(
    params: Sequence[tuple[Sequence[float], float]],
    ftol: float,
    nmax: int,
    func: Callable[[list[float]], float],
) -> tuple[list[tuple[Vertex, float]], int]:
    """Downhill simplex minimisation.

    ``params`` holds N+1 pairs of (corner, function value at that corner),
    each corner having N coordinates. The search stops once all corner values
    agree to within the fractional tolerance ``ftol``, or, with a warning,
    once more than ``nmax`` function calls have been made.

    Returns the final corners as (corner, value) pairs, with the best corner
    first if the tolerance was met, and the number of function calls.
    """
    tiny = 1.0e-10
    vertices = [[float(c) for c in corner] for corner, _ in params]
    values = [float(value) for _, value in params]
    npts = len(vertices)

    if any(len(corner) + 1 != npts for corner in vertices):
        raise MinimiseError(
            "amoeba: number of parameters is not one less than the number "
            "of parameter vectors on input"
        )
    if npts < 3:
        raise MinimiseError("amoeba: at least two parameters are needed")

    ndim = npts - 1
    psum = _column_sums(vertices)
    nfunc = 0

    def attempt(ihi: int, fac: float) -> float:
        fac1 = (1.0 - fac) / ndim
        fac2 = fac1 - fac
        ptry = [s * fac1 - p * fac2 for s, p in zip(psum, vertices[ihi])]
        ytry = func(list(ptry))
        if ytry < values[ihi]:
            values[ihi] = ytry
            for j, (new, old) in enumerate(zip(ptry, vertices[ihi])):
                psum[j] += new - old
            vertices[ihi] = ptry
        return ytry

    while True:
        ilo = 0
        if values[0] > values[1]:
            ihi, inhi = 1, 2
        else:
            ihi, inhi = 2, 1
        for i, value in enumerate(values):
            if value <= values[ilo]:
                ilo = i
            if value > values[ihi]:
                inhi = ihi
                ihi = i
            elif value > values[inhi] and i != ihi:
                inhi = i

        rtol = 2.0 * abs(values[ihi] - values[ilo]) / (
            abs(values[ihi]) + abs(values[ilo]) + tiny
        )

        if rtol < ftol:
            values[0], values[ilo] = values[ilo], values[0]
            vertices[0], vertices[ilo] = vertices[ilo], vertices[0]
            break

        if nfunc >= nmax:
            warnings.warn(f"amoeba: nmax = {nmax} exceeded.", RuntimeWarning, stacklevel=2)
            break

        nfunc += 2
        ytry = attempt(ihi, -1.0)
        if ytry <= values[ilo]:
            attempt(ihi, 2.0)
        elif ytry >= values[inhi]:
            ysave = values[ihi]
            ytry = attempt(ihi, 0.5)
            if ytry >= ysave:
                lowest = vertices[ilo]
                for i, corner in enumerate(vertices):
                    if i != ilo:
                        shrunk = [0.5 * (a + b) for a, b in zip(corner, lowest)]
                        vertices[i] = shrunk
                        values[i] = func(list(shrunk))
                nfunc += ndim
                psum = _column_sums(vertices)
        else:
            nfunc -= 1

    return list(zip(vertices, values)), nfunc


def _sign(a: float, b: float) -> float:
    return abs(a) if b >= 0.0 else -abs(a)


def dbrent(
    ax: float,
    bx: float,
    cx: float,
    func: Callable[[float], float],
    dfunc: Callable[[float], float],
    acc: float,
    stopfast: bool = False,
    fref: float = 0.0,
) -> tuple[float, float]:
    """Refine a bracketed minimum using derivatives.

    ``ax`` and ``cx`` must bracket a minimum with ``bx`` between them.
    ``acc`` is the absolute accuracy in x. With ``stopfast`` the search
    returns as soon as a function value below ``fref`` is found.

    Returns (xmin, function value at xmin).
    """
    itmax = 100
    a = min(ax, cx)
    b = max(ax, cx)
    x = w = v = bx
    fx = fw = fv = func(x)

    if stopfast and fx < fref:
        return x, fx

    dx = dw = dv = dfunc(x)
    e = 0.0
    d = 0.0

    for _ in range(itmax):
        xm = 0.5 * (a + b)
        tol1 = acc
        tol2 = 2.0 * tol1
        if abs(x - xm) <= tol2 - 0.5 * (b - a):
            return x, fx

        bisect = True
        if abs(e) > tol1:
            d1 = d2 = 2.0 * (b - a)
            if dw != dx:
                d1 = (w - x) * dx / (dx - dw)
            if dv != dx:
                d2 = (v - x) * dx / (dx - dv)
            u1 = x + d1
            u2 = x + d2
            ok1 = (a - u1) * (u1 - b) > 0.0 and dx * d1 <= 0.0
            ok2 = (a - u2) * (u2 - b) > 0.0 and dx * d2 <= 0.0
            olde = e
            e = d
            if ok1 or ok2:
                if ok1 and ok2:
                    d = d1 if abs(d1) < abs(d2) else d2
                elif ok1:
                    d = d1
                else:
                    d = d2
                if abs(d) <= abs(0.5 * olde):
                    bisect = False
                    u = x + d
                    if u - a < tol2 or b - u < tol2:
                        d = _sign(tol1, xm - x)
        if bisect:
            e = a - x if dx >= 0.0 else b - x
            d = 0.5 * e

        if abs(d) >= tol1:
            u = x + d
            fu = func(u)
            if stopfast and fu < fref:
                return u, fu
        else:
            u = x + _sign(tol1, d)
            fu = func(u)
            if stopfast and fu < fref:
                return u, fu
            if fu > fx:
                return x, fx

        du = dfunc(u)
        if fu <= fx:
            if u >= x:
                a = x
            else:
                b = x
            v, fv, dv = w, fw, dw
            w, fw, dw = x, fx, dx
            x, fx, dx = u, fu, du
        else:
            if u < x:
                a = u
            else:
                b = u
            if fu <= fw or w == x:
                v, fv, dv = w, fw, dw
                w, fw, dw = u, fu, du
            elif fu < fv or v == x or v == w:
                v, fv, dv = u, fu, du

    raise MinimiseError("dbrent: too many iterations")