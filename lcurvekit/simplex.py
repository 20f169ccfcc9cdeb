"""Bounded Nelder-Mead simplex minimisation."""

from __future__ import annotations

import logging
import math
from typing import Callable, Sequence

logger = logging.getLogger(__name__)


def _clamp(value: float, limit: tuple[float, float]) -> float:
    low, high = limit
    return min(max(value, low), high)


def _clamped(point: Sequence[float], limits: Sequence[tuple[float, float]]) -> list[float]:
    return [_clamp(value, limit) for value, limit in zip(point, limits)]


def nelder_mead(
    f: Callable[[list[float]], float],
    x0: Sequence[float],
    step: Sequence[float],
    limits: Sequence[tuple[float, float]],
    max_iter: int = 999999,
    tol: float = 5e-5,
) -> list[float]:
    """Minimise ``f`` starting from ``x0``, keeping every trial point within
    ``limits`` (one (low, high) pair per parameter).

    The initial simplex is ``x0`` plus one corner per parameter displaced by
    ``step``. Iteration stops once the spread (standard deviation) of the
    corner values falls below ``tol`` or after ``max_iter`` iterations.
    Returns the best corner.
    """
    n = len(x0)
    simplex = [list(map(float, x0)) for _ in range(n + 1)]
    for i, (start, delta, limit) in enumerate(zip(x0, step, limits)):
        simplex[i + 1][i] = _clamp(start + delta, limit)
    fvals = [f(list(corner)) for corner in simplex]

    for iteration in range(max_iter):
        if iteration % 10 == 0:
            logger.info("Iteration %d  Weighted Chi^2 = %g", iteration, math.fsum(fvals) / n)

        order = sorted(range(n + 1), key=fvals.__getitem__)
        best, worst, second_worst = order[0], order[n], order[n - 1]
        x_worst = simplex[worst]

        centroid = [
            math.fsum(coords) / n
            for coords in zip(*(c for k, c in enumerate(simplex) if k != worst))
        ]

        x_ref = _clamped(
            [c + 1.0 * (c - w) for c, w in zip(centroid, x_worst)], limits
        )
        f_ref = f(list(x_ref))

        if f_ref < fvals[best]:
            x_exp = _clamped(
                [c + 2.0 * (r - c) for c, r in zip(centroid, x_ref)], limits
            )
            f_exp = f(list(x_exp))
            if f_exp < f_ref:
                simplex[worst], fvals[worst] = x_exp, f_exp
            else:
                simplex[worst], fvals[worst] = x_ref, f_ref
        elif f_ref < fvals[second_worst]:
            simplex[worst], fvals[worst] = x_ref, f_ref
        else:
            x_con = _clamped(
                [c + 0.5 * (w - c) for c, w in zip(centroid, x_worst)], limits
            )
            f_con = f(list(x_con))
            if f_con < fvals[worst]:
                simplex[worst], fvals[worst] = x_con, f_con
            else:
                # shrink every corner but the first towards the current best
                for k in range(1, n + 1):
                    anchor = simplex[best]
                    simplex[k] = _clamped(
                        [b + 0.5 * (v - b) for v, b in zip(simplex[k], anchor)],
                        limits,
                    )
                    fvals[k] = f(list(simplex[k]))

        mean = math.fsum(fvals) / (n + 1)
        variance = math.fsum((v - mean) ** 2 for v in fvals) / (n + 1)
        if math.sqrt(variance) < tol:
            break

    best_index = min(range(n + 1), key=fvals.__getitem__)
    return list(simplex[best_index])