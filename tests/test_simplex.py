import pytest

from lcurvekit.simplex import nelder_mead


def _bowl(p):
    return (p[0] - 1.0) ** 2 + (p[1] + 2.0) ** 2


WIDE = [(-10.0, 10.0), (-10.0, 10.0)]


def test_finds_unconstrained_minimum():
    best = nelder_mead(_bowl, [0.0, 0.0], [0.5, 0.5], WIDE, 10000, 1e-14)
    assert best[0] == pytest.approx(1.0, abs=1e-3)
    assert best[1] == pytest.approx(-2.0, abs=1e-3)


def test_result_has_one_value_per_parameter():
    best = nelder_mead(_bowl, [3.0, 3.0], [1.0, 1.0], WIDE, 500, 1e-10)
    assert len(best) == 2


def test_result_no_worse_than_start():
    x0 = [4.0, 5.0]
    best = nelder_mead(_bowl, x0, [1.0, 1.0], WIDE, 50, 1e-10)
    assert _bowl(best) <= _bowl(x0)


def test_respects_limits():
    limits = [(-1.0, 0.5), (-10.0, 10.0)]
    seen = []

    def f(p):
        seen.append(list(p))
        return _bowl(p)

    best = nelder_mead(f, [0.0, 0.0], [0.3, 0.3], limits, 10000, 1e-14)
    assert all(-1.0 <= p[0] <= 0.5 for p in seen[1:])
    assert best[0] == pytest.approx(0.5, abs=1e-3)
    assert best[1] == pytest.approx(-2.0, abs=1e-2)


def test_zero_iterations_returns_best_initial_corner():
    best = nelder_mead(_bowl, [0.0, 0.0], [1.0, 0.0], WIDE, 0, 1e-10)
    assert best == [1.0, 0.0]


def test_three_dimensions():
    def f(p):
        return (p[0] - 0.5) ** 2 + 2.0 * (p[1] - 0.25) ** 2 + (p[2] + 1.0) ** 2

    best = nelder_mead(f, [0.0, 0.0, 0.0], [0.2, 0.2, 0.2],
                       [(-5.0, 5.0)] * 3, 20000, 1e-15)
    assert best[0] == pytest.approx(0.5, abs=1e-3)
    assert best[1] == pytest.approx(0.25, abs=1e-3)
    assert best[2] == pytest.approx(-1.0, abs=1e-3)