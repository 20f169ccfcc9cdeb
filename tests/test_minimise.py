import pytest

from lcurvekit.minimise import MinimiseError, amoeba, dbrent


def _bowl(p):
    return (p[0] - 1.0) ** 2 + (p[1] - 2.0) ** 2


def _start(func, corners):
    return [(corner, func(corner)) for corner in corners]


def test_amoeba_finds_minimum_of_bowl():
    params = _start(_bowl, [[0.0, 0.0], [0.5, 0.0], [0.0, 0.5]])
    result, nfunc = amoeba(params, 1e-10, 5000, _bowl)
    best, value = result[0]
    assert best[0] == pytest.approx(1.0, abs=1e-3)
    assert best[1] == pytest.approx(2.0, abs=1e-3)
    assert value == pytest.approx(_bowl(best))
    assert nfunc > 0


def test_amoeba_best_first_after_convergence():
    params = _start(_bowl, [[3.0, 3.0], [2.0, 4.0], [4.0, 1.0]])
    result, _ = amoeba(params, 1e-8, 5000, _bowl)
    values = [value for _, value in result]
    assert values[0] == min(values)
    assert len(result) == 3


def test_amoeba_values_never_increase():
    params = _start(_bowl, [[3.0, 3.0], [2.0, 4.0], [4.0, 1.0]])
    start_best = min(value for _, value in params)
    result, _ = amoeba(params, 1e-6, 5000, _bowl)
    assert result[0][1] <= start_best


def test_amoeba_rejects_wrong_dimensions():
    params = [([0.0, 0.0], 1.0), ([1.0], 2.0), ([0.0, 1.0], 3.0)]
    with pytest.raises(MinimiseError):
        amoeba(params, 1e-6, 100, _bowl)


def test_amoeba_warns_when_nmax_exceeded():
    params = _start(_bowl, [[3.0, 3.0], [2.0, 4.0], [4.0, 1.0]])
    with pytest.warns(RuntimeWarning):
        result, nfunc = amoeba(params, 1e-12, 0, _bowl)
    assert nfunc == 0
    assert sorted(value for _, value in result) == sorted(v for _, v in params)


def test_dbrent_parabola():
    xmin, fmin = dbrent(
        0.0, 1.0, 5.0, lambda x: (x - 2.0) ** 2, lambda x: 2.0 * (x - 2.0), 1e-8
    )
    assert xmin == pytest.approx(2.0, abs=1e-6)
    assert fmin == pytest.approx(0.0, abs=1e-10)


def test_dbrent_bracket_order_irrelevant():
    f = lambda x: (x + 1.5) ** 2 + 3.0
    df = lambda x: 2.0 * (x + 1.5)
    forward = dbrent(-4.0, -1.0, 2.0, f, df, 1e-8)
    backward = dbrent(2.0, -1.0, -4.0, f, df, 1e-8)
    assert forward[0] == pytest.approx(-1.5, abs=1e-6)
    assert backward[0] == pytest.approx(forward[0], abs=1e-6)
    assert forward[1] == pytest.approx(3.0, abs=1e-9)


def test_dbrent_stopfast_returns_start():
    calls = []

    def f(x):
        calls.append(x)
        return (x - 2.0) ** 2

    xmin, fmin = dbrent(0.0, 1.0, 5.0, f, lambda x: 2.0 * (x - 2.0), 1e-8,
                        stopfast=True, fref=10.0)
    assert xmin == 1.0
    assert fmin == 1.0
    assert calls == [1.0]