import math

import pytest

from logistic_growth.convergence import convergence_table, global_error, observed_order


@pytest.mark.parametrize(
    "method,low,high",
    [
        ("euler", 0.7, 1.3),
        ("euler_improved", 1.6, 2.4),
        ("rk4", 3.4, 4.6),
    ],
)
def test_observed_order_matches_nominal(method, low, high):
    orders = observed_order(method, r=0.05, K=1.0, y0=0.5, tf=100.0, h=2.0, refinements=2)
    assert len(orders) == 2
    for p in orders:
        assert low <= p <= high, f"{method}: observed order {p}"


def test_fixed_point_order_is_undefined():
    orders = observed_order("rk4", r=0.05, K=1.0, y0=1.0, tf=100.0, h=5.0)
    assert len(orders) == 1
    assert math.isnan(orders[0])


def test_refinements_must_be_positive():
    with pytest.raises(ValueError):
        observed_order("euler", 0.05, 1.0, 0.5, 100.0, 5.0, refinements=0)


def test_unknown_method():
    with pytest.raises(ValueError):
        global_error("midpoint", 0.05, 1.0, 0.5, 100.0, 5.0)


def test_convergence_table():
    df = convergence_table(0.05, 1.0, 0.5, 100.0, [10.0, 5.0, 2.5])
    assert list(df.columns) == ["h", "euler", "euler_improved", "rk4"]
    assert df["h"].tolist() == [10.0, 5.0, 2.5]
    for key in ("euler", "euler_improved", "rk4"):
        # errors shrink as the step shrinks
        assert df[key].is_monotonic_decreasing
    last = df.iloc[-1]
    assert last["rk4"] < last["euler_improved"] < last["euler"]
