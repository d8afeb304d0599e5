import numpy as np
import pytest
from scipy.integrate import trapezoid

from ringcalc.core import (
    DivisionByZero,
    INTEGRATION_METHODS,
    calculate_integral,
    create,
    integrate,
    trapezoidal,
)

CUBES = [float(x ** 3) for x in range(1, 11)]


def make_store(values, **kwargs):
    store = create(len(values), **kwargs)
    store.extend(values)
    return store


def test_wrap_aware_unit_step():
    store = make_store(CUBES)
    assert calculate_integral(store, 1.0) == pytest.approx(2525.0)


def test_composite_clamp_pins_boundary():
    store = make_store(CUBES)
    assert trapezoidal(store, 1.0) == pytest.approx(2524.5)


def test_composite_wrap_pins_boundary():
    store = make_store(CUBES, boundary="wrap")
    assert trapezoidal(store, 1.0) == pytest.approx(2025.0)


@pytest.mark.parametrize("dt", [1.0, 0.25, 0.001])
def test_composite_clamp_matches_textbook_rule(dt):
    values = np.sin(np.linspace(0.0, 3.0, 50))
    store = make_store(values)
    assert trapezoidal(store, dt) == pytest.approx(trapezoid(values, dx=dt))


def test_composite_wrap_offset():
    values = np.linspace(1.0, 5.0, 9)
    dt = 0.5
    clamp = trapezoidal(make_store(values), dt)
    wrap = trapezoidal(make_store(values, boundary="wrap"), dt)
    assert wrap - clamp == pytest.approx(dt / 2 * (values[0] - values[-1]))


def test_single_slot_store():
    store = make_store([5.0])
    assert calculate_integral(store, 2.0) == pytest.approx(5.0)
    assert trapezoidal(store, 2.0) == pytest.approx(10.0)


def test_fine_resolution_wrap_aware():
    dt = 0.001
    store = create(10_000)
    for i in range(1, 10_001):
        store.append((i * dt) ** 3)
    assert calculate_integral(store, dt) == pytest.approx(2500.000025, abs=1e-6)


def test_wrap_aware_converges():
    errors = []
    for factor in [1, 10, 100]:
        dt = 1.0 / factor
        store = create(10 * factor)
        for i in range(1, 10 * factor + 1):
            store.append((i * dt) ** 3)
        errors.append(abs(calculate_integral(store, dt) - 2500.0))
    assert errors[0] > errors[1] > errors[2]
    assert errors[1] == pytest.approx(0.25)


def test_integrate_dispatch():
    store = make_store(CUBES)
    assert set(INTEGRATION_METHODS) == {"wrap_aware", "trapezoidal"}
    assert integrate(store, 1.0) == pytest.approx(2525.0)
    assert integrate(store, 1.0, "trapezoidal") == pytest.approx(2524.5)
    with pytest.raises(ValueError):
        integrate(store, 1.0, "simpson")


@pytest.mark.parametrize("rule", [calculate_integral, trapezoidal])
def test_zero_dt_rejected(rule):
    with pytest.raises(DivisionByZero):
        rule(make_store(CUBES), 0.0)


def test_integrals_leave_store_untouched():
    store = make_store(CUBES)
    before = store.snapshot()
    calculate_integral(store, 1.0)
    trapezoidal(store, 1.0)
    np.testing.assert_array_equal(store.snapshot(), before)
    assert store.write_cursor == 0
