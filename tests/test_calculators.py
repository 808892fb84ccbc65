import math
import threading

import numpy as np
import pytest
import intervalQuadrature as iq
from intervalQuadrature.example_problems import (
    Linear, Quadratic, Polynomial, Sine, Exponential
)


######################
# Initial IO checks
######################

def test_io(calculator_cls, square):
    calculator = calculator_cls(square)
    res = calculator.calculate(0.0, 2.0, 10)
    assert isinstance(res, float)
    assert isinstance(calculator, iq.IntegralCalculator)
    assert calculator.f is square


def test_f_is_read_only(calculator_cls, square):
    calculator = calculator_cls(square)
    with pytest.raises(AttributeError):
        calculator.f = lambda x: x


def test_not_callable(calculator_cls):
    with pytest.raises(TypeError):
        calculator_cls(1.0)


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        iq.IntegralCalculator()


######################
# Known results
######################

def test_trapezoidal_linear():
    calculator = iq.TrapezoidalIntegralCalculator(lambda x: 2 * x)
    assert calculator.calculate(0, 1, 100) == pytest.approx(1.0, abs=1e-4)


def test_simpson_quadratic():
    calculator = iq.SimpsonIntegralCalculator(lambda x: x * x)
    assert calculator.calculate(0, 1, 100) == pytest.approx(1 / 3, abs=1e-4)


def test_simpson_exponential():
    calculator = iq.SimpsonIntegralCalculator(math.exp)
    assert calculator.calculate(0, 1, 100) == pytest.approx(math.e - 1, abs=1e-4)


def test_simpson_odd_intervals(square):
    calculator = iq.SimpsonIntegralCalculator(square)
    res = calculator.calculate(0, 1, 101)
    assert np.isfinite(res)
    assert res > 0


def test_simpson_odd_matches_next_even(square):
    calculator = iq.SimpsonIntegralCalculator(square)
    assert calculator.calculate(0, 1, 7) == calculator.calculate(0, 1, 8)


@pytest.mark.parametrize("n, expected", [(1, 2), (2, 2), (3, 4), (100, 100), (101, 102)])
def test_simpson_adjust_intervals(n, expected):
    assert iq.SimpsonIntegralCalculator.adjust_intervals(n) == expected


def test_both_agree_with_closed_form(calculator_cls, square):
    calculator = calculator_cls(square)
    assert calculator.calculate(0, 2, 1000) == pytest.approx(8 / 3, abs=1e-3)


@pytest.mark.parametrize("n", [1, 2, 3, 10])
def test_trapezoidal_single_and_few_intervals(n):
    # exact for linear integrands regardless of n
    calculator = iq.TrapezoidalIntegralCalculator(lambda x: 3 * x - 1)
    assert calculator.calculate(-1.0, 2.0, n) == pytest.approx(1.5, abs=1e-12)


@pytest.mark.parametrize("n", [1, 2, 5, 50])
def test_simpson_exact_for_cubics(n):
    problem = Polynomial([1.0, -2.0, 0.5, 3.0], a=-1.0, b=2.0)
    calculator = iq.SimpsonIntegralCalculator(problem.integrand)
    assert calculator.calculate(problem.a, problem.b, n) == pytest.approx(
        problem.answer, rel=1e-12)


@pytest.mark.parametrize("problem", [
    Linear(m=-4.0, c=1.5, a=-2.0, b=3.0),
    Quadratic(a=0.0, b=2.0),
    Sine(),
    Exponential(),
])
def test_problems(calculator_cls, problem):
    calculator = calculator_cls(problem.integrand)
    assert calculator.calculate(problem.a, problem.b, 1000) == pytest.approx(
        problem.answer, abs=1e-3)


######################
# Orientation
######################

@pytest.mark.parametrize("a", [-3.5, 0.0, 1.0, 42.0])
@pytest.mark.parametrize("n", [1, 7, 100])
def test_zero_interval(calculator_cls, square, a, n):
    assert calculator_cls(square).calculate(a, a, n) == 0


def test_reverse_interval(calculator_cls, square):
    calculator = calculator_cls(square)
    assert calculator.calculate(2, 0, 100) == pytest.approx(-8 / 3, abs=1e-3)


@pytest.mark.parametrize("a, b", [(0.0, 1.0), (-2.0, 5.0), (0.3, 0.7)])
@pytest.mark.parametrize("n", [1, 4, 33])
def test_antisymmetry(calculator_cls, a, b, n):
    calculator = calculator_cls(math.exp)
    assert calculator.calculate(b, a, n) == pytest.approx(
        -calculator.calculate(a, b, n), rel=1e-12)


######################
# Convergence
######################

def test_convergence(calculator_cls):
    calculator = calculator_cls(math.sin)
    small_error = abs(calculator.calculate(0, math.pi, 10) - 2.0)
    large_error = abs(calculator.calculate(0, math.pi, 1000) - 2.0)
    assert large_error < small_error


def test_simpson_more_accurate_than_trapezoidal():
    trap = iq.TrapezoidalIntegralCalculator(math.sin)
    simp = iq.SimpsonIntegralCalculator(math.sin)
    assert abs(simp.calculate(0, math.pi, 20) - 2.0) < abs(
        trap.calculate(0, math.pi, 20) - 2.0)


######################
# Evaluation count
######################

@pytest.mark.parametrize("n", [1, 2, 10, 99])
def test_trapezoidal_evaluations(counting_square, n):
    iq.TrapezoidalIntegralCalculator(counting_square).calculate(0.0, 1.0, n)
    assert counting_square.n_evals == n + 1


@pytest.mark.parametrize("n", [1, 2, 10, 99])
def test_simpson_evaluations(counting_square, n):
    iq.SimpsonIntegralCalculator(counting_square).calculate(0.0, 1.0, n)
    assert counting_square.n_evals == iq.SimpsonIntegralCalculator.adjust_intervals(n) + 1


def test_sample_points_passed_in_order(calculator_cls):
    seen = []

    def f(x):
        seen.append(x)
        return x

    calculator_cls(f).calculate(0.0, 1.0, 4)
    assert seen == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])
    assert all(isinstance(x, float) for x in seen)


######################
# Errors
######################

@pytest.mark.parametrize("n", [0, -1, -100])
def test_non_positive_n(calculator_cls, counting_square, n):
    with pytest.raises(iq.InvalidArgumentError):
        calculator_cls(counting_square).calculate(0.0, 1.0, n)
    # nothing is evaluated on invalid input
    assert counting_square.n_evals == 0


@pytest.mark.parametrize("n", [2.0, "10", None, True])
def test_non_integer_n(calculator_cls, square, n):
    with pytest.raises(iq.InvalidArgumentError):
        calculator_cls(square).calculate(0.0, 1.0, n)


def test_invalid_argument_is_value_error(calculator_cls, square):
    with pytest.raises(ValueError):
        calculator_cls(square).calculate(0.0, 1.0, 0)


def test_numpy_integer_n(calculator_cls, square):
    res = calculator_cls(square).calculate(0.0, 2.0, np.int64(1000))
    assert res == pytest.approx(8 / 3, abs=1e-3)


def test_integrand_exception_propagates(calculator_cls):
    def f(x):
        raise ZeroDivisionError('boom')

    with pytest.raises(ZeroDivisionError):
        calculator_cls(f).calculate(0.0, 1.0, 4)


def test_non_finite_propagates(calculator_cls):
    res = calculator_cls(lambda x: math.inf).calculate(0.0, 1.0, 4)
    assert math.isinf(res)
    res = calculator_cls(lambda x: x).calculate(0.0, math.nan, 4)
    assert math.isnan(res)


######################
# Reuse
######################

def test_reuse_across_threads(calculator_cls):
    calculator = calculator_cls(math.sin)
    expected = calculator.calculate(0.0, math.pi, 200)
    results = []

    def work():
        results.append(calculator.calculate(0.0, math.pi, 200))

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [expected] * 8
