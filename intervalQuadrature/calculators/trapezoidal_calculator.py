import numpy as np

from .base_class import IntegralCalculator
from ..utils import IntegrableFunction, check_intervals, sample_points


class TrapezoidalIntegralCalculator(IntegralCalculator):
    """
    Composite trapezoidal rule: each sub-interval contributes
    the area of the trapezoid under the chord joining its end points. \n
    Exact for linear integrands.

    Parameters
    ----------
    f : IntegrableFunction
        function of one real variable returning a real number

    Example
    -------
    >>> calculator = TrapezoidalIntegralCalculator(lambda x: 2 * x)
    >>> round(calculator.calculate(0.0, 1.0, 100), 6)
    1.0
    """

    name = 'Trapezoidal'

    def __init__(self, f: IntegrableFunction):
        if not callable(f):
            raise TypeError(f"f must be callable, got {type(f).__name__}")
        self._f = f

    @property
    def f(self) -> IntegrableFunction:
        return self._f

    def calculate(self, a: float, b: float, n: int) -> float:
        """
        h * (f(x_0)/2 + f(x_1) + ... + f(x_{n-1}) + f(x_n)/2)
        with h = (b - a) / n and x_i = a + i * h. \n
        The integrand is evaluated exactly n + 1 times.
        """
        n = check_intervals(n)
        h = (b - a) / n
        ys = np.array([self._f(x) for x in sample_points(a, b, n).tolist()],
                      dtype=float)

        return float(h * (0.5 * ys[0] + np.sum(ys[1:-1]) + 0.5 * ys[-1]))

    def __str__(self) -> str:
        return 'TrapezoidalIntegralCalculator'
