import numpy as np

from .base_class import IntegralCalculator
from ..utils import IntegrableFunction, check_intervals, sample_points


class SimpsonIntegralCalculator(IntegralCalculator):
    """
    Composite Simpson's rule: every pair of neighbouring sub-intervals
    is integrated with the parabola through its three sample points. \n
    Exact for polynomials of degree at most 3.

    An odd number of sub-intervals is silently increased by one,
    so the approximation is computed on the next even count.

    Parameters
    ----------
    f : IntegrableFunction
        function of one real variable returning a real number
    """

    name = 'Simpson'

    def __init__(self, f: IntegrableFunction):
        if not callable(f):
            raise TypeError(f"f must be callable, got {type(f).__name__}")
        self._f = f

    @property
    def f(self) -> IntegrableFunction:
        return self._f

    @staticmethod
    def adjust_intervals(n: int) -> int:
        """the even number of sub-intervals actually used for n"""
        n = check_intervals(n)
        if n % 2 == 1:
            n += 1
        return n

    def calculate(self, a: float, b: float, n: int) -> float:
        """
        h/3 * (f(x_0) + 4 f(x_1) + 2 f(x_2) + ... + 4 f(x_{n-1}) + f(x_n))
        with h = (b - a) / n and x_i = a + i * h, after rounding
        n up to an even number. \n
        The integrand is evaluated exactly n + 1 times for the adjusted n.
        """
        n = self.adjust_intervals(n)
        h = (b - a) / n
        ys = np.array([self._f(x) for x in sample_points(a, b, n).tolist()],
                      dtype=float)

        odd = np.sum(ys[1:-1:2])
        even = np.sum(ys[2:-1:2])

        return float(h / 3.0 * (ys[0] + ys[-1] + 4.0 * odd + 2.0 * even))

    def __str__(self) -> str:
        return 'SimpsonIntegralCalculator'
