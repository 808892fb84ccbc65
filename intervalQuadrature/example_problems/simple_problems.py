from typing import Sequence
import numpy as np
from numpy.polynomial import Polynomial as _Poly

from .base_class import Problem


class Polynomial(Problem):
    def __init__(self, coeffs: Sequence[float], a: float = 0.0, b: float = 1.0):
        """
        Polynomial integrand
        f(x) = c_0 + c_1 x + ... + c_k x^k

        Parameters
        ----------
        coeffs : sequence of float
            coefficients in increasing order of degree
        a, b : float, optional
            limits of integration, default [0, 1]
        """
        super().__init__(a, b)
        if len(coeffs) == 0:
            raise ValueError('coeffs must contain at least one coefficient')
        self.poly = _Poly(np.asarray(coeffs, dtype=float))

    @property
    def degree(self) -> int:
        return self.poly.degree()

    def integrand(self, x):
        return self.poly(x)

    def exact_answer(self) -> float:
        antiderivative = self.poly.integ()
        return float(antiderivative(self.b) - antiderivative(self.a))

    def __str__(self) -> str:
        return f'Polynomial(degree={self.degree}, a={self.a}, b={self.b})'


class Linear(Polynomial):
    def __init__(self, m: float = 2.0, c: float = 0.0,
                 a: float = 0.0, b: float = 1.0):
        """f(x) = m x + c"""
        super().__init__([c, m], a, b)
        self.m = m
        self.c = c

    def __str__(self) -> str:
        return f'Linear(m={self.m}, c={self.c}, a={self.a}, b={self.b})'


class Quadratic(Polynomial):
    def __init__(self, a: float = 0.0, b: float = 1.0):
        """f(x) = x^2"""
        super().__init__([0.0, 0.0, 1.0], a, b)

    def __str__(self) -> str:
        return f'Quadratic(a={self.a}, b={self.b})'


class Sine(Problem):
    def __init__(self, a: float = 0.0, b: float = np.pi):
        """f(x) = sin(x), default domain [0, pi] with answer 2"""
        super().__init__(a, b)

    def integrand(self, x):
        return np.sin(x)

    def exact_answer(self) -> float:
        return float(np.cos(self.a) - np.cos(self.b))

    def __str__(self) -> str:
        return f'Sine(a={self.a:.4f}, b={self.b:.4f})'


class Exponential(Problem):
    def __init__(self, a: float = 0.0, b: float = 1.0):
        """f(x) = e^x, default domain [0, 1] with answer e - 1"""
        super().__init__(a, b)

    def integrand(self, x):
        return np.exp(x)

    def exact_answer(self) -> float:
        return float(np.exp(self.b) - np.exp(self.a))

    def __str__(self) -> str:
        return f'Exponential(a={self.a}, b={self.b})'


class Gaussian(Problem):
    def __init__(self, sigma: float = 1.0, a: float = -1.0, b: float = 1.0):
        """
        Unnormalised Gaussian bump f(x) = exp(-x^2 / (2 sigma^2)).
        No closed form is used, the answer comes from
        scipy.integrate.quad.
        """
        super().__init__(a, b)
        if sigma <= 0:
            raise ValueError(f'sigma must be positive, got {sigma}')
        self.sigma = sigma

    def integrand(self, x):
        return np.exp(-np.square(x) / (2 * self.sigma ** 2))

    def __str__(self) -> str:
        return f'Gaussian(sigma={self.sigma}, a={self.a}, b={self.b})'
