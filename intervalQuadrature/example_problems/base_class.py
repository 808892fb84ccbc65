from abc import ABC, abstractmethod
from typing import Optional
import warnings

import numpy as np
from scipy.integrate import quad


class Problem(ABC):
    '''
    base class for one dimensional integration problems

    Attributes
    ----------
    a, b : float
        the lower and upper limit of integration
    answer : float
        the true value of int_a^b integrand(x) dx

    Methods
    -------
    integrand(x)
        the function being integrated
        MUST be implemented by subclasses
        input : float or numpy.ndarray
        return : same shape as x
    '''
    def __init__(self, a: float, b: float):
        """
        Arguments
        ---------
        a, b : float
            the lower and upper limit of integration,
            must be finite
        """
        if not (np.isfinite(a) and np.isfinite(b)):
            raise ValueError(f'limits must be finite, got a={a}, b={b}')
        self.a = float(a)
        self.b = float(b)
        self._answer: Optional[float] = None

    @abstractmethod
    def integrand(self, x):
        """
        must be defined, the function being integrated

        Argument
        --------
        x : float or numpy.ndarray

        Return
        ------
        float or numpy.ndarray
            f(x) evaluated elementwise
        """
        pass

    def exact_answer(self) -> Optional[float]:
        """
        closed form value of the integral,
        subclasses override when one is known
        """
        return None

    @property
    def answer(self) -> float:
        if self._answer is None:
            exact = self.exact_answer()
            if exact is None:
                warnings.warn(
                    f'{self} has no closed form answer, '
                    'using scipy.integrate.quad as reference')
                exact, _ = quad(self.integrand, self.a, self.b)
            self._answer = float(exact)
        return self._answer

    def __str__(self) -> str:
        return f'Problem(a={self.a}, b={self.b})'
