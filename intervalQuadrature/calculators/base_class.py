from abc import ABC, abstractmethod


class IntegralCalculator(ABC):
    """
    Abstract base class for one dimensional integral calculators.

    A calculator is bound to a single integrable function
    at construction and can then be asked for the integral
    over any interval with any number of sub-intervals.
    """

    name: str = 'IntegralCalculator'

    @abstractmethod
    def calculate(self, a: float, b: float, n: int) -> float:
        """
        Approximate the integral of the bound function over [a, b].

        Parameters
        ----------
        a, b : float
            the lower and upper limits of integration,
            a > b gives the negated integral over [b, a]
        n : int
            number of equal width sub-intervals, at least 1

        Return
        ------
        float
            the approximate integral

        Raises
        ------
        InvalidArgumentError
            if n is not an integer or n < 1
        """
        pass
