import numpy as np
from typing import Any, Callable, Dict, Union
from collections.abc import MutableMapping


IntegrableFunction = Callable[[float], float]


class InvalidArgumentError(ValueError):
    """
    Raised when a calculator receives an unusable
    number of sub-intervals.
    """
    pass


def check_intervals(n) -> int:
    """
    Validate the number of sub-intervals

    Parameter
    ---------
    n : int
        the number of equal width sub-intervals

    Return
    ------
    int
        n as a python int

    Raises
    ------
    InvalidArgumentError
        if n is not an integer or n < 1
    """
    # bool is an int subclass, but True intervals is not meaningful
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgumentError(
            f"n must be an integer, got {type(n).__name__}"
        )
    if n < 1:
        raise InvalidArgumentError(f"n must be at least 1, got {n}")
    return int(n)


def sample_points(a: float, b: float, n: int) -> np.ndarray:
    """
    The n + 1 equally spaced points x_i = a + i * h,
    h = (b - a) / n, for i = 0, ..., n
    """
    h = (b - a) / n
    return a + np.arange(n + 1) * h


class CountingFunction:
    """
    Wrap an integrable function and count
    how many times it is evaluated.

    Example
    -------
    >>> f = CountingFunction(lambda x: x ** 2)
    >>> f(2.0)
    4.0
    >>> f.n_evals
    1
    """

    def __init__(self, f: IntegrableFunction):
        if not callable(f):
            raise TypeError(f"f must be callable, got {type(f).__name__}")
        self.f = f
        self.n_evals = 0

    def __call__(self, x: float) -> float:
        self.n_evals += 1
        return self.f(x)

    def reset(self) -> None:
        self.n_evals = 0


class ResultDict(MutableMapping):
    """
    A dictionary-like object holding the outcome of one
    calculator run. \n
    Only accepts float values for the 'estimate' key.
    """

    def __init__(self, estimate: float, **kwargs):
        """
        Parameters
        ----------
        estimate : float
            The estimate of the integral.
        **kwargs : Any
            Other keys and values to be added to the dictionary. \n
            Not compulsory, commonly used keys: \n
            - n_evals (int): The number of integrand evaluations.
            - n (int): The number of sub-intervals actually used.
            - h (float): The width of each sub-interval.
            - error (float): estimate minus the true answer.

        Example
        -------
        >>> result = ResultDict(estimate=1.0, n_evals=101)
        >>> result['estimate']
        1.0
        >>> # Adding estimate as a string will raise a TypeError
        >>> try:
        >>>    result['estimate'] = '1.0'
        >>> except TypeError as e:
        >>>    print(e)
        'estimate' must be a float, got str
        """
        if not isinstance(estimate, float):
            raise TypeError(
                f"'estimate' must be a float, got {type(estimate).__name__}"
            )
        self._data: Dict[str, Any] = {"estimate": estimate}
        self.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key in ("estimate", "h", "error"):
            if not isinstance(value, float):
                raise TypeError(
                    f"'{key}' must be a float, got {type(value).__name__}"
                )
        elif key in ("n_evals", "n"):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"'{key}' must be an int, "
                                f"got {type(value).__name__}")

        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key == "estimate":
            raise KeyError("'estimate' key cannot be deleted")
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(self._data)

    def update(self, other: Union[Dict[str, Any], "ResultDict"]) -> None:
        for key, value in other.items():
            self[key] = value

    def setdefault(self, key: str, default: Any = None) -> Any:
        if key == "estimate" and not isinstance(default, float):
            raise TypeError("'estimate' must be a float, "
                            f"got {type(default).__name__}")
        return self._data.setdefault(key, default)
