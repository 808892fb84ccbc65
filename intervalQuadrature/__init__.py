from . import calculators, example_problems, utils
from .calculators import (
    IntegralCalculator,
    TrapezoidalIntegralCalculator,
    SimpsonIntegralCalculator,
)
from .utils import InvalidArgumentError, CountingFunction, ResultDict
from .compare_calculators import (
    integrate_problem,
    compare_calculators,
    convergence_order,
    write_results,
)

__all__ = [
    "calculators",
    "example_problems",
    "utils",
    "IntegralCalculator",
    "TrapezoidalIntegralCalculator",
    "SimpsonIntegralCalculator",
    "InvalidArgumentError",
    "CountingFunction",
    "ResultDict",
    "integrate_problem",
    "compare_calculators",
    "convergence_order",
    "write_results",
]
