from .base_class import IntegralCalculator
from .trapezoidal_calculator import TrapezoidalIntegralCalculator
from .simpson_calculator import SimpsonIntegralCalculator

__all__ = [
    "IntegralCalculator",
    "TrapezoidalIntegralCalculator",
    "SimpsonIntegralCalculator",
]
