from .base_class import Problem
from .simple_problems import (
    Polynomial,
    Linear,
    Quadratic,
    Sine,
    Exponential,
    Gaussian,
)

__all__ = [
    "Problem",
    "Polynomial",
    "Linear",
    "Quadratic",
    "Sine",
    "Exponential",
    "Gaussian",
]
