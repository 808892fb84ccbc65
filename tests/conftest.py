import pytest
import intervalQuadrature as iq

CALCULATORS = [
    iq.TrapezoidalIntegralCalculator,
    iq.SimpsonIntegralCalculator,
]


@pytest.fixture(params=CALCULATORS, ids=lambda cls: cls.name)
def calculator_cls(request):
    """each calculator class in turn"""
    return request.param


@pytest.fixture
def square():
    """f(x) = x^2, integral over [0, 2] is 8/3"""
    return lambda x: x * x


@pytest.fixture
def counting_square():
    """x^2 wrapped to count evaluations"""
    return iq.CountingFunction(lambda x: x * x)


@pytest.fixture
def calculators():
    """every calculator class, for comparisons"""
    return list(CALCULATORS)
