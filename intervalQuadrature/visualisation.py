import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.patches import Polygon

import numpy as np
import pandas as pd
import warnings
from typing import Optional

from .calculators import (
    IntegralCalculator, SimpsonIntegralCalculator, TrapezoidalIntegralCalculator
)
from .utils import check_intervals, sample_points

MAX_PANELS = 200


def plot_rule(calculator: IntegralCalculator, a: float, b: float, n: int,
              title: Optional[str] = None, ax: Optional[Axes] = None,
              n_fine: int = 400, color: str = 'tab:orange') -> Axes:
    """
    Plot the integrand together with the panels
    the calculator's rule integrates:
    trapezoids for the trapezoidal rule,
    one parabola per pair of sub-intervals for Simpson's rule.

    Parameters
    ----------
    calculator : IntegralCalculator
        a TrapezoidalIntegralCalculator or SimpsonIntegralCalculator
    a, b : float
        the limits of integration
    n : int
        number of sub-intervals, adjusted the same way
        the calculator adjusts it
    title : str, optional
        title of the plot, defaults to the rule, n and the estimate
    ax : matplotlib.axes.Axes, optional
        axes to draw on, a new figure is created if None
    n_fine : int, optional
        number of points used to draw the integrand.
        Default : 400
    color : str, optional
        colour of the panels.
        Default : 'tab:orange'

    Return
    ------
    matplotlib.axes.Axes
    """
    if isinstance(calculator, SimpsonIntegralCalculator):
        n = calculator.adjust_intervals(n)
    elif isinstance(calculator, TrapezoidalIntegralCalculator):
        n = check_intervals(n)
    else:
        raise TypeError('calculator must be a TrapezoidalIntegralCalculator '
                        'or SimpsonIntegralCalculator, '
                        f'got {type(calculator).__name__}')

    if n > MAX_PANELS:
        warnings.warn(f'{n} sub-intervals are too many to draw clearly, '
                      f'consider n <= {MAX_PANELS}')

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    f = calculator.f
    xs = sample_points(a, b, n)
    ys = np.array([f(x) for x in xs.tolist()], dtype=float)

    x_fine = np.linspace(a, b, n_fine)
    y_fine = np.array([f(x) for x in x_fine.tolist()], dtype=float)

    if a == b:
        # zero width interval has no panels
        pass
    elif isinstance(calculator, SimpsonIntegralCalculator):
        for i in range(0, n, 2):
            # parabola through the three points of this pair
            coeffs = np.polyfit(xs[i:i + 3], ys[i:i + 3], 2)
            x_panel = np.linspace(xs[i], xs[i + 2], 30)
            y_panel = np.polyval(coeffs, x_panel)
            vertices = np.column_stack([
                np.concatenate([[xs[i]], x_panel, [xs[i + 2]]]),
                np.concatenate([[0.0], y_panel, [0.0]])])
            ax.add_patch(Polygon(vertices, closed=True, facecolor=color,
                                 edgecolor='k', alpha=0.4))
    else:
        for i in range(n):
            vertices = [(xs[i], 0.0), (xs[i], ys[i]),
                        (xs[i + 1], ys[i + 1]), (xs[i + 1], 0.0)]
            ax.add_patch(Polygon(vertices, closed=True, facecolor=color,
                                 edgecolor='k', alpha=0.4))

    ax.plot(x_fine, y_fine, 'b-', label='integrand')
    ax.plot(xs, ys, 'ko', markersize=3, label='samples')
    ax.axhline(0.0, color='grey', linewidth=0.8)

    if title is None:
        estimate = calculator.calculate(a, b, n)
        title = f'{calculator.name} rule, n={n}: {estimate:.6f}'
    ax.set_title(title)
    ax.set_xlabel('x')
    ax.set_ylabel('f(x)')
    ax.legend()

    return ax


def plot_convergence(results: pd.DataFrame, ax: Optional[Axes] = None,
                     title: Optional[str] = None) -> Axes:
    """
    log-log plot of the absolute error against the number
    of sub-intervals, one line per calculator

    Parameters
    ----------
    results : pandas.DataFrame
        output of compare_calculators
    """
    required = {'calculator', 'n_used', 'abs_error'}
    if not required.issubset(results.columns):
        raise ValueError(f'results must have columns {sorted(required)}, '
                         f'got {list(results.columns)}')

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    for name, group in results.groupby('calculator', sort=False):
        group = group[group['abs_error'] > 0].sort_values('n_used')
        ax.loglog(group['n_used'], group['abs_error'], 'o-', label=name)

    ax.set_xlabel('number of sub-intervals')
    ax.set_ylabel('absolute error')
    if title is not None:
        ax.set_title(title)
    ax.legend()

    return ax
