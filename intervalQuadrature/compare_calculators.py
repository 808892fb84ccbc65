from .example_problems import Problem
from .calculators import IntegralCalculator
from .utils import CountingFunction, ResultDict

import os, time, warnings

import numpy as np
import pandas as pd
from typing import Dict, List, Sequence, Type
from traceback import print_exc


FIELDNAMES = [
    'calculator', 'problem', 'n', 'n_used', 'h', 'true_value',
    'estimate', 'error', 'abs_error', 'n_evals', 'time_taken']


def integrate_problem(calculator_cls: Type[IntegralCalculator],
                      problem: Problem, n: int) -> ResultDict:
    """
    Run one calculator on one problem.

    Parameters
    ----------
    calculator_cls : Type[IntegralCalculator]
        the calculator class, instantiated on the problem's integrand
    problem : Problem
        the problem to integrate
    n : int
        the requested number of sub-intervals

    Return
    ------
    ResultDict
        with the following keys:
        - 'estimate' (float) : estimated integral value
        - 'n_evals' (int) : number of integrand evaluations
        - 'n' (int) : number of sub-intervals actually used
        - 'h' (float) : width of each sub-interval
        - 'error' (float) : estimate - problem.answer
    """
    f = CountingFunction(problem.integrand)
    calculator = calculator_cls(f)
    estimate = calculator.calculate(problem.a, problem.b, n)

    # every rule samples the n + 1 end points of its sub-intervals
    n_used = f.n_evals - 1

    return ResultDict(estimate=estimate,
                      n_evals=f.n_evals,
                      n=n_used,
                      h=(problem.b - problem.a) / n_used,
                      error=estimate - problem.answer)


def compare_calculators(calculators: List[Type[IntegralCalculator]],
                        problem: Problem,
                        ns: Sequence[int] = (10, 100, 1000),
                        verbose: int = 1) -> pd.DataFrame:
    """
    Compare calculators on a given problem over
    a range of sub-interval counts.

    It will print for each calculator and n (if verbose >= 1):
    - Estimated integral value
    - The signed error  estimate - answer
    - Number of integrand evaluations
    - Time taken in seconds

    Parameters
    ----------
    calculators : List[Type[IntegralCalculator]]
        calculator classes to be compared
    problem : Problem
        The problem instance containing the integrand and true answer.
    ns : Sequence[int], optional
        numbers of sub-intervals to try.
        Default is (10, 100, 1000).
    verbose : int, optional
        If 0, print no message;
        if 1, print a summary per calculator;
        if 2, print every run as well.
        Default is 1.

    Return
    ------
    pandas.DataFrame
        one row per (calculator, n), columns as in FIELDNAMES.
        Failed runs keep their row with NaN results.
    """
    rows = []
    n_succeeded = 0

    for calculator_cls in calculators:
        finest = None
        calculator_name = getattr(calculator_cls, 'name', calculator_cls.__name__)

        if verbose >= 1:
            print(f'Testing {calculator_name} on {str(problem)}')

        for n in ns:
            start_time = time.time()
            try:
                result = integrate_problem(calculator_cls, problem, n)
            except Exception as e:
                if verbose >= 1:
                    print(f'Error during integration with {calculator_name}, n={n}: {e}')
                if verbose >= 2:
                    print_exc()
                rows.append({
                    'calculator': calculator_name, 'problem': str(problem),
                    'n': n, 'n_used': np.nan, 'h': np.nan,
                    'true_value': problem.answer, 'estimate': np.nan,
                    'error': np.nan, 'abs_error': np.nan,
                    'n_evals': np.nan, 'time_taken': np.nan})
                continue
            time_taken = time.time() - start_time
            n_succeeded += 1

            if verbose >= 2:
                print(f'n = {n}: estimate {result["estimate"]:.10f}, '
                      f'error {result["error"]:.3e}')

            finest = {
                'calculator': calculator_name,
                'problem': str(problem),
                'n': n,
                'n_used': result['n'],
                'h': result['h'],
                'true_value': problem.answer,
                'estimate': result['estimate'],
                'error': result['error'],
                'abs_error': abs(result['error']),
                'n_evals': result['n_evals'],
                'time_taken': time_taken}
            rows.append(finest)

        # summary of the largest n that succeeded
        if verbose >= 1 and finest is not None:
            print(f'-------- {calculator_name} --------')
            print(f'True answer of {str(problem)}: {problem.answer}')
            print(f'Estimated value (n={finest["n"]}): {finest["estimate"]:.10f}')
            print(f'Signed error: {finest["error"]:.3e}')
            print(f'Number of evaluations: {finest["n_evals"]}')
            print('----------------------------------')

    if n_succeeded == 0:
        raise RuntimeError('no run succeeded')

    return pd.DataFrame(rows, columns=FIELDNAMES)


def convergence_order(results: pd.DataFrame) -> Dict[str, float]:
    """
    Observed order of convergence p of each calculator,
    from a least squares fit of log|error| = log C - p log n.

    Rows with zero or missing errors are ignored
    (e.g. a rule that is exact for the problem).
    A calculator with fewer than two usable rows gets NaN.

    Parameters
    ----------
    results : pandas.DataFrame
        output of compare_calculators

    Return
    ------
    dict
        calculator name -> observed order
    """
    orders = {}
    for name, group in results.groupby('calculator', sort=False):
        usable = group[(group['abs_error'] > 0) & np.isfinite(group['abs_error'])]
        if len(usable) < 2 or usable['n_used'].nunique() < 2:
            warnings.warn(f'not enough non-zero errors to fit the order of {name}')
            orders[name] = np.nan
            continue
        slope, _ = np.polyfit(np.log(usable['n_used'].astype(float)),
                              np.log(usable['abs_error'].astype(float)), 1)
        orders[name] = float(-slope)
    return orders


def write_results(output_file: str, results: pd.DataFrame, mode: str = 'w') -> None:
    """
    Save a comparison to CSV.
    With mode='a' rows are appended and the header
    is only written when the file does not exist yet.
    """
    write_header = mode == 'w' or not os.path.exists(output_file)
    results.to_csv(output_file, mode=mode, header=write_header, index=False)
