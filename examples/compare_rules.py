from intervalQuadrature.calculators import (
    TrapezoidalIntegralCalculator, SimpsonIntegralCalculator
)
from intervalQuadrature.example_problems import (
    Linear, Quadratic, Polynomial, Sine, Exponential, Gaussian
)
from intervalQuadrature.compare_calculators import (
    compare_calculators, convergence_order, write_results
)
from intervalQuadrature.visualisation import plot_convergence, plot_rule

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import os, argparse


parser = argparse.ArgumentParser(description="Compare the trapezoidal and Simpson rules on the bundled problems")
parser.add_argument('--ns', type=int, nargs='+', default=[4, 8, 16, 32, 64, 128], help='Numbers of sub-intervals (default: 4 8 16 32 64 128)')
parser.add_argument('--output_file', type=str, default='rule_comparison.csv', help='CSV file for the results (default: rule_comparison.csv)')
parser.add_argument('--verbose', type=int, default=1, help='0 silent, 1 summary, 2 every run (default: 1)')
parser.add_argument('--plot', action='store_true', help='Plot the panels and the convergence of each rule')


if __name__ == '__main__':
    args = parser.parse_args()

    script_dir = os.path.dirname(os.path.abspath(__file__))
    output_file = os.path.join(script_dir, args.output_file)

    problems = [
        Linear(m=2.0, c=0.0),
        Quadratic(a=0.0, b=2.0),
        Polynomial([1.0, -3.0, 0.0, 2.0, 0.5], a=-1.0, b=1.5),
        Sine(),
        Exponential(),
        Gaussian(sigma=0.3, a=-1.0, b=1.0),
    ]
    calculators = [TrapezoidalIntegralCalculator, SimpsonIntegralCalculator]

    all_results = []
    for problem in problems:
        results = compare_calculators(calculators, problem, ns=args.ns,
                                      verbose=args.verbose)
        all_results.append(results)

        for name, order in convergence_order(results).items():
            print(f'{name} observed order on {problem}: {order:.2f}')

        if args.plot:
            fig, axes = plt.subplots(1, 3, figsize=(18, 5))
            plot_rule(TrapezoidalIntegralCalculator(problem.integrand),
                      problem.a, problem.b, 6, ax=axes[0])
            plot_rule(SimpsonIntegralCalculator(problem.integrand),
                      problem.a, problem.b, 6, ax=axes[1])
            plot_convergence(results, ax=axes[2], title=str(problem))
            fig.tight_layout()
            plt.show()

    write_results(output_file, pd.concat(all_results, ignore_index=True))
    print(f'Results written to {output_file}')
    print(f'Largest absolute error: '
          f'{np.nanmax(pd.concat(all_results)["abs_error"]):.3e}')
