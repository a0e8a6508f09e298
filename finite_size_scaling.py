import argparse

import numpy as np
from scipy.stats import linregress

from percolation_stats import PercolationExperiment

# finite-size scaling exponent, -1/nu with nu = 4/3 for 2D percolation
SCALING_EXPONENT = -3/4


def sweep_sizes(sizes, trials, seed=None):
    """
    Runs one PercolationExperiment per grid size.

    A single numpy seed sequence is spawned into one child seed per size so
    the sweep is reproducible without reusing the same stream for every
    size.

    Args:
        sizes: iterable of grid sizes L
        trials: Monte Carlo trials per size
        seed: optional seed for the whole sweep

    Returns:
        list of ExperimentResult, in the order of 'sizes'
    """
    sizes = [int(L) for L in sizes]
    children = np.random.SeedSequence(seed).spawn(len(sizes))

    results = []
    for L, child in zip(sizes, children):
        print(f"simulate n = {L}")
        experiment = PercolationExperiment(L, trials, seed=child)
        experiment.report()
        results.append(experiment.result())

    return results


def extrapolate_threshold(sizes, means, exponent=SCALING_EXPONENT):
    """
    Fits the mean critical probability against L^(exponent) and reads off
    pc(infinity) as the intercept at L^(exponent) = 0.
    """
    L_values = np.asarray(sizes, dtype=float)
    means = np.asarray(means, dtype=float)

    if L_values.shape != means.shape:
        raise ValueError("sizes and means must have the same length")
    if len(L_values) < 2:
        raise ValueError("at least two grid sizes are needed to extrapolate")

    X_scaling = L_values ** exponent
    slope, intercept, r_value, p_value, std_err = linregress(X_scaling, means)

    return {
        'pc_inf': float(intercept),
        'slope': float(slope),
        'r_squared': float(r_value**2),
        'stderr': float(std_err),
    }


if __name__ == "__main__":

    parser = argparse.ArgumentParser(
        description="Estimate pc(infinity) for 2D site percolation by finite-size scaling."
    )

    parser.add_argument(
        '--Lmin',
        type=int,
        default=50,
        help="Smallest lattice side L in the sweep."
    )

    parser.add_argument(
        '--Lmax',
        type=int,
        default=200,
        help="Largest lattice side L in the sweep (inclusive)."
    )

    parser.add_argument(
        '--Lstep',
        type=int,
        default=50,
        help="Increment of L between consecutive sweep points."
    )

    parser.add_argument(
        '--t',
        type=int,
        default=500,
        help="Monte Carlo trials run at every L."
    )

    parser.add_argument(
        '--exponent',
        type=float,
        default=SCALING_EXPONENT,
        help="Scaling exponent applied to L before the linear fit."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random number generator."
    )

    args = parser.parse_args()

    print("Starting Monte Carlo Percolation Analysis...")
    print(f"Lattice sides L: {args.Lmin} to {args.Lmax}, step {args.Lstep}")
    print(f"Trials per L: {args.t}")

    L_values = np.arange(args.Lmin, args.Lmax + 1, args.Lstep)
    results = sweep_sizes(L_values, args.t, seed=args.seed)

    print("\n--- Simulation Complete ---")

    fit = extrapolate_threshold(L_values, [r.mean for r in results], exponent=args.exponent)
    print(f"\n--- Extrapolation Results (exponent {args.exponent:.2f}) ---")
    print(f"pc(infinity) = {fit['pc_inf']:.6f}, R^2 = {fit['r_squared']:.4f}")
    print("-------------------------------------------------------")
