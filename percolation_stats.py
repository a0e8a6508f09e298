from dataclasses import dataclass
import argparse
import math

import numpy as np

from square_percolation import PercolationGrid, check_positive_int, make_uniform, run_until_percolation

# z value of the 95% confidence interval
CONFIDENCE_FACTOR = 1.96

# the interval is only reported for more trials than this
MIN_TRIALS_FOR_INTERVAL = 30

# sample recorded for a trial that could not finish
FAILED_SAMPLE = -1.0


@dataclass(frozen=True)
class ExperimentResult:
    """Summary statistics of a batch of percolation trials on an n x n grid."""

    n: int
    trials: int
    mean: float
    stddev: float
    failures: int = 0

    @property
    def half_width(self) -> float:
        return (CONFIDENCE_FACTOR * self.stddev) / math.sqrt(self.trials)

    @property
    def confidence_lo(self) -> float:
        return self.mean - self.half_width

    @property
    def confidence_hi(self) -> float:
        return self.mean + self.half_width

    @property
    def has_interval(self) -> bool:
        return not math.isnan(self.stddev)


class PercolationExperiment:
    """
    Runs 'trials' independent percolation experiments on fresh n x n grids
    and summarises the thresholds.

    Each trial opens uniformly random sites until the grid percolates and
    records the fraction of open sites. A trial that hits an out-of-range
    site (a broken random source) is kept as a failed sample of -1: it still
    counts towards the mean, and the standard deviation is reported as NaN
    so the result is visibly unreliable.
    """

    def __init__(self, n: int, trials: int, uniform=None, seed=None):

        check_positive_int(n, "grid size n")
        check_positive_int(trials, "trials")

        if uniform is None:
            uniform = make_uniform(seed)

        self.gridSize = int(n)
        self.trialCount = int(trials)
        self.failedTrials = 0
        self.trialResults = []

        for i in range(self.trialCount):
            self.trialResults.append(self._run_trial(uniform))

        self._mean = float(np.mean(self.trialResults))
        if self.trialCount == 1 or self.failedTrials > 0:
            self._stddev = math.nan
        else:
            self._stddev = float(np.std(self.trialResults, ddof=1))

    def _run_trial(self, uniform) -> float:
        simulator = PercolationGrid(self.gridSize)
        try:
            openSites = run_until_percolation(simulator, uniform)
        except IndexError:
            self.failedTrials += 1
            return FAILED_SAMPLE

        return openSites / (self.gridSize * self.gridSize)

    def mean(self, ) -> float:
        return self._mean

    def stddev(self, ) -> float:
        return self._stddev

    def confidenceLo(self, ) -> float:
        return self.result().confidence_lo

    def confidenceHi(self, ) -> float:
        return self.result().confidence_hi

    def result(self, ) -> ExperimentResult:
        return ExperimentResult(
            n=self.gridSize,
            trials=self.trialCount,
            mean=self._mean,
            stddev=self._stddev,
            failures=self.failedTrials,
        )

    def report(self, ):
        print("="*60)
        print("STATS REPORT")
        print("="*60)

        print(f"mean value of critical value pc = {self.mean(): .6f}")
        print(f"std value of critical value pc = {self.stddev(): .6f}")
        if self.failedTrials:
            print(f"{self.failedTrials} of {self.trialCount} trials failed")
        # no interval for a single trial or after a failed trial
        if self.trialCount > MIN_TRIALS_FOR_INTERVAL and self.result().has_interval:
            print(f"the 95% confidence interval is [{self.confidenceLo()}, {self.confidenceHi()}]")
        print("="*60)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run a Monte Carlo simulation for 2D site percolation."
    )

    parser.add_argument(
        'n',
        type=int,
        help="Size of the square grid (n x n)."
    )

    parser.add_argument(
        'trials',
        type=int,
        help="The number of Monte Carlo trials to perform."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random number generator."
    )

    args = parser.parse_args(argv)

    experiment = PercolationExperiment(args.n, args.trials, seed=args.seed)
    experiment.report()
    return experiment


if __name__ == "__main__":
    main()
