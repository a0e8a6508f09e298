from collections import deque
import argparse

import numpy as np

from union_find import SiteUnionFind

# site states
BLOCKED = 0
OPEN = 1
FULL = 2


def check_positive_int(value, name: str):
    """Raises ValueError unless 'value' is an integer greater than zero."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value}")


def make_uniform(seed=None):
    """
    Returns a random source uniform(k) -> integer in [0, k) backed by a
    numpy Generator, so that a fixed seed reproduces a whole run.
    """
    rng = np.random.default_rng(seed)

    def uniform(k):
        return int(rng.integers(k))

    return uniform


class PercolationGrid:
    """
    An n by n grid of sites for top-to-bottom site percolation.

    Sites are addressed 1-indexed as (row, col). Each site is BLOCKED, OPEN
    or FULL, where FULL means the site is joined to the top row through a
    chain of open neighbours (up, down, left, right). The grid percolates
    once any bottom-row site becomes FULL.

    Open sites are also merged in a SiteUnionFind so that
    arbitrary pairs of sites can be tested for connectivity. Fullness is
    tracked separately with a flood fill, which keeps percolates() O(1)
    without virtual top/bottom nodes.
    """

    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        check_positive_int(n, "n")

        self.gridSize = int(n)
        self.gridSquare = self.gridSize * self.gridSize
        self.grid = np.zeros((self.gridSize, self.gridSize), dtype=np.int8)

        self.clusters = SiteUnionFind(self.gridSquare)

        self.openSite = 0
        self.percolated = False

    # open the site[i,j] if it's not open yet
    def open(self, row: int, col: int):
        self.validState(row, col)

        if self.isOpen(row, col):
            return

        # top row sites are full on their own
        if row == 1:
            self.grid[row - 1][col - 1] = FULL
        else:
            self.grid[row - 1][col - 1] = OPEN
        self.openSite += 1

        if self.grid[row - 1][col - 1] == FULL:
            self._fill(row, col)

        # connect to neighbours: up, left, right, down
        flatIndex = self.flattenGrid(row, col)
        for nRow, nCol in self._neighbours(row, col):
            if self.isOpen(nRow, nCol):
                self.clusters.merge(flatIndex, self.flattenGrid(nRow, nCol))
                self._reconcile(row, col, nRow, nCol)

    def _reconcile(self, row1: int, col1: int, row2: int, col2: int):
        """
        Makes two freshly joined open sites agree on fullness: if one of
        them is full, the other one (and everything open behind it) is
        promoted.
        """
        state1 = self.grid[row1 - 1][col1 - 1]
        state2 = self.grid[row2 - 1][col2 - 1]

        if state1 == OPEN and state2 == FULL:
            self.grid[row1 - 1][col1 - 1] = FULL
            self._fill(row1, col1)
        elif state1 == FULL and state2 == OPEN:
            self.grid[row2 - 1][col2 - 1] = FULL
            self._fill(row2, col2)

    def _fill(self, row: int, col: int):
        """
        Flood fill outward from a site that has just become full. Uses an
        explicit queue so that large landlocked regions joining the top row
        do not blow the call stack. Each site is promoted at most once.
        """
        queue = deque([(row, col)])
        while queue:
            r, c = queue.popleft()
            if r == self.gridSize:
                self.percolated = True

            for nRow, nCol in self._neighbours(r, c):
                if self.grid[nRow - 1][nCol - 1] == OPEN:
                    self.grid[nRow - 1][nCol - 1] = FULL
                    queue.append((nRow, nCol))

    def _neighbours(self, row: int, col: int):
        for nRow, nCol in ((row - 1, col), (row, col - 1), (row, col + 1), (row + 1, col)):
            if self.isOnGrid(nRow, nCol):
                yield nRow, nCol

    # is site[i,j] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1] != BLOCKED)

    # is site[i,j] connected to the top row?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[row - 1][col - 1] == FULL)

    def isConnected(self, row1: int, col1: int, row2: int, col2: int) -> bool:
        self.validState(row1, col1)
        self.validState(row2, col2)
        return self.clusters.connected(self.flattenGrid(row1, col1), self.flattenGrid(row2, col2))

    # number of open sites in the cluster of site[i,j], 0 if it is blocked
    def clusterSize(self, row: int, col: int) -> int:
        if not self.isOpen(row, col):
            return 0
        return self.clusters.size(self.flattenGrid(row, col))

    def percolates(self, ) -> bool:
        return self.percolated

    def numberOfOpenSites(self,) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        if not self.isOnGrid(row, col):
            raise IndexError(f"site ({row}, {col}) is out of bounds for a {self.gridSize}x{self.gridSize} grid")

    def flattenGrid(self, row: int, col: int) -> int:
        return self.gridSize * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        shiftRow = row - 1
        shiftCol = col - 1

        return (shiftRow >= 0 and shiftCol >= 0 and shiftRow < self.gridSize and shiftCol < self.gridSize)


def run_until_percolation(grid: PercolationGrid, uniform) -> int:
    """
    Opens uniformly random sites on 'grid' until it percolates.

    :param grid: The grid to fill, usually fresh.
    :param uniform: Random source, uniform(k) -> integer in [0, k).
    :return: The number of open sites at the moment of percolation.
    """
    n = grid.gridSize
    while not grid.percolates():
        row = uniform(n) + 1
        col = uniform(n) + 1
        if not grid.isOpen(row, col):
            grid.open(row, col)

    return grid.numberOfOpenSites()


def estimate_threshold(n: int, uniform=None, seed=None) -> float:
    """
    Single Monte Carlo estimate of the percolation threshold: the fraction
    of sites of a fresh n by n grid open when it first percolates.
    """
    if uniform is None:
        uniform = make_uniform(seed)

    grid = PercolationGrid(n)
    openSites = run_until_percolation(grid, uniform)
    return openSites / (n * n)


if __name__ == "__main__":

    parser = argparse.ArgumentParser(
        description="Open random sites of one square grid until it percolates."
    )

    parser.add_argument(
        'n',
        type=int,
        help="Size of the square grid (n x n)."
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help="Seed for the random number generator."
    )

    args = parser.parse_args()

    grid = PercolationGrid(args.n)
    openSites = run_until_percolation(grid, make_uniform(args.seed))

    print("="*60)
    print(f"the system percolates when {openSites} sites are opened")
    print(f"estimate of the percolation threshold = {openSites / (args.n * args.n): .6f}")
    print("="*60)
