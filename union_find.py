import numpy as np


class SiteUnionFind:
    """
    Disjoint sets over the sites of an n x n grid, keyed by the grid's
    linear index (row - 1) * n + (col - 1).

    Parents and cluster sizes live in numpy arrays. Merging is by cluster
    size and lookups halve the path as they walk to the root.
    """

    def __init__(self, sites: int):
        if sites <= 0:
            raise ValueError("number of sites must be > 0")

        self.parent = np.arange(sites, dtype=np.int64)
        self.clusterSize = np.ones(sites, dtype=np.int64)

    def _check(self, site: int):
        if site < 0 or site >= len(self.parent):
            raise IndexError(f"site {site} is not between 0 and {len(self.parent) - 1}")

    def root(self, site: int) -> int:
        self._check(site)
        parent = self.parent
        while parent[site] != site:
            # path halving
            parent[site] = parent[parent[site]]
            site = parent[site]
        return int(site)

    def connected(self, a: int, b: int) -> bool:
        return self.root(a) == self.root(b)

    def merge(self, a: int, b: int) -> bool:
        """
        Joins the clusters of sites 'a' and 'b'. Returns False when they were
        already one cluster.
        """
        rootA = self.root(a)
        rootB = self.root(b)
        if rootA == rootB:
            return False

        if self.clusterSize[rootA] < self.clusterSize[rootB]:
            rootA, rootB = rootB, rootA
        self.parent[rootB] = rootA
        self.clusterSize[rootA] += self.clusterSize[rootB]
        return True

    def size(self, site: int) -> int:
        """Number of sites in the cluster holding 'site'."""
        return int(self.clusterSize[self.root(site)])
