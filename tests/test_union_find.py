"""Tests for the grid-site union-find."""

import pytest

from union_find import SiteUnionFind


class TestSiteUnionFind:
    """Tests for SiteUnionFind."""

    def test_starts_as_singletons(self):
        clusters = SiteUnionFind(5)

        for site in range(5):
            assert clusters.root(site) == site
            assert clusters.size(site) == 1

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            SiteUnionFind(0)

    def test_merge_joins_clusters(self):
        clusters = SiteUnionFind(6)
        assert clusters.merge(0, 1)
        assert clusters.merge(2, 3)
        assert clusters.merge(1, 3)

        assert clusters.connected(0, 2)
        assert not clusters.connected(0, 4)
        assert clusters.size(3) == 4
        assert clusters.size(4) == 1

    def test_repeated_merge_reports_no_change(self):
        clusters = SiteUnionFind(3)
        clusters.merge(0, 1)

        assert not clusters.merge(1, 0)
        assert clusters.size(0) == 2

    def test_larger_cluster_keeps_its_root(self):
        clusters = SiteUnionFind(4)
        clusters.merge(0, 1)
        clusters.merge(0, 2)
        big_root = clusters.root(0)
        clusters.merge(3, 0)

        assert clusters.root(3) == big_root
        assert clusters.size(3) == 4

    def test_root_halves_path(self):
        clusters = SiteUnionFind(5)
        # chain 4 -> 3 -> 2 -> 1 -> 0 built by hand
        clusters.parent[1:] = [0, 1, 2, 3]
        root = clusters.root(4)

        assert root == 0
        assert clusters.parent[4] == 2
        assert clusters.parent[2] == 0

    def test_out_of_range_site(self):
        clusters = SiteUnionFind(3)
        with pytest.raises(IndexError):
            clusters.root(3)
        with pytest.raises(IndexError):
            clusters.merge(-1, 0)
