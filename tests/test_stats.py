"""
Tests for tree diagnostics.
"""

import numpy as np
import pytest

from snydtree import GameConfig, InvalidConfiguration, predicted_node_count, tree_stats


class TestTreeStats:
    """Tests for tree_stats."""

    def test_two_sided_game(self, game2):
        """Counts per node type and per depth of the D=2 game."""
        stats = tree_stats(game2)
        assert stats.nodes == 125
        assert stats.chance == 1
        assert stats.decisions == 64
        assert stats.terminals == 60
        assert stats.max_depth == 6
        np.testing.assert_array_equal(stats.nodes_per_depth, [1, 4, 16, 40, 40, 20, 4])

    @pytest.mark.parametrize("fixture,sides", [("game1", 1), ("game2", 2), ("game3", 3)])
    def test_depth_is_bounded_by_raises(self, request, fixture, sides):
        """The longest line is the chance move, the opening and every raise, then snyd."""
        stats = tree_stats(request.getfixturevalue(fixture))
        assert stats.max_depth == sides * sides + 2
        assert stats.nodes_per_depth.sum() == stats.nodes

    def test_subtree(self, game2):
        """Stats work on any node, not just the root."""
        _, opening = game2.branches[0]
        assert tree_stats(opening).nodes == 31


class TestPredictedNodeCount:
    """Tests for predicted_node_count."""

    @pytest.mark.parametrize("sides,nodes", [(1, 4), (2, 125), (3, 9208), (4, 2097137)])
    def test_known_sizes(self, sides, nodes):
        """The documented node counts."""
        assert predicted_node_count(sides) == nodes

    @pytest.mark.parametrize("fixture,sides", [("game1", 1), ("game2", 2), ("game3", 3)])
    def test_matches_built_tree(self, request, fixture, sides):
        """The prediction agrees with the actual tree."""
        assert predicted_node_count(sides) == tree_stats(request.getfixturevalue(fixture)).nodes

    def test_huge_games_dont_overflow(self):
        """Sizes far beyond anything buildable are still exact."""
        assert predicted_node_count(GameConfig(8, node_budget=None)) == 1 + 64 * (2 ** 65 - 1)

    def test_invalid(self):
        """Bad configs are rejected."""
        with pytest.raises(InvalidConfiguration):
            predicted_node_count(0)
