"""
Tests for the on-demand view of the game.
"""

from fractions import Fraction

from snydtree import CHANCE, NO_ACTION, P1, P2, SNYD, LazyGame, Payoffs, Raise, Terminal
from snydtree.lazy import RolledGame, histories
from snydtree.tree import walk


class TestLazyGame:
    """Tests for LazyGame and its positions."""

    def test_root_is_chance(self):
        """The root is owned by chance and has no value."""
        game = LazyGame(2)
        assert game.owner() == CHANCE
        assert game.value() is None
        children = list(game.children())
        assert len(children) == 4
        assert all(prob == Fraction(1, 4) for prob, _ in children)

    def test_same_size_as_tree(self):
        """Walking every position visits as many nodes as the eager tree has."""
        assert sum(1 for _ in histories(LazyGame(2))) == 125
        assert sum(1 for _ in histories(LazyGame(3))) == 9208

    def test_same_order_as_tree(self, game2):
        """Owners appear in the same order in both traversals."""
        eager = [node.owner() for node, _ in walk(game2)]
        lazy = [position.owner() for position in histories(LazyGame(2))]
        assert lazy == eager

    def test_same_payoffs_as_tree(self, game3):
        """Leaves carry the same payoffs in both traversals."""
        eager = [node.payoffs for node, _ in walk(game3) if isinstance(node, Terminal)]
        lazy = [p.value() for p in histories(LazyGame(3)) if p.owner() is None]
        assert lazy == eager

    def test_positions(self):
        """Owners alternate and snyd ends the game."""
        _, position = next(LazyGame(2).children())
        assert position.owner() == P1
        assert position.hist == (NO_ACTION,)
        actions = [action for action, _ in position.children()]
        assert SNYD not in actions
        after = dict(position.children())[Raise(1, 2)]
        assert after.owner() == P2
        assert [action for action, _ in after.children()] == [SNYD, Raise(2, 1), Raise(2, 2)]
        leaf = dict(after.children())[SNYD]
        assert leaf.is_leaf()
        assert list(leaf.children()) == []
        # Both dice show 1, so there is no 2 to back up P1's raise
        assert leaf.value() == Payoffs(0, 1)

    def test_value_of_inner_position(self):
        """Only leaves have a value."""
        _, position = next(LazyGame(1).children())
        assert isinstance(position, RolledGame)
        assert position.value() is None
