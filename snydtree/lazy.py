'''
The game as positions that are expanded on demand.

Useful when the full tree doesn't fit in memory, or when only part of it is
needed. Every position has owner() (P1, P2, CHANCE, or None at a leaf),
value() (payoffs at a leaf, otherwise None) and children(), which yields
(prob, position) pairs at the root and (action, position) pairs below it, in
the same order as the branches of the eager tree.
'''

from .config import GameConfig
from .game import CHANCE, NO_ACTION, SNYD, history_label
from .lattice import Lattice
from .payoff import resolve
from .rolls import enumerate_rolls


class LazyGame:
    def __init__(self, config):
        self.config = GameConfig.of(config).validate()
        self.lattice = Lattice(self.config)

    def owner(self):
        return CHANCE

    def value(self):
        return None

    def children(self):
        for outcome in enumerate_rolls(self.config.sides, self.config.dice):
            yield outcome.prob, RolledGame(self.lattice, outcome.roll)


class RolledGame:
    def __init__(self, lattice, roll, hist=(NO_ACTION,)):
        self.lattice = lattice
        self.roll = roll
        self.hist = hist

    def __repr__(self):
        return 'RolledGame({}, {})'.format(self.roll, history_label(self.hist))

    def is_leaf(self):
        return self.hist[-1] is SNYD

    def owner(self):
        if self.is_leaf():
            return None
        # P1 moves after the opening marker, then players alternate
        return (len(self.hist) - 1) % 2

    def value(self):
        if not self.is_leaf():
            return None
        caller = (len(self.hist) - 2) % 2
        return resolve(caller, self.roll, self.hist[-2], self.lattice.config.variant)

    def children(self):
        if self.is_leaf():
            return
        for action in self.lattice.options(self.hist):
            yield action, RolledGame(self.lattice, self.roll, self.hist + (action,))


def histories(position):
    ''' Every position at or below `position`, parents first. '''
    yield position
    for _, child in position.children():
        yield from histories(child)
