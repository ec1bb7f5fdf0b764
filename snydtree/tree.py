'''
Nodes of the game tree.

Nodes are immutable. Each carries its outgoing edges as a tuple of
(label, child) pairs, where the label is a ChanceOutcome below a Chance node
and an action below a Decision node.
'''

from dataclasses import dataclass, field

from .game import CHANCE, history_label


@dataclass(frozen=True, slots=True)
class Terminal:
    payoffs: tuple

    @property
    def branches(self):
        return ()

    def owner(self):
        return None


@dataclass(frozen=True, slots=True)
class Chance:
    branches: tuple = field(repr=False)

    def owner(self):
        return CHANCE


@dataclass(frozen=True, slots=True)
class Decision:
    to_move: int
    state: tuple
    history: tuple
    branches: tuple = field(repr=False)

    def owner(self):
        return self.to_move

    @property
    def actions(self):
        return tuple(action for action, _ in self.branches)

    def child(self, action):
        for edge, node in self.branches:
            if edge == action:
                return node
        raise KeyError('{!r} is not available after {}'.format(action, history_label(self.history)))


def children(node):
    return [child for _, child in node.branches]


def walk(root):
    ''' Yield (node, depth) for every node, parents before children,
        siblings in branch order. '''
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        for child in reversed(children(node)):
            stack.append((child, depth + 1))
