'''
Information sets of the built tree.

A player sees the whole betting history and their own dice, but not the dice
of the opponent. Decision nodes that agree on (to_move, own dice, history) are
therefore indistinguishable to the player to move, and form one information
set. Sets are numbered in depth first order of their first member, which makes
the numbering stable between builds.
'''

from .errors import SnydError
from .game import history_label
from .tree import Decision, walk


class InformationSets:
    def __init__(self):
        self._ids = {}
        self._keys = []
        self._members = []
        self._actions = []

    @staticmethod
    def key_of(decision):
        player = decision.to_move
        return (player, decision.state.of(player), decision.history)

    def add(self, decision):
        key = self.key_of(decision)
        if key not in self._ids:
            self._ids[key] = len(self._keys)
            self._keys.append(key)
            self._members.append([])
            self._actions.append(decision.actions)
        i = self._ids[key]
        if decision.actions != self._actions[i]:
            raise SnydError('Nodes of information set {} ({}) offer different actions'.format(
                i, history_label(decision.history)))
        self._members[i].append(decision)
        return i

    def id_of(self, decision):
        return self._ids[self.key_of(decision)]

    def key(self, i):
        return self._keys[i]

    def members(self, i):
        return list(self._members[i])

    def actions(self, i):
        return self._actions[i]

    def for_player(self, player):
        return [i for i, (owner, _, _) in enumerate(self._keys) if owner == player]

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(range(len(self._keys)))


def tag_information_sets(root):
    infosets = InformationSets()
    for node, _ in walk(root):
        if isinstance(node, Decision):
            infosets.add(node)
    return infosets
