'''
The order on raises.

A raise must be strictly greater than the previous one, comparing the amount
first and the face second. Snyd may be called whenever there is a raise to
dispute. The raise universe is small (max_amount x sides), and successor lists
are memoized per lattice, so there is no global table.
'''

import bisect
from functools import lru_cache

from .config import GameConfig
from .errors import IllegalAction
from .game import NO_ACTION, SNYD, Raise, history_label, is_raise


class Lattice:
    def __init__(self, config):
        self.config = GameConfig.of(config).validate()
        self.calls = tuple(Raise(amount, face)
                           for amount in range(1, self.config.max_amount + 1)
                           for face in self.config.faces)
        # Cached per lattice, so nothing is shared between games
        self.legal_successors = lru_cache(maxsize=None, typed=True)(self._legal_successors)

    def __len__(self):
        return len(self.calls)

    def __contains__(self, action):
        return is_raise(action) and 1 <= action.amount <= self.config.max_amount \
            and action.face in self.config.faces

    def _legal_successors(self, prior):
        ''' The raises allowed after `prior`, in increasing order.
            Empty after the largest raise, where only snyd is left. '''
        if prior is NO_ACTION:
            return self.calls
        if prior is SNYD:
            raise IllegalAction('Nothing can follow snyd')
        if prior not in self:
            raise IllegalAction('{!r} is not a raise in this game'.format(prior))
        return self.calls[bisect.bisect_right(self.calls, prior):]

    def is_snyd_legal(self, history):
        return any(is_raise(action) for action in history)

    def options(self, history):
        ''' Everything the player to move may do after `history`, snyd first. '''
        successors = self.legal_successors(history[-1])
        if self.is_snyd_legal(history):
            return (SNYD,) + successors
        return successors

    def apply(self, history, action):
        ''' Extend `history` by `action`, which must be legal there. '''
        history = tuple(history)
        if not history or history[0] is not NO_ACTION:
            raise IllegalAction('Histories start with {!r}'.format(NO_ACTION))
        if not (action is SNYD or is_raise(action)) or action not in self.options(history):
            raise IllegalAction('{!r} is not allowed after {}'.format(action, history_label(history)))
        return history + (action,)

    def check_history(self, history):
        ''' Replay `history` from the opening marker, raising IllegalAction
            at the first action that isn't allowed. '''
        history = tuple(history)
        if not history or history[0] is not NO_ACTION:
            raise IllegalAction('Histories start with {!r}'.format(NO_ACTION))
        replayed = history[:1]
        for action in history[1:]:
            replayed = self.apply(replayed, action)
        return replayed
