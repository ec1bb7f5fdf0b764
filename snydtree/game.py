'''
Players, actions and private state of two player Liar's dice.

A raise ("call" in snyd terms) claims that at least `amount` of all the dice
on the table show `face`. Raises are tuples, so the usual tuple comparison is
exactly the betting order. Calling snyd disputes the last raise and ends the game.
'''

from enum import Enum
from typing import NamedTuple

from .errors import IllegalAction

P1, P2, CHANCE = range(3)


def opponent(player):
    if player not in (P1, P2):
        raise ValueError('Not a player: {!r}'.format(player))
    return 1 - player


class Marker(Enum):
    NO_ACTION = '-'
    SNYD = 'snyd'

    def __repr__(self):
        return self.name


# Start of every history. Never something a player can choose.
NO_ACTION = Marker.NO_ACTION
# Dispute the previous raise.
SNYD = Marker.SNYD


class Raise(NamedTuple):
    amount: int
    face: int

    def __str__(self):
        return '{}x{}'.format(self.amount, self.face)


def is_raise(action):
    return isinstance(action, Raise)


def label(action):
    if is_raise(action):
        return str(action)
    if isinstance(action, Marker):
        return action.value
    raise IllegalAction('Not an action: {!r}'.format(action))


def parse_label(text):
    ''' Inverse of `label`. '''
    for marker in Marker:
        if text == marker.value:
            return marker
    amount, sep, face = text.partition('x')
    if not sep or not amount.isdigit() or not face.isdigit():
        raise ValueError('Not an action label: {!r}'.format(text))
    return Raise(int(amount), int(face))


def history_label(history):
    return ','.join(map(label, history))


class Roll(NamedTuple):
    ''' The private dice of both players, each a tuple of faces. '''
    p1: tuple
    p2: tuple

    def of(self, player):
        return (self.p1, self.p2)[player]

    @property
    def faces(self):
        return self.p1 + self.p2


class ChanceOutcome(NamedTuple):
    roll: Roll
    prob: object  # fractions.Fraction


class Payoffs(NamedTuple):
    p1: int
    p2: int

    @classmethod
    def win(cls, player):
        return cls(1, 0) if player == P1 else cls(0, 1)

    def of(self, player):
        return (self.p1, self.p2)[player]
