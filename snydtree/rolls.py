import itertools
from fractions import Fraction

from .config import GameConfig
from .game import ChanceOutcome, Roll


def player_rolls(sides, dice):
    return list(itertools.product(range(1, sides + 1), repeat=dice))


def enumerate_rolls(sides, dice=(1, 1)):
    ''' All joint rolls of the two players, P1's roll varying slowest.
        Every roll is equally likely, so probabilities are exact fractions. '''
    dice1, dice2 = GameConfig(sides, dice=dice).validate().dice
    rolls1 = player_rolls(sides, dice1)
    rolls2 = player_rolls(sides, dice2)
    prob = Fraction(1, len(rolls1) * len(rolls2))
    return [ChanceOutcome(Roll(d1, d2), prob) for d1 in rolls1 for d2 in rolls2]
