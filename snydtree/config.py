from dataclasses import dataclass

from .errors import InvalidConfiguration

NORMAL, JOKER = 'normal', 'joker'
VARIANTS = (NORMAL, JOKER)

# Comfortably holds the D=4 game (about 2.1M nodes)
DEFAULT_NODE_BUDGET = 5 * 10**6


@dataclass(frozen=True)
class GameConfig:
    ''' Parameters of a game of Liar's dice.

        sides: number of faces on each die (D).
        dice: number of dice held by P1 and P2.
        max_amount: largest amount a raise may claim. Defaults to `sides`,
            so the raises form a D x D grid.
        variant: 'normal', or 'joker' where 1s are wild and can't be raised.
        node_budget: largest tree we are willing to build, or None for no limit.
    '''
    sides: int
    dice: tuple = (1, 1)
    max_amount: int = None
    variant: str = NORMAL
    node_budget: int = DEFAULT_NODE_BUDGET

    def __post_init__(self):
        # Normalize, so equal games compare equal
        if isinstance(self.dice, list):
            object.__setattr__(self, 'dice', tuple(self.dice))
        if self.max_amount is None and _is_int(self.sides):
            object.__setattr__(self, 'max_amount', self.sides)

    @classmethod
    def of(cls, config):
        ''' Accept either a config or a bare die size. '''
        if isinstance(config, cls):
            return config
        return cls(sides=config)

    @property
    def faces(self):
        ''' The faces a raise may name. '''
        lowest = 2 if self.variant == JOKER else 1
        return range(lowest, self.sides + 1)

    def validate(self):
        if not _is_int(self.sides) or self.sides < 1:
            raise InvalidConfiguration('Die size must be a positive integer, got {!r}'.format(self.sides))
        if not isinstance(self.dice, tuple) or len(self.dice) != 2 or not all(_is_int(d) and d >= 1 for d in self.dice):
            raise InvalidConfiguration('Each player needs at least one die, got {!r}'.format(self.dice))
        if not _is_int(self.max_amount) or self.max_amount < 1:
            raise InvalidConfiguration('Largest raise must be positive, got {!r}'.format(self.max_amount))
        if self.variant not in VARIANTS:
            raise InvalidConfiguration('Unknown variant {!r}, use one of {}'.format(
                self.variant, ', '.join(VARIANTS)))
        if self.variant == JOKER and self.sides < 2:
            raise InvalidConfiguration('Jokers need dice with at least two sides')
        if self.node_budget is not None and (not _is_int(self.node_budget) or self.node_budget < 1):
            raise InvalidConfiguration('Node budget must be positive, got {!r}'.format(self.node_budget))
        return self


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)
