'''Extensive-form game trees for two player Liar's dice (snyd).'''

from .builder import TreeBuilder, build_game
from .config import GameConfig
from .errors import IllegalAction, InvalidConfiguration, ResourceExhaustion, SnydError
from .game import (CHANCE, NO_ACTION, P1, P2, SNYD, ChanceOutcome, Payoffs, Raise,
                   Roll, history_label, label, opponent, parse_label)
from .infosets import InformationSets, tag_information_sets
from .lattice import Lattice
from .lazy import LazyGame
from .payoff import is_correct_call, resolve
from .rolls import enumerate_rolls
from .stats import TreeStats, predicted_node_count, tree_stats
from .tree import Chance, Decision, Terminal

__version__ = '0.1.0'
