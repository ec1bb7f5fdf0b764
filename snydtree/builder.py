'''
Eager construction of the full game tree.

The root is a Chance node over all joint rolls. Below each roll P1 moves first
from the history (NO_ACTION,), and players alternate until somebody calls snyd.
'''

import logging
from functools import partial
from multiprocessing import Pool

from .config import GameConfig
from .errors import InvalidConfiguration, ResourceExhaustion
from .game import NO_ACTION, P1, SNYD, opponent
from .lattice import Lattice
from .payoff import resolve
from .rolls import enumerate_rolls
from .stats import predicted_node_count
from .tree import Chance, Decision, Terminal

logger = logging.getLogger(__name__)


class TreeBuilder:
    def __init__(self, config):
        self.config = GameConfig.of(config).validate()
        self.lattice = Lattice(self.config)
        self.budget = self.config.node_budget
        # Number of nodes created so far
        self.nodes = 0

    def count_node(self):
        self.nodes += 1
        if self.budget is not None and self.nodes > self.budget:
            raise ResourceExhaustion(self.budget, self.nodes)

    def build_decision(self, to_move, state, history):
        ''' The subtree where `to_move` acts after `history`.
            Snyd, when allowed, is the first branch, followed by the raises
            in increasing order. '''
        return self._build(to_move, state, self.lattice.check_history(history))

    def _build(self, to_move, state, history):
        self.count_node()
        prior = history[-1]
        successors = self.lattice.legal_successors(prior)
        branches = []
        if self.lattice.is_snyd_legal(history):
            self.count_node()
            payoffs = resolve(to_move, state, prior, self.config.variant)
            branches.append((SNYD, Terminal(payoffs)))
        for call in successors:
            child = self._build(opponent(to_move), state, history + (call,))
            branches.append((call, child))
        return Decision(to_move, state, history, tuple(branches))

    def build_roll(self, outcome):
        return self._build(P1, outcome.roll, (NO_ACTION,))


def _build_roll_worker(outcome, config):
    return TreeBuilder(config).build_roll(outcome)


def build_game(config, processes=1):
    ''' Build the whole game for a config or a die size.

        The predicted size is checked against the node budget before anything
        is allocated. With processes > 1 the subtrees of the different rolls
        are built in a process pool. The resulting tree doesn't depend on it. '''
    config = GameConfig.of(config).validate()
    if not isinstance(processes, int) or processes < 1:
        raise InvalidConfiguration('Need at least one process, got {!r}'.format(processes))

    required = predicted_node_count(config)
    if config.node_budget is not None and required > config.node_budget:
        raise ResourceExhaustion(config.node_budget, required)

    outcomes = enumerate_rolls(config.sides, config.dice)
    logger.info('Building %d-sided game: %d rolls, %d nodes', config.sides, len(outcomes), required)

    if processes == 1:
        builder = TreeBuilder(config)
        builder.count_node()  # The root
        subtrees = []
        for outcome in outcomes:
            subtrees.append(builder.build_roll(outcome))
            logger.debug('Built roll %s, %d nodes so far', outcome.roll, builder.nodes)
    else:
        with Pool(processes=processes) as pool:
            subtrees = pool.map(partial(_build_roll_worker, config=config), outcomes)

    root = Chance(tuple(zip(outcomes, subtrees)))
    logger.info('Finished %d-sided game', config.sides)
    return root
