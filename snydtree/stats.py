from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .lattice import Lattice
from .tree import Chance, Decision, Terminal, walk


@dataclass
class TreeStats:
    nodes: int
    chance: int
    decisions: int
    terminals: int
    max_depth: int
    # nodes_per_depth[d] is the number of nodes d edges below the root
    nodes_per_depth: np.ndarray


def tree_stats(root):
    counts = {Chance: 0, Decision: 0, Terminal: 0}
    depths = []
    for node, depth in walk(root):
        counts[type(node)] += 1
        depths.append(depth)
    per_depth = np.bincount(np.array(depths, dtype=np.int64))
    return TreeStats(
        nodes=len(depths),
        chance=counts[Chance],
        decisions=counts[Decision],
        terminals=counts[Terminal],
        max_depth=len(per_depth) - 1,
        nodes_per_depth=per_depth,
    )


def predicted_node_count(config):
    ''' Size of the tree build_game would produce, without building it.

        A decision with k raises left above the last one has a snyd leaf and
        one subtree per raise, which gives 2**(k+1) nodes. The opening
        decision has no snyd leaf and can pick any of the R raises, giving
        2**(R+1) - 1 nodes below each roll. '''
    config = GameConfig.of(config).validate()
    raises = len(Lattice(config))
    rolls = config.sides ** sum(config.dice)
    per_roll = 2 ** (raises + 1) - 1
    return 1 + rolls * per_roll
