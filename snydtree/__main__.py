import argparse
import logging
import sys

from .builder import build_game
from .config import DEFAULT_NODE_BUDGET, VARIANTS, GameConfig
from .errors import ResourceExhaustion, SnydError
from .game import P1, P2
from .infosets import tag_information_sets
from .stats import predicted_node_count, tree_stats


def make_parser():
    parser = argparse.ArgumentParser(prog='snydtree', description='Build the game tree of two player Liar\'s dice')
    parser.add_argument('sides', type=int, help='Number of sides on the dice')
    parser.add_argument('--dice1', type=int, default=1, help='Number of dice for player 1')
    parser.add_argument('--dice2', type=int, default=1, help='Number of dice for player 2')
    parser.add_argument('--max-amount', type=int, default=None, help='Largest amount a raise can claim (default: sides)')
    parser.add_argument('--variant', choices=VARIANTS, default='normal', help='joker makes 1s count for anything')
    parser.add_argument('--budget', type=int, default=DEFAULT_NODE_BUDGET, help='Refuse to build trees with more nodes, 0 for no limit')
    parser.add_argument('--processes', type=int, default=1, help='Build the rolls in parallel')
    parser.add_argument('--infosets', action='store_true', help='Also count information sets')
    parser.add_argument('--predict-only', action='store_true', help='Only print the expected number of nodes')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(asctime)s %(name)s %(message)s')

    config = GameConfig(
        sides=args.sides,
        dice=(args.dice1, args.dice2),
        max_amount=args.max_amount,
        variant=args.variant,
        node_budget=args.budget or None)

    try:
        if args.predict_only:
            print('Nodes:', predicted_node_count(config))
            return 0
        root = build_game(config, processes=args.processes)
    except ResourceExhaustion as e:
        print('Too large:', e, file=sys.stderr)
        return 2
    except SnydError as e:
        print('Error:', e, file=sys.stderr)
        return 1

    stats = tree_stats(root)
    print('Nodes:', stats.nodes)
    print('Chance: {}, Decisions: {}, Terminals: {}'.format(stats.chance, stats.decisions, stats.terminals))
    print('Max depth:', stats.max_depth)
    print('Per depth:', ' '.join(map(str, stats.nodes_per_depth)))
    if args.infosets:
        infosets = tag_information_sets(root)
        print('Information sets: {} (P1: {}, P2: {})'.format(
            len(infosets), len(infosets.for_player(P1)), len(infosets.for_player(P2))))
    return 0


if __name__ == '__main__':
    sys.exit(main())
