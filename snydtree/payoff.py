from collections import Counter

from .config import JOKER, NORMAL
from .errors import IllegalAction
from .game import Payoffs, is_raise, opponent


def count_matching(faces, face, variant=NORMAL):
    ''' Number of dice that count towards `face`. With jokers, 1s count for anything. '''
    cnt = Counter(faces)
    if variant == JOKER and face != 1:
        return cnt[face] + cnt[1]
    return cnt[face]


def is_correct_call(roll, call, variant=NORMAL):
    ''' Is there really at least call.amount dice showing call.face? '''
    if not is_raise(call):
        raise IllegalAction('Only a raise can be disputed, got {!r}'.format(call))
    return count_matching(roll.faces, call.face, variant) >= call.amount


def resolve(caller, roll, called, variant=NORMAL):
    ''' Payoffs after `caller` called snyd on the raise `called`.
        If the raise was correct the caller loses, otherwise the caller wins. '''
    if is_correct_call(roll, called, variant):
        return Payoffs.win(opponent(caller))
    return Payoffs.win(caller)
