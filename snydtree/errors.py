class SnydError(Exception):
    ''' Base class for everything raised by snydtree. '''


class InvalidConfiguration(SnydError, ValueError):
    ''' The game parameters don't describe a playable game. '''


class IllegalAction(SnydError):
    ''' An action was used where the betting rules don't allow it.
        Only a bug in the caller can trigger this. '''


class ResourceExhaustion(SnydError):
    ''' Building the tree would take more nodes than the budget allows. '''

    def __init__(self, budget, required):
        self.budget = budget
        # May be a lower bound, if construction was stopped half way
        self.required = required
        super().__init__(
            'Game tree needs at least {} nodes, but the budget is {}'.format(required, budget))
