"""
Pytest fixtures for snydtree tests.
"""

import pytest

from snydtree import build_game


@pytest.fixture(scope="session")
def game1():
    """The one-sided game, the smallest there is."""
    return build_game(1)


@pytest.fixture(scope="session")
def game2():
    """Two-sided dice, 125 nodes."""
    return build_game(2)


@pytest.fixture(scope="session")
def game3():
    """Three-sided dice, 9208 nodes."""
    return build_game(3)
