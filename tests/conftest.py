import random

import pytest

from ringcube import Color, Cube

@pytest.fixture
def scrambled() -> Cube:
    """ A cube with arbitrary colors everywhere, not necessarily reachable by turning """
    rng = random.Random(1234)
    return Cube.from_simple_string("".join(rng.choice("012345") for _ in range(48)))

@pytest.fixture
def turned() -> Cube:
    """ A cube reached from solved by a fixed sequence of turns """
    cube = Cube.solved()
    for value in [0, 3, 1, 4, 2, 5, 1, 1, 0]:
        cube = cube.rotate_clockwise(Color(value))
    return cube
