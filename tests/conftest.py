import pytest

from tetris_catalog import BrickCatalog
from tetris_engine import TetrisEngine
from tetris_piece import DEFAULT_BRICKS
from tetris_rng import LCGRandom
from tetris_timer import GameTimer


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, sec):
        self.now += sec


def brick(name):
    return next(b for b in DEFAULT_BRICKS if b.name == name)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog():
    return BrickCatalog.standard(seed=1234)


@pytest.fixture
def highscore_file(tmp_path):
    return tmp_path / "highscore.txt"


@pytest.fixture
def make_engine(clock, highscore_file):
    """Engine with a frozen clock so automatic drops only happen on demand."""
    def make(catalog=None, names=None):
        if catalog is None:
            catalog = BrickCatalog(LCGRandom(7))
            if names:
                for name in names:
                    catalog.register(brick(name))
            else:
                catalog.populate_defaults()
        return TetrisEngine(catalog, timer=GameTimer(0.5, clock=clock),
                            highscore_file=highscore_file)
    return make


@pytest.fixture
def engine(make_engine):
    return make_engine()
