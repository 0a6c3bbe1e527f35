import pytest

from tetris_scoring import reward, level_for_score, drop_timeout, speed_ms


@pytest.mark.parametrize("erased, points", [
    (0, 0), (1, 100), (2, 300), (3, 700), (4, 1500), (5, 1500), (100, 1500),
])
def test_reward_table(erased, points):
    assert reward(erased) == points


@pytest.mark.parametrize("score, level", [
    (0, 1), (599, 1), (600, 1), (1200, 2), (2400, 4), (4800, 8), (6000, 10), (12000, 10),
])
def test_level_for_score(score, level):
    assert level_for_score(score) == level


def test_drop_timeout_curve():
    assert drop_timeout(1) == pytest.approx(0.5)
    assert drop_timeout(10) == pytest.approx(0.05)
    timeouts = [drop_timeout(level) for level in range(1, 11)]
    assert timeouts == sorted(timeouts, reverse=True)


@pytest.mark.parametrize("level, ms", [(1, 500), (4, 350), (7, 200), (10, 50)])
def test_speed_ms(level, ms):
    assert speed_ms(level) == ms
