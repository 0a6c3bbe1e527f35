"""Reward table and level/speed curve"""

REWARDS = (0, 100, 300, 700, 1500)  # by rows erased in one pass, 4+ capped
SCORE_PER_LEVEL = 600
MIN_LEVEL, MAX_LEVEL = 1, 10


def reward(erased: int) -> int:
    if erased <= 0:
        return 0
    return REWARDS[min(erased, len(REWARDS) - 1)]


def level_for_score(score: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, score // SCORE_PER_LEVEL))


def drop_timeout(level: int) -> float:
    """Seconds between automatic drops: 0.5s at level 1 down to 0.05s at 10."""
    return (MAX_LEVEL + 1 - level) * 0.05


def speed_ms(level: int) -> int:
    return round(drop_timeout(level) * 1000)
