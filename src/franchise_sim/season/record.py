from __future__ import annotations

from typing import Optional

import numpy as np

from ..sampler.rng import bounded_normal, make_rng
from ..schemas import SeasonRecord

GAME_JITTER_STD = 0.03
GAME_JITTER_MAX = 0.08
GAME_WIN_PROB_BOUNDS = (0.15, 0.85)


def simulate_season_record(
    win_pct: float,
    total_games: int,
    rng: Optional[np.random.Generator] = None,
) -> SeasonRecord:
    """Bernoulli game-by-game season around an expected win pct.

    Each game's win probability gets a small bounded jitter before the draw,
    so a club has good and bad nights without drifting off its true level.
    An empty schedule yields an empty 0-0 record.
    """
    if total_games <= 0:
        return SeasonRecord(wins=0, losses=0, win_pct=0.0)
    rng = rng if rng is not None else make_rng()
    lo, hi = GAME_WIN_PROB_BOUNDS

    wins = 0
    for _ in range(total_games):
        jitter = bounded_normal(rng, 0.0, GAME_JITTER_STD, -GAME_JITTER_MAX, GAME_JITTER_MAX)
        p = max(lo, min(hi, win_pct + jitter))
        if rng.random() < p:
            wins += 1

    losses = total_games - wins
    return SeasonRecord(wins=wins, losses=losses, win_pct=wins / total_games)
