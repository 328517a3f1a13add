from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, SeasonConfig
from ..sampler.rng import make_rng
from ..schemas import PlayoffResult

logger = logging.getLogger(__name__)

PLAYOFF_LUCK = 5.0
DIVISIONAL_BASE = 50.0
DIVISIONAL_SEED_STEP = 3.0
CHAMPIONSHIP_BASE = 55.0
TITLE_SERIES_BASE = 60.0


def _luck(rng: np.random.Generator) -> float:
    return float(rng.uniform(-PLAYOFF_LUCK, PLAYOFF_LUCK))


def _wins_round(strength: float, opponent: float, rng: np.random.Generator) -> bool:
    return strength + _luck(rng) > opponent + _luck(rng)


def simulate_playoffs(
    strength: float,
    made_playoffs: bool,
    rank: int,
    tier: str,
    rng: Optional[np.random.Generator] = None,
    config: Optional[SeasonConfig] = None,
) -> PlayoffResult:
    """Divisional, championship, then (top tier only) the title series.

    Each round is one strength-plus-luck comparison. Better seeds draw a
    weaker divisional opponent.
    """
    if not made_playoffs:
        return PlayoffResult(won_championship=False, won_top_title=False)

    cfg = config or DEFAULT_SETTINGS.season
    rng = rng if rng is not None else make_rng()

    divisional = DIVISIONAL_BASE + (4 - min(rank, 4)) * DIVISIONAL_SEED_STEP
    if not _wins_round(strength, divisional, rng):
        logger.info("Eliminated in the divisional round (seed %d)", rank)
        return PlayoffResult(won_championship=False, won_top_title=False, elimination_round="divisional")

    championship = CHAMPIONSHIP_BASE + _luck(rng)
    if not _wins_round(strength, championship, rng):
        logger.info("Eliminated in the championship round")
        return PlayoffResult(won_championship=False, won_top_title=False, elimination_round="championship")

    if tier != cfg.top_tier:
        logger.info("Won the %s championship", tier)
        return PlayoffResult(won_championship=True, won_top_title=False)

    title = TITLE_SERIES_BASE + _luck(rng)
    if not _wins_round(strength, title, rng):
        logger.info("Lost the title series")
        return PlayoffResult(won_championship=True, won_top_title=False, elimination_round="title_series")

    logger.info("Won the title series")
    return PlayoffResult(won_championship=True, won_top_title=True)
