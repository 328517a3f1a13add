from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, GameRules
from ..sampler.rng import bounded_normal
from ..schemas import PitcherRatings

logger = logging.getLogger(__name__)


def pitches_for_plate_appearance(rng: np.random.Generator) -> int:
    # ~4 pitches per PA, never fewer than 1 or more than 12
    return int(math.floor(bounded_normal(rng, 4.0, 1.5, 1.0, 12.0)))


def starter_is_spent(pitch_count: int, rules: Optional[GameRules] = None) -> bool:
    rules = rules or DEFAULT_SETTINGS.rules
    return pitch_count > rules.starter_pitch_limit


class PitchingStaff:
    """Tracks who is on the mound for one side of one game.

    The starter works until his pitch count passes the limit; relievers then
    come in roster order and each covers a 1-2 inning stint. The last arm in
    the list stays in however long the game runs.
    """

    def __init__(self, pitchers: List[PitcherRatings], rng: np.random.Generator, rules: Optional[GameRules] = None):
        if not pitchers:
            raise ValueError("a pitching staff needs at least one pitcher")
        self.pitchers = pitchers
        self.rng = rng
        self.rules = rules or DEFAULT_SETTINGS.rules
        self.idx = 0
        self._stint_left = 0

    @property
    def current(self) -> PitcherRatings:
        return self.pitchers[self.idx]

    @property
    def has_relief(self) -> bool:
        return self.idx < len(self.pitchers) - 1

    def _stint(self) -> int:
        return int(self.rng.integers(self.rules.reliever_min_innings, self.rules.reliever_max_innings + 1))

    def maybe_change(self, current_pitch_count: int) -> bool:
        """Called before each defensive half-inning; returns True on a pitching change."""
        if not self.has_relief:
            return False
        if self.idx == 0:
            if not starter_is_spent(current_pitch_count, self.rules):
                return False
        elif self._stint_left > 0:
            return False
        outgoing = self.current.player_id
        self.idx += 1
        self._stint_left = self._stint()
        logger.debug("Pitching change: %s -> %s (%d pitches)", outgoing, self.current.player_id, current_pitch_count)
        return True

    def finish_inning(self) -> None:
        if self.idx > 0:
            self._stint_left -= 1
