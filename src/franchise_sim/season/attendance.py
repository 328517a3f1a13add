from __future__ import annotations

from typing import Optional

import numpy as np

from ..sampler.rng import make_rng
from ..schemas import AttendanceResult

BASE_FILL = 0.4


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def calculate_attendance(
    capacity: int,
    win_pct: float,
    city_pride: float,
    unemployment_rate: float,
    stadium_quality: float,
    home_games: int,
    external_multiplier: float = 1.0,
    rng: Optional[np.random.Generator] = None,
) -> AttendanceResult:
    """Average and season-total gate.

    40% of capacity scaled by (win_pct/.5)^1.5, city pride (0.7x-1.5x),
    unemployment (down to 0.5x), stadium quality (0.8x-1.2x), an external
    multiplier and +/-10% noise. Never above capacity, never negative.
    """
    rng = rng if rng is not None else make_rng()
    capacity = max(0, int(capacity))
    home_games = max(0, int(home_games))

    win_pct = _clamp(win_pct, 0.0, 1.0)
    city_pride = _clamp(city_pride, 0.0, 100.0)
    unemployment_rate = _clamp(unemployment_rate, 0.0, 100.0)
    stadium_quality = _clamp(stadium_quality, 0.0, 100.0)
    external_multiplier = max(0.0, external_multiplier)

    crowd = capacity * BASE_FILL
    crowd *= (win_pct / 0.5) ** 1.5
    crowd *= 0.7 + (city_pride / 100.0) * 0.8
    crowd *= 1.0 - (unemployment_rate / 100.0) * 0.5
    crowd *= 0.8 + (stadium_quality / 100.0) * 0.4
    crowd *= external_multiplier
    crowd *= float(rng.uniform(0.9, 1.1))

    avg = int(_clamp(round(crowd), 0, capacity))
    return AttendanceResult(avg_attendance=avg, total_attendance=avg * home_games)
