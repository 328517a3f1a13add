from __future__ import annotations

import math
from typing import Any, Optional

from ..config import DEFAULT_SETTINGS, LeagueBaselines
from ..schemas import TeamOffenseDefense

PYTHAG_EXPONENT = 2.0
SEASON_WIN_PCT_BOUNDS = (0.25, 0.75)
HOME_FIELD_ADVANTAGE = 0.04
HOME_WIN_PROB_CAP = 0.95


def _get(obj: Any, key: str) -> float:
    if isinstance(obj, dict):
        return float(obj[key])
    return float(getattr(obj, key))


def expected_runs(offense: float, opposing_defense: float, league: Optional[LeagueBaselines] = None) -> float:
    """Runs per game for ``offense`` against ``opposing_defense`` (both on the 20-80 scale).

    Rating 50 maps to a 1.2 multiplier on each side, so an average matchup
    lands a little above league runs per game; only the ratio matters for
    win expectancy.
    """
    lg = league or DEFAULT_SETTINGS.league
    off_mult = 0.7 + offense / 100.0
    def_mult = 0.7 + opposing_defense / 100.0
    return lg.runs_per_game * off_mult / math.sqrt(def_mult)


def pythagorean_expectation(
    team: Any,
    opponent: Any,
    exponent: float = PYTHAG_EXPONENT,
    league: Optional[LeagueBaselines] = None,
) -> float:
    """Bill James: RS^k / (RS^k + RA^k), unclamped. Accepts models or dicts."""
    rs = expected_runs(_get(team, "offense"), _get(opponent, "defense"), league)
    ra = expected_runs(_get(opponent, "offense"), _get(team, "defense"), league)
    rs_k = rs ** exponent
    ra_k = ra ** exponent
    return rs_k / (rs_k + ra_k)


def expected_win_pct(team: Any, opponent: Any, league: Optional[LeagueBaselines] = None) -> float:
    lo, hi = SEASON_WIN_PCT_BOUNDS
    return max(lo, min(hi, pythagorean_expectation(team, opponent, league=league)))


def expected_win_pct_from_strength(team_strength: float, opponent_strength: float) -> float:
    """Single-number strengths are treated as balanced offense/defense pairs."""
    team = TeamOffenseDefense(offense=team_strength, defense=team_strength)
    opponent = TeamOffenseDefense(offense=opponent_strength, defense=opponent_strength)
    return expected_win_pct(team, opponent)


def home_win_probability(home: Any, away: Any, league: Optional[LeagueBaselines] = None) -> float:
    p = pythagorean_expectation(home, away, league=league)
    return min(HOME_WIN_PROB_CAP, p + HOME_FIELD_ADVANTAGE)
