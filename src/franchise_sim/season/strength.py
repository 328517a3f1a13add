from __future__ import annotations

from typing import Any, Iterable, List, Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, SeasonConfig
from ..sampler.rng import bounded_normal, make_rng
from ..schemas import AITeam, RosterPlayer, TeamOffenseDefense

EMPTY_SIDE_RATING = 40.0
HUMAN_BOUNDS = (20.0, 80.0)
AI_BOUNDS = (25.0, 75.0)


def _clamp(x: float, bounds) -> float:
    lo, hi = bounds
    return max(lo, min(hi, x))


def _as_player(p: Any) -> RosterPlayer:
    return p if isinstance(p, RosterPlayer) else RosterPlayer(**p)


def _mean(values: List[float], default: float) -> float:
    return sum(values) / len(values) if values else default


def coaching_bonus(coach_skill: float, config: Optional[SeasonConfig] = None) -> float:
    cfg = config or DEFAULT_SETTINGS.season
    return ((coach_skill - 50.0) / 30.0) * cfg.coaching_weight * 10.0


def morale_bonus(avg_morale: float, config: Optional[SeasonConfig] = None) -> float:
    cfg = config or DEFAULT_SETTINGS.season
    return ((avg_morale - 50.0) / 50.0) * cfg.morale_weight * 5.0


def team_offense_defense(
    players: Iterable[Any],
    hitting_coach_skill: float,
    pitching_coach_skill: float,
    config: Optional[SeasonConfig] = None,
) -> TeamOffenseDefense:
    """Offense from active hitters, defense from active pitchers, plus coaching and morale."""
    active = [p for p in map(_as_player, players) if p.is_on_roster and not p.is_injured]
    if not active:
        return TeamOffenseDefense(offense=EMPTY_SIDE_RATING, defense=EMPTY_SIDE_RATING)

    hitters = [p.rating for p in active if p.role == "HITTER"]
    pitchers = [p.rating for p in active if p.role == "PITCHER"]
    morale = morale_bonus(_mean([p.morale for p in active], 50.0), config)

    offense = _mean(hitters, EMPTY_SIDE_RATING) + coaching_bonus(hitting_coach_skill, config) + morale
    defense = _mean(pitchers, EMPTY_SIDE_RATING) + coaching_bonus(pitching_coach_skill, config) + morale
    return TeamOffenseDefense(offense=_clamp(offense, HUMAN_BOUNDS), defense=_clamp(defense, HUMAN_BOUNDS))


def team_strength(players: Iterable[Any], hitting_coach_skill: float, pitching_coach_skill: float) -> float:
    od = team_offense_defense(players, hitting_coach_skill, pitching_coach_skill)
    return (od.offense + od.defense) / 2.0


def ai_team_offense_defense(
    team: Any,
    tier: str,
    rng: Optional[np.random.Generator] = None,
    config: Optional[SeasonConfig] = None,
) -> TeamOffenseDefense:
    """AI clubs: base strength lifted by tier, split unevenly between offense and defense."""
    cfg = config or DEFAULT_SETTINGS.season
    rng = rng if rng is not None else make_rng()
    t = team if isinstance(team, AITeam) else AITeam(**team)

    base = t.base_strength + cfg.tier_modifiers.get(tier, 0.0)
    sigma = 3.0 * t.variance_multiplier
    off_var = bounded_normal(rng, 0.0, sigma, -8.0, 8.0)
    def_var = bounded_normal(rng, 0.0, sigma, -8.0, 8.0)
    # some clubs are built for offense, some for run prevention
    bias = (float(rng.random()) - 0.5) * 10.0

    return TeamOffenseDefense(
        offense=_clamp(base + bias + off_var, AI_BOUNDS),
        defense=_clamp(base - bias + def_var, AI_BOUNDS),
    )


def ai_team_strength(team: Any, tier: str, rng: Optional[np.random.Generator] = None) -> float:
    od = ai_team_offense_defense(team, tier, rng)
    return (od.offense + od.defense) / 2.0
