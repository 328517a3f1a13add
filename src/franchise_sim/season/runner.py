from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, Settings
from ..sampler.rng import make_rng
from ..schemas import SeasonInput, SeasonResult
from .attendance import calculate_attendance
from .playoffs import simulate_playoffs
from .standings import PLAYER_TEAM_ID, simulate_league_standings
from .strength import team_offense_defense

logger = logging.getLogger(__name__)


def simulate_season(
    season: Any,
    rng: Optional[np.random.Generator] = None,
    settings: Optional[Settings] = None,
) -> SeasonResult:
    """Strength, standings, playoffs and gate for one season of the player's club."""
    settings = settings or DEFAULT_SETTINGS
    cfg = settings.season
    rng = rng if rng is not None else make_rng()
    inp = season if isinstance(season, SeasonInput) else SeasonInput(**season)

    total_games = cfg.games_by_tier[inp.tier]
    home_games = total_games // 2

    profile = team_offense_defense(inp.players, inp.hitting_coach_skill, inp.pitching_coach_skill, cfg)
    strength = (profile.offense + profile.defense) / 2.0
    logger.debug("Team profile offense=%.1f defense=%.1f", profile.offense, profile.defense)

    table = simulate_league_standings(profile, inp.ai_teams, inp.tier, rng, cfg)
    mine = next(s for s in table.standings if s.team_id == PLAYER_TEAM_ID)

    playoffs = simulate_playoffs(strength, table.made_playoffs, table.player_rank, inp.tier, rng, cfg)
    gate = calculate_attendance(
        inp.stadium_capacity,
        mine.win_pct,
        inp.city_pride,
        inp.unemployment_rate,
        inp.stadium_quality,
        home_games,
        external_multiplier=inp.fan_multiplier,
        rng=rng,
    )

    return SeasonResult(
        wins=mine.wins,
        losses=mine.losses,
        win_pct=mine.win_pct,
        team_strength=strength,
        standings=table.standings,
        division_rank=table.player_rank,
        made_playoffs=table.made_playoffs,
        won_division=table.won_division,
        playoffs=playoffs,
        avg_attendance=gate.avg_attendance,
        total_attendance=gate.total_attendance,
    )
