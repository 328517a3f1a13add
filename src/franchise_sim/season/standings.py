from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import numpy as np

from ..config import DEFAULT_SETTINGS, SeasonConfig
from ..sampler.rng import make_rng
from ..schemas import AITeam, StandingsResult, TeamOffenseDefense, TeamStanding
from ..utils.wp import expected_win_pct
from .record import simulate_season_record
from .strength import ai_team_offense_defense

logger = logging.getLogger(__name__)

PLAYER_TEAM_ID = "player"
PLAYER_TEAM_NAME = "Your Team"


def _strength(od: TeamOffenseDefense) -> float:
    return (od.offense + od.defense) / 2.0


def league_average(profiles: Sequence[TeamOffenseDefense]) -> TeamOffenseDefense:
    if not profiles:
        return TeamOffenseDefense(offense=50.0, defense=50.0)
    n = len(profiles)
    return TeamOffenseDefense(
        offense=sum(p.offense for p in profiles) / n,
        defense=sum(p.defense for p in profiles) / n,
    )


def simulate_league_standings(
    player_team: Any,
    ai_teams: Sequence[Any],
    tier: str,
    rng: Optional[np.random.Generator] = None,
    config: Optional[SeasonConfig] = None,
) -> StandingsResult:
    """One season for the player's club and every AI club, ranked by win pct.

    AI profiles are drawn once per season. Every club is measured against the
    league-average AI profile rather than a real schedule.
    """
    cfg = config or DEFAULT_SETTINGS.season
    rng = rng if rng is not None else make_rng()
    total_games = cfg.games_by_tier[tier]

    player = player_team if isinstance(player_team, TeamOffenseDefense) else TeamOffenseDefense(**player_team)
    teams = [t if isinstance(t, AITeam) else AITeam(**t) for t in ai_teams]
    profiles = [ai_team_offense_defense(t, tier, rng, cfg) for t in teams]
    opponent = league_average(profiles)

    entries: List[tuple] = [(PLAYER_TEAM_ID, PLAYER_TEAM_NAME, player)]
    entries.extend((t.team_id, t.name, od) for t, od in zip(teams, profiles))

    standings: List[TeamStanding] = []
    for team_id, name, od in entries:
        record = simulate_season_record(expected_win_pct(od, opponent), total_games, rng)
        standings.append(
            TeamStanding(
                team_id=team_id,
                name=name,
                wins=record.wins,
                losses=record.losses,
                win_pct=record.win_pct,
                strength=_strength(od),
            )
        )

    # stable sort: the player's club wins ties with clubs listed after it
    standings.sort(key=lambda s: s.win_pct, reverse=True)
    rank = next(i for i, s in enumerate(standings, 1) if s.team_id == PLAYER_TEAM_ID)
    made_playoffs = rank <= cfg.playoff_teams

    logger.info(
        "%s standings: player %d-%d, rank %d of %d%s",
        tier,
        standings[rank - 1].wins,
        standings[rank - 1].losses,
        rank,
        len(standings),
        " (playoffs)" if made_playoffs else "",
    )
    return StandingsResult(
        standings=standings,
        player_rank=rank,
        made_playoffs=made_playoffs,
        won_division=rank == 1,
    )
