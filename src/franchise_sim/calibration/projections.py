from __future__ import annotations

from typing import List, Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, LeagueBaselines
from ..models.pa_model import batter_probabilities
from ..schemas import RatingValidation, SeasonProjection

RATING_BANDS = [
    (20, "Replacement Level"),
    (30, "Below Average"),
    (40, "Fringe Starter"),
    (50, "League Average"),
    (60, "Above Average"),
    (70, "All-Star"),
    (80, "MVP Caliber"),
]


def project_season_stats(
    contact: int,
    power: int,
    speed: int,
    games: int = 150,
    pa_per_game: float = 4.2,
    rng: Optional[np.random.Generator] = None,
    league: Optional[LeagueBaselines] = None,
) -> SeasonProjection:
    """Expected full-season line for a hitter, from the per-PA probabilities.

    Counting stats are the probabilities scaled by plate appearances and
    rounded. Steals, runs, RBI and WAR are rough rule-of-thumb estimates.
    """
    lg = league or DEFAULT_SETTINGS.league
    total_pa = int(round(games * pa_per_game))
    p = batter_probabilities(contact, power, speed, rng=rng, league=lg)

    walks = round(total_pa * p.walk)
    hbp = round(total_pa * p.hit_by_pitch)
    at_bats = max(1, total_pa - walks - hbp)

    home_runs = round(total_pa * p.home_run)
    triples = round(total_pa * p.triple)
    doubles = round(total_pa * p.double)
    singles = round(total_pa * p.single)
    hits = singles + doubles + triples + home_runs
    strikeouts = round(total_pa * p.strikeout)

    speed_factor = (speed - 50) / 50.0
    sb_attempts = round((walks + hbp + singles) * lg.sb_attempt_rate * (1 + speed_factor))
    stolen_bases = max(0, round(sb_attempts * (lg.sb_success_rate + (speed - 50) / 200.0)))

    total_bases = singles + 2 * doubles + 3 * triples + 4 * home_runs
    runs = round(0.9 * (hits + walks + hbp) * (0.3 + speed / 200.0))
    rbi = round(0.25 * total_bases + 0.1 * (hits + walks))

    batting_avg = hits / at_bats
    obp = (hits + walks + hbp) / total_pa if total_pa else 0.0
    slg = total_bases / at_bats
    ops = obp + slg
    war = ((ops - 0.700) * at_bats / 600.0) * 4 + stolen_bases * 0.02 + speed_factor

    return SeasonProjection(
        games=games,
        plate_appearances=total_pa,
        at_bats=at_bats,
        hits=hits,
        doubles=doubles,
        triples=triples,
        home_runs=home_runs,
        runs=runs,
        rbi=rbi,
        walks=walks,
        strikeouts=strikeouts,
        stolen_bases=stolen_bases,
        batting_avg=round(batting_avg, 3),
        obp=round(obp, 3),
        slg=round(slg, 3),
        ops=round(ops, 3),
        war=round(war, 1),
    )


def validate_rating_scale(rng: Optional[np.random.Generator] = None) -> List[RatingValidation]:
    """Season projections for a flat-rated hitter at each rating band."""
    rows: List[RatingValidation] = []
    for rating, label in RATING_BANDS:
        proj = project_season_stats(rating, rating, rating, rng=rng)
        rows.append(
            RatingValidation(
                rating=rating,
                expected_ba=f"{proj.batting_avg:.3f}",
                expected_hr=proj.home_runs,
                expected_ops=f"{proj.ops:.3f}",
                player_type=label,
            )
        )
    return rows
