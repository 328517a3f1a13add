from typing import Optional

from ..config import DEFAULT_SETTINGS, LeagueBaselines
from ..schemas import OutcomeDistribution, PitcherEffectiveness
from .pitcher_model import opposing_rates

STRIKEOUT_CAP = 0.45
_EPS = 1e-9


def _odds(p: float) -> float:
    p = max(_EPS, min(1.0 - _EPS, float(p)))
    return p / (1.0 - p)


def log5(batter_p: float, pitcher_p: float, league_p: float) -> float:
    """Bill James' Log5: combine batter and pitcher rates against the league rate."""
    combined = _odds(batter_p) * _odds(pitcher_p) / _odds(league_p)
    return combined / (1.0 + combined)


def adjust_for_pitcher(
    batter: OutcomeDistribution,
    pitcher: PitcherEffectiveness,
    league: Optional[LeagueBaselines] = None,
) -> OutcomeDistribution:
    """Matchup-adjusted distribution for ``batter`` facing ``pitcher``.

    - Aggregate hits go through Log5 against the opponent average; the ratio
      rescales singles, doubles and triples.
    - Home runs and walks get their own Log5 against the pitcher's per-PA rates.
    - Strikeouts scale with the pitcher's K rate relative to league, capped.
    - Hit-by-pitch and balls in play for outs pass through unchanged.
    """
    lg = league or DEFAULT_SETTINGS.league
    opp = opposing_rates(pitcher, lg)

    total_hits = batter.single + batter.double + batter.triple + batter.home_run
    adjusted_hits = log5(total_hits, opp["hit"], lg.batting_avg)
    ratio = adjusted_hits / total_hits

    k_scale = 0.6 + 0.4 * (opp["strikeout"] / lg.k_per_pa)

    return OutcomeDistribution(
        home_run=log5(batter.home_run, opp["home_run"], lg.hr_per_pa),
        triple=batter.triple * ratio,
        double=batter.double * ratio,
        single=batter.single * ratio,
        walk=log5(batter.walk, opp["walk"], lg.bb_per_pa),
        hit_by_pitch=batter.hit_by_pitch,
        strikeout=min(STRIKEOUT_CAP, batter.strikeout * k_scale),
        ground_out=batter.ground_out,
        fly_out=batter.fly_out,
    )
