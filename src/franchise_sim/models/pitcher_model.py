from __future__ import annotations

from typing import Dict, Optional

from ..config import DEFAULT_SETTINGS, LeagueBaselines
from ..features.ratings_adapter import PitcherLike, as_pitcher, pitcher_features
from ..schemas import PitcherEffectiveness


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def pitcher_effectiveness(
    stuff: int,
    control: int,
    movement: int,
    league: Optional[LeagueBaselines] = None,
) -> PitcherEffectiveness:
    """Aggregate opposing-rate profile for a pitcher.

    Each rating is centred on 50 so that a 50/50/50 pitcher reproduces the
    league baselines; the weights decide how far the extremes move away.
    """
    lg = league or DEFAULT_SETTINGS.league
    pa9 = lg.pa_per_game_team

    feats = pitcher_features({"stuff": stuff, "control": control, "movement": movement})
    stf = feats["stuff"] - 0.5
    ctl = feats["control"] - 0.5
    mov = feats["movement"] - 0.5

    opp_ba = lg.batting_avg - stf * 0.08 - mov * 0.06 - ctl * 0.02
    k9 = lg.k_per_9 + stf * 10.0 + mov * 2.0
    bb9 = lg.bb_per_9 - ctl * 4.5 - stf * 0.5
    hr9 = lg.hr_per_9 - mov * 1.2 - stf * 0.4

    # On-base: hits over the at-bat share plus walks and plunked batters
    bb_pa = bb9 / pa9
    opp_obp = opp_ba * (1.0 - bb_pa - lg.hbp_per_pa) + bb_pa + lg.hbp_per_pa

    era = (
        lg.era
        + (opp_ba - lg.batting_avg) * 15.0
        + (bb9 - lg.bb_per_9) * 0.3
        - (k9 - lg.k_per_9) * 0.1
    )

    return PitcherEffectiveness(
        opp_batting_avg=_clamp(opp_ba, 0.180, 0.350),
        opp_on_base_pct=_clamp(opp_obp, 0.250, 0.400),
        strikeouts_per_9=_clamp(k9, 3.0, 15.0),
        walks_per_9=_clamp(bb9, 0.5, 8.0),
        home_runs_per_9=_clamp(hr9, 0.3, 3.0),
        era=_clamp(era, 1.5, 7.0),
    )


def effectiveness_for(p: PitcherLike, league: Optional[LeagueBaselines] = None) -> PitcherEffectiveness:
    r = as_pitcher(p)
    return pitcher_effectiveness(r.stuff, r.control, r.movement, league=league)


def opposing_rates(eff: PitcherEffectiveness, league: Optional[LeagueBaselines] = None) -> Dict[str, float]:
    """Per-PA opposing rates used by the Log5 matchup."""
    lg = league or DEFAULT_SETTINGS.league
    pa9 = lg.pa_per_game_team
    return {
        "hit": eff.opp_batting_avg,
        "home_run": eff.home_runs_per_9 / pa9,
        "walk": eff.walks_per_9 / pa9,
        "strikeout": eff.strikeouts_per_9 / pa9,
    }
