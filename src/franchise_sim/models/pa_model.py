from typing import Dict, List, Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, LeagueBaselines
from ..features.ratings_adapter import BatterLike, PitcherLike, as_batter, batter_features
from ..sampler.rng import make_rng
from ..schemas import OutcomeDistribution, OUTCOME_ORDER
from .log5 import adjust_for_pitcher
from .pitcher_model import effectiveness_for

CLASSES: List[str] = [o.value for o in OUTCOME_ORDER]

# Per-category floors keep every event reachable at rating extremes
FLOORS: Dict[str, float] = {
    "home_run": 0.001,
    "triple": 0.001,
    "double": 0.010,
    "single": 0.080,
    "walk": 0.030,
    "hit_by_pitch": 0.005,
    "strikeout": 0.050,
    "ground_out": 0.050,
    "fly_out": 0.050,
}
STRIKEOUT_CEILING = 0.400


def batter_probabilities(
    contact: int,
    power: int,
    speed: int,
    discipline: int = 50,
    rng: Optional[np.random.Generator] = None,
    league: Optional[LeagueBaselines] = None,
) -> OutcomeDistribution:
    """Plate-appearance outcome probabilities for a batter against a league-average arm.

    A batter rated 50 across the board lands on the league baselines. Every
    category except hit-by-pitch is a pure function of the ratings.
    """
    lg = league or DEFAULT_SETTINGS.league
    rng = rng if rng is not None else make_rng()

    feats = batter_features({"contact": contact, "power": power, "speed": speed, "discipline": discipline})
    con, pwr, spd, eye = feats["contact"], feats["power"], feats["speed"], feats["eye"]

    # Contact drives hits; power adds a slight boost
    hit = lg.hits_per_pa * (0.8 + con * 0.4) * (0.95 + pwr * 0.1)

    # Poor contact keeps raw power from translating into home runs
    hr = lg.hr_per_pa * (0.15 + pwr * 1.7) * (0.7 + con * 0.6)

    triple = 0.001 + spd * 0.007
    double = lg.hits_per_pa * lg.double_rate * (0.6 + pwr * 0.5 + spd * 0.3)
    single = max(FLOORS["single"], hit - hr - triple - double)

    # Pitchers pitch around power
    walk = lg.bb_per_pa * (0.5 + eye * 0.8 + pwr * 0.2)
    hbp = (lg.hbp_per_pa - 0.004) + float(rng.random()) * 0.008

    # Uppercut swings trade contact for strikeouts
    k = lg.k_per_pa * (1.4 - con * 0.9 + pwr * 0.1)

    remaining = 1.0 - single - double - triple - hr - walk - hbp - k
    ground = remaining * (0.55 - pwr * 0.15)
    fly = remaining - ground

    return OutcomeDistribution(
        home_run=max(FLOORS["home_run"], hr),
        triple=max(FLOORS["triple"], triple),
        double=max(FLOORS["double"], double),
        single=single,
        walk=max(FLOORS["walk"], walk),
        hit_by_pitch=max(FLOORS["hit_by_pitch"], hbp),
        strikeout=max(FLOORS["strikeout"], min(STRIKEOUT_CEILING, k)),
        ground_out=max(FLOORS["ground_out"], ground),
        fly_out=max(FLOORS["fly_out"], fly),
    )


class PaOutcomeModel:
    def __init__(self, version: str = "pa-1.0.0", league: Optional[LeagueBaselines] = None):
        self.version = version
        self.league = league or DEFAULT_SETTINGS.league

    def batter_distribution(self, batter: BatterLike, rng: Optional[np.random.Generator] = None) -> OutcomeDistribution:
        b = as_batter(batter)
        return batter_probabilities(b.contact, b.power, b.speed, b.discipline, rng=rng, league=self.league)

    def predict(
        self,
        batter: BatterLike,
        pitcher: Optional[PitcherLike] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> OutcomeDistribution:
        """Matchup-adjusted distribution; without a pitcher the raw batter profile is returned."""
        dist = self.batter_distribution(batter, rng=rng)
        if pitcher is None:
            return dist
        return adjust_for_pitcher(dist, effectiveness_for(pitcher, self.league), league=self.league)

    def predict_proba(
        self,
        batter: BatterLike,
        pitcher: Optional[PitcherLike] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Dict[str, float]:
        dist = self.predict(batter, pitcher, rng=rng)
        return {k.value: float(v) for k, v in dist.as_dict().items()}
