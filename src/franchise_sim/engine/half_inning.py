from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import numpy as np

from ..models.advancement_model import advance_on_hit, empty_bases, forced_advance, runners_on
from ..sampler.rng import sample_plate_appearance
from ..schemas import BatterRatings, GameContext, OutcomeDistribution, PitcherRatings
from ..utils.fatigue import pitches_for_plate_appearance
from .boxscore import BatterLine, PitcherLine

logger = logging.getLogger(__name__)

MAX_PA_PER_HALF = 50

# (batter, pitcher, rng) -> matchup distribution
DistributionFn = Callable[[BatterRatings, PitcherRatings, np.random.Generator], OutcomeDistribution]


@dataclass
class HalfInningResult:
    runs: int
    hits: int
    outs: int
    next_index: int
    left_on_base: int
    plate_appearances: int
    walk_off: bool = False


def simulate_half_inning(
    lineup: List[BatterRatings],
    start_index: int,
    pitcher: PitcherRatings,
    batting: Dict[str, BatterLine],
    pitcher_line: PitcherLine,
    distribution: DistributionFn,
    rng: np.random.Generator,
    inning: int = 1,
    score_differential: int = 0,
    walk_off_target: Optional[int] = None,
    max_plate_appearances: int = MAX_PA_PER_HALF,
) -> HalfInningResult:
    """Play one half-inning against a single pitcher.

    ``batting`` maps player id -> BatterLine and is mutated in place, as is
    ``pitcher_line``. The lineup position carries over between halves via
    ``start_index``/``next_index``. When ``walk_off_target`` is set the half
    stops as soon as the batting side's runs exceed it.
    """
    if not lineup:
        raise ValueError("lineup must contain at least one batter")

    outs = 0
    runs = 0
    hits = 0
    bases = empty_bases()
    idx = start_index
    pa_count = 0
    walk_off = False

    while outs < 3:
        if pa_count >= max_plate_appearances:
            logger.debug("Half-inning cut off at %d plate appearances (inning %d)", pa_count, inning)
            break

        batter = lineup[idx % len(lineup)]
        idx += 1
        pa_count += 1

        ctx = GameContext(
            runners_on_base=runners_on(bases),
            outs=outs,
            inning=inning,
            score_differential=score_differential + runs,
        )
        pa = sample_plate_appearance(distribution(batter, pitcher, rng), rng, context=ctx)
        scored: List[str] = []

        if pa.is_out:
            outs += 1
        elif pa.is_hit:
            hits += 1
            bases, scored = advance_on_hit(bases, pa.bases_advanced, batter.player_id)
        else:
            bases, scored = forced_advance(bases, batter.player_id)

        batting[batter.player_id].record(pa, rbi=len(scored))
        pitcher_line.record(pa, pitches_for_plate_appearance(rng))
        for runner_id in scored:
            line = batting.get(runner_id)
            if line is not None:
                line.runs += 1
        runs += len(scored)

        if walk_off_target is not None and runs > walk_off_target:
            walk_off = True
            break

    # One full inning per completed half; a walk-off credits only the outs recorded
    pitcher_line.innings_pitched += (outs / 3.0) if walk_off else 1.0
    pitcher_line.charge_runs(runs)

    return HalfInningResult(
        runs=runs,
        hits=hits,
        outs=outs,
        next_index=idx % len(lineup),
        left_on_base=runners_on(bases),
        plate_appearances=pa_count,
        walk_off=walk_off,
    )
