import numpy as np
from typing import Optional

from ..schemas import GameContext, Outcome, OutcomeDistribution, PlateAppearanceOutcome, OUTCOME_ORDER

# type, bases advanced, is_hit, is_out, rbi potential
_OUTCOME_TAGS = {
    Outcome.HOME_RUN:     (4, True, False, 4),
    Outcome.TRIPLE:       (3, True, False, 3),
    Outcome.DOUBLE:       (2, True, False, 2),
    Outcome.SINGLE:       (1, True, False, 1),
    Outcome.WALK:         (1, False, False, 0),
    Outcome.HIT_BY_PITCH: (1, False, False, 0),
    Outcome.STRIKEOUT:    (0, False, True, 0),
    Outcome.GROUND_OUT:   (0, False, True, 0),
    Outcome.FLY_OUT:      (0, False, True, 0),
}


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed) if seed is not None else np.random.default_rng()


def bounded_normal(rng: np.random.Generator, mean: float, std: float, lo: float, hi: float) -> float:
    return float(max(lo, min(hi, rng.normal(mean, std))))


def outcome_for(kind: Outcome) -> PlateAppearanceOutcome:
    bases, is_hit, is_out, rbi = _OUTCOME_TAGS[kind]
    return PlateAppearanceOutcome(type=kind, bases_advanced=bases, is_hit=is_hit, is_out=is_out, rbi_potential=rbi)


def sample_outcome(dist: OutcomeDistribution, roll: float) -> Outcome:
    """Walk the cumulative thresholds in fixed priority order for a given roll."""
    probs = dist.as_dict()
    threshold = 0.0
    for kind in OUTCOME_ORDER[:-1]:
        threshold += probs[kind]
        if roll < threshold:
            return kind
    # Fly out absorbs whatever mass the upstream rounding left over
    return Outcome.FLY_OUT


def sample_plate_appearance(
    dist: OutcomeDistribution,
    rng: Optional[np.random.Generator] = None,
    context: Optional[GameContext] = None,
) -> PlateAppearanceOutcome:
    # ``context`` is accepted for situational models; the base model ignores it.
    rng = rng if rng is not None else make_rng()
    return outcome_for(sample_outcome(dist, float(rng.random())))
