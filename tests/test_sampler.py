from franchise_sim.sampler.rng import bounded_normal, make_rng, outcome_for, sample_outcome
from franchise_sim.schemas import Outcome, OutcomeDistribution


def _dist(**kw):
    base = dict(home_run=0.1, triple=0.1, double=0.1, single=0.1, walk=0.1,
                hit_by_pitch=0.1, strikeout=0.1, ground_out=0.1, fly_out=0.1)
    base.update(kw)
    return OutcomeDistribution(**base)


def test_priority_order_thresholds():
    d = _dist()
    assert sample_outcome(d, 0.0) == Outcome.HOME_RUN
    assert sample_outcome(d, 0.15) == Outcome.TRIPLE
    assert sample_outcome(d, 0.45) == Outcome.WALK
    assert sample_outcome(d, 0.75) == Outcome.GROUND_OUT


def test_leftover_mass_falls_to_fly_out():
    # Cumulative total is only 0.9; anything past it is a fly out
    d = _dist()
    assert sample_outcome(d, 0.85) == Outcome.FLY_OUT
    assert sample_outcome(d, 0.999) == Outcome.FLY_OUT


def test_outcome_tags():
    hr = outcome_for(Outcome.HOME_RUN)
    assert hr.is_hit and not hr.is_out and hr.bases_advanced == 4
    bb = outcome_for(Outcome.WALK)
    assert not bb.is_hit and not bb.is_out and bb.bases_advanced == 1
    k = outcome_for(Outcome.STRIKEOUT)
    assert k.is_out and k.bases_advanced == 0


def test_bounded_normal_respects_bounds():
    rng = make_rng(11)
    draws = [bounded_normal(rng, 0.0, 5.0, -1.0, 1.0) for _ in range(500)]
    assert min(draws) >= -1.0 and max(draws) <= 1.0


def test_seeded_generators_repeat():
    a, b = make_rng(42), make_rng(42)
    assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
