import pytest

from franchise_sim.sampler.rng import make_rng
from franchise_sim.schemas import PitcherRatings
from franchise_sim.utils.fatigue import PitchingStaff, pitches_for_plate_appearance, starter_is_spent


def _arms(n):
    return [PitcherRatings(player_id=f"p{i}") for i in range(1, n + 1)]


def test_pitch_limit_boundary():
    assert not starter_is_spent(100)
    assert starter_is_spent(101)


def test_pitches_per_plate_appearance_bounded():
    rng = make_rng(1)
    draws = [pitches_for_plate_appearance(rng) for _ in range(1000)]
    assert min(draws) >= 1 and max(draws) <= 12
    assert 3.0 < sum(draws) / len(draws) < 4.5


def test_starter_stays_until_spent():
    staff = PitchingStaff(_arms(3), make_rng(2))
    assert not staff.maybe_change(60)
    assert staff.current.player_id == "p1"
    assert staff.maybe_change(105)
    assert staff.current.player_id == "p2"


def test_reliever_works_a_short_stint_and_last_arm_stays():
    staff = PitchingStaff(_arms(3), make_rng(3))
    staff.maybe_change(120)
    # the new reliever is never pulled before finishing an inning
    assert not staff.maybe_change(0)
    for _ in range(2):
        staff.finish_inning()
    assert staff.maybe_change(0)
    assert staff.current.player_id == "p3" and not staff.has_relief
    for _ in range(5):
        staff.finish_inning()
        assert not staff.maybe_change(200)


def test_empty_staff_rejected():
    with pytest.raises(ValueError):
        PitchingStaff([], make_rng(4))
