from franchise_sim.features.ratings_adapter import as_batter, as_pitcher, batter_features, pitcher_features
from franchise_sim.features.transforms import clamp_rating, normalize_20_80
from franchise_sim.schemas import BatterRatings, PitcherRatings


def test_out_of_range_ratings_are_clamped():
    b = BatterRatings(contact=95, power=5, speed=50.4)
    assert b.contact == 80 and b.power == 20 and b.speed == 50
    p = PitcherRatings(stuff=-10, control=200)
    assert p.stuff == 20 and p.control == 80 and p.movement == 50


def test_normalize_endpoints_and_default():
    assert normalize_20_80(20) == 0.0
    assert normalize_20_80(80) == 1.0
    assert normalize_20_80(None) == 0.5
    assert clamp_rating(None, default=40) == 40


def test_nested_and_flat_records_agree():
    nested = {"player_id": "b1", "ratings": {"contact": 70, "power": 60, "speed": 55}}
    flat = {"player_id": "b1", "contact": 70, "power": 60, "speed": 55}
    assert as_batter(nested) == as_batter(flat)
    assert as_batter(nested).discipline == 50
    assert as_pitcher({"ratings": {"stuff": 65}}).stuff == 65


def test_features_are_normalized():
    f = batter_features({"contact": 80, "power": 20, "speed": 50})
    assert f == {"contact": 1.0, "power": 0.0, "speed": 0.5, "eye": 0.5}
    pf = pitcher_features(PitcherRatings(stuff=80, control=20, movement=50))
    assert pf == {"stuff": 1.0, "control": 0.0, "movement": 0.5}
