from franchise_sim.calibration.projections import RATING_BANDS, project_season_stats, validate_rating_scale
from franchise_sim.sampler.rng import make_rng


def test_average_hitter_projection():
    proj = project_season_stats(50, 50, 50, rng=make_rng(1))
    assert proj.plate_appearances == 630
    assert abs(proj.batting_avg - 0.250) < 0.01
    assert 15 <= proj.home_runs <= 23
    assert abs(proj.ops - (proj.obp + proj.slg)) < 0.002


def test_rating_scale_is_monotonic():
    rows = validate_rating_scale(rng=make_rng(2))
    assert [r.rating for r in rows] == [b for b, _ in RATING_BANDS]
    assert rows[3].player_type == "League Average"
    hrs = [r.expected_hr for r in rows]
    assert all(b > a for a, b in zip(hrs, hrs[1:]))
    ops = [float(r.expected_ops) for r in rows]
    assert ops[-1] > ops[3] > ops[0]


def test_speed_and_war():
    slow = project_season_stats(50, 50, 20, rng=make_rng(3))
    fast = project_season_stats(50, 50, 80, rng=make_rng(3))
    assert fast.stolen_bases > slow.stolen_bases
    assert fast.war > slow.war
