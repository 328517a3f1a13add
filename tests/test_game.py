import pytest

from franchise_sim.engine.boxscore import PitcherLine, TeamBox, assign_decisions
from franchise_sim.engine.game import simulate_full_game, simulate_game_outcome
from franchise_sim.sampler.rng import make_rng
from franchise_sim.schemas import OutcomeDistribution, TeamOffenseDefense

_ZERO = dict(home_run=0.0, triple=0.0, double=0.0, single=0.0, walk=0.0,
             hit_by_pitch=0.0, strikeout=0.0, ground_out=0.0, fly_out=0.0)


def _only(field):
    probs = dict(_ZERO)
    probs[field] = 1.0
    return OutcomeDistribution(**probs)


class _FixedModel:
    """Hands every batter on a side the same degenerate distribution."""

    def __init__(self, home, away):
        self.home = _only(home)
        self.away = _only(away)

    def predict(self, batter, pitcher=None, rng=None):
        return self.home if batter.player_id.startswith("home") else self.away


def _lineup():
    return [{"contact": 50, "power": 50, "speed": 50} for _ in range(9)]


def _staff(n=5):
    return [{"stuff": 50, "control": 50, "movement": 50} for _ in range(n)]


def test_real_game_terminates_with_consistent_box():
    for seed in range(5):
        g = simulate_full_game(_lineup(), _lineup(), _staff(), _staff(), rng=make_rng(seed))
        assert 9 <= g.innings <= 15
        assert g.home_score == sum(g.home_line_score)
        assert g.away_score == sum(g.away_line_score)
        assert len(g.away_line_score) == g.innings
        assert sum(b.runs for b in g.home_batter_stats) == g.home_score
        assert sum(p.runs_allowed for p in g.home_pitcher_stats) == g.away_score
        if g.winner != "tie":
            assert sum(p.loss for p in g.home_pitcher_stats + g.away_pitcher_stats) == 1
        assert g.home_pitcher_stats[0].player_id == "home-P1"


def test_all_outs_runs_to_the_inning_cap():
    g = simulate_full_game(_lineup(), _lineup(), _staff(), _staff(), rng=make_rng(1),
                           model=_FixedModel("strikeout", "strikeout"))
    assert g.innings == 15 and g.winner == "tie"
    assert g.home_score == g.away_score == 0
    assert not any(p.win or p.loss for p in g.home_pitcher_stats + g.away_pitcher_stats)


def test_all_walks_terminates_through_plate_appearance_cap():
    g = simulate_full_game(_lineup(), _lineup(), _staff(), _staff(), rng=make_rng(2),
                           model=_FixedModel("walk", "walk"))
    assert g.innings == 15 and g.winner == "tie"
    assert g.home_line_score == [47] * 15 and g.away_line_score == [47] * 15


def test_home_lead_skips_the_last_home_half():
    g = simulate_full_game(_lineup(), _lineup(), _staff(), _staff(), rng=make_rng(3),
                           model=_FixedModel("home_run", "strikeout"))
    assert g.winner == "home" and g.innings == 9
    assert len(g.away_line_score) == 9 and len(g.home_line_score) == 8
    assert g.home_score == 400 and g.away_score == 0
    assert sum(b.rbi for b in g.home_batter_stats) == 400

    winners = [p for p in g.home_pitcher_stats if p.win]
    losers = [p for p in g.away_pitcher_stats if p.loss]
    assert len(winners) == 1 and winners[0].player_id == "home-P1"
    assert winners[0].quality_start
    assert len(losers) == 1


def test_one_pitcher_staff_finishes_the_game():
    g = simulate_full_game(_lineup(), _lineup(), _staff(1), _staff(1), rng=make_rng(4))
    assert len(g.home_pitcher_stats) == 1 and len(g.away_pitcher_stats) == 1
    assert g.home_pitcher_stats[0].innings_pitched >= 8


def test_empty_sides_rejected():
    with pytest.raises(ValueError):
        simulate_full_game([], _lineup(), _staff(), _staff(), rng=make_rng(5))
    with pytest.raises(ValueError):
        simulate_full_game(_lineup(), _lineup(), [], _staff(), rng=make_rng(5))


def _line(pid, ip, runs, order, inning, lead):
    line = PitcherLine(pid, innings_pitched=ip)
    line.charge_runs(runs)
    line.enter(inning, lead, order)
    return line


def _box(*lines):
    return TeamBox(pitchers={p.player_id: p for p in lines})


def test_decisions_win_hold_save():
    starter = _line("w1", 7.0, 2, 0, 1, 0)
    setup = _line("w2", 1.0, 0, 1, 8, 2)
    closer = _line("w3", 1.0, 1, 2, 9, 2)
    loser = _line("l1", 8.0, 3, 0, 1, 0)
    assign_decisions(_box(starter, setup, closer), _box(loser))
    assert starter.win and starter.quality_start
    assert setup.hold and not setup.save
    assert closer.save and not closer.hold
    assert loser.loss and not loser.quality_start


def test_short_start_gets_no_win():
    starter = _line("w1", 4.0, 1, 0, 1, 0)
    long_man = _line("w2", 3.0, 0, 1, 5, 1)
    closer = _line("w3", 2.0, 0, 2, 8, 1)
    loser = _line("l1", 9.0, 4, 0, 1, 0)
    assign_decisions(_box(starter, long_man, closer), _box(loser))
    assert not any(p.win for p in (starter, long_man, closer))
    assert loser.loss
    # entered in the eighth: not a save situation
    assert not closer.save
    assert long_man.hold


def test_blown_lead_reliever_gets_no_save():
    starter = _line("w1", 8.0, 3, 0, 1, 0)
    closer = _line("w3", 1.0, 2, 1, 9, 2)
    assign_decisions(_box(starter, closer), _box(_line("l1", 8.0, 2, 0, 1, 0)))
    assert starter.win and starter.quality_start
    assert not closer.save


def test_quick_game_has_no_ties():
    home = TeamOffenseDefense(offense=55, defense=50)
    away = TeamOffenseDefense(offense=50, defense=55)
    for seed in range(200):
        r = simulate_game_outcome(home, away, rng=make_rng(seed))
        assert r.home_score != r.away_score
        assert r.home_wins == (r.home_score > r.away_score)
        assert 0 <= min(r.home_score, r.away_score)
