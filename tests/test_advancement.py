import itertools

from franchise_sim.models.advancement_model import advance_on_hit, empty_bases, forced_advance, runners_on


def _bases(b1=None, b2=None, b3=None):
    return {"1B": b1, "2B": b2, "3B": b3}


def _all_states():
    for on1, on2, on3 in itertools.product((False, True), repeat=3):
        yield _bases("R1" if on1 else None, "R2" if on2 else None, "R3" if on3 else None)


def test_runner_conservation_on_hits():
    for bases in _all_states():
        for adv in (1, 2, 3, 4):
            after, scored = advance_on_hit(bases, adv, "B")
            assert runners_on(bases) + 1 == runners_on(after) + len(scored)


def test_runner_conservation_on_walks():
    for bases in _all_states():
        after, scored = forced_advance(bases, "B")
        assert runners_on(bases) + 1 == runners_on(after) + len(scored)
        assert after["1B"] == "B"


def test_single_moves_runners_one_base_and_scores_third():
    after, scored = advance_on_hit(_bases("R1", "R2", "R3"), 1, "B")
    assert scored == ["R3"]
    assert after == _bases("B", "R1", "R2")


def test_double_scores_second_and_sends_first_to_third():
    after, scored = advance_on_hit(_bases("R1", "R2"), 2, "B")
    assert scored == ["R2"]
    assert after == _bases(None, "B", "R1")


def test_triple_clears_bases_but_batter_stays():
    after, scored = advance_on_hit(_bases("R1", "R2", "R3"), 3, "B")
    assert sorted(scored) == ["R1", "R2", "R3"]
    assert after == _bases(None, None, "B")


def test_home_run_clears_everything():
    after, scored = advance_on_hit(_bases("R1", None, "R3"), 4, "B")
    assert set(scored) == {"R1", "R3", "B"}
    assert after == empty_bases()


def test_walk_only_moves_forced_runners():
    after, scored = forced_advance(_bases(None, "R2"), "B")
    assert scored == [] and after == _bases("B", "R2")
    after, scored = forced_advance(_bases("R1", "R2", "R3"), "B")
    assert scored == ["R3"] and after == _bases("B", "R1", "R2")
