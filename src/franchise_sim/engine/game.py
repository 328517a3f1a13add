from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..config import DEFAULT_SETTINGS, Settings
from ..features.ratings_adapter import BatterLike, PitcherLike, as_batter, as_pitcher
from ..models.pa_model import PaOutcomeModel
from ..sampler.rng import bounded_normal, make_rng
from ..schemas import BatterRatings, GameResult, PitcherRatings, QuickGameResult, TeamOffenseDefense
from ..utils.fatigue import PitchingStaff
from ..utils.wp import expected_runs, home_win_probability
from .boxscore import TeamBox, assign_decisions
from .half_inning import simulate_half_inning

logger = logging.getLogger(__name__)


def _with_ids(players: List, prefix: str) -> List:
    out = []
    for i, p in enumerate(players, 1):
        out.append(p if p.player_id else p.model_copy(update={"player_id": f"{prefix}{i}"}))
    return out


def _lineup(batters: Sequence[BatterLike], prefix: str) -> List[BatterRatings]:
    return _with_ids([as_batter(b) for b in batters], prefix)


def _staff(pitchers: Sequence[PitcherLike], prefix: str) -> List[PitcherRatings]:
    return _with_ids([as_pitcher(p) for p in pitchers], prefix)


class _Side:
    def __init__(self, lineup: List[BatterRatings], pitchers: List[PitcherRatings], rng: np.random.Generator, settings: Settings):
        if not lineup:
            raise ValueError("each side needs at least one batter")
        self.lineup = lineup
        self.staff = PitchingStaff(pitchers, rng, settings.rules)
        self.box = TeamBox.for_roster([b.player_id for b in lineup], [p.player_id for p in pitchers])
        self.order_idx = 0
        self._appearances = 0

    @property
    def runs(self) -> int:
        return self.box.runs

    def take_the_mound(self, inning: int, lead: int) -> None:
        """Swap pitchers if needed and log the appearance of whoever pitches this half."""
        current_line = self.box.pitchers[self.staff.current.player_id]
        self.staff.maybe_change(current_line.pitch_count)
        line = self.box.pitchers[self.staff.current.player_id]
        if not line.appeared:
            line.enter(inning, lead, self._appearances)
            self._appearances += 1


def simulate_full_game(
    home_batters: Sequence[BatterLike],
    away_batters: Sequence[BatterLike],
    home_pitchers: Sequence[PitcherLike],
    away_pitchers: Sequence[PitcherLike],
    rng: Optional[np.random.Generator] = None,
    settings: Optional[Settings] = None,
    model: Optional[PaOutcomeModel] = None,
) -> GameResult:
    """Play a full game plate appearance by plate appearance.

    Nine innings, more while tied up to ``rules.max_innings``. The home half
    is skipped once the home side leads after the top of the ninth or later,
    and a home half in the ninth or later ends the moment the home side goes
    ahead. A game still level at the cap is returned as a tie with no
    decisions.
    """
    settings = settings or DEFAULT_SETTINGS
    rules = settings.rules
    rng = rng if rng is not None else make_rng()
    model = model or PaOutcomeModel(league=settings.league)

    def distribution(batter, pitcher, gen):
        return model.predict(batter, pitcher, rng=gen)

    home = _Side(_lineup(home_batters, "home-B"), _staff(home_pitchers, "home-P"), rng, settings)
    away = _Side(_lineup(away_batters, "away-B"), _staff(away_pitchers, "away-P"), rng, settings)

    inning = 0
    while True:
        inning += 1

        # Top: away bats, home pitches
        home.take_the_mound(inning, home.runs - away.runs)
        pitcher = home.staff.current
        top = simulate_half_inning(
            away.lineup, away.order_idx, pitcher, away.box.batters, home.box.pitchers[pitcher.player_id],
            distribution, rng, inning=inning, score_differential=away.runs - home.runs,
            max_plate_appearances=rules.max_pa_per_half,
        )
        away.order_idx = top.next_index
        away.box.line_score.append(top.runs)
        home.staff.finish_inning()

        if inning >= rules.regulation_innings and home.runs > away.runs:
            # Home side already ahead: bottom half not played
            break

        # Bottom: home bats, away pitches
        away.take_the_mound(inning, away.runs - home.runs)
        pitcher = away.staff.current
        walk_off_target = (away.runs - home.runs) if inning >= rules.regulation_innings else None
        bottom = simulate_half_inning(
            home.lineup, home.order_idx, pitcher, home.box.batters, away.box.pitchers[pitcher.player_id],
            distribution, rng, inning=inning, score_differential=home.runs - away.runs,
            walk_off_target=walk_off_target, max_plate_appearances=rules.max_pa_per_half,
        )
        home.order_idx = bottom.next_index
        home.box.line_score.append(bottom.runs)
        away.staff.finish_inning()

        if inning >= rules.regulation_innings and home.runs != away.runs:
            break
        if inning >= rules.max_innings:
            logger.debug("Game halted tied at the %d-inning cap", inning)
            break
        if inning >= rules.regulation_innings:
            logger.debug("Extra innings: tied %d-%d after %d", away.runs, home.runs, inning)

    if home.runs > away.runs:
        winner = "home"
        assign_decisions(home.box, away.box, rules.regulation_innings)
    elif away.runs > home.runs:
        winner = "away"
        assign_decisions(away.box, home.box, rules.regulation_innings)
    else:
        winner = "tie"

    return GameResult(
        home_score=home.runs,
        away_score=away.runs,
        winner=winner,
        innings=inning,
        home_line_score=list(home.box.line_score),
        away_line_score=list(away.box.line_score),
        home_batter_stats=[b.snapshot() for b in home.box.batters.values()],
        away_batter_stats=[b.snapshot() for b in away.box.batters.values()],
        home_pitcher_stats=[p.snapshot() for p in home.box.pitchers.values()],
        away_pitcher_stats=[p.snapshot() for p in away.box.pitchers.values()],
    )


def simulate_game_outcome(
    home: TeamOffenseDefense,
    away: TeamOffenseDefense,
    rng: Optional[np.random.Generator] = None,
) -> QuickGameResult:
    """Winner and final score without play-by-play, for bulk schedules."""
    rng = rng if rng is not None else make_rng()
    home_wins = bool(rng.random() < home_win_probability(home, away))

    home_expected = expected_runs(home.offense, away.defense)
    away_expected = expected_runs(away.offense, home.defense)
    home_score = int(round(bounded_normal(rng, home_expected, 2.5, 0, 20)))
    away_score = int(round(bounded_normal(rng, away_expected, 2.5, 0, 20)))

    # The sampled winner always wins; no ties
    if home_wins and home_score <= away_score:
        home_score = away_score + int(rng.integers(1, 4))
    elif not home_wins and away_score <= home_score:
        away_score = home_score + int(rng.integers(1, 4))

    return QuickGameResult(home_wins=home_wins, home_score=home_score, away_score=away_score)
