from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..schemas import BatterGameStats, Outcome, PitcherGameStats, PlateAppearanceOutcome

_HIT_FIELDS = {
    Outcome.SINGLE: "singles",
    Outcome.DOUBLE: "doubles",
    Outcome.TRIPLE: "triples",
    Outcome.HOME_RUN: "home_runs",
}


@dataclass
class BatterLine:
    player_id: str
    plate_appearances: int = 0
    at_bats: int = 0
    hits: int = 0
    singles: int = 0
    doubles: int = 0
    triples: int = 0
    home_runs: int = 0
    runs: int = 0
    rbi: int = 0
    walks: int = 0
    strikeouts: int = 0
    hit_by_pitch: int = 0

    def record(self, pa: PlateAppearanceOutcome, rbi: int) -> None:
        self.plate_appearances += 1
        self.rbi += rbi
        if pa.type == Outcome.WALK:
            self.walks += 1
            return
        if pa.type == Outcome.HIT_BY_PITCH:
            self.hit_by_pitch += 1
            return
        self.at_bats += 1
        if pa.type == Outcome.STRIKEOUT:
            self.strikeouts += 1
        if pa.is_hit:
            self.hits += 1
            name = _HIT_FIELDS[pa.type]
            setattr(self, name, getattr(self, name) + 1)

    def snapshot(self) -> BatterGameStats:
        return BatterGameStats(**self.__dict__)


@dataclass
class PitcherLine:
    player_id: str
    innings_pitched: float = 0.0
    batters_faced: int = 0
    hits_allowed: int = 0
    runs_allowed: int = 0
    earned_runs: int = 0
    walks: int = 0
    strikeouts: int = 0
    home_runs_allowed: int = 0
    pitch_count: int = 0
    quality_start: bool = False
    win: bool = False
    loss: bool = False
    save: bool = False
    hold: bool = False
    # appearance context for save/hold decisions
    entered_inning: Optional[int] = None
    entered_lead: int = 0
    appearance_order: int = 0

    @property
    def appeared(self) -> bool:
        return self.entered_inning is not None

    def enter(self, inning: int, lead: int, order: int) -> None:
        if self.entered_inning is None:
            self.entered_inning = inning
            self.entered_lead = lead
            self.appearance_order = order

    def record(self, pa: PlateAppearanceOutcome, pitches: int) -> None:
        self.batters_faced += 1
        self.pitch_count += pitches
        if pa.is_hit:
            self.hits_allowed += 1
        if pa.type == Outcome.HOME_RUN:
            self.home_runs_allowed += 1
        elif pa.type == Outcome.WALK:
            self.walks += 1
        elif pa.type == Outcome.STRIKEOUT:
            self.strikeouts += 1

    def charge_runs(self, runs: int) -> None:
        # All runs are treated as earned
        self.runs_allowed += runs
        self.earned_runs += runs

    def snapshot(self) -> PitcherGameStats:
        return PitcherGameStats(
            player_id=self.player_id,
            innings_pitched=round(self.innings_pitched, 3),
            batters_faced=self.batters_faced,
            hits_allowed=self.hits_allowed,
            runs_allowed=self.runs_allowed,
            earned_runs=self.earned_runs,
            walks=self.walks,
            strikeouts=self.strikeouts,
            home_runs_allowed=self.home_runs_allowed,
            pitch_count=self.pitch_count,
            quality_start=self.quality_start,
            win=self.win,
            loss=self.loss,
            save=self.save,
            hold=self.hold,
        )


@dataclass
class TeamBox:
    batters: Dict[str, BatterLine] = field(default_factory=dict)
    pitchers: Dict[str, PitcherLine] = field(default_factory=dict)
    line_score: List[int] = field(default_factory=list)

    @classmethod
    def for_roster(cls, batter_ids: List[str], pitcher_ids: List[str]) -> "TeamBox":
        return cls(
            batters={pid: BatterLine(pid) for pid in batter_ids},
            pitchers={pid: PitcherLine(pid) for pid in pitcher_ids},
        )

    @property
    def runs(self) -> int:
        return sum(self.line_score)


def _starter(lines: List[PitcherLine]) -> PitcherLine:
    # Most innings pitched; ties go to whoever appeared first
    return max(lines, key=lambda p: (p.innings_pitched, -p.appearance_order))


def assign_decisions(winner: TeamBox, loser: TeamBox, regulation_innings: int = 9) -> None:
    """Win/loss/save/hold assignment for a decided game."""
    win_staff = [p for p in winner.pitchers.values() if p.appeared]
    lose_staff = [p for p in loser.pitchers.values() if p.appeared]
    if not win_staff or not lose_staff:
        return

    win_starter = _starter(win_staff)
    lose_starter = _starter(lose_staff)

    # No reliever win is modeled when the starter falls short of five innings
    if win_starter.innings_pitched >= 5:
        win_starter.win = True
        win_starter.quality_start = win_starter.innings_pitched >= 6 and win_starter.earned_runs <= 3
    lose_starter.loss = True

    finisher = max(win_staff, key=lambda p: p.appearance_order)
    if finisher is win_starter:
        return
    if finisher.entered_inning >= regulation_innings and finisher.entered_lead > 0 and finisher.runs_allowed <= 1:
        finisher.save = True
    for p in win_staff:
        if p is win_starter or p is finisher:
            continue
        if p.entered_lead > 0 and p.runs_allowed == 0:
            p.hold = True
