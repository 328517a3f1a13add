from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .features.transforms import clamp_rating

Tier = Literal["LOW_A", "HIGH_A", "DOUBLE_A", "TRIPLE_A", "MLB"]
Role = Literal["HITTER", "PITCHER"]
Winner = Literal["home", "away", "tie"]
EliminationRound = Literal["divisional", "championship", "title_series"]


class Outcome(str, Enum):
    HOME_RUN = "HOME_RUN"
    TRIPLE = "TRIPLE"
    DOUBLE = "DOUBLE"
    SINGLE = "SINGLE"
    WALK = "WALK"
    HIT_BY_PITCH = "HIT_BY_PITCH"
    STRIKEOUT = "STRIKEOUT"
    GROUND_OUT = "GROUND_OUT"
    FLY_OUT = "FLY_OUT"


# Sampler priority order; FLY_OUT is the catch-all.
OUTCOME_ORDER = [
    Outcome.HOME_RUN,
    Outcome.TRIPLE,
    Outcome.DOUBLE,
    Outcome.SINGLE,
    Outcome.WALK,
    Outcome.HIT_BY_PITCH,
    Outcome.STRIKEOUT,
    Outcome.GROUND_OUT,
    Outcome.FLY_OUT,
]


# Ratings (20-80 scale, clamped rather than rejected)
class BatterRatings(BaseModel):
    player_id: Optional[str] = None
    contact: int = 50
    power: int = 50
    speed: int = 50
    discipline: int = 50

    @field_validator("contact", "power", "speed", "discipline", mode="before")
    @classmethod
    def _clamp(cls, v):
        return clamp_rating(v)


class PitcherRatings(BaseModel):
    player_id: Optional[str] = None
    stuff: int = 50
    control: int = 50
    movement: int = 50

    @field_validator("stuff", "control", "movement", mode="before")
    @classmethod
    def _clamp(cls, v):
        return clamp_rating(v)


class OutcomeDistribution(BaseModel):
    """Per-PA outcome probabilities.

    Built additively and floored per category; the values are deliberately
    not renormalized, so ``total()`` may drift slightly from 1.0.
    """

    model_config = ConfigDict(frozen=True)

    home_run: float
    triple: float
    double: float
    single: float
    walk: float
    hit_by_pitch: float
    strikeout: float
    ground_out: float
    fly_out: float

    def as_dict(self) -> Dict[Outcome, float]:
        return {
            Outcome.HOME_RUN: self.home_run,
            Outcome.TRIPLE: self.triple,
            Outcome.DOUBLE: self.double,
            Outcome.SINGLE: self.single,
            Outcome.WALK: self.walk,
            Outcome.HIT_BY_PITCH: self.hit_by_pitch,
            Outcome.STRIKEOUT: self.strikeout,
            Outcome.GROUND_OUT: self.ground_out,
            Outcome.FLY_OUT: self.fly_out,
        }

    def hits(self) -> float:
        return self.home_run + self.triple + self.double + self.single

    def on_base(self) -> float:
        return self.hits() + self.walk + self.hit_by_pitch

    def total(self) -> float:
        return float(sum(self.as_dict().values()))


class PitcherEffectiveness(BaseModel):
    model_config = ConfigDict(frozen=True)

    opp_batting_avg: float
    opp_on_base_pct: float
    strikeouts_per_9: float
    walks_per_9: float
    home_runs_per_9: float
    era: float


class PlateAppearanceOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Outcome
    bases_advanced: int
    is_hit: bool
    is_out: bool
    rbi_potential: int


class GameContext(BaseModel):
    runners_on_base: int = 0
    outs: int = 0
    inning: int = 1
    score_differential: int = 0


# Box score snapshots
class BatterGameStats(BaseModel):
    model_config = ConfigDict(frozen=True)

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


class PitcherGameStats(BaseModel):
    model_config = ConfigDict(frozen=True)

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


class GameResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_score: int
    away_score: int
    winner: Winner
    innings: int
    home_line_score: List[int]
    away_line_score: List[int]
    home_batter_stats: List[BatterGameStats]
    away_batter_stats: List[BatterGameStats]
    home_pitcher_stats: List[PitcherGameStats]
    away_pitcher_stats: List[PitcherGameStats]


class QuickGameResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_wins: bool
    home_score: int
    away_score: int


# Team / season records
class TeamOffenseDefense(BaseModel):
    offense: float
    defense: float


class RosterPlayer(BaseModel):
    player_id: str
    role: Role
    rating: float
    morale: float = 50.0
    is_injured: bool = False
    is_on_roster: bool = True


class AITeam(BaseModel):
    team_id: str
    name: str
    base_strength: float
    variance_multiplier: float = 1.0


class SeasonRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    wins: int
    losses: int
    win_pct: float


class TeamStanding(BaseModel):
    model_config = ConfigDict(frozen=True)

    team_id: str
    name: str
    wins: int
    losses: int
    win_pct: float
    strength: float


class StandingsResult(BaseModel):
    standings: List[TeamStanding]
    player_rank: int
    made_playoffs: bool
    won_division: bool


class PlayoffResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    won_championship: bool
    won_top_title: bool
    elimination_round: Optional[EliminationRound] = None


class AttendanceResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_attendance: int
    total_attendance: int


class SeasonInput(BaseModel):
    players: List[RosterPlayer]
    hitting_coach_skill: float = 50.0
    pitching_coach_skill: float = 50.0
    tier: Tier = "LOW_A"
    stadium_capacity: int
    stadium_quality: float = 50.0
    city_pride: float = 50.0
    unemployment_rate: float = 5.0
    ai_teams: List[AITeam]
    fan_multiplier: float = 1.0


class SeasonResult(BaseModel):
    wins: int
    losses: int
    win_pct: float
    team_strength: float
    standings: List[TeamStanding]
    division_rank: int
    made_playoffs: bool
    won_division: bool
    playoffs: PlayoffResult
    avg_attendance: int
    total_attendance: int


# Calibration
class SeasonProjection(BaseModel):
    model_config = ConfigDict(frozen=True)

    games: int
    plate_appearances: int
    at_bats: int
    hits: int
    doubles: int
    triples: int
    home_runs: int
    runs: int
    rbi: int
    walks: int
    strikeouts: int
    stolen_bases: int
    batting_avg: float
    obp: float
    slg: float
    ops: float
    war: float


class RatingValidation(BaseModel):
    rating: int
    expected_ba: str
    expected_hr: int
    expected_ops: str
    player_type: str = Field(..., description="Scouting label for the rating band")
