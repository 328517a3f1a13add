import logging
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field
import yaml

logger = logging.getLogger(__name__)


class LeagueBaselines(BaseModel):
    # Per-PA rates
    batting_avg: float = 0.250
    hr_per_pa: float = 0.030
    bb_per_pa: float = 0.085
    hbp_per_pa: float = 0.010
    k_per_pa: float = 0.220

    # Share of hits that go for two bases
    double_rate: float = 0.22

    # Game structure
    pa_per_game_team: float = 38.0
    runs_per_game: float = 4.5
    era: float = 4.20

    # Base running
    sb_success_rate: float = 0.72
    sb_attempt_rate: float = 0.06

    @property
    def hits_per_pa(self) -> float:
        """League hits per plate appearance (BA over the at-bat share of PAs)."""
        return self.batting_avg * (1.0 - self.bb_per_pa - self.hbp_per_pa)

    # Per-9 figures follow from the per-PA rates so a league-average arm stays on baseline
    @property
    def k_per_9(self) -> float:
        return self.k_per_pa * self.pa_per_game_team

    @property
    def bb_per_9(self) -> float:
        return self.bb_per_pa * self.pa_per_game_team

    @property
    def hr_per_9(self) -> float:
        return self.hr_per_pa * self.pa_per_game_team


class GameRules(BaseModel):
    regulation_innings: int = 9
    max_innings: int = 15
    starter_pitch_limit: int = 100
    max_pa_per_half: int = 50
    reliever_min_innings: int = 1
    reliever_max_innings: int = 2


class SeasonConfig(BaseModel):
    games_by_tier: Dict[str, int] = Field(default_factory=lambda: {
        "LOW_A": 132,
        "HIGH_A": 132,
        "DOUBLE_A": 138,
        "TRIPLE_A": 144,
        "MLB": 162,
    })
    tier_modifiers: Dict[str, float] = Field(default_factory=lambda: {
        "LOW_A": 0.0,
        "HIGH_A": 5.0,
        "DOUBLE_A": 10.0,
        "TRIPLE_A": 15.0,
        "MLB": 20.0,
    })
    top_tier: str = "MLB"
    playoff_teams: int = 4
    coaching_weight: float = 0.15
    morale_weight: float = 0.1


class Settings(BaseModel):
    league: LeagueBaselines = Field(default_factory=LeagueBaselines)
    rules: GameRules = Field(default_factory=GameRules)
    season: SeasonConfig = Field(default_factory=SeasonConfig)


DEFAULT_SETTINGS = Settings()


def load_settings(path: Optional[str] = None) -> Settings:
    """Return engine settings, overlaying a YAML file on the defaults.

    The file mirrors ``config/settings.example.yaml``: top-level ``league``,
    ``rules`` and ``season`` blocks; any block or key may be omitted.
    """
    if path is None:
        return Settings()
    with open(path, "r") as f:
        y = yaml.safe_load(f) or {}
    lg = y.get("league", {}) or {}
    rules = y.get("rules", {}) or {}
    season = y.get("season", {}) or {}
    settings = Settings(
        league=LeagueBaselines(**lg),
        rules=GameRules(**rules),
        season=SeasonConfig(**season),
    )
    logger.debug("Loaded settings from %s", Path(path).resolve())
    return settings
