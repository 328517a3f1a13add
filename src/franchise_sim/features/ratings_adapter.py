from typing import Any, Dict, Union

from ..schemas import BatterRatings, PitcherRatings
from .transforms import normalize_20_80

BatterLike = Union[BatterRatings, Dict[str, Any]]
PitcherLike = Union[PitcherRatings, Dict[str, Any]]


def as_batter(b: BatterLike) -> BatterRatings:
    if isinstance(b, BatterRatings):
        return b
    # Accept nested {"ratings": {...}} records as well as flat ones
    r = dict(b.get("ratings") or {}) if "ratings" in b else dict(b)
    if "player_id" in b:
        r["player_id"] = b["player_id"]
    return BatterRatings(**r)


def as_pitcher(p: PitcherLike) -> PitcherRatings:
    if isinstance(p, PitcherRatings):
        return p
    r = dict(p.get("ratings") or {}) if "ratings" in p else dict(p)
    if "player_id" in p:
        r["player_id"] = p["player_id"]
    return PitcherRatings(**r)


def batter_features(b: BatterLike) -> Dict[str, float]:
    r = as_batter(b)
    return {
        "contact": normalize_20_80(r.contact),
        "power":   normalize_20_80(r.power),
        "speed":   normalize_20_80(r.speed),
        "eye":     normalize_20_80(r.discipline),  # unknown discipline defaults to 50
    }


def pitcher_features(p: PitcherLike) -> Dict[str, float]:
    r = as_pitcher(p)
    return {
        "stuff":    normalize_20_80(r.stuff),
        "control":  normalize_20_80(r.control),
        "movement": normalize_20_80(r.movement),
    }
