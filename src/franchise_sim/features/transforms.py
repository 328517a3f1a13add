from typing import Optional

RATING_MIN = 20
RATING_MAX = 80


def clamp_rating(x: Optional[float], default: int = 50) -> int:
    if x is None:
        return default
    return int(max(RATING_MIN, min(RATING_MAX, round(float(x)))))


def normalize_20_80(x: Optional[float], default: int = 50) -> float:
    """Map a 20-80 scouting rating onto [0,1]; out-of-range input is clamped first."""
    r = clamp_rating(x, default)
    return (r - RATING_MIN) / float(RATING_MAX - RATING_MIN)
