from __future__ import annotations

from typing import Dict, List, Optional, Tuple

Bases = Dict[str, Optional[str]]

BASE_KEYS = ("1B", "2B", "3B")


def empty_bases() -> Bases:
    return {"1B": None, "2B": None, "3B": None}


def occupancy(bases: Bases) -> List[bool]:
    return [bases.get(k) is not None for k in BASE_KEYS]


def runners_on(bases: Bases) -> int:
    return sum(occupancy(bases))


def advance_on_hit(bases: Bases, advance: int, batter_id: str) -> Tuple[Bases, List[str]]:
    """Move runners for a hit worth ``advance`` bases; returns (new_bases, scored runner ids).

    Runner on 3B always scores. Runner on 2B scores on a double or better,
    otherwise takes third. Runner on 1B scores on a triple or better, takes
    third on a double, otherwise second. A home run clears the bases and
    scores the batter.
    """
    b = dict(bases)
    scored: List[str] = []

    if advance >= 4:
        scored.extend(r for r in (b["3B"], b["2B"], b["1B"]) if r is not None)
        scored.append(batter_id)
        return empty_bases(), scored

    if b["3B"] is not None:
        scored.append(b["3B"])
        b["3B"] = None

    if b["2B"] is not None:
        if advance >= 2:
            scored.append(b["2B"])
        else:
            b["3B"] = b["2B"]
        b["2B"] = None

    if b["1B"] is not None:
        if advance >= 3:
            scored.append(b["1B"])
        elif advance >= 2:
            b["3B"] = b["1B"]
        else:
            b["2B"] = b["1B"]
        b["1B"] = None

    b[BASE_KEYS[max(1, advance) - 1]] = batter_id
    return b, scored


def forced_advance(bases: Bases, batter_id: str) -> Tuple[Bases, List[str]]:
    """Walk / hit-by-pitch: only forced runners move."""
    b = dict(bases)
    scored: List[str] = []
    if b["1B"] is not None:
        if b["2B"] is not None:
            if b["3B"] is not None:
                scored.append(b["3B"])
            b["3B"] = b["2B"]
        b["2B"] = b["1B"]
    b["1B"] = batter_id
    return b, scored
