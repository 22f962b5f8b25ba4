"""Tier classification.

Tiers are declared top first in ``Tier``. The top tier (Monarch) is gated by
level and title instead of xp; every other tier is reached by xp alone.
"""
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional

from tierboard.constants import MONARCH_MAX_USERS, MONARCH_REQUIRED_LEVEL, TIER_TABLE
from tierboard.exceptions import UnknownTierError


@total_ordering
class Tier(Enum):
    MONARCH = TIER_TABLE[0]
    NATIONAL_RANKER = TIER_TABLE[1]
    S = TIER_TABLE[2]
    A = TIER_TABLE[3]
    B = TIER_TABLE[4]
    C = TIER_TABLE[5]
    D = TIER_TABLE[6]
    E = TIER_TABLE[7]

    def __init__(self, key, min_xp, color):
        self.key = key
        self.min_xp = min_xp
        self.color = color

    @property
    def position(self) -> int:
        """0 for the top tier, increasing downwards."""
        return _ORDERED.index(self)

    @property
    def is_top(self) -> bool:
        return self is _ORDERED[0]

    @property
    def above(self) -> Optional["Tier"]:
        if self.is_top:
            return None
        return _ORDERED[self.position - 1]

    def __lt__(self, other):
        if not isinstance(other, Tier):
            return NotImplemented
        return self.position > other.position


_ORDERED = list(Tier)
TIERS_ORDER = [t.key for t in _ORDERED]
TOP_TIER = _ORDERED[0]
LOWEST_TIER = _ORDERED[-1]


@dataclass(frozen=True)
class TierDescriptor:
    tier: Tier
    key: str
    min_threshold: int
    next_threshold_min: Optional[int]
    color: str
    requires_title: bool = False
    requires_level: Optional[int] = None
    max_users: Optional[int] = None


def get_tier(key) -> Tier:
    """Resolves a tier from its key, ignoring case and surrounding whitespace."""
    if isinstance(key, Tier):
        return key
    if isinstance(key, str):
        wanted = key.strip().lower()
        for tier in _ORDERED:
            if tier.key.lower() == wanted:
                return tier
    raise UnknownTierError(f"'{key}' is not a tier. Tiers: {', '.join(TIERS_ORDER)}.")


def _describe(tier: Tier, next_threshold_min) -> TierDescriptor:
    if tier.is_top:
        return TierDescriptor(
            tier=tier,
            key=tier.key,
            min_threshold=tier.min_xp,
            next_threshold_min=None,
            color=tier.color,
            requires_title=True,
            requires_level=MONARCH_REQUIRED_LEVEL,
            max_users=MONARCH_MAX_USERS,
        )
    return TierDescriptor(
        tier=tier,
        key=tier.key,
        min_threshold=tier.min_xp,
        next_threshold_min=next_threshold_min,
        color=tier.color,
    )


def _fallback() -> TierDescriptor:
    return _describe(LOWEST_TIER, None)


def _valid_xp(xp) -> bool:
    return isinstance(xp, (int, float)) and not isinstance(xp, bool) and xp >= 0


def _normalize_level(level):
    """Returns (valid, level), turning whole floats like 100.0 into ints."""
    if level is None:
        return True, None
    if isinstance(level, bool):
        return False, None
    if isinstance(level, int):
        return True, level
    if isinstance(level, float) and level.is_integer():
        return True, int(level)
    return False, None


def classify_tier(xp=0, has_special_title=False, level=None) -> TierDescriptor:
    """Returns the tier a user belongs to.

    Monarch is granted only to level 100 users holding the special title, no
    matter their xp. Anyone else lands in the highest ordinary tier whose
    threshold their xp reaches, even when that xp is above Monarch's nominal
    threshold. Invalid input (negative or non-numeric xp, a level that is not
    a whole number) gets the lowest tier with no next threshold.
    """
    level_ok, level = _normalize_level(level)
    if not _valid_xp(xp) or not level_ok:
        return _fallback()
    for tier in _ORDERED:
        if tier.is_top:
            if level == MONARCH_REQUIRED_LEVEL and has_special_title is True:
                return _describe(tier, None)
            continue
        if xp >= tier.min_xp:
            return _describe(tier, tier.above.min_xp)
    return _fallback()


def tier_progress(xp=0, has_special_title=False, level=None) -> float:
    """Progress through the current tier towards the next one, from 0 to 1."""
    tier = classify_tier(xp, has_special_title, level)
    if tier.next_threshold_min is None:
        return 1.0
    span = tier.next_threshold_min - tier.min_threshold
    if span <= 0:
        return 1.0
    return max(0.0, min(1.0, (xp - tier.min_threshold) / span))
