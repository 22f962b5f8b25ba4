from dataclasses import dataclass, field
from typing import List, Optional

from tierboard.constants import UNRANKED
from tierboard.helpers import UserRecord, position_of, sort_by_xp
from tierboard.tiers import Tier, TierDescriptor, classify_tier

# Leaderboard views over a roster snapshot. Every view re-sorts its input by
# xp, so callers may pass the roster in any order.


@dataclass(frozen=True)
class LeaderboardEntry:
    position: int
    user: UserRecord
    tier: TierDescriptor


@dataclass(frozen=True)
class LeaderboardPage:
    entries: List[LeaderboardEntry]
    total: int
    offset: int


@dataclass(frozen=True)
class AroundResult:
    entries: List[LeaderboardEntry]
    rank: int
    total: int
    start_index: int


@dataclass(frozen=True)
class UserRank:
    rank: int
    xp: int
    total: int


@dataclass
class TierGroup:
    tier: Tier
    users: List[UserRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.users)

    @property
    def top(self) -> Optional[UserRecord]:
        return self.users[0] if self.users else None


def _check_non_negative(**values):
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def _entry(position, user):
    return LeaderboardEntry(
        position=position,
        user=user,
        tier=classify_tier(user.xp, user.has_special_title, user.level),
    )


def fetch_top(roster, limit=50, offset=0) -> LeaderboardPage:
    """One page of the leaderboard, starting after `offset` users."""
    _check_non_negative(limit=limit, offset=offset)
    ordered = sort_by_xp(roster)
    window = ordered[offset:offset + limit]
    entries = [_entry(offset + i, u) for i, u in enumerate(window, 1)]
    return LeaderboardPage(entries=entries, total=len(ordered), offset=offset)


def fetch_around(roster, user_id, radius=5) -> AroundResult:
    """The user plus up to `radius` neighbours on each side."""
    _check_non_negative(radius=radius)
    ordered = sort_by_xp(roster)
    rank = position_of(ordered, user_id)
    if rank == UNRANKED:
        return AroundResult(entries=[], rank=UNRANKED, total=len(ordered), start_index=0)
    idx = rank - 1
    start = max(0, idx - radius)
    end = min(len(ordered), idx + radius + 1)
    entries = [_entry(start + i, u) for i, u in enumerate(ordered[start:end], 1)]
    return AroundResult(entries=entries, rank=rank, total=len(ordered), start_index=start)


def fetch_user_rank(roster, user_id) -> UserRank:
    ordered = sort_by_xp(roster)
    rank = position_of(ordered, user_id)
    if rank == UNRANKED:
        return UserRank(rank=UNRANKED, xp=0, total=len(ordered))
    return UserRank(rank=rank, xp=ordered[rank - 1].xp, total=len(ordered))


def group_by_tier(roster) -> List[TierGroup]:
    """Groups users by tier, top tier first. Empty tiers are left out."""
    groups = {tier: TierGroup(tier=tier) for tier in Tier}
    for user in sort_by_xp(roster):
        tier = classify_tier(user.xp, user.has_special_title, user.level).tier
        groups[tier].users.append(user)
    return [g for g in groups.values() if g.count > 0]
