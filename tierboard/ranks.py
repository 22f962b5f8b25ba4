import inspect
from dataclasses import dataclass

from tierboard.constants import UNRANKED
from tierboard.exceptions import FetchError
from tierboard.helpers import position_of
from tierboard.logger_config import logger
from tierboard.tiers import TierDescriptor, classify_tier


@dataclass(frozen=True)
class RankResult:
    global_rank: int
    tier_rank: int
    tier: TierDescriptor

    @property
    def is_ranked(self) -> bool:
        # 0 means the user is missing from the roster, not first place.
        return self.global_rank != UNRANKED


def rank_in_roster(roster, target_user_id, target_xp, has_special_title, target_level):
    """Ranks a user against a roster already sorted by xp, highest first.

    The target is classified from the values passed in; every other roster
    entry is classified from its own record.
    """
    global_rank = position_of(roster, target_user_id)
    target_tier = classify_tier(target_xp, has_special_title, target_level)
    tier_users = [
        u for u in roster
        if classify_tier(u.xp, u.has_special_title, u.level).key == target_tier.key
    ]
    tier_rank = position_of(tier_users, target_user_id)
    return RankResult(global_rank=global_rank, tier_rank=tier_rank, tier=target_tier)


async def _fetch_roster(roster_fetcher):
    try:
        roster = roster_fetcher()
        if inspect.isawaitable(roster):
            roster = await roster
        return list(roster)
    except FetchError:
        # Already logged by the provider.
        raise
    except Exception as e:
        logger.exception(f"❌ ERROR: roster fetch failed: {e}")
        raise FetchError(f"Roster provider failed: {e}") from e


async def compute_ranks(
    target_user_id,
    target_xp,
    has_special_title,
    target_level,
    roster_fetcher,
) -> RankResult:
    """Computes a user's global rank and rank within their own tier.

    roster_fetcher is called once and must return users sorted by xp,
    highest first. A failed fetch raises FetchError; a user missing from the
    roster gets rank 0 for both fields.
    """
    roster = await _fetch_roster(roster_fetcher)
    result = rank_in_roster(
        roster,
        target_user_id,
        target_xp,
        has_special_title,
        target_level,
    )
    if not result.is_ranked:
        logger.warning(f"⚠️ User {target_user_id} is not on the roster. Unranked.")
    return result
