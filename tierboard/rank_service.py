from database import database_startup
from tierboard.config import AROUND_RADIUS, LEADERBOARD_PAGE_SIZE
from tierboard.db_service import DatabaseService
from tierboard.exceptions import DatabaseError
from tierboard.leaderboard import fetch_around, fetch_top, group_by_tier
from tierboard.logger_config import logger
from tierboard.ranks import compute_ranks
from tierboard.sentry_config import setup_sentry


class RankService:
    """Rank and leaderboard lookups for a profile display layer."""

    def __init__(self, db_service):
        self.db_service = db_service

    @classmethod
    def from_env(cls):
        """Builds the service from environment configuration.

        Raises DatabaseError when Firebase does not start.
        """
        setup_sentry()
        db = database_startup()
        if not db:
            logger.error("❌ ERROR: Database did not properly initialize")
            raise DatabaseError("Firestore client could not be created.")
        return cls(DatabaseService(db))

    async def get_user_ranks(self, user_id):
        user = await self.db_service.get_user(user_id)
        return await compute_ranks(
            user.id,
            user.xp,
            user.has_special_title,
            user.level,
            self.db_service.fetch_all_users_descending_by_xp,
        )

    async def get_leaderboard(self, limit=None, offset=0):
        roster = await self.db_service.fetch_all_users_descending_by_xp()
        if limit is None:
            limit = LEADERBOARD_PAGE_SIZE
        return fetch_top(roster, limit=limit, offset=offset)

    async def get_around(self, user_id, radius=None):
        roster = await self.db_service.fetch_all_users_descending_by_xp()
        if radius is None:
            radius = AROUND_RADIUS
        return fetch_around(roster, user_id, radius=radius)

    async def get_tier_groups(self):
        roster = await self.db_service.fetch_all_users_descending_by_xp()
        return group_by_tier(roster)
