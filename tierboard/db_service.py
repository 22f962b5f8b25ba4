from google.cloud.firestore import Query

from tierboard.config import USERS_COLLECTION
from tierboard.exceptions import DatabaseError, FetchError, UserNotFoundError
from tierboard.helpers import parse_user_record
from tierboard.logger_config import logger


class DatabaseService:
    """Service layer for Firestore user reads."""

    def __init__(self, db, collection=USERS_COLLECTION):
        self.db = db
        self.collection = collection

    async def fetch_all_users_descending_by_xp(self):
        """Roster of every user, highest xp first."""
        try:
            docs = (
                self.db.collection(self.collection)
                .order_by("xp", direction=Query.DESCENDING)
                .stream()
            )
            roster = [parse_user_record(doc.id, doc.to_dict()) for doc in docs]
        except Exception as e:
            logger.exception(f"❌ ERROR: failed to fetch roster from {self.collection}")
            raise FetchError(
                f"Could not read collection '{self.collection}': {e}",
            ) from e
        logger.info(f"📋 Fetched roster of {len(roster)} users.")
        return roster

    async def get_user(self, user_id):
        doc_ref = self.db.collection(self.collection).document(str(user_id))
        try:
            doc = doc_ref.get()
        except Exception as e:
            logger.exception(f"❌ ERROR: failed to read user {user_id}")
            raise DatabaseError(
                f"Database read failed for user {user_id}: {e}",
            ) from e
        if not doc.exists:
            raise UserNotFoundError(f"User {user_id} does not exist.")
        return parse_user_record(doc.id, doc.to_dict())
