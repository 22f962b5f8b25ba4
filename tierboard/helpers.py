# Roster record parsing and small roster utilities shared by the rank
# calculator and the leaderboard views.
import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UserRecord:
    id: str
    xp: int = 0
    level: Optional[int] = None
    has_special_title: bool = False
    display_name: Optional[str] = None


def _to_int(value, default):
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def parse_user_record(doc_id, data) -> UserRecord:
    """Builds a UserRecord from a Firestore users document.

    Missing or malformed fields fall back to xp 0, no level and no title.
    """
    data = data or {}
    display_name = data.get("displayName") or data.get("name")
    if not isinstance(display_name, str):
        display_name = None
    return UserRecord(
        id=str(doc_id),
        xp=_to_int(data.get("xp"), 0),
        level=_to_int(data.get("level"), None),
        has_special_title=data.get("hasMonarchTitle") is True,
        display_name=display_name,
    )


def sort_by_xp(roster):
    """Returns the roster ordered by xp, highest first. Ties keep input order."""
    return sorted(roster, key=lambda u: u.xp, reverse=True)


def position_of(roster, user_id) -> int:
    """1-based position of user_id in roster, or 0 when absent."""
    for i, user in enumerate(roster, 1):
        if user.id == user_id:
            return i
    return 0
