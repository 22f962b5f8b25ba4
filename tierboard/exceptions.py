class TierboardError(Exception):
    """Base exception for all ranking errors."""
    def __init__(self, message: str = "An unexpected error occurred."):
        self.message = message
        super().__init__(self.message)

class DatabaseError(TierboardError):
    """Base exception for all Firestore related errors."""
    def __init__(self, detail: str = "Failed to read database records."):
        prefix = "💾 **Database Error:**"
        self.message = f"{prefix} {detail}"
        super().__init__(self.message)

class FetchError(DatabaseError):
    """Raised when the user roster could not be fetched.

    Distinct from a user being absent from the roster, which is not an error.
    """
    def __init__(self, detail: str = "Failed to fetch the user roster."):
        prefix = "📡 **Roster Fetch Error:**"
        self.message = f"{prefix} {detail}"
        # Bypass DatabaseError so its prefix is not added twice.
        TierboardError.__init__(self, self.message)

class UserNotFoundError(TierboardError):
    """Raised when a single user lookup finds no document."""
    def __init__(self, detail: str = "User not found."):
        prefix = "🔍 **Search Error:**"
        self.message = f"{prefix} {detail}"
        super().__init__(self.message)

class UnknownTierError(TierboardError):
    """Raised when a tier key does not name any tier."""
    def __init__(self, detail: str = "Unknown tier."):
        prefix = "🏷️ **Tier Error:**"
        self.message = f"{prefix} {detail}"
        super().__init__(self.message)
