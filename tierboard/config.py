import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Firestore

USERS_COLLECTION = os.getenv("USERS_COLLECTION", "users")

# Leaderboard defaults

LEADERBOARD_PAGE_SIZE = _env_int("LEADERBOARD_PAGE_SIZE", 50)
AROUND_RADIUS = _env_int("AROUND_RADIUS", 5)

# Logging / Sentry

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ENV = os.getenv("ENV", "development")
SENTRY_TRACES_SAMPLE_RATE = _env_float("SENTRY_TRACES_SAMPLE_RATE", 1.0)
