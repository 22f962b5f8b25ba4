import logging
import os

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from tierboard.config import ENV, SENTRY_TRACES_SAMPLE_RATE

logger = logging.getLogger(__name__)


def setup_sentry():
    """Starts Sentry error reporting when SENTRY_DSN is configured.

    Returns True when Sentry is active after the call.
    """
    if sentry_sdk.is_initialized():
        return True
    dsn = os.getenv("SENTRY_DSN")
    if not dsn:
        logger.warning("⚠️ SENTRY_DSN not found. Sentry is DISABLED.")
        return False
    sentry_logging = LoggingIntegration(
        level=logging.INFO,
        event_level=logging.ERROR,
    )
    try:
        sentry_sdk.init(
            dsn=dsn,
            integrations=[sentry_logging],
            traces_sample_rate=SENTRY_TRACES_SAMPLE_RATE,
            attach_stacktrace=True,
            environment=ENV,
        )
        logger.info(f"✅ Sentry tracking initialized in {ENV} mode.")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to initialize Sentry: {e}")
        return False
