import base64
import json
import os

import firebase_admin
from firebase_admin import credentials, firestore

from tierboard.logger_config import logger


def _load_credentials():
    b64_creds = os.getenv("FIREBASE_CREDENTIALS_BASE64")
    if b64_creds:
        b64_creds = b64_creds.strip()
        missing_padding = len(b64_creds) % 4
        if missing_padding:
            b64_creds += "=" * (4 - missing_padding)
        cred_info = json.loads(base64.b64decode(b64_creds).decode("utf-8"))
        return credentials.Certificate(cred_info)
    cred_path = os.getenv("FIREBASE_CREDENTIALS_PATH")
    if cred_path:
        return credentials.Certificate(cred_path)
    return None


def database_startup():
    """Returns a Firestore client, or None when Firebase cannot start."""
    if firebase_admin._apps:
        return firestore.client()
    try:
        cred = _load_credentials()
        if cred is None:
            logger.error("❌ ERROR: No Firebase credentials found.")
            return None
        firebase_admin.initialize_app(cred)
        logger.info("✅ Firebase initialized successfully!")
        return firestore.client()
    except Exception as e:
        logger.exception(f"❌ ERROR: initializing Firebase: {e}")
        return None
