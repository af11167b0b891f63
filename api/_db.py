import logging
import os
import threading

from pymongo import MongoClient

logger = logging.getLogger("api")

SCHOOLS_COLLECTION = "schools"
DEFAULT_DB_NAME = "schools"
DEFAULT_TIMEOUT_MS = 5000

# Reused across invocations for the lifetime of the process
_client = None
_client_lock = threading.Lock()


def get_client() -> MongoClient:
    """Return the process-wide client, connecting on first use.

    Settings are read from the environment at connect time rather than at
    import so runtimes (and tests) can provide them after the module loads.
    """
    global _client
    if _client is not None:
        return _client
    with _client_lock:
        # Another thread may have connected while we waited
        if _client is not None:
            return _client
        uri = os.environ.get('MONGODB_URI', '').strip()
        if not uri:
            raise RuntimeError('MONGODB_URI is not set')
        timeout_ms = int(os.environ.get('MONGODB_TIMEOUT_MS', DEFAULT_TIMEOUT_MS))
        _client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        logger.info("MongoDB client created (timeout_ms=%d)", timeout_ms)
        return _client


def get_database():
    default_name = os.environ.get('MONGODB_DB', DEFAULT_DB_NAME).strip() or DEFAULT_DB_NAME
    return get_client().get_default_database(default=default_name)


def get_schools_collection():
    return get_database()[SCHOOLS_COLLECTION]


def reset_client() -> None:
    """Close and forget the cached client."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
        _client = None
