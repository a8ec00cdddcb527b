from pymongo import MongoClient

from voteledger.config import MONGO_URI, MONGO_DB_NAME, EVENTS_COLLECTION_NAME, MONGO_TIMEOUT_MS

_client = None


def get_client() -> MongoClient:
    global _client
    if not MONGO_URI:
        raise ValueError("MONGO_URI not set. Check your .env file location.")
    if _client is None:
        _client = MongoClient(
            MONGO_URI,
            tz_aware=True,
            serverSelectionTimeoutMS=MONGO_TIMEOUT_MS,
            connectTimeoutMS=MONGO_TIMEOUT_MS,
            socketTimeoutMS=MONGO_TIMEOUT_MS,
        )
    return _client


def get_events_collection():
    return get_client()[MONGO_DB_NAME][EVENTS_COLLECTION_NAME]
