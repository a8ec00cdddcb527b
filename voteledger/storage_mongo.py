# storage_mongo.py
import logging
from typing import List

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

from voteledger.errors import LedgerUnavailable
from voteledger.models.event_model import Event, event_from_document

logger = logging.getLogger(__name__)


class MongoJournal:
    name = "mongodb"

    def __init__(self, collection):
        """Wrap a MongoDB collection as an append-only event journal"""
        self.collection = collection
        try:
            # One entry per (ledger, sequence); a second writer on the same ledger fails loudly
            self.collection.create_index(
                [("ledger_id", ASCENDING), ("sequence", ASCENDING)], unique=True
            )
        except PyMongoError as e:
            logger.error(f"Failed to prepare event journal collection: {e}")
            raise LedgerUnavailable(f"Event journal unavailable: {e}") from e

    def append(self, event: Event) -> None:
        """
        Insert one event document.

        Raises:
            LedgerUnavailable: the write was not acknowledged by MongoDB
        """
        try:
            result = self.collection.insert_one(event.model_dump())
        except DuplicateKeyError as e:
            logger.error(f"Sequence {event.sequence} already journaled for ledger {event.ledger_id}")
            raise LedgerUnavailable(f"Event journal conflict: {e}") from e
        except PyMongoError as e:
            logger.error(f"Error journaling event {event.sequence} for ledger {event.ledger_id}: {e}")
            raise LedgerUnavailable(f"Event journal unavailable: {e}") from e
        if not result.acknowledged:
            raise LedgerUnavailable("Event journal write was not acknowledged")

    def events(self, ledger_id: str, since: int = 0) -> List[Event]:
        try:
            cursor = self.collection.find(
                {"ledger_id": ledger_id, "sequence": {"$gt": since}}
            ).sort("sequence", ASCENDING)
            return [event_from_document(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error(f"Error reading event journal for ledger {ledger_id}: {e}")
            raise LedgerUnavailable(f"Event journal unavailable: {e}") from e

    def ping(self) -> bool:
        try:
            self.collection.database.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
