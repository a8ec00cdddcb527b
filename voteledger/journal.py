# voteledger/journal.py
import threading
from typing import List

from voteledger.models.event_model import Event


class InMemoryJournal:
    """
    Append-only event journal kept in process memory.
    Swap for storage_mongo.MongoJournal when events must outlive the process.
    """

    name = "memory"

    def __init__(self):
        self._events: List[Event] = []
        self._lock = threading.Lock()

    def append(self, event: Event) -> None:
        with self._lock:
            self._events.append(event)

    def events(self, ledger_id: str, since: int = 0) -> List[Event]:
        """
        Return the events of one ledger with sequence > since, oldest first.
        """
        with self._lock:
            return [
                e for e in self._events
                if e.ledger_id == ledger_id and e.sequence > since
            ]

    def ping(self) -> bool:
        return True
