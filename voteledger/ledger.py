# voteledger/ledger.py
"""The voting ledger state machine.

Owns the candidate list and the set of voters who have voted. Every
operation runs under one lock; a mutation is validated, journaled and only
then applied, so a rejected or unjournaled operation leaves no trace.

Policies:
    * A candidate name made only of whitespace counts as empty. Accepted names
      are stored exactly as given.
    * ``vote`` checks "already voted" before the candidate index.
    * ``get_winner`` breaks ties in favour of the lowest index.
"""
import logging
import threading
import uuid
from collections import deque
from typing import Callable, List, Optional, Set, Tuple

from voteledger.errors import (
    AlreadyVoted,
    InvalidCandidateIndex,
    InvalidInput,
    NoCandidates,
    Unauthorized,
)
from voteledger.journal import InMemoryJournal
from voteledger.models.candidate_model import Candidate
from voteledger.models.event_model import CandidateAdded, Event, Voted
from voteledger.security import AuthorizationGuard

logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


class VotingLedger:

    def __init__(self, admin_identity: str, journal=None, ledger_id: Optional[str] = None):
        self.guard = AuthorizationGuard(admin_identity)
        self.journal = journal if journal is not None else InMemoryJournal()
        self.ledger_id = ledger_id or uuid.uuid4().hex
        self._candidates: List[Candidate] = []
        self._voters: Set[str] = set()
        self._sequence = 0
        self._listeners: List[Listener] = []
        self._pending = deque()
        self._lock = threading.Lock()
        self._delivery_lock = threading.RLock()

        journaled = self.journal.events(self.ledger_id)
        if journaled:
            raise ValueError(
                f"Ledger id {self.ledger_id!r} already has {len(journaled)} journaled events; "
                "start the ledger with a new id"
            )
        logger.info(f"Ledger {self.ledger_id} created (journal: {self.journal.name})")

    @property
    def admin_identity(self) -> str:
        return self.guard.admin_identity

    def is_authorized(self, caller_identity: str) -> bool:
        return self.guard.is_authorized(caller_identity)

    # --- Mutations ---

    def add_candidate(self, caller_identity: str, name: str) -> int:
        """Register a candidate and return its index.

        Raises:
            Unauthorized: caller is not the administrator
            InvalidInput: name is empty or whitespace only
            LedgerUnavailable: the event could not be journaled
        """
        with self._lock:
            if not self.guard.is_authorized(caller_identity):
                logger.warning(f"Rejected add_candidate from {caller_identity!r}: not the administrator")
                raise Unauthorized(caller_identity)
            if not isinstance(name, str) or not name.strip():
                logger.warning("Rejected add_candidate: empty candidate name")
                raise InvalidInput("Candidate name cannot be empty")

            index = len(self._candidates)
            event = CandidateAdded(
                sequence=self._sequence + 1,
                ledger_id=self.ledger_id,
                name=name,
                index=index,
            )
            self.journal.append(event)

            self._sequence = event.sequence
            self._candidates.append(Candidate(index=index, name=name, vote_count=0))
            self._pending.append(event)

        logger.info(f"Candidate {name!r} added at index {index}")
        self._deliver()
        return index

    def vote(self, voter_identity: str, candidate_index: int) -> None:
        """Record one vote.

        Raises:
            InvalidInput: voter identity is blank
            AlreadyVoted: this identity has voted before (checked first)
            InvalidCandidateIndex: index is not in [0, number of candidates)
            LedgerUnavailable: the event could not be journaled
        """
        if not isinstance(voter_identity, str) or not voter_identity.strip():
            raise InvalidInput("Voter identity cannot be empty")

        with self._lock:
            if voter_identity in self._voters:
                logger.warning(f"Rejected vote from {voter_identity!r}: already voted")
                raise AlreadyVoted(voter_identity)
            count = len(self._candidates)
            if (
                isinstance(candidate_index, bool)
                or not isinstance(candidate_index, int)
                or not 0 <= candidate_index < count
            ):
                logger.warning(f"Rejected vote from {voter_identity!r}: invalid index {candidate_index!r}")
                raise InvalidCandidateIndex(candidate_index, count)

            event = Voted(
                sequence=self._sequence + 1,
                ledger_id=self.ledger_id,
                voter_identity=voter_identity,
                candidate_index=candidate_index,
            )
            self.journal.append(event)

            self._sequence = event.sequence
            self._candidates[candidate_index].vote_count += 1
            self._voters.add(voter_identity)
            self._pending.append(event)

        logger.info(f"Vote recorded for candidate {candidate_index}")
        self._deliver()

    # --- Reads ---

    def get_candidates(self) -> List[Candidate]:
        with self._lock:
            return [c.model_copy() for c in self._candidates]

    def get_winner(self) -> str:
        """Name of the candidate with the most votes; lowest index wins a tie."""
        with self._lock:
            if not self._candidates:
                raise NoCandidates()
            winner = self._candidates[0]
            for candidate in self._candidates[1:]:
                if candidate.vote_count > winner.vote_count:
                    winner = candidate
            return winner.name

    def has_voted(self, voter_identity: str) -> bool:
        with self._lock:
            return voter_identity in self._voters

    def voter_count(self) -> int:
        with self._lock:
            return len(self._voters)

    def events(self, since: int = 0) -> List[Event]:
        return self.journal.events(self.ledger_id, since=since)

    def snapshot(self) -> Tuple[List[Candidate], int, List[Event]]:
        """Candidates, voter count and journaled events, read as one consistent state."""
        with self._lock:
            return (
                [c.model_copy() for c in self._candidates],
                len(self._voters),
                self.journal.events(self.ledger_id),
            )

    # --- Listeners ---

    def subscribe(self, listener: Listener) -> None:
        """Call `listener` with every event after its mutation is applied.

        Events reach listeners one at a time and in sequence order.
        """
        self._listeners.append(listener)

    def _deliver(self) -> None:
        # Events enter _pending under _lock in sequence order; whichever thread
        # holds _delivery_lock drains them, so dispatch order matches.
        with self._delivery_lock:
            while True:
                with self._lock:
                    if not self._pending:
                        return
                    event = self._pending.popleft()
                for listener in list(self._listeners):
                    try:
                        listener(event)
                    except Exception:
                        logger.exception(f"Event listener failed on event {event.sequence}")
