# voteledger/audit.py
"""Rebuild tallies from the event stream and check them against the ledger."""
import logging
from typing import Dict, Iterable

from pydantic import BaseModel

from voteledger.models.event_model import CandidateAdded, Event, Voted

logger = logging.getLogger(__name__)


class AuditReport(BaseModel):
    consistent: bool
    ledger: Dict[int, int]
    replayed: Dict[int, int]
    voters: int
    events: int


def replay_tally(events: Iterable[Event]) -> Dict[int, int]:
    """Per-candidate vote counts derived only from `CandidateAdded`/`Voted` events.

    Candidates that never received a vote still appear with 0.
    """
    tally: Dict[int, int] = {}
    for event in events:
        if isinstance(event, CandidateAdded):
            tally.setdefault(event.index, 0)
        elif isinstance(event, Voted):
            tally[event.candidate_index] = tally.get(event.candidate_index, 0) + 1
    return tally


def verify_ledger(ledger) -> AuditReport:
    candidates, voters, events = ledger.snapshot()
    replayed = replay_tally(events)
    ledger_tally = {c.index: c.vote_count for c in candidates}
    voted_events = sum(1 for e in events if isinstance(e, Voted))

    consistent = (
        replayed == ledger_tally
        and sum(ledger_tally.values()) == voters
        and voted_events == voters
    )
    if not consistent:
        logger.error(f"Audit mismatch for ledger {ledger.ledger_id}: ledger={ledger_tally} replayed={replayed}")
    return AuditReport(
        consistent=consistent,
        ledger=ledger_tally,
        replayed=replayed,
        voters=voters,
        events=len(events),
    )
