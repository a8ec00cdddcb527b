from datetime import datetime, timezone
from typing import Literal, Union

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


class LedgerEvent(BaseModel):
    """One entry of the append-only event stream.

    ``sequence`` starts at 1 for each ledger and grows by one per accepted
    mutation, so the stream is totally ordered.
    """
    sequence: int = Field(..., ge=1)
    ledger_id: str
    recorded_at: datetime = Field(default_factory=_now)


class CandidateAdded(LedgerEvent):
    kind: Literal["CandidateAdded"] = "CandidateAdded"
    name: str
    index: int


class Voted(LedgerEvent):
    kind: Literal["Voted"] = "Voted"
    voter_identity: str
    candidate_index: int


Event = Union[CandidateAdded, Voted]

EVENT_TYPES = {
    "CandidateAdded": CandidateAdded,
    "Voted": Voted,
}


def event_from_document(document: dict) -> Event:
    """Rebuild an event from its stored dict form (e.g. a MongoDB document)."""
    data = {k: v for k, v in document.items() if k != "_id"}
    kind = data.get("kind")
    if kind not in EVENT_TYPES:
        raise ValueError(f"Unknown event kind: {kind!r}")
    return EVENT_TYPES[kind](**data)
