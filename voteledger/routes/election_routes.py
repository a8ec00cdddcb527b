from fastapi import APIRouter, Depends, Query

from voteledger.audit import AuditReport, verify_ledger
from voteledger.dependencies import get_ledger, ledger_http_error
from voteledger.errors import LedgerError, LedgerUnavailable
from voteledger.ledger import VotingLedger
from voteledger.schemas import WinnerOut

router = APIRouter(tags=["Election"])


@router.get("/winner", response_model=WinnerOut)
def get_winner(ledger: VotingLedger = Depends(get_ledger)):
    try:
        return WinnerOut(winner=ledger.get_winner())
    except LedgerError as e:
        raise ledger_http_error(e)


@router.get("/events")
def get_events(
    since: int = Query(0, ge=0, description="Only return events with a greater sequence number"),
    ledger: VotingLedger = Depends(get_ledger),
):
    """
    The ledger's event log, oldest first. Lets an external reader rebuild
    the tally on its own.
    """
    try:
        events = ledger.events(since=since)
    except LedgerUnavailable as e:
        raise ledger_http_error(e)
    return {"events": [e.model_dump(mode="json") for e in events]}


@router.get("/audit", response_model=AuditReport)
def audit(ledger: VotingLedger = Depends(get_ledger)):
    try:
        return verify_ledger(ledger)
    except LedgerUnavailable as e:
        raise ledger_http_error(e)
