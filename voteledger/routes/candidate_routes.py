import logging
from typing import List

from fastapi import APIRouter, Depends

from voteledger.dependencies import get_caller_identity, get_ledger, ledger_http_error
from voteledger.errors import LedgerError, LedgerUnavailable
from voteledger.ledger import VotingLedger
from voteledger.schemas import CandidateAddedOut, CandidateCreate, CandidateOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/candidates", tags=["Candidates"])


@router.post("", status_code=201, response_model=CandidateAddedOut)
def add_candidate(
    candidate: CandidateCreate,
    caller: str = Depends(get_caller_identity),
    ledger: VotingLedger = Depends(get_ledger),
):
    """
    Register a candidate. Only the administrator's bearer token is accepted.
    """
    try:
        index = ledger.add_candidate(caller, candidate.name)
    except (LedgerError, LedgerUnavailable) as e:
        raise ledger_http_error(e)
    return CandidateAddedOut(message="Candidate added successfully", index=index)


@router.get("", response_model=List[CandidateOut])
def get_candidates(ledger: VotingLedger = Depends(get_ledger)):
    return [
        CandidateOut(id=c.index, name=c.name, vote_count=c.vote_count)
        for c in ledger.get_candidates()
    ]
