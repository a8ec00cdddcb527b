from fastapi import APIRouter, Depends

from voteledger.dependencies import get_ledger, ledger_http_error
from voteledger.errors import LedgerError, LedgerUnavailable
from voteledger.ledger import VotingLedger
from voteledger.models.vote_model import Vote
from voteledger.schemas import VoteOut

vote_router = APIRouter(prefix="/vote", tags=["Vote"])


# ------------------------------
# CAST VOTE
# ------------------------------
@vote_router.post("", status_code=201, response_model=VoteOut)
def cast_vote(vote: Vote, ledger: VotingLedger = Depends(get_ledger)):
    """
    Casts a vote. Each voter identity is accepted exactly once.
    """
    try:
        ledger.vote(vote.voter_identity, vote.candidate_index)
    except (LedgerError, LedgerUnavailable) as e:
        raise ledger_http_error(e)

    return VoteOut(
        message="Vote cast successfully",
        voter_identity=vote.voter_identity,
        candidate_index=vote.candidate_index,
    )


# ------------------------------
# CHECK IF USER HAS ALREADY VOTED
# ------------------------------
@vote_router.get("/check/{voter_identity}")
def check_vote(voter_identity: str, ledger: VotingLedger = Depends(get_ledger)):
    if ledger.has_voted(voter_identity):
        return {"status": "already_voted", "voterIdentity": voter_identity}
    return {"status": "not_voted", "message": "Voter can proceed to vote."}
