# voteledger/dependencies.py
import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import OAuth2PasswordBearer

from voteledger.errors import (
    AlreadyVoted,
    InvalidCandidateIndex,
    InvalidInput,
    LedgerUnavailable,
    NoCandidates,
    Unauthorized,
)
from voteledger.ledger import VotingLedger
from voteledger.security import identity_from_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

STATUS_BY_ERROR = {
    InvalidInput: 400,
    InvalidCandidateIndex: 400,
    AlreadyVoted: 400,
    Unauthorized: 403,
    NoCandidates: 404,
    LedgerUnavailable: 503,
}


def get_ledger(request: Request) -> VotingLedger:
    return request.app.state.ledger


def get_caller_identity(request: Request, token: str = Depends(oauth2_scheme)) -> str:
    identity = identity_from_token(token, secret_key=request.app.state.secret_key)
    if identity is None:
        raise HTTPException(
            status_code=401,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


def ledger_http_error(error: Exception) -> HTTPException:
    """
    Translate a ledger failure into the HTTPException sent to the client.
    The failure kind always travels in the response body.
    """
    status_code = STATUS_BY_ERROR.get(type(error))
    if status_code is None:
        logger.error(f"Unexpected ledger failure: {error!r}")
        return HTTPException(
            status_code=500,
            detail={"error": "InternalError", "message": "Internal Server Error"},
        )
    return HTTPException(
        status_code=status_code,
        detail={"error": error.kind, "message": str(error)},
    )
