# main.py
import logging
from typing import Optional

from fastapi import FastAPI, Depends, Form, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from voteledger.config import (
    ADMIN_IDENTITY,
    ADMIN_PASSWORD_HASH,
    CORS_ORIGINS,
    LEDGER_ID,
    MONGO_URI,
    SECRET_KEY,
)
from voteledger.dependencies import get_ledger
from voteledger.journal import InMemoryJournal
from voteledger.ledger import VotingLedger
from voteledger.routes.candidate_routes import router as candidate_router
from voteledger.routes.election_routes import router as election_router
from voteledger.routes.vote_routes import vote_router
from voteledger.schemas import TokenOut
from voteledger.security import create_access_token, verify_password

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_journal():
    """MongoDB journal when MONGO_URI is configured, in-memory otherwise."""
    if not MONGO_URI:
        return InMemoryJournal()
    from voteledger.database.connection import get_events_collection
    from voteledger.storage_mongo import MongoJournal
    return MongoJournal(get_events_collection())


def create_app(ledger: Optional[VotingLedger] = None,
               secret_key: str = SECRET_KEY,
               admin_password_hash: str = ADMIN_PASSWORD_HASH) -> FastAPI:
    if ledger is None:
        ledger = VotingLedger(ADMIN_IDENTITY, journal=build_journal(), ledger_id=LEDGER_ID)

    app = FastAPI(title="VoteLedger - Election Ledger API")
    app.state.ledger = ledger
    app.state.secret_key = secret_key
    app.state.admin_password_hash = admin_password_hash

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(candidate_router)
    app.include_router(vote_router)
    app.include_router(election_router)

    # --- Admin Endpoints ---

    @app.post("/auth/token", response_model=TokenOut, tags=["Admin"])
    def admin_login(username: str = Form(...), password: str = Form(...)):
        """Exchange the administrator's credentials for a bearer token."""
        if username != ledger.admin_identity or not verify_password(password, app.state.admin_password_hash):
            logger.warning(f"Failed login attempt for {username!r}")
            raise HTTPException(
                status_code=401,
                detail="Incorrect identity or password.",
                headers={"WWW-Authenticate": "Bearer"},
            )
        token = create_access_token({"sub": username}, secret_key=app.state.secret_key)
        return TokenOut(access_token=token)

    # --- General Endpoints ---

    @app.get("/health", tags=["General"])
    def health_check(current: VotingLedger = Depends(get_ledger)):
        journal_ok = current.journal.ping()
        return {
            "status": "healthy" if journal_ok else "degraded",
            "journal": current.journal.name,
            "ledgerId": current.ledger_id,
        }

    @app.get("/", tags=["General"])
    def read_root():
        return {"message": "Welcome to the VoteLedger API"}

    return app


app = create_app()
