# voteledger/config.py
# Central place for settings and constants
import os
from dotenv import load_dotenv

load_dotenv()

# --- Ledger ---
# The single identity allowed to register candidates; fixed for the life of the ledger
ADMIN_IDENTITY = os.getenv("ADMIN_IDENTITY", "admin")
# bcrypt hash of the admin password (generate with `python -m voteledger.bootstrap hash-password`)
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")
# None -> random per process. A ledger refuses to start on an id the journal already holds
LEDGER_ID = os.getenv("LEDGER_ID")

# --- Security & JWT Config ---
# In production, use secure, environment-variable-based secrets
SECRET_KEY = os.getenv("SECRET_KEY", "a_very_secret_key_for_dev_only")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# --- Database Config ---
# Leave MONGO_URI unset to keep the event journal in memory
MONGO_URI = os.getenv("MONGO_URI")
MONGO_DB_NAME = os.getenv("MONGO_DB", "voting_system")
EVENTS_COLLECTION_NAME = os.getenv("EVENTS_COLLECTION_NAME", "ledger_events")
# Bounds how long a journal write can hold the ledger lock during an outage
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "2000"))

# --- HTTP ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if origin.strip()
]
