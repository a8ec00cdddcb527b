import pytest
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from voteledger.errors import LedgerUnavailable
from voteledger.ledger import VotingLedger
from voteledger.main import create_app
from voteledger.security import create_access_token, hash_password

ADMIN = "admin-0xA11CE"
ADMIN_PASSWORD = "s3cret-pass"
SECRET = "test-secret-key"


class _InsertResult:
    acknowledged = True


class _Cursor(list):
    def sort(self, key, direction=1):
        return _Cursor(sorted(self, key=lambda d: d[key], reverse=direction < 0))


class FakeCollection:
    """Just enough of a pymongo Collection for the event journal."""

    def __init__(self):
        self.documents = []
        self.unique_keys = None
        self.fail_writes = False
        self.fail_reads = False

    def create_index(self, keys, unique=False):
        if unique:
            self.unique_keys = [k for k, _ in keys]
        return "_".join(k for k, _ in keys)

    def insert_one(self, document):
        if self.fail_writes:
            raise ServerSelectionTimeoutError("no servers available")
        if self.unique_keys:
            key = tuple(document[k] for k in self.unique_keys)
            for existing in self.documents:
                if tuple(existing[k] for k in self.unique_keys) == key:
                    raise DuplicateKeyError("duplicate key")
        self.documents.append(dict(document, _id=len(self.documents) + 1))
        return _InsertResult()

    def find(self, query):
        if self.fail_reads:
            raise ServerSelectionTimeoutError("no servers available")
        since = query["sequence"]["$gt"]
        return _Cursor(
            dict(d) for d in self.documents
            if d["ledger_id"] == query["ledger_id"] and d["sequence"] > since
        )


class FailingJournal:
    name = "failing"

    def __init__(self):
        self.fail = True
        self.appended = []

    def append(self, event):
        if self.fail:
            raise LedgerUnavailable("journal offline")
        self.appended.append(event)

    def events(self, ledger_id, since=0):
        return [e for e in self.appended if e.sequence > since]

    def ping(self):
        return not self.fail


@pytest.fixture
def ledger():
    return VotingLedger(ADMIN)


@pytest.fixture
def alice_bob(ledger):
    ledger.add_candidate(ADMIN, "Alice")
    ledger.add_candidate(ADMIN, "Bob")
    return ledger


@pytest.fixture(scope="session")
def admin_password_hash():
    return hash_password(ADMIN_PASSWORD)


@pytest.fixture
def client(ledger, admin_password_hash):
    app = create_app(ledger, secret_key=SECRET, admin_password_hash=admin_password_hash)
    return TestClient(app)


@pytest.fixture
def admin_headers():
    token = create_access_token({"sub": ADMIN}, secret_key=SECRET)
    return {"Authorization": f"Bearer {token}"}
