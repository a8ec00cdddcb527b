import pytest

from voteledger.database import connection


class RecordingClient:
    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs


@pytest.fixture
def fresh_client(monkeypatch):
    monkeypatch.setattr(connection, "_client", None)
    monkeypatch.setattr(connection, "MongoClient", RecordingClient)
    monkeypatch.setattr(connection, "MONGO_URI", "mongodb://db.example:27017")


def test_client_uses_short_timeouts(fresh_client, monkeypatch):
    monkeypatch.setattr(connection, "MONGO_TIMEOUT_MS", 1500)
    client = connection.get_client()
    assert client.uri == "mongodb://db.example:27017"
    assert client.kwargs["serverSelectionTimeoutMS"] == 1500
    assert client.kwargs["socketTimeoutMS"] == 1500
    assert connection.get_client() is client


def test_client_requires_uri(monkeypatch):
    monkeypatch.setattr(connection, "_client", None)
    monkeypatch.setattr(connection, "MONGO_URI", None)
    with pytest.raises(ValueError):
        connection.get_client()
