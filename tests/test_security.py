import pytest

from voteledger.security import (
    AuthorizationGuard,
    create_access_token,
    hash_password,
    identity_from_token,
    verify_password,
)


def test_guard_only_accepts_admin():
    guard = AuthorizationGuard("admin")
    assert guard.is_authorized("admin")
    assert not guard.is_authorized("Admin")
    assert not guard.is_authorized("")
    assert not guard.is_authorized(None)


def test_guard_identity_is_read_only():
    guard = AuthorizationGuard("admin")
    with pytest.raises(AttributeError):
        guard.admin_identity = "mallory"


@pytest.mark.parametrize("identity", ["", "   ", None])
def test_guard_needs_identity(identity):
    with pytest.raises(ValueError):
        AuthorizationGuard(identity)


def test_password_round_trip():
    hashed = hash_password("hunter22")
    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)
    assert not verify_password("hunter22", "")


def test_token_identity():
    token = create_access_token({"sub": "V1"}, secret_key="k1")
    assert identity_from_token(token, secret_key="k1") == "V1"
    assert identity_from_token(token, secret_key="k2") is None
    assert identity_from_token("not-a-token", secret_key="k1") is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "V1"}, expires_delta=-1, secret_key="k1")
    assert identity_from_token(token, secret_key="k1") is None


def test_token_without_subject_is_rejected():
    token = create_access_token({"role": "admin"}, secret_key="k1")
    assert identity_from_token(token, secret_key="k1") is None
