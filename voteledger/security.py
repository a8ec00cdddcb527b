from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from voteledger.config import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


# Hash a password
def hash_password(password: str) -> str:
    return pwd_context.hash(password)


# Verify a plain password against a hash
def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


# Create JWT access token
def create_access_token(data: dict, expires_delta: int = ACCESS_TOKEN_EXPIRE_MINUTES,
                        secret_key: str = SECRET_KEY):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_delta)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)
    return encoded_jwt


def identity_from_token(token: str, secret_key: str = SECRET_KEY) -> Optional[str]:
    """Return the `sub` claim of a valid token, or None if it does not verify."""
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except JWTError:
        return None
    identity = payload.get("sub")
    if not isinstance(identity, str) or not identity:
        return None
    return identity


class AuthorizationGuard:
    """Decides whether a caller may perform privileged ledger operations.

    Holds nothing but the administrator identity captured at construction.
    """

    __slots__ = ("_admin_identity",)

    def __init__(self, admin_identity: str):
        if not isinstance(admin_identity, str) or not admin_identity.strip():
            raise ValueError("Administrator identity must be a non-empty string")
        self._admin_identity = admin_identity

    @property
    def admin_identity(self) -> str:
        return self._admin_identity

    def is_authorized(self, caller_identity: str) -> bool:
        return caller_identity == self._admin_identity
