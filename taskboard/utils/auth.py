from datetime import datetime, timedelta, UTC
from typing import Optional

from jose import jwt
from passlib.context import CryptContext
from taskboard.config import SECRET_KEY, ALGORITHM

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises ValueError if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if len(password.encode("utf-8")) > 72:
        raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a hash.

    A ValueError from the hasher (for example plain >72 bytes) counts as a
    mismatch so the caller answers with an authentication failure.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_token(subject: str, expires_minutes: Optional[float] = None) -> str:
    # read expiry at call-time so runtime overrides of
    # taskboard.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    import taskboard.config as _cfg
    minutes = _cfg.ACCESS_TOKEN_EXPIRE_MINUTES if expires_minutes is None else expires_minutes
    expire = datetime.now(UTC) + timedelta(minutes=minutes)
    # exp is a Unix timestamp
    return jwt.encode({"sub": subject, "exp": int(expire.timestamp())}, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and verify a token; jose validates ``exp`` and raises JWTError subclasses."""
    return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])


def extract_token(authorization: Optional[str], token_query: Optional[str]) -> Optional[str]:
    """Return token from Authorization header (Bearer ...) or token query param (compat).
    Header has precedence.
    """
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return token_query
