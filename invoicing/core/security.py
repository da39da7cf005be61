# invoicing/core/security.py
"""
Password hashing and bearer token helpers.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from invoicing.core.errors import InvalidOrExpiredToken

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str


def hash_password(password: str, rounds: int = 10) -> str:
    """
    Hash a password using bcrypt with a fresh salt.
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plain text password against a stored bcrypt hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user_id: str, email: str, secret: str, expires_in: int) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> TokenClaims:
    """
    Verify signature and expiry, returning the embedded subject and email.

    Raises:
        InvalidOrExpiredToken: on any signature, expiry or claim problem.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise InvalidOrExpiredToken() from exc

    email = payload.get("email")
    if not isinstance(email, str):
        raise InvalidOrExpiredToken()
    return TokenClaims(user_id=payload["sub"], email=email)
