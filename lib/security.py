# =============================================================================
# lib/security.py - Password Hashing & Access Tokens
# =============================================================================
# Small helpers around bcrypt and python-jose:
# - hash_password / verify_password for the users.password column
# - create_access_token / decode_access_token for the session token
#
# Tokens carry the user id in `sub` plus `email` and `role` claims so route
# guards can authorize without a database round-trip.
# =============================================================================

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
from jose import jwt

from app.config import settings


def hash_password(password: str, rounds: int | None = None) -> str:
    """Return a bcrypt hash of `password` using the configured cost."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plaintext password against a stored hash. OAuth accounts have no hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash in the database
        return False


def create_access_token(
    user_id: int,
    email: str,
    role: str,
    expires_minutes: int | None = None,
) -> str:
    """
    Sign an access token for a user.

    Args:
        user_id: users.id, stored as the `sub` claim (string per RFC 7519)
        email: User email
        role: One of the UserRole values
        expires_minutes: Override for ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
    payload = {
        "sub": str(user_id),
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + timedelta(minutes=lifetime),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry, returning the claims.

    Raises:
        jose.ExpiredSignatureError: If the token has expired
        jose.JWTError: If the token is malformed or badly signed
    """
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
