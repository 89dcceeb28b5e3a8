"""
Security Service

Password hashing and JWT access tokens.

Tokens carry the user's role names in a "roles" claim. The role guard
in dependencies.py reads that claim; it never goes back to the
database, so role changes take effect at the next login.

Usage:
    from bookstore.services.security import hash_password, verify_password

    hashed = hash_password("secret1")
    is_valid = verify_password("secret1", hashed)
"""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from bookstore.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    """Hash a plain text password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a bcrypt hash (constant time)."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode, usually {"sub", "email", "roles"}
        expires_delta: Optional custom lifetime

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token({"sub": "1", "roles": ["Customer"]})
        >>> token.count(".") == 2
        True
    """
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(UTC) + expires_delta

    to_encode.update({"exp": expire, "type": "access"})

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=ALGORITHM,
    )


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload if valid, None if invalid or expired
    """
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None


def verify_access_token(token: str) -> dict | None:
    """Decode a token and make sure it is an access token."""
    payload = decode_token(token)

    if payload is None:
        return None

    if payload.get("type") != "access":
        logger.warning("Token type mismatch: expected access")
        return None

    return payload
