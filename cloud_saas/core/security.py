# Standard library imports
import time
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import Settings


# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str, rounds: int) -> str:
    """
    Hash a plain password using bcrypt

    Passwords longer than 72 UTF-8 bytes are truncated, so hashes stay
    compatible with existing bcryptjs hashes.

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt work factor (``Settings.bcrypt_rounds``)

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # bcrypt raises ValueError for a hash it cannot parse
        return False


def create_jwt_token(
    payload: Dict[str, Any],
    settings: Settings,
    issued_at: Optional[int] = None,
) -> str:
    """
    Create a JWT token with expiration

    Args:
        payload: Dictionary containing token claims (e.g., sub, userId)
        settings: Application settings holding the signing secret and lifetime
        issued_at: Unix timestamp to use as ``iat`` (defaults to now)

    Returns:
        Encoded JWT token string
    """
    if issued_at is None:
        issued_at = int(time.time())
    expires_at = issued_at + settings.access_token_expire_seconds

    token_payload = {
        **payload,
        "iat": issued_at,
        "exp": expires_at,
    }

    return jwt.encode(
        token_payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm
    )


def decode_jwt_token(token: str, settings: Settings) -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode
        settings: Application settings holding the signing secret

    Returns:
        Dictionary containing decoded token claims

    Raises:
        ValueError: If token is invalid, tampered with or expired
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm]
        )
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}") from e


def token_subject(claims: Dict[str, Any]) -> Optional[str]:
    """Return the user id carried by decoded token claims, if any."""
    subject = claims.get("sub") or claims.get("userId")
    return str(subject) if subject else None
