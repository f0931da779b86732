from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from .config import settings

# Argon2 only; bcrypt truncates at 72 bytes and is flaky on 3.13
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ALGORITHM = "HS256"


class InvalidSessionToken(Exception):
    """Raised when a session token is malformed, expired or has no subject."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # unrecognised / corrupted hash
        return False


def create_session_token(user_id: int, expires_minutes: Optional[int] = None) -> str:
    """Sign a session token whose subject is the user's primary key."""
    if expires_minutes is None:
        expires_minutes = settings.jwt_expire_minutes
    issued = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": issued,
        "exp": issued + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def read_session_token(token: str) -> int:
    """Return the user id carried by ``token``.

    Signature and expiry are checked by python-jose; anything it rejects,
    or a payload without an integer subject, becomes InvalidSessionToken.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise InvalidSessionToken(str(exc)) from exc

    sub = payload.get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError) as exc:
        raise InvalidSessionToken("Missing or malformed subject") from exc
