import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from todo_scheduler.core.config import settings
from todo_scheduler.core.database import get_session
from todo_scheduler.core.security import InvalidSessionToken, read_session_token
from todo_scheduler.models import User

logger = logging.getLogger(__name__)

# Browsers authenticate with the session cookie; the bearer header is
# accepted for scripts and API clients.
bearer = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    session: Session = Depends(get_session),
) -> User:
    # Cookie first; a stale cookie must not shadow a valid bearer token.
    tokens = [request.cookies.get(settings.cookie_name), creds.credentials if creds else None]
    tokens = [t for t in tokens if t]
    if not tokens:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authorized, no token")

    user_id = None
    for token in tokens:
        try:
            user_id = read_session_token(token)
            break
        except InvalidSessionToken:
            continue
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authorized, token failed")

    user = session.get(User, user_id)
    if not user:
        logger.warning("Valid token for missing user id=%s", user_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")

    return user
