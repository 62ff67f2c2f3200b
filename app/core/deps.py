"""
FastAPI dependencies for authentication and authorization.

These dependencies are used to protect endpoints and extract user context.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import JWTError, decode_token
from app.models.user import User

# Authorization: Bearer <token>; a missing header is not an error here
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Resolve the user behind the bearer token, if one was sent.

    Returns None for anonymous requests.

    Raises:
        UnauthorizedError: If a token was sent but is invalid, expired, or
            names a user that no longer exists
    """
    if credentials is None:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise UnauthorizedError("Could not validate credentials")

    username = payload.get("sub")
    if username is None:
        raise UnauthorizedError("Could not validate credentials")

    user = db.query(User).filter(User.username == username).first()
    if user is None:
        raise UnauthorizedError("Could not validate credentials")

    return user


def ensure_admin(user: Optional[User] = Depends(get_current_user)) -> User:
    """
    Gate for mutating endpoints: the caller must be a logged-in admin.

    Raises:
        UnauthorizedError 401: No credentials
        ForbiddenError 403: Authenticated but not an admin
    """
    if user is None:
        raise UnauthorizedError()

    if not user.is_admin:
        raise ForbiddenError("Admin privileges required")

    return user
