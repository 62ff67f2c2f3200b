"""
Authentication endpoints.

- POST /token: Exchange username/password for a JWT
- POST /register: Create a (non-admin) account and return a JWT
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import BadRequestError, UnauthorizedError
from app.core.security import verify_password, get_password_hash, create_access_token
from app.models.user import User
from app.schemas.user import UserLoginRequest, UserRegisterRequest, TokenResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)


@router.post("/token", response_model=TokenResponse)
def login(
    request: UserLoginRequest,
    db: Session = Depends(get_db)
):
    """
    Authenticate a user and return a JWT.

    The token carries the username and admin flag; send it back as
    `Authorization: Bearer <token>`.
    """
    user = db.query(User).filter(User.username == request.username).first()
    if not user or not verify_password(request.password, user.hashed_password):
        raise UnauthorizedError("Invalid username/password")

    logger.info(f"User logged in: {user.username}")

    return TokenResponse(token=create_access_token(user.username, is_admin=user.is_admin))


@router.post("/register", status_code=201, response_model=TokenResponse)
def register(
    request: UserRegisterRequest,
    db: Session = Depends(get_db)
):
    """
    Register a new user account.

    New accounts are never admins; promote with create_admin.py.
    """
    existing_user = db.query(User).filter(User.username == request.username).first()
    if existing_user:
        raise BadRequestError(f"Duplicate username: {request.username}")

    new_user = User(
        username=request.username,
        hashed_password=get_password_hash(request.password),
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
        is_admin=False,
    )
    db.add(new_user)
    db.commit()
    db.refresh(new_user)

    logger.info(f"New user registered: {new_user.username}")

    return TokenResponse(token=create_access_token(new_user.username, is_admin=False))
