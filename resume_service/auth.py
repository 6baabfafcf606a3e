from passlib.context import CryptContext
from jose import JWTError, jwt
from datetime import datetime, timedelta, timezone
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional
import logging

from .config import Settings
from .errors import Unauthenticated, Forbidden
from .schemas import CurrentUser

logger = logging.getLogger("resume_service.auth")

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error is off so a missing header becomes our own Unauthenticated error
security = HTTPBearer(auto_error=False)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)


def create_access_token(data: dict, settings: Settings, expires_delta: timedelta = None) -> str:
    """Create a JWT access token"""
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def issue_token_for(user, settings: Settings) -> str:
    return create_access_token(
        {"sub": str(user.id), "user_id": user.id, "email": user.email},
        settings,
    )


def decode_token(token: str, settings: Settings) -> CurrentUser:
    """Verify signature and expiry, then return the identity the token carries."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.info(f"Rejected access token: {e}")
        raise Forbidden() from e

    user_id = payload.get("user_id")
    email = payload.get("email")
    if not isinstance(user_id, int) or not email:
        raise Forbidden("Token does not carry a user identity.")
    return CurrentUser(id=user_id, email=email)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """Authorization gate for every endpoint that touches user-owned data."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    user = decode_token(credentials.credentials, request.app.state.settings)
    request.state.user = user
    return user
