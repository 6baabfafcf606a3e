from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session
import logging

from ..database import get_db
from ..repository import UserRepository
from ..schemas import RegisterRequest, RegisterResponse, LoginRequest, TokenResponse, UserOut
from ..auth import get_password_hash, verify_password, issue_token_for
from ..errors import InvalidCredentials

logger = logging.getLogger("resume_service.routers.auth")

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, repo: UserRepository = Depends(get_user_repository)):
    """Create a user account"""
    logger.info("Received a request to /api/auth/register")
    user = repo.create(email=data.email, password_hash=get_password_hash(data.password))
    logger.info(f"User {user.id} created successfully")
    return RegisterResponse(message="User created successfully!", user=UserOut.model_validate(user))


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, request: Request, repo: UserRepository = Depends(get_user_repository)):
    """Exchange email and password for a bearer token"""
    logger.info("Received a request to /api/auth/login")
    user = repo.get_by_email(data.email)
    # Unknown email and wrong password are reported the same way
    if not user or not verify_password(data.password, user.password_hash):
        raise InvalidCredentials()
    token = issue_token_for(user, request.app.state.settings)
    return TokenResponse(message="Login successful!", token=token)
