"""Authentication routes (register, login)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_password_hasher, get_user_repo
from api.models import LoginRequest, RegisterRequest, TokenResponse
from api.security import create_access_token
from domain.model.errors import DuplicateIdentityError, InvalidCredentialsError, ValidationError
from port.password_hasher import PasswordHasher
from port.user_repository import UserRepository
from services import auth_service
from utils.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

# Handlers are sync: bcrypt and pymongo block, so FastAPI runs them in its threadpool.


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
):
    """Register, log in, and return a token.

    Raises:
        HTTPException: 409 Conflict if the username is taken, 400 if the password is rejected
    """
    try:
        account = auth_service.register(
            repo,
            hasher,
            username=request.username,
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
        )
    except DuplicateIdentityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    auth_service.update_login_timestamp(repo, account.username)
    return TokenResponse(token=create_access_token(account.username, settings))


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
):
    """Check credentials and return a token. last_login_at is stamped before responding.

    Raises:
        HTTPException: 400 if the username/password pair is invalid
    """
    try:
        account = auth_service.login(repo, hasher, request.username, request.password)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return TokenResponse(token=create_access_token(account.username, settings))
