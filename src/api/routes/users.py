"""User listing, detail and per-user message routes. All require login."""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_message_repo, get_user_repo
from api.models import (
    ReceivedMessageListResponse,
    ReceivedMessageResponse,
    SentMessageListResponse,
    SentMessageResponse,
    UserDetailResponse,
    UserListResponse,
    UserResponse,
    UserSummaryResponse,
)
from api.security import get_current_username
from domain.model.errors import NotFoundError
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services import auth_service, message_service

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_current_username)])


@router.get("", response_model=UserListResponse)
def list_users(repo: UserRepository = Depends(get_user_repo)):
    users = auth_service.list_all(repo)
    return UserListResponse(users=[UserSummaryResponse.from_domain(u) for u in users])


@router.get("/{username}", response_model=UserResponse)
def get_user(username: str, repo: UserRepository = Depends(get_user_repo)):
    try:
        account = auth_service.get(repo, username)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return UserResponse(user=UserDetailResponse.from_account(account))


@router.get("/{username}/to", response_model=ReceivedMessageListResponse)
def get_messages_to(username: str, repo: MessageRepository = Depends(get_message_repo)):
    """Messages received by username. Unknown users get an empty list."""
    messages = message_service.messages_to(repo, username)
    return ReceivedMessageListResponse(messages=[ReceivedMessageResponse.from_domain(m) for m in messages])


@router.get("/{username}/from", response_model=SentMessageListResponse)
def get_messages_from(username: str, repo: MessageRepository = Depends(get_message_repo)):
    """Messages sent by username. Unknown users get an empty list."""
    messages = message_service.messages_from(repo, username)
    return SentMessageListResponse(messages=[SentMessageResponse.from_domain(m) for m in messages])
