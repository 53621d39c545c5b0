"""Message routes (send, detail)."""

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_message_repo, get_user_repo
from api.models import MessageEnvelope, MessageResponse, SendMessageRequest
from api.security import get_current_username
from domain.model.errors import NotFoundError
from port.message_repository import MessageRepository
from port.user_repository import UserRepository
from services import message_service

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageEnvelope, status_code=status.HTTP_201_CREATED)
def send_message(
    request: SendMessageRequest,
    username: str = Depends(get_current_username),
    user_repo: UserRepository = Depends(get_user_repo),
    message_repo: MessageRepository = Depends(get_message_repo),
):
    """Send a message from the logged-in user."""
    try:
        message = message_service.send_message(
            user_repo,
            message_repo,
            from_username=username,
            to_username=request.to_username,
            body=request.body,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MessageEnvelope(message=MessageResponse.from_domain(message))


@router.get("/{message_id}", response_model=MessageEnvelope)
def get_message(
    message_id: str,
    username: str = Depends(get_current_username),
    repo: MessageRepository = Depends(get_message_repo),
):
    """Message detail, visible only to its sender and recipient."""
    try:
        message = message_service.get_message(repo, message_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if username not in (message.from_username, message.to_username):
        raise HTTPException(status_code=403, detail="Cannot read this message")
    return MessageEnvelope(message=MessageResponse.from_domain(message))
