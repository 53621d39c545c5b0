"""Pydantic models for API request/response.

None of these carry the password hash.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from domain.model.message import Message, ReceivedMessage, SentMessage
from domain.model.user import Account, UserSummary
from port.password_hasher import MAX_PASSWORD_BYTES


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)
    first_name: str
    last_name: str
    phone: str

    @field_validator('password')
    @classmethod
    def password_fits_hasher(cls, v: str) -> str:
        """Reject passwords the hasher cannot take whole."""
        if len(v.encode('utf-8')) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginRequest(BaseModel):
    """Request model for user login."""
    username: str
    password: str


class TokenResponse(BaseModel):
    token: str


class UserSummaryResponse(BaseModel):
    username: str
    first_name: str
    last_name: str
    phone: str

    @classmethod
    def from_domain(cls, user: UserSummary) -> "UserSummaryResponse":
        return cls(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            phone=user.phone,
        )


class UserDetailResponse(UserSummaryResponse):
    join_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_account(cls, account: Account) -> "UserDetailResponse":
        return cls(
            username=account.username,
            first_name=account.first_name,
            last_name=account.last_name,
            phone=account.phone,
            join_at=account.joined_at,
            last_login_at=account.last_login_at,
        )


class UserListResponse(BaseModel):
    users: list[UserSummaryResponse]


class UserResponse(BaseModel):
    user: UserDetailResponse


class SentMessageResponse(BaseModel):
    id: str
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    to_user: UserSummaryResponse

    @classmethod
    def from_domain(cls, message: SentMessage) -> "SentMessageResponse":
        return cls(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            to_user=UserSummaryResponse.from_domain(message.to_user),
        )


class ReceivedMessageResponse(BaseModel):
    id: str
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None
    from_user: UserSummaryResponse

    @classmethod
    def from_domain(cls, message: ReceivedMessage) -> "ReceivedMessageResponse":
        return cls(
            id=message.id,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
            from_user=UserSummaryResponse.from_domain(message.from_user),
        )


class SentMessageListResponse(BaseModel):
    messages: list[SentMessageResponse]


class ReceivedMessageListResponse(BaseModel):
    messages: list[ReceivedMessageResponse]


class SendMessageRequest(BaseModel):
    """Request model for sending a message as the logged-in user."""
    to_username: str
    body: str = Field(..., min_length=1)


class MessageResponse(BaseModel):
    id: str
    from_username: str
    to_username: str
    body: str
    sent_at: datetime
    read_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            from_username=message.from_username,
            to_username=message.to_username,
            body=message.body,
            sent_at=message.sent_at,
            read_at=message.read_at,
        )


class MessageEnvelope(BaseModel):
    message: MessageResponse
