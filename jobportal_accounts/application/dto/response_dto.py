from typing import Optional

from pydantic import BaseModel

from .user_dto import UserResponse, UserSummaryResponse


class MessageResponse(BaseModel):
    """Envelope shared by every endpoint"""
    success: bool = True
    message: str


class RegisterResponse(MessageResponse):
    user: UserSummaryResponse


class AccountResponse(MessageResponse):
    user: Optional[UserResponse] = None
