from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .user_dto import UserResponse


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request.

    Fields are optional at the schema level so that a missing field reaches the
    use case and is reported as a ValidationError with the shared message.
    """
    model_config = ConfigDict(populate_by_name=True)

    fullname: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")
    password: Optional[str] = None
    role: Optional[str] = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginResult(BaseModel):
    """Outcome of a successful login: the session token and the sanitized user"""
    access_token: str
    user: UserResponse
