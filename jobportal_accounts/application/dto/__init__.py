from .auth_dto import UserRegistrationRequest, UserLoginRequest, LoginResult
from .user_dto import UserResponse, UserSummaryResponse, ProfileResponse
from .profile_dto import ProfileUpdateRequest
from .response_dto import MessageResponse, RegisterResponse, AccountResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "LoginResult",
    "UserResponse",
    "UserSummaryResponse",
    "ProfileResponse",
    "ProfileUpdateRequest",
    "MessageResponse",
    "RegisterResponse",
    "AccountResponse",
]
