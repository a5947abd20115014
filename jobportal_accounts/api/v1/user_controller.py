# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest
from ...application.dto.profile_dto import ProfileUpdateRequest
from ...application.dto.response_dto import AccountResponse, MessageResponse, RegisterResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase
from ...domain.models.media import MediaFile
from ...di.container import get_container
from .cookies import clear_session_cookie, set_session_cookie
from .dependencies import get_current_user_id


router = APIRouter(tags=["user"])


async def read_upload(file: Optional[UploadFile]) -> Optional[MediaFile]:
    """Read an optional multipart file into memory; no file (or no filename) means None."""
    if file is None or not file.filename:
        return None
    content = await file.read()
    return MediaFile(filename=file.filename, content=content, content_type=file.content_type)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    password: Optional[str] = Form(None),
    role: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
) -> RegisterResponse:
    """
    Register a new user

    Multipart form; ``file`` is an optional profile photo.

    Returns:
        RegisterResponse with the created user's id, fullname, email and role
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    request = UserRegistrationRequest(
        fullname=fullname,
        email=email,
        phone_number=phone_number,
        password=password,
        role=role,
    )
    user = await register_use_case.execute(request, profile_photo=await read_upload(file))
    return RegisterResponse(message="Account created successfully.", user=user)


@router.post("/login", response_model=AccountResponse)
async def login_user(request: UserLoginRequest, response: Response) -> AccountResponse:
    """
    Authenticate user and start a session

    Sets the http-only ``token`` cookie on success.

    Returns:
        AccountResponse with a welcome message and the sanitized user
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    result = await login_use_case.execute(request)
    set_session_cookie(response, result.access_token)
    return AccountResponse(message=f"Welcome back {result.user.fullname}", user=result.user)


@router.api_route("/logout", methods=["GET", "POST"], response_model=MessageResponse)
async def logout_user(response: Response) -> MessageResponse:
    """
    End the session by clearing the cookie. Succeeds with or without a session.
    """
    clear_session_cookie(response)
    return MessageResponse(message="Logged out successfully.")


@router.api_route("/profile/update", methods=["POST", "PUT"], response_model=AccountResponse)
async def update_profile(
    fullname: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None, alias="phoneNumber"),
    bio: Optional[str] = Form(None),
    skills: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    user_id: str = Depends(get_current_user_id),
) -> AccountResponse:
    """
    Update the authenticated user's account and profile

    Only supplied fields change. ``skills`` is comma-separated; ``file`` is a
    resume stored on the media host.

    Returns:
        AccountResponse with the updated user
    """
    container = get_container()
    update_profile_use_case = container.get(UpdateProfileUseCase)

    request = ProfileUpdateRequest(
        fullname=fullname,
        email=email,
        phone_number=phone_number,
        bio=bio,
        skills=skills,
    )
    user = await update_profile_use_case.execute(user_id, request, resume=await read_upload(file))
    return AccountResponse(message="Profile updated successfully.", user=user)
