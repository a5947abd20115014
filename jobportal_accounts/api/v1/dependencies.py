# External package imports
from fastapi import Request

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...core.config import get_settings
from ...di.container import get_container


async def get_current_user_id(request: Request) -> str:
    """
    FastAPI dependency to get the authenticated user ID from the session cookie

    Args:
        request: Incoming request carrying the session cookie

    Returns:
        The user ID embedded in the session token

    Raises:
        NotAuthenticatedError: If the cookie is missing or the token is invalid
    """
    token = request.cookies.get(get_settings().session_cookie_name)

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    return await get_current_user_use_case.execute(token)
