"""Session cookie helpers shared by login and logout."""

# External package imports
from fastapi import Response

# Local application imports
from ...core.config import get_settings

SESSION_COOKIE_SAMESITE = "strict"


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the signed session token; max-age matches the token lifetime."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=SESSION_COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response) -> None:
    """Overwrite the session cookie with an empty value that expires immediately."""
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=SESSION_COOKIE_SAMESITE,
    )
