# Standard library imports
from typing import Optional

# Local application imports
from ....domain.exceptions import NotAuthenticatedError
from ....core.security import decode_jwt_token


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user ID from a session token"""

    async def execute(self, token: Optional[str]) -> str:
        """
        Get current user ID from JWT token

        The user is not looked up here; operations that need the record do
        their own existence check.

        Args:
            token: JWT taken from the session cookie, may be None

        Returns:
            The user ID carried in the token's subject claim

        Raises:
            NotAuthenticatedError: If the token is missing, invalid or expired
        """
        if not token:
            raise NotAuthenticatedError()

        try:
            payload = decode_jwt_token(token)
        except ValueError:
            raise NotAuthenticatedError("Invalid or expired session.")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise NotAuthenticatedError("Invalid or expired session.")

        return user_id
