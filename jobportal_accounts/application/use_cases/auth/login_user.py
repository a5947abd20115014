# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthError, ValidationError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, LoginResult
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> LoginResult:
        """
        Authenticate user and generate access token

        Unknown email, wrong password and wrong role all fail with the same
        AuthError message.

        Args:
            request: Login request with email, password and role

        Returns:
            LoginResult with the token and the sanitized user

        Raises:
            ValidationError: If email, password or role is missing
            AuthError: If the credentials or the role do not match
        """
        if not request.email or not request.password or not request.role:
            raise ValidationError("Something is missing.")

        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.info("Login rejected: unknown email")
            raise AuthError()

        if not verify_password(request.password, user.hashed_password):
            logger.info(f"Login rejected for user {user.id}: password mismatch")
            raise AuthError()

        if request.role != user.role.value:
            logger.info(
                f"Login rejected for user {user.id}: requested role {request.role!r}, "
                f"account role {user.role.value!r}"
            )
            raise AuthError()

        # Generate JWT token
        token = create_jwt_token({"sub": user.id or ""})
        logger.info(f"User {user.id} logged in")

        return LoginResult(access_token=token, user=UserResponse.from_user(user))
