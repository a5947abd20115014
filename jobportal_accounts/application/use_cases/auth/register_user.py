# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.media_uploader import MediaUploader
from ....domain.models.user import User, UserProfile, UserRole, is_valid_email
from ....domain.models.media import MediaFile
from ....domain.constants import IMAGE_RESOURCE_TYPE
from ....domain.exceptions import ConflictError, UploadError, ValidationError
from ....core.security import hash_password, password_too_long
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserSummaryResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, media_uploader: MediaUploader) -> None:
        self.user_repository = user_repository
        self.media_uploader = media_uploader

    async def execute(
        self,
        request: UserRegistrationRequest,
        profile_photo: Optional[MediaFile] = None,
    ) -> UserSummaryResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details
            profile_photo: Optional photo to upload before the user is created

        Returns:
            UserSummaryResponse with created user information

        Raises:
            ValidationError: If a required field is missing, the email is malformed,
                the password exceeds the bcrypt limit or the role is unknown
            ConflictError: If user with email already exists
            UploadError: If the profile photo could not be uploaded
        """
        required = (request.fullname, request.email, request.phone_number, request.password, request.role)
        if any(not value for value in required) or not request.fullname.strip():
            raise ValidationError()

        if not is_valid_email(request.email):
            raise ValidationError("Invalid email format.")

        if password_too_long(request.password):
            raise ValidationError("Password is too long.")

        try:
            role = UserRole(request.role)
        except ValueError:
            raise ValidationError(f"Invalid role. Use one of: {', '.join(r.value for r in UserRole)}")

        # Check if user already exists before touching the media host
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            logger.info("Registration rejected, email already in use")
            raise ConflictError()

        profile_photo_url = ""
        if profile_photo is not None:
            try:
                result = await self.media_uploader.upload(profile_photo, resource_type=IMAGE_RESOURCE_TYPE)
            except UploadError as exception:
                logger.error(f"Profile photo upload failed during registration: {exception}")
                raise UploadError("Image upload failed. Please try again.")
            profile_photo_url = result.secure_url

        # Create domain user entity
        new_user = User(
            id=None,  # Will be set by repository
            fullname=request.fullname,
            email=request.email,
            phone_number=request.phone_number,
            hashed_password=hash_password(request.password),
            role=role,
            profile=UserProfile(profile_photo=profile_photo_url),
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id} with role {saved_user.role.value}")

        return UserSummaryResponse.from_user(saved_user)
