# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.services.media_uploader import MediaUploader
from ....domain.models.user import is_valid_email, parse_skills
from ....domain.models.media import MediaFile
from ....domain.constants import (
    RAW_RESOURCE_TYPE,
    PUBLIC_ACCESS_MODE,
    UPLOAD_PATH_SEGMENT,
    INLINE_UPLOAD_PATH_SEGMENT,
)
from ....domain.exceptions import ConflictError, NotFoundError, ValidationError
from ...dto.profile_dto import ProfileUpdateRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


def to_inline_view_url(secure_url: str) -> str:
    """Rewrite a delivery URL so the browser displays the file instead of downloading it."""
    return secure_url.replace(UPLOAD_PATH_SEGMENT, INLINE_UPLOAD_PATH_SEGMENT, 1)


class UpdateProfileUseCase:
    """Use case for partially updating the authenticated user's account and profile"""

    def __init__(
        self,
        user_repository: UserRepository,
        media_uploader: MediaUploader,
        resume_folder: str = "resumes",
    ) -> None:
        self.user_repository = user_repository
        self.media_uploader = media_uploader
        self.resume_folder = resume_folder

    async def execute(
        self,
        user_id: str,
        request: ProfileUpdateRequest,
        resume: Optional[MediaFile] = None,
    ) -> UserResponse:
        """
        Update the fields that were supplied and leave the rest untouched

        The user must exist and a new email must be free before the resume is
        sent to the media host.

        Args:
            user_id: Authenticated user ID from the session
            request: Optional account/profile fields
            resume: Optional resume file

        Returns:
            UserResponse with the updated user

        Raises:
            ValidationError: If a supplied email is malformed or fullname is blank
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
            UploadError: If the resume could not be uploaded
        """
        if request.email and not is_valid_email(request.email):
            raise ValidationError("Invalid email format.")
        if request.fullname and not request.fullname.strip():
            raise ValidationError("Full name cannot be blank.")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError()

        if request.email and request.email != user.email:
            owner = await self.user_repository.find_by_email(request.email)
            if owner is not None and owner.id != user.id:
                logger.info(f"Profile update rejected for user {user.id}: email already in use")
                raise ConflictError()

        if resume is not None:
            result = await self.media_uploader.upload(
                resume,
                resource_type=RAW_RESOURCE_TYPE,
                folder=self.resume_folder,
                access_mode=PUBLIC_ACCESS_MODE,
            )
            user.profile.resume = to_inline_view_url(result.secure_url)
            user.profile.resume_original_name = resume.filename

        if request.fullname:
            user.fullname = request.fullname
        if request.email:
            user.email = request.email
        if request.phone_number:
            user.phone_number = request.phone_number
        if request.bio:
            user.profile.bio = request.bio
        if request.skills:
            user.profile.skills = parse_skills(request.skills)

        saved_user = await self.user_repository.save(user)
        logger.info(f"Updated profile for user {saved_user.id}")

        return UserResponse.from_user(saved_user)
