from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.user_repository import UserRepository
from ...domain.services.media_uploader import MediaUploader
from ...application.use_cases.profile.update_profile import UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    """Profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(
                user_repository=container.get(UserRepository),
                media_uploader=container.get(MediaUploader),
                resume_folder=get_settings().resume_upload_folder,
            )
        )
