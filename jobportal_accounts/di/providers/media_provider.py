from typing import TYPE_CHECKING
from ...domain.services.media_uploader import MediaUploader
from ...infrastructure.external.cloudinary_client import CloudinaryMediaUploader

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MediaProvider:
    """Media host provider - wires the MediaUploader interface to Cloudinary"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the media uploader as a singleton.
        Credentials are read from settings when the uploader is built.
        """
        container.register_singleton(MediaUploader, CloudinaryMediaUploader())
