from abc import ABC, abstractmethod
from typing import Optional

from ..constants import IMAGE_RESOURCE_TYPE
from ..models.media import MediaFile, UploadResult


class MediaUploader(ABC):
    """Media host interface - turns uploaded bytes into a durable URL"""

    @abstractmethod
    async def upload(
        self,
        file: MediaFile,
        resource_type: str = IMAGE_RESOURCE_TYPE,
        folder: Optional[str] = None,
        access_mode: Optional[str] = None,
    ) -> UploadResult:
        """
        Upload a file.

        Raises UploadError when the media host cannot store the file.
        """
        pass
