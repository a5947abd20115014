"""Constants for domain model field names"""

from .user_fields import UserFields, ProfileFields
from .media_constants import (
    IMAGE_RESOURCE_TYPE,
    RAW_RESOURCE_TYPE,
    PUBLIC_ACCESS_MODE,
    UPLOAD_PATH_SEGMENT,
    INLINE_UPLOAD_PATH_SEGMENT,
    DEFAULT_MIME_TYPE,
)

__all__ = [
    "UserFields",
    "ProfileFields",
    "IMAGE_RESOURCE_TYPE",
    "RAW_RESOURCE_TYPE",
    "PUBLIC_ACCESS_MODE",
    "UPLOAD_PATH_SEGMENT",
    "INLINE_UPLOAD_PATH_SEGMENT",
    "DEFAULT_MIME_TYPE",
]
