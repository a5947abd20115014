"""External service clients for communicating with external systems"""

from .cloudinary_client import CloudinaryMediaUploader, sign_params

__all__ = [
    "CloudinaryMediaUploader",
    "sign_params",
]
