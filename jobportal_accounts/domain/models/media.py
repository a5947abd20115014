# Standard library imports
from dataclasses import dataclass
from typing import Optional


@dataclass
class MediaFile:
    """
    A file received from a client, held in memory until it is handed to the
    media host.
    """
    filename: str
    content: bytes
    content_type: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.filename:
            raise ValueError("File name is required")


@dataclass
class UploadResult:
    """Durable location of a file stored by the media host"""
    secure_url: str
    public_id: Optional[str] = None
    resource_type: Optional[str] = None
