"""
Data URI encoding for uploaded files.

The media host accepts a file either as multipart bytes or as a data URI;
we send data URIs so the upload request stays a plain form post.
"""
import base64
import mimetypes

from ..domain.constants import DEFAULT_MIME_TYPE
from ..domain.models.media import MediaFile


def guess_mime_type(file: MediaFile) -> str:
    """Declared content type, else a guess from the extension, else octet-stream."""
    if file.content_type:
        return file.content_type.strip().lower()
    guessed, _ = mimetypes.guess_type(file.filename)
    return guessed or DEFAULT_MIME_TYPE


def get_data_uri(file: MediaFile) -> str:
    """Encode a file as ``data:<mime>;base64,<payload>``."""
    payload = base64.b64encode(file.content).decode("ascii")
    return f"data:{guess_mime_type(file)};base64,{payload}"
