# Standard library imports
import hashlib
import logging
import time
from typing import Any, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.constants import IMAGE_RESOURCE_TYPE
from ...domain.exceptions import UploadError
from ...domain.models.media import MediaFile, UploadResult
from ...domain.services.media_uploader import MediaUploader
from ...utils.datauri import get_data_uri
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)

# Parameters the media host leaves out of the signature
_UNSIGNED_PARAMS = frozenset({"file", "api_key", "resource_type", "cloud_name"})


def sign_params(params: Dict[str, Any], api_secret: str) -> str:
    """
    Sign upload parameters the way Cloudinary expects.

    Non-empty parameters (minus file/api_key/resource_type/cloud_name) are
    sorted by name, joined as ``key=value`` pairs with ``&``, suffixed with
    the API secret and hashed with SHA-1. Same algorithm as the SDK's
    ``cloudinary.utils.api_sign_request``; see
    https://cloudinary.com/documentation/authentication_signatures
    """
    to_sign = "&".join(
        f"{key}={params[key]}"
        for key in sorted(params)
        if key not in _UNSIGNED_PARAMS and params[key] not in (None, "")
    )
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryMediaUploader(MediaUploader):
    """
    HTTP client for the Cloudinary upload API.

    Files are sent as data URIs in a signed form post; the response's
    ``secure_url`` is the durable location.
    """

    def __init__(
        self,
        cloud_name: Optional[str] = None,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the uploader.

        Args:
            cloud_name: Cloudinary cloud name. If None, reads from settings.
            api_key: API key. If None, reads from settings.
            api_secret: API secret. If None, reads from settings.
            base_url: API base URL. If None, reads from settings.
            http_client: Client to send requests with. Defaults to the shared pooled client.
        """
        settings = get_settings()
        self.cloud_name = cloud_name or settings.cloudinary_cloud_name
        self.api_key = api_key or settings.cloudinary_api_key
        self.api_secret = api_secret or settings.cloudinary_api_secret
        self.base_url = (base_url or settings.cloudinary_api_base_url).rstrip("/")
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    def upload_url(self, resource_type: str) -> str:
        return f"{self.base_url}/v1_1/{self.cloud_name}/{resource_type}/upload"

    async def upload(
        self,
        file: MediaFile,
        resource_type: str = IMAGE_RESOURCE_TYPE,
        folder: Optional[str] = None,
        access_mode: Optional[str] = None,
    ) -> UploadResult:
        """
        Upload a file to Cloudinary.

        Args:
            file: File received from the client
            resource_type: "image", "raw", "video" or "auto"
            folder: Optional destination folder
            access_mode: Optional access mode ("public" or "authenticated")

        Returns:
            UploadResult with the secure delivery URL

        Raises:
            UploadError: On missing credentials, transport errors, non-2xx
                responses, or a response without ``secure_url``
        """
        if not self.cloud_name or not self.api_key or not self.api_secret:
            logger.error("Cloudinary credentials are not configured")
            raise UploadError()

        params: Dict[str, Any] = {"timestamp": int(time.time())}
        if folder:
            params["folder"] = folder
        if access_mode:
            params["access_mode"] = access_mode

        form = {
            **params,
            "file": get_data_uri(file),
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }

        logger.info(f"Uploading {file.filename!r} to Cloudinary as {resource_type}")
        try:
            response = await self.http_client.post(self.upload_url(resource_type), data=form)
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException:
            logger.error(f"Timeout while uploading {file.filename!r} to Cloudinary")
            raise UploadError()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error uploading {file.filename!r} to Cloudinary: "
                f"{e.response.status_code} - {e.response.text}"
            )
            raise UploadError()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Unexpected error uploading {file.filename!r} to Cloudinary: {e}", exc_info=True)
            raise UploadError()

        secure_url = body.get("secure_url") if isinstance(body, dict) else None
        if not secure_url:
            logger.error(f"Cloudinary response for {file.filename!r} has no secure_url")
            raise UploadError()

        logger.info(f"Uploaded {file.filename!r} to Cloudinary")
        return UploadResult(
            secure_url=secure_url,
            public_id=body.get("public_id"),
            resource_type=body.get("resource_type", resource_type),
        )
