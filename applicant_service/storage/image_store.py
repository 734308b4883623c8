"""Image Store Client.

Uploads applicant photos to Cloudinary and returns the durable public URL.

The client is built explicitly from settings and handed to the workflow;
credentials travel with every upload call instead of living in the SDK's
global configuration.
"""

from __future__ import annotations

from typing import Any, Protocol

import cloudinary.exceptions
import cloudinary.uploader
from fastapi.concurrency import run_in_threadpool

from ..core.config import Settings
from ..core.constants import ErrorMessages
from ..core.exceptions import ImageUploadError
from ..core.logging import get_logger
from ..schemas.applicant import UploadedImage

logger = get_logger(__name__)


class ImageStore(Protocol):
    """Anything able to store a local image file and return where it lives."""

    async def upload(self, file_path: str) -> UploadedImage:
        ...


class CloudinaryImageStore:
    """Cloudinary-backed image store."""

    def __init__(
        self,
        cloud_name: str | None,
        api_key: str | None,
        api_secret: str | None,
        folder: str | None = None,
        timeout: float | None = None
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> CloudinaryImageStore:
        """Build the client from CLOUDINARY_* settings."""
        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
            timeout=settings.CLOUDINARY_UPLOAD_TIMEOUT
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def _upload_options(self) -> dict[str, Any]:
        options: dict[str, Any] = {
            "cloud_name": self.cloud_name,
            "api_key": self.api_key,
            "api_secret": self.api_secret,
            "resource_type": "image",
            "secure": True,
        }
        if self.folder:
            options["folder"] = self.folder
        if self.timeout is not None:
            options["timeout"] = self.timeout
        return options

    async def upload(self, file_path: str) -> UploadedImage:
        """Upload a local file and return the stored image metadata.

        The SDK call blocks, so it runs in the threadpool.

        Args:
            file_path: Path of the local temporary file

        Returns:
            Upload result including ``secure_url``

        Raises:
            ImageUploadError: If credentials are missing or Cloudinary fails
        """
        if not self.is_configured:
            raise ImageUploadError(
                ErrorMessages.IMAGE_UPLOAD_FAILED.format(error="Cloudinary credentials are not configured")
            )

        try:
            result = await run_in_threadpool(
                cloudinary.uploader.upload,
                file_path,
                **self._upload_options()
            )
        except (cloudinary.exceptions.Error, OSError) as e:
            logger.error(
                "Cloudinary upload failed",
                extra={
                    'error': str(e),
                    'error_type': type(e).__name__,
                    'cloud_name': self.cloud_name
                }
            )
            raise ImageUploadError(ErrorMessages.IMAGE_UPLOAD_FAILED.format(error=str(e))) from e

        image = UploadedImage.model_validate(result)
        logger.info(
            "Image uploaded",
            extra={
                'public_id': image.public_id,
                'bytes': image.bytes
            }
        )
        return image
