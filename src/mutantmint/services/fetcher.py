"""Download generated images into memory."""

from __future__ import annotations

import logging
import uuid

import requests

from mutantmint.core.errors import AssetFetchError
from mutantmint.core.models import GeneratedImage, ImageAsset

logger = logging.getLogger(__name__)


class ImageFetcher:
    """Fetch a generated image over HTTP(S).

    The bytes are returned in an :class:`ImageAsset` rather than written to a
    shared file, so concurrent requests never see each other's downloads.

    Args:
        session: ``requests.Session`` used for every download.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def download(self, image: GeneratedImage) -> ImageAsset:
        """Download the image at ``image.url``.

        Raises:
            AssetFetchError: On network failure, a non-2xx status, or an
                empty body.
        """
        try:
            response = self._session.get(image.url)
            response.raise_for_status()
        except requests.RequestException as e:
            raise AssetFetchError(f"Failed to download generated image: {e}") from e

        if not response.content:
            raise AssetFetchError("Generated image download was empty")

        content_type = response.headers.get("Content-Type", "image/png").split(";")[0]
        filename = f"mutant_{uuid.uuid4().hex}.png"
        logger.info("Image downloaded (%d bytes) as %s", len(response.content), filename)
        return ImageAsset(content=response.content, filename=filename, content_type=content_type)

    def close(self) -> None:
        """Release the pooled connections of the underlying session."""
        self._session.close()
