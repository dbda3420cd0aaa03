"""Pinata pinning gateway client.

Two operations are used by the pipeline:

========================  ==================================  ===============
Method                    Endpoint                            Body
========================  ==================================  ===============
:meth:`pin_file`          ``POST /pinning/pinFileToIPFS``     multipart file
:meth:`pin_json`          ``POST /pinning/pinJSONToIPFS``     JSON document
========================  ==================================  ===============

Both return a :class:`~mutantmint.core.models.PinnedContent` built from the
``IpfsHash`` field of the gateway response.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from mutantmint.core.config import MintConfig
from mutantmint.core.errors import StorageUploadError
from mutantmint.core.models import ImageAsset, PinnedContent

logger = logging.getLogger(__name__)


class PinataClient:
    """Upload files and JSON documents to IPFS through Pinata.

    Args:
        api_key: Pinata API key.
        api_secret: Pinata API secret.
        base_url: Root URL of the pinning API.
        session: Optional ``requests.Session`` (a new one is created if
            omitted).
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = "https://api.pinata.cloud",
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._auth_headers = {
            "pinata_api_key": api_key,
            "pinata_secret_api_key": api_secret,
        }

    @classmethod
    def from_config(cls, config: MintConfig) -> PinataClient:
        """Build a client from application configuration.

        Raises:
            ValueError: If either Pinata credential is missing.
        """
        config.require("pinata_api_key", "pinata_api_secret")
        return cls(
            config.pinata_api_key.get_secret_value(),
            config.pinata_api_secret.get_secret_value(),
            base_url=config.pinata_base_url,
        )

    def pin_file(self, asset: ImageAsset) -> PinnedContent:
        """Pin raw file bytes using a multipart upload.

        Raises:
            StorageUploadError: On network failure, a non-2xx status, or a
                response without ``IpfsHash``.
        """
        files = {"file": (asset.filename, asset.content, asset.content_type)}
        return self._post("pinFileToIPFS", stage="image_pin", files=files)

    def pin_json(self, document: dict[str, Any]) -> PinnedContent:
        """Pin a JSON document.

        Raises:
            StorageUploadError: On network failure, a non-2xx status, or a
                response without ``IpfsHash``.
        """
        return self._post("pinJSONToIPFS", stage="metadata_pin", json=document)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def _post(self, endpoint: str, *, stage: str, **kwargs: Any) -> PinnedContent:
        url = f"{self._base_url}/pinning/{endpoint}"
        try:
            response = self._session.post(url, headers=self._auth_headers, **kwargs)
            response.raise_for_status()
            cid = response.json()["IpfsHash"]
        except requests.RequestException as e:
            # The gateway's error body is the useful part of a 4xx/5xx.
            body = e.response.text if e.response is not None else ""
            logger.error("Pinata %s failed: %s %s", endpoint, e, body)
            raise StorageUploadError(f"Pinata {endpoint} failed: {e}", stage=stage) from e
        except (KeyError, TypeError, ValueError) as e:
            raise StorageUploadError(
                f"Pinata {endpoint} returned no IpfsHash", stage=stage
            ) from e

        if not cid:
            raise StorageUploadError(f"Pinata {endpoint} returned an empty IpfsHash", stage=stage)

        return PinnedContent(cid=str(cid))
