"""Typed stage records for the mint pipeline.

Each pipeline stage consumes the record produced by the stage before it, so
the dependency chain is visible in the type signatures of
:class:`~mutantmint.core.pipeline.MintPipeline`.  All records are frozen:
nothing is mutated after it has been produced.
"""

from __future__ import annotations

from dataclasses import dataclass

IPFS_SCHEME = "ipfs"


@dataclass(frozen=True)
class CreaturePrompt:
    """Prompt sent to the text model.

    Attributes:
        text: The full prompt.
        subjects: The subject names the prompt mentions (one or two).
        is_fusion: ``True`` when two subjects are fused.
    """

    text: str
    subjects: tuple[str, ...]
    is_fusion: bool = False


@dataclass(frozen=True)
class GeneratedDescription:
    text: str


@dataclass(frozen=True)
class ImagePrompt:
    text: str


@dataclass(frozen=True)
class GeneratedImage:
    """Provider-hosted image URL.  Expires shortly after generation."""

    url: str


@dataclass(frozen=True)
class ImageAsset:
    """Downloaded image bytes held in memory for the duration of a request.

    Attributes:
        content: Raw image bytes.
        filename: Per-request unique name used for the multipart upload.
        content_type: MIME type reported by the image host.
    """

    content: bytes
    filename: str
    content_type: str = "image/png"


@dataclass(frozen=True)
class PinnedContent:
    """Content pinned to IPFS.

    Attributes:
        cid: Content identifier returned by the gateway.
    """

    cid: str

    @property
    def uri(self) -> str:
        """Content address in ``ipfs://<cid>`` form."""
        return f"{IPFS_SCHEME}://{self.cid}"


@dataclass(frozen=True)
class MetadataRecord:
    """Token metadata document uploaded in step 7."""

    name: str
    description: str
    image: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "description": self.description, "image": self.image}


@dataclass(frozen=True)
class MintReceipt:
    """Confirmed mint transaction.

    Attributes:
        transaction_hash: ``0x``-prefixed hash of the mint transaction.
        block_number: Block the transaction was included in, when known.
    """

    transaction_hash: str
    block_number: int | None = None


@dataclass(frozen=True)
class MintResult:
    """Terminal output of a successful pipeline run."""

    primary_subject: str
    secondary_subject: str | None
    description: str
    image_uri: str
    metadata_uri: str
    transaction_hash: str
