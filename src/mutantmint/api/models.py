"""Pydantic request and response models for the Mutant Mint API.

These models define the JSON schema of the mint endpoint.  The wire format
uses camelCase field names; the Python attributes are snake_case.

Models
------
MintRequest
    Payload for ``POST /mint-brainrot-animal``.
MintResponse
    Successful mint summary.
ErrorResponse
    Body of 400 and 500 responses.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mutantmint.core.models import MintResult


class MintRequest(BaseModel):
    """Request body for the ``POST /mint-brainrot-animal`` endpoint.

    Both fields are optional at the schema level so that a missing primary
    subject is reported as a 400 with a readable message by the pipeline
    validation, not as a schema error.

    Attributes:
        primary_subject: Main animal (wire name ``primarySubject``; the
            legacy ``animal1`` is also accepted).
        secondary_subject: Optional second animal to fuse with the first
            (wire name ``secondarySubject``; legacy ``animal2``).
    """

    primary_subject: str | None = Field(
        default=None,
        validation_alias=AliasChoices("primarySubject", "animal1", "primary_subject"),
        description="Main animal of the creature (required, non-blank).",
    )
    secondary_subject: str | None = Field(
        default=None,
        validation_alias=AliasChoices("secondarySubject", "animal2", "secondary_subject"),
        description="Optional second animal to fuse with the first.",
    )


class MintResponse(BaseModel):
    """Response body of a successful mint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Hyper-Realistic Brainrot Animal NFT Minted!"
    primary_subject: str
    secondary_subject: str | None = None
    description: str
    image_content_address: str
    metadata_content_address: str
    transaction_hash: str

    @classmethod
    def from_result(cls, result: MintResult) -> MintResponse:
        return cls(
            primary_subject=result.primary_subject,
            secondary_subject=result.secondary_subject,
            description=result.description,
            image_content_address=result.image_uri,
            metadata_content_address=result.metadata_uri,
            transaction_hash=result.transaction_hash,
        )


class ErrorResponse(BaseModel):
    """Error body.  ``stage`` is only set for pipeline failures."""

    error: str
    stage: str | None = None
