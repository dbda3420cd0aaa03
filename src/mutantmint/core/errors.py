"""Error taxonomy for the mint pipeline.

Every failure the pipeline can produce is a :class:`MintError` tagged with
the ``stage`` it came from.  The API layer maps :class:`ValidationError` to
a 400 response and every :class:`PipelineError` to a masked 500 response
that still carries the stage tag.
"""

from __future__ import annotations


class MintError(Exception):
    """Base class for all mint pipeline errors.

    Attributes:
        message: Human-readable description of the failure.
        stage: Short tag naming the pipeline step that failed.
    """

    stage = "unknown"

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if stage is not None:
            self.stage = stage


class ValidationError(MintError):
    """The client request is missing required input.

    The message is intended to be displayed directly to the caller.
    """

    stage = "validation"


class PipelineError(MintError):
    """A collaborator failed after validation passed."""


class UpstreamGenerationError(PipelineError):
    """The text or image generation service failed or returned nothing."""

    stage = "generation"


class AssetFetchError(PipelineError):
    """The generated image could not be downloaded."""

    stage = "image_fetch"


class StorageUploadError(PipelineError):
    """The pinning gateway rejected an upload."""

    stage = "pin"


class ChainTransactionError(PipelineError):
    """The mint transaction could not be submitted or was not confirmed."""

    stage = "mint"
