"""Unit tests for stage records and the error taxonomy."""

from dataclasses import FrozenInstanceError

import pytest

from mutantmint.core.errors import (
    AssetFetchError,
    ChainTransactionError,
    MintError,
    PipelineError,
    StorageUploadError,
    UpstreamGenerationError,
    ValidationError,
)
from mutantmint.core.models import MetadataRecord, PinnedContent


class TestPinnedContent:
    def test_uri_prefixes_scheme(self):
        assert PinnedContent(cid="bafybeigdyr").uri == "ipfs://bafybeigdyr"

    def test_frozen(self):
        pinned = PinnedContent(cid="Qm123")
        with pytest.raises(FrozenInstanceError):
            pinned.cid = "Qm999"


class TestMetadataRecord:
    def test_to_dict(self):
        record = MetadataRecord(name="Brainrot Animal #5", description="d", image="ipfs://Qm1")
        assert record.to_dict() == {
            "name": "Brainrot Animal #5",
            "description": "d",
            "image": "ipfs://Qm1",
        }


class TestErrors:
    """Tests for the stage-tagged error hierarchy."""

    @pytest.mark.parametrize(
        "error_cls, stage",
        [
            (ValidationError, "validation"),
            (UpstreamGenerationError, "generation"),
            (AssetFetchError, "image_fetch"),
            (StorageUploadError, "pin"),
            (ChainTransactionError, "mint"),
        ],
    )
    def test_default_stage(self, error_cls, stage):
        assert error_cls("x").stage == stage

    def test_stage_override(self):
        assert UpstreamGenerationError("x", stage="text_generation").stage == "text_generation"

    def test_hierarchy(self):
        assert not issubclass(ValidationError, PipelineError)
        for cls in (UpstreamGenerationError, AssetFetchError, StorageUploadError, ChainTransactionError):
            assert issubclass(cls, PipelineError)
            assert issubclass(cls, MintError)

    def test_message_preserved(self):
        with pytest.raises(MintError, match="Custom failure"):
            raise StorageUploadError("Custom failure")
        assert PipelineError("boom").stage == "unknown"
