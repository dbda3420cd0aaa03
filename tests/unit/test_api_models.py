"""Tests for mutantmint.api.models — Pydantic request/response models.

Tests cover:
- camelCase and legacy field names on MintRequest.
- Optional fields defaulting to None.
- MintResponse serialisation by alias.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mutantmint.api.models import ErrorResponse, MintRequest, MintResponse
from mutantmint.core.models import MintResult


class TestMintRequest:
    """Test MintRequest Pydantic model."""

    def test_camel_case_fields(self):
        req = MintRequest.model_validate({"primarySubject": "cat", "secondarySubject": "octopus"})
        assert req.primary_subject == "cat"
        assert req.secondary_subject == "octopus"

    def test_legacy_fields(self):
        req = MintRequest.model_validate({"animal1": "cat", "animal2": "octopus"})
        assert req.primary_subject == "cat"
        assert req.secondary_subject == "octopus"

    def test_defaults_are_none(self):
        """Missing fields are left for the pipeline to reject."""
        req = MintRequest.model_validate({})
        assert req.primary_subject is None
        assert req.secondary_subject is None

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            MintRequest.model_validate({"primarySubject": ["frog"]})


class TestMintResponse:
    """Test MintResponse serialisation."""

    def test_from_result_dumps_camel_case(self):
        result = MintResult(
            primary_subject="frog",
            secondary_subject=None,
            description="a warty hybrid",
            image_uri="ipfs://Qm123",
            metadata_uri="ipfs://Qm456",
            transaction_hash="0xabc",
        )
        data = MintResponse.from_result(result).model_dump(by_alias=True)
        assert data == {
            "message": "Hyper-Realistic Brainrot Animal NFT Minted!",
            "primarySubject": "frog",
            "secondarySubject": None,
            "description": "a warty hybrid",
            "imageContentAddress": "ipfs://Qm123",
            "metadataContentAddress": "ipfs://Qm456",
            "transactionHash": "0xabc",
        }


class TestErrorResponse:
    def test_stage_optional(self):
        assert ErrorResponse(error="bad").stage is None
