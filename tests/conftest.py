"""Shared pytest fixtures for Mutant Mint tests."""

from __future__ import annotations

import random
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from mutantmint.api.main import app, get_pipeline
from mutantmint.core.config import MintConfig
from mutantmint.core.models import (
    GeneratedDescription,
    GeneratedImage,
    ImageAsset,
    MintReceipt,
    PinnedContent,
)
from mutantmint.core.pipeline import MintPipeline
from mutantmint.services import ContractMinter, ImageFetcher, OpenAIGenerator, PinataClient

IMAGE_URL = "https://images.example.com/generated/creature.png"
IMAGE_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


@pytest.fixture
def test_config() -> MintConfig:
    """Create a fully populated configuration that ignores the local .env.

    Returns:
        MintConfig instance for testing
    """
    return MintConfig(
        _env_file=None,
        rpc_url="http://localhost:8545",
        private_key="0x" + "11" * 32,
        contract_address="0x" + "22" * 20,
        openai_api_key="sk-test",
        pinata_api_key="pinata-key",
        pinata_api_secret="pinata-secret",
    )


@pytest.fixture
def fake_generator() -> MagicMock:
    """Text/image generator returning a fixed description and URL."""
    generator = MagicMock(spec=OpenAIGenerator)
    generator.describe.return_value = GeneratedDescription(text="a warty hybrid")
    generator.render.return_value = GeneratedImage(url=IMAGE_URL)
    return generator


@pytest.fixture
def fake_fetcher() -> MagicMock:
    """Fetcher returning fixed image bytes."""
    fetcher = MagicMock(spec=ImageFetcher)
    fetcher.download.return_value = ImageAsset(content=IMAGE_BYTES, filename="mutant_test.png")
    return fetcher


@pytest.fixture
def fake_pinner() -> MagicMock:
    """Pinning gateway returning ``Qm123`` for files and ``Qm456`` for JSON."""
    pinner = MagicMock(spec=PinataClient)
    pinner.pin_file.return_value = PinnedContent(cid="Qm123")
    pinner.pin_json.return_value = PinnedContent(cid="Qm456")
    return pinner


@pytest.fixture
def fake_minter() -> MagicMock:
    """Contract minter returning transaction hash ``0xabc``."""
    minter = MagicMock(spec=ContractMinter)
    minter.mint.return_value = MintReceipt(transaction_hash="0xabc", block_number=7)
    return minter


@pytest.fixture
def pipeline(fake_generator, fake_fetcher, fake_pinner, fake_minter) -> MintPipeline:
    """Pipeline wired to the fake collaborators with a seeded RNG."""
    return MintPipeline(
        generator=fake_generator,
        fetcher=fake_fetcher,
        pinner=fake_pinner,
        minter=fake_minter,
        rng=random.Random(1234),
    )


@pytest.fixture
def test_client(pipeline: MintPipeline) -> Generator[TestClient, None, None]:
    """TestClient whose mint route uses the fake pipeline.

    The client is not entered as a context manager, so the lifespan (which
    would build real collaborators) never runs.
    """
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
