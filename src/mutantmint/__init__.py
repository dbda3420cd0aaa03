"""Mutant Mint - generate a mutant creature and mint it as an NFT."""

__version__ = "0.1.0"

from mutantmint.core.config import MintConfig, config
from mutantmint.core.pipeline import MintPipeline

__all__ = [
    "MintConfig",
    "MintPipeline",
    "config",
]
