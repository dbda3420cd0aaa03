"""Clients for the external collaborators of the mint pipeline.

Modules
-------
openai_service
    Text and image generation through the OpenAI API.
fetcher
    In-memory download of generated images.
pinata
    File and JSON pinning through the Pinata gateway.
contract
    ``mintTo`` submission and receipt confirmation through web3.
"""

from mutantmint.services.contract import ContractMinter
from mutantmint.services.fetcher import ImageFetcher
from mutantmint.services.openai_service import OpenAIGenerator
from mutantmint.services.pinata import PinataClient

__all__ = ["ContractMinter", "ImageFetcher", "OpenAIGenerator", "PinataClient"]
