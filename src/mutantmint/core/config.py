"""Configuration management for Mutant Mint.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the MUTANTMINT_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (MUTANTMINT_* prefix)
2. .env file in the project root
3. Default values defined in MintConfig

Example .env file:
    MUTANTMINT_RPC_URL=https://api.avax-test.network/ext/bc/C/rpc
    MUTANTMINT_PRIVATE_KEY=0x...
    MUTANTMINT_CONTRACT_ADDRESS=0x...
    MUTANTMINT_OPENAI_API_KEY=sk-...
    MUTANTMINT_PINATA_API_KEY=...
    MUTANTMINT_PINATA_API_SECRET=...
    MUTANTMINT_SERVER_PORT=3000

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
Every credential defaults to an empty string so that importing the package
never fails; missing values are reported when the collaborators are built
(see :meth:`MintConfig.require`).

Usage Example
-------------
    from mutantmint.core.config import config

    print(config.text_model)
    print(config.server_port)
"""

from typing import Literal

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Square resolutions each known image model accepts.  Unknown models are not
# checked.
SQUARE_SIZES_BY_MODEL: dict[str, frozenset[str]] = {
    "dall-e-2": frozenset({"256x256", "512x512", "1024x1024"}),
    "dall-e-3": frozenset({"1024x1024"}),
}


class MintConfig(BaseSettings):
    """Main configuration for Mutant Mint.

    Attributes
    ----------
    Chain Settings:
        rpc_url : str
            JSON-RPC endpoint of the network the contract lives on
        private_key : SecretStr
            Signing key of the minting wallet
        contract_address : str
            Address of the NFT contract exposing ``mintTo``
        chain_id : int | None
            Chain ID used when signing; fetched from the node when unset
        receipt_timeout : float
            Seconds to wait for the mint transaction to be confirmed

    Generation Settings:
        openai_api_key : SecretStr
            Credential for both the text and the image service
        text_model : str
            Chat completion model that writes the creature description
        image_model : str
            Image model that paints the creature
        image_size : Literal["1024x1024", "512x512", "256x256"]
            Square output resolution; must be one the image model accepts
            (dall-e-3 only renders 1024x1024 squares)

    Pinning Settings:
        pinata_api_key : SecretStr
        pinata_api_secret : SecretStr
        pinata_base_url : str
            Root of the Pinata pinning API
        metadata_name_prefix : str
            Prefix of the generated NFT display name

    Server Settings:
        server_host : str
        server_port : int
        log_level : str

    Examples
    --------
        >>> custom_config = MintConfig(text_model="gpt-4o", server_port=8080)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MUTANTMINT_",
        case_sensitive=False,
    )

    # Chain settings
    rpc_url: str = Field(default="", description="JSON-RPC endpoint URL")
    private_key: SecretStr = Field(
        default=SecretStr(""),
        description="Private key of the minting wallet",
    )
    contract_address: str = Field(default="", description="NFT contract address")
    chain_id: int | None = Field(
        default=None,
        description="Chain ID for signing (fetched from the node when unset)",
    )
    receipt_timeout: float = Field(
        default=120.0,
        description="Seconds to wait for the mint transaction receipt",
        gt=0,
    )

    # Text and image generation
    openai_api_key: SecretStr = Field(
        default=SecretStr(""),
        description="OpenAI API key (text and image generation)",
    )
    text_model: str = Field(default="gpt-4", description="Chat completion model")
    image_model: str = Field(default="dall-e-3", description="Image generation model")
    image_size: Literal["1024x1024", "512x512", "256x256"] = Field(
        default="1024x1024",
        description="Square image resolution requested from the image model",
    )

    # Pinning gateway
    pinata_api_key: SecretStr = Field(default=SecretStr(""), description="Pinata API key")
    pinata_api_secret: SecretStr = Field(
        default=SecretStr(""),
        description="Pinata API secret",
    )
    pinata_base_url: str = Field(
        default="https://api.pinata.cloud",
        description="Pinata pinning API root",
    )
    metadata_name_prefix: str = Field(
        default="Brainrot Animal",
        description="Prefix of the NFT display name",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(default=3000, description="Server port", ge=1, le=65535)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root logging level",
    )

    @model_validator(mode="after")
    def _check_image_size(self) -> "MintConfig":
        allowed = SQUARE_SIZES_BY_MODEL.get(self.image_model)
        if allowed is not None and self.image_size not in allowed:
            raise ValueError(
                f"image_size {self.image_size!r} is not supported by {self.image_model}; "
                f"use one of {sorted(allowed)}"
            )
        return self

    def require(self, *names: str) -> None:
        """Ensure that the named settings are non-empty.

        Args:
            *names: Field names to check.

        Raises:
            ValueError: Listing every missing setting by its environment
                variable name.
        """
        missing = []
        for name in names:
            value = getattr(self, name)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            if not value:
                missing.append(f"MUTANTMINT_{name.upper()}")
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")


# Global configuration instance, loaded from MUTANTMINT_* variables and .env.
config = MintConfig()
