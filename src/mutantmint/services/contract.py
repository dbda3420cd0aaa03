"""On-chain minting through the NFT contract's ``mintTo`` function.

:class:`ContractMinter` owns the signer account and the contract handle.
They are created once at application startup and shared by all requests;
the build-sign-send sequence is serialised with a lock so that two requests
running in the threadpool never allocate the same nonce.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import requests
from web3 import Web3
from web3.exceptions import Web3Exception

from mutantmint.core.config import MintConfig
from mutantmint.core.errors import ChainTransactionError
from mutantmint.core.models import MintReceipt

logger = logging.getLogger(__name__)

# Only the function the service calls.
NFT_ABI: list[dict[str, Any]] = [
    {
        "type": "function",
        "name": "mintTo",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "recipient", "type": "address"},
            {"name": "metadataURI", "type": "string"},
        ],
        "outputs": [{"name": "", "type": "uint256"}],
    }
]

# Errors raised by web3 itself or by the HTTP transport underneath it.
_CHAIN_ERRORS = (Web3Exception, requests.RequestException, ValueError)


class ContractMinter:
    """Sign and submit ``mintTo`` transactions, then wait for confirmation.

    Args:
        web3: Connected ``Web3`` instance.
        contract_address: Address of the NFT contract.
        private_key: Signing key of the minting wallet.
        chain_id: Chain ID to sign for.  ``None`` lets web3 ask the node.
        receipt_timeout: Seconds to wait for the receipt.
    """

    def __init__(
        self,
        web3: Web3,
        contract_address: str,
        private_key: str,
        *,
        chain_id: int | None = None,
        receipt_timeout: float = 120.0,
    ) -> None:
        self._web3 = web3
        self._account = web3.eth.account.from_key(private_key)
        self._contract = web3.eth.contract(
            address=Web3.to_checksum_address(contract_address),
            abi=NFT_ABI,
        )
        self._chain_id = chain_id
        self._receipt_timeout = receipt_timeout
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: MintConfig) -> ContractMinter:
        """Connect to the configured RPC endpoint and load the signer.

        Raises:
            ValueError: If the RPC URL, private key, or contract address is
                missing.
        """
        config.require("rpc_url", "private_key", "contract_address")
        web3 = Web3(Web3.HTTPProvider(config.rpc_url))
        return cls(
            web3,
            config.contract_address,
            config.private_key.get_secret_value(),
            chain_id=config.chain_id,
            receipt_timeout=config.receipt_timeout,
        )

    @property
    def address(self) -> str:
        """Checksum address of the signer, which also receives the token."""
        return self._account.address

    def mint(self, metadata_uri: str) -> MintReceipt:
        """Mint a token to the signer's own address.

        Args:
            metadata_uri: ``ipfs://`` address of the token metadata, passed
                to ``mintTo`` unchanged.

        Returns:
            The confirmed receipt.

        Raises:
            ChainTransactionError: If the transaction cannot be built,
                signed, or submitted, if no receipt arrives within the
                timeout, or if the receipt reports a revert.
        """
        try:
            tx_hash = self._submit(metadata_uri)
        except _CHAIN_ERRORS as e:
            raise ChainTransactionError(f"Mint transaction submission failed: {e}") from e

        tx_hex = Web3.to_hex(tx_hash)
        logger.info("Mint transaction submitted: %s", tx_hex)

        try:
            receipt = self._web3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self._receipt_timeout
            )
        except _CHAIN_ERRORS as e:
            raise ChainTransactionError(
                f"Mint transaction {tx_hex} was not confirmed: {e}"
            ) from e

        if receipt["status"] != 1:
            raise ChainTransactionError(f"Mint transaction {tx_hex} reverted on chain")

        return MintReceipt(transaction_hash=tx_hex, block_number=receipt.get("blockNumber"))

    def _submit(self, metadata_uri: str):
        with self._lock:
            nonce = self._web3.eth.get_transaction_count(self._account.address, "pending")
            params: dict[str, Any] = {"from": self._account.address, "nonce": nonce}
            if self._chain_id is not None:
                params["chainId"] = self._chain_id

            tx = self._contract.functions.mintTo(
                self._account.address, metadata_uri
            ).build_transaction(params)
            signed = self._account.sign_transaction(tx)
            return self._web3.eth.send_raw_transaction(signed.raw_transaction)
