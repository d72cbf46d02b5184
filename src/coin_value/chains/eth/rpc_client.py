from __future__ import annotations

import logging
from typing import TypeAlias

import requests
from web3 import Web3
from web3.exceptions import Web3Exception
from web3.providers import BaseProvider

from coin_value.chains.eth.config import EthRpcConfig
from coin_value.errors import TransportError

logger = logging.getLogger(__name__)

BLOCK_TAGS = ("latest", "earliest", "pending", "safe", "finalized")

BlockId: TypeAlias = int | str


def validate_block(block: BlockId) -> BlockId:
    """Check that $block is a non-negative block number or one of `BLOCK_TAGS`.

    Returns:
        The same $block, ready to pass to web3 as a block identifier.

    Raises:
        ValueError: If $block is a negative number or an unknown tag.
    """
    if isinstance(block, int) and not isinstance(block, bool):
        if block < 0:
            raise ValueError(f"$block must be >= 0, but provided value is: {block}")
        return block

    if block not in BLOCK_TAGS:
        raise ValueError(f"$block must be a block number or one of {BLOCK_TAGS}, but provided value is: {block!r}")
    return block


class EthRpcClient:
    """Thin wrapper over `Web3` for the one lookup this package needs.

    Each call is a single request/response. There is no retry; failures surface as
    `TransportError` and the caller decides what to do.

    Usage:
        ```python
        client = EthRpcClient(EthRpcConfig.from_env())
        code = client.code_at("0xdAC17F958D2ee523a2206206994597C13D831ec7")
        ```
    """

    def __init__(self, config: EthRpcConfig, provider: BaseProvider | None = None):
        """
        Args:
            config: Node endpoint and timeouts.
            provider: Optional web3 provider. An HTTP provider for `config.url` with the
                configured timeouts is created when omitted.
        """
        self._config = config
        if provider is None:
            provider = Web3.HTTPProvider(config.url, request_kwargs={"timeout": config.timeout})
        self._web3 = Web3(provider)

    @property
    def config(self) -> EthRpcConfig:
        return self._config

    @property
    def web3(self) -> Web3:
        return self._web3

    def code_at(self, address: str, block: BlockId = "latest") -> bytes:
        """Return the bytecode deployed at $address (empty for externally owned accounts).

        Validate $address with `is_valid_address` first; it is checksummed before the call.

        Raises:
            ValueError: If $address or $block is malformed (no request is sent).
            TransportError: On any network or RPC failure.
        """
        block = validate_block(block)
        checksum_address = Web3.to_checksum_address(address)
        logger.debug(f"eth_getCode {checksum_address} at block {block} via {self._config.url}")

        try:
            code = self._web3.eth.get_code(checksum_address, block)
        except (Web3Exception, requests.RequestException, ValueError, TimeoutError, ConnectionError, OSError) as e:
            logger.warning(f"eth_getCode {checksum_address} failed: {e}")
            raise TransportError(f"eth_getCode for {checksum_address} via {self._config.url} failed") from e

        return bytes(code)
