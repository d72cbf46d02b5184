from __future__ import annotations

import logging
import re

from coin_value.chains.eth.rpc_client import BlockId, EthRpcClient
from coin_value.errors import InvalidAddressError, TransportError

logger = logging.getLogger(__name__)

_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_valid_address(address: str) -> bool:
    """Return True if $address is `0x` followed by 40 hex digits (any case).

    No EIP-55 checksum validation is done.
    """
    return isinstance(address, str) and _ADDRESS_PATTERN.fullmatch(address) is not None


def is_smart_contract(address: str, client: EthRpcClient, block: BlockId = "latest") -> bool:
    """Return True if bytecode is deployed at $address.

    Args:
        address: Account address to classify.
        client: RPC client used for the `eth_getCode` lookup.
        block: Block number or tag to query at.

    Raises:
        InvalidAddressError: If $address is malformed (no network call is made).
        TransportError: If the bytecode lookup fails.
    """
    # Raise: never hit the node with a malformed address
    if not is_valid_address(address):
        raise InvalidAddressError(address)

    try:
        byte_code = client.code_at(address, block)
    except TransportError as e:
        raise TransportError(f"failed to get bytecode for {address}") from e

    logger.debug(f"Address {address} has {len(byte_code)} bytes of code at block {block}")
    return len(byte_code) > 0
