"""Ethereum binding: the Eth amount type, address checks and a minimal JSON-RPC client."""

from coin_value.chains.eth.address import is_smart_contract, is_valid_address
from coin_value.chains.eth.config import EthRpcConfig
from coin_value.chains.eth.eth import GWEI, KWEI, MWEI, Eth
from coin_value.chains.eth.rpc_client import EthRpcClient

__all__ = ["Eth", "EthRpcClient", "EthRpcConfig", "GWEI", "KWEI", "MWEI", "is_smart_contract", "is_valid_address"]
