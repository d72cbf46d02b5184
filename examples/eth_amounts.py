from __future__ import annotations

import logging
import sys

from coin_value import BTC, Amount, MismatchedCurrencyError
from coin_value.chains.eth import Eth, EthRpcClient, EthRpcConfig, is_smart_contract, is_valid_address
from coin_value.errors import CoinValueError

logger = logging.getLogger(__name__)


def show_conversions() -> None:
    # Gas fee: 21000 gas at 30 gwei
    gas_price = Eth.from_gwei("30")
    fee = gas_price * 21000
    logger.info(f"Fee: {fee.wei()} wei = {fee.gwei()} gwei = {fee.ether()} ETH")

    # Sending 1.5 ETH plus fee
    total = Eth.from_ether("1.5") + fee
    logger.info(f"Total: {total}")

    # Currencies never mix
    try:
        total + Amount.from_coins("0.1", BTC)
    except MismatchedCurrencyError as e:
        logger.info(f"Rejected: {e}")


def classify(addresses: list[str]) -> None:
    # Needs ETH_RPC_URL in the environment or in a .env file
    client = EthRpcClient(EthRpcConfig.from_env())
    for address in addresses:
        if not is_valid_address(address):
            logger.info(f"{address}: not an address")
            continue
        try:
            kind = "contract" if is_smart_contract(address, client) else "account"
        except CoinValueError as e:
            logger.warning(f"{address}: lookup failed ({e})")
            continue
        logger.info(f"{address}: {kind}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    show_conversions()
    if len(sys.argv) > 1:
        classify(sys.argv[1:])
