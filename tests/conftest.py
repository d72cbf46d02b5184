from __future__ import annotations

import pytest

from coin_value.chains.eth.config import EthRpcConfig
from coin_value.chains.eth.rpc_client import EthRpcClient
from tests.helpers.helper_rpc import NODE_URL, FakeProvider


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def rpc_client(fake_provider: FakeProvider) -> EthRpcClient:
    return EthRpcClient(EthRpcConfig(url=NODE_URL), provider=fake_provider)
