from __future__ import annotations

import pytest

from coin_value.chains.eth.config import EthRpcConfig

ENV_VARS = ("ETH_RPC_URL", "ETH_RPC_CONNECT_TIMEOUT", "ETH_RPC_READ_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so that monkeypatch also removes values loaded from .env files on teardown
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_config_defaults():
    config = EthRpcConfig(url="http://localhost:8545")
    assert config.timeout == (5, 30)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"url": ""},
        {"url": "   "},
        {"url": "http://localhost:8545", "connect_timeout": 0},
        {"url": "http://localhost:8545", "read_timeout": -1},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        EthRpcConfig(**kwargs)


def test_from_env_reads_dotenv_file(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("ETH_RPC_URL=https://rpc.example.org\nETH_RPC_READ_TIMEOUT=12.5\n")

    config = EthRpcConfig.from_env(dotenv_file)

    assert config.url == "https://rpc.example.org"
    assert config.connect_timeout == 5
    assert config.read_timeout == 12.5


def test_from_env_prefers_exported_variables(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("ETH_RPC_URL=https://from-file.example.org\n")
    clean_env.setenv("ETH_RPC_URL", "https://from-env.example.org")
    clean_env.setenv("ETH_RPC_CONNECT_TIMEOUT", "2")

    config = EthRpcConfig.from_env(dotenv_file)

    assert config.url == "https://from-env.example.org"
    assert config.connect_timeout == 2


def test_from_env_requires_url(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("")

    with pytest.raises(ValueError, match="ETH_RPC_URL"):
        EthRpcConfig.from_env(dotenv_file)


def test_from_env_rejects_non_numeric_timeout(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("ETH_RPC_URL=https://rpc.example.org\nETH_RPC_CONNECT_TIMEOUT=soon\n")

    with pytest.raises(ValueError):
        EthRpcConfig.from_env(dotenv_file)
