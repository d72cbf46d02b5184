from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

CONNECT_TIMEOUT = 5
READ_TIMEOUT = 30


@dataclass(frozen=True)
class EthRpcConfig:
    """Connection settings for an Ethereum JSON-RPC node.

    Attributes:
        url (str): HTTP(S) endpoint of the node.
        connect_timeout (float): Seconds to wait for the TCP connection.
        read_timeout (float): Seconds to wait for the response.
    """

    url: str
    connect_timeout: float = CONNECT_TIMEOUT
    read_timeout: float = READ_TIMEOUT

    def __post_init__(self):
        # Raise: $url is required to reach any node
        if not isinstance(self.url, str) or not self.url.strip():
            raise ValueError(f"$url must be a non-empty string, but provided value is: '{self.url}'")

        # Raise: timeouts must be positive
        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError(f"Timeouts must be > 0, but provided values are: connect_timeout={self.connect_timeout}, read_timeout={self.read_timeout}")

    @property
    def timeout(self) -> tuple[float, float]:
        """Timeout tuple in the form `requests` expects."""
        return self.connect_timeout, self.read_timeout

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> EthRpcConfig:
        """Build config from environment variables, loading a `.env` file first.

        Variables:
            ETH_RPC_URL: node endpoint (required).
            ETH_RPC_CONNECT_TIMEOUT: connect timeout in seconds (optional).
            ETH_RPC_READ_TIMEOUT: read timeout in seconds (optional).

        Already exported variables take precedence over values from the `.env` file.

        Raises:
            ValueError: If ETH_RPC_URL is not set or a timeout is not a number.
        """
        load_dotenv(dotenv_path)

        url = os.environ.get("ETH_RPC_URL")
        if not url:
            raise ValueError("Cannot call `EthRpcConfig.from_env` because $ETH_RPC_URL is not set. Add it to the environment or to a .env file")

        try:
            connect_timeout = float(os.environ.get("ETH_RPC_CONNECT_TIMEOUT", CONNECT_TIMEOUT))
            read_timeout = float(os.environ.get("ETH_RPC_READ_TIMEOUT", READ_TIMEOUT))
        except ValueError as e:
            raise ValueError("Cannot call `EthRpcConfig.from_env` because a timeout variable is not a number") from e

        return cls(url=url, connect_timeout=connect_timeout, read_timeout=read_timeout)
