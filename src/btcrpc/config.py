"""
Client configuration.

Settings come from, in increasing priority:
- built-in defaults (local mainnet node on 127.0.0.1:8332)
- ~/.btcrpc/.env (or an explicit .env path)
- process environment variables

Recognized keys: BITCOIN_RPC_URL, BITCOIN_RPC_USER, BITCOIN_RPC_PASSWORD,
BITCOIN_RPC_TIMEOUT, BITCOIN_RPC_ID.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import quote

from dotenv import dotenv_values

from .wire.envelope import DEFAULT_REQUEST_ID
from .wire.transport import DEFAULT_TIMEOUT

# Default config directory
BTCRPC_DIR = Path.home() / ".btcrpc"
BTCRPC_ENV = BTCRPC_DIR / ".env"

DEFAULT_RPC_URL = "http://127.0.0.1:8332/"

_WALLET_PATH = re.compile(r"/wallet/[^/]*$")


@dataclass(frozen=True)
class RpcConfig:
    username: str
    password: str
    url: str = DEFAULT_RPC_URL
    timeout: float = DEFAULT_TIMEOUT
    request_id: str = DEFAULT_REQUEST_ID

    @property
    def auth(self) -> tuple[str, str]:
        return (self.username, self.password)

    def with_wallet(self, wallet_name: str) -> "RpcConfig":
        """Return a copy pointed at the node's ``/wallet/<name>`` endpoint.

        A wallet already in the URL is replaced, not nested.
        """
        base = _WALLET_PATH.sub("", self.url.rstrip("/"))
        return replace(self, url=f"{base}/wallet/{quote(wallet_name, safe='')}")

    def __repr__(self) -> str:
        return (
            f"RpcConfig(username={self.username!r}, password='***', url={self.url!r}, "
            f"timeout={self.timeout!r}, request_id={self.request_id!r})"
        )


def _read_env(env_path: Optional[Path]) -> dict[str, str]:
    env_path = env_path or BTCRPC_ENV
    values: dict[str, str] = {}
    if env_path.exists():
        values.update({k: v for k, v in dotenv_values(env_path).items() if v is not None})
    values.update(os.environ)
    return values


def parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(f"BITCOIN_RPC_TIMEOUT must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ValueError(f"BITCOIN_RPC_TIMEOUT must be positive, got {raw!r}")
    return timeout


def config_from_mapping(values: Mapping[str, str]) -> RpcConfig:
    return RpcConfig(
        username=values.get("BITCOIN_RPC_USER", ""),
        password=values.get("BITCOIN_RPC_PASSWORD", ""),
        url=values.get("BITCOIN_RPC_URL") or DEFAULT_RPC_URL,
        timeout=parse_timeout(values["BITCOIN_RPC_TIMEOUT"])
        if values.get("BITCOIN_RPC_TIMEOUT")
        else DEFAULT_TIMEOUT,
        request_id=values.get("BITCOIN_RPC_ID") or DEFAULT_REQUEST_ID,
    )


def load_config(env_path: Optional[Path] = None) -> RpcConfig:
    """
    Load client configuration from a .env file and the environment.

    Args:
        env_path: Path to .env file (default: ~/.btcrpc/.env)

    Returns:
        Immutable RpcConfig

    Raises:
        ValueError: If BITCOIN_RPC_TIMEOUT is not a positive number
    """
    return config_from_mapping(_read_env(env_path))


__all__ = [
    "BTCRPC_DIR",
    "BTCRPC_ENV",
    "DEFAULT_RPC_URL",
    "RpcConfig",
    "config_from_mapping",
    "load_config",
    "parse_timeout",
]
