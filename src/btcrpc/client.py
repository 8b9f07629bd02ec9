"""
Bitcoin node JSON-RPC client.

``BitcoinClient.invoke`` is the single call path: encode the request, hand
the bytes to the transport, classify the reply. Every operation in the
catalog is bound onto the class as a method that marshals its arguments and
calls ``invoke``; none of them carries logic of its own.

No retries, caching or batching: one call is one HTTP exchange.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from .catalog import CATALOG, get_operation
from .config import DEFAULT_RPC_URL, RpcConfig, load_config
from .errors import ProtocolError, RemoteError, TransportError
from .wire.envelope import DEFAULT_REQUEST_ID, Value, classify, decode_response, encode_request, parse_envelope
from .wire.params import Operation
from .wire.transport import DEFAULT_TIMEOUT, HttpTransport, Transport

logger = logging.getLogger(__name__)

# Params and results of these methods carry key material; keep them out of logs.
SENSITIVE_METHODS = frozenset(
    {
        "dumpprivkey",
        "encryptwallet",
        "importdescriptors",
        "importmulti",
        "importprivkey",
        "sethdseed",
        "signmessagewithprivkey",
        "signrawtransactionwithkey",
        "walletpassphrase",
        "walletpassphrasechange",
    }
)


class BitcoinClient:
    """Synchronous client for one node endpoint."""

    def __init__(
        self,
        username: str,
        password: str,
        url: str = DEFAULT_RPC_URL,
        timeout: float = DEFAULT_TIMEOUT,
        request_id: str = DEFAULT_REQUEST_ID,
        transport: Optional[Transport] = None,
    ) -> None:
        self.config = RpcConfig(
            username=username,
            password=password,
            url=url,
            timeout=timeout,
            request_id=request_id,
        )
        self._transport: Transport = transport or HttpTransport(timeout=timeout)

    @classmethod
    def from_config(cls, config: RpcConfig, transport: Optional[Transport] = None) -> "BitcoinClient":
        return cls(
            username=config.username,
            password=config.password,
            url=config.url,
            timeout=config.timeout,
            request_id=config.request_id,
            transport=transport,
        )

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None, transport: Optional[Transport] = None) -> "BitcoinClient":
        """Build a client from ~/.btcrpc/.env and BITCOIN_RPC_* variables."""
        return cls.from_config(load_config(env_path), transport=transport)

    def __repr__(self) -> str:
        return f"BitcoinClient(url={self.config.url!r}, username={self.config.username!r})"

    def for_wallet(self, wallet_name: str) -> "BitcoinClient":
        """Return a client bound to the node's per-wallet endpoint."""
        config = self.config.with_wallet(wallet_name)
        return type(self).from_config(config, transport=self._transport)

    # ============ Call pipeline ============

    def invoke(self, method: str, params: Optional[list] = None) -> Value:
        """
        Call an RPC method with already-marshaled positional params.

        Args:
            method: RPC method name (e.g., "getblockcount")
            params: Positional parameters (default: [])

        Returns:
            The ``result`` member of the reply (may be None)

        Raises:
            TransportError: If the request could not be delivered
            ProtocolError: If the reply is not a JSON-RPC envelope
            RemoteError: If the node returned an error
        """
        params = list(params or [])
        body = encode_request(method, params, request_id=self.config.request_id)
        sensitive = method in SENSITIVE_METHODS
        logger.debug("RPC request: %s %s", method, "<redacted>" if sensitive else params)

        try:
            payload = self._transport.post(self.config.url, body, self.config.auth)
        except TransportError as exc:
            self._raise_remote_from_status(exc, method)
            logger.warning("RPC %s transport failure: %s", method, exc)
            raise

        if not sensitive and logger.isEnabledFor(logging.DEBUG):
            logger.debug("RPC response: %s %s", method, payload.decode("utf-8", errors="replace"))

        try:
            return decode_response(payload, method=method)
        except (ProtocolError, RemoteError) as exc:
            logger.warning("RPC %s failed: %s", method, exc)
            raise

    def _raise_remote_from_status(self, exc: TransportError, method: str) -> None:
        # The node answers failed calls with HTTP 500/404 and an error envelope.
        if not exc.body:
            return
        try:
            envelope = parse_envelope(exc.body)
        except ProtocolError:
            return
        if not isinstance(envelope.get("error"), dict):
            return
        try:
            classify(envelope, method=method, payload=exc.body)
        except RemoteError as remote:
            logger.warning("RPC %s failed: %s", method, remote)
            raise remote from exc

    def call(self, name: str, *args: Any, **kwargs: Any) -> Value:
        """Invoke a catalog operation by Python name or RPC method name."""
        op = get_operation(name)
        if op is None:
            raise ValueError(f"Unknown operation: {name}")
        return self.invoke(op.method, op.bind(*args, **kwargs))


# ============ Catalog binding ============


def _bind_operation(op: Operation) -> Callable[..., Value]:
    def operation(self: BitcoinClient, *args: Any, **kwargs: Any) -> Value:
        return self.invoke(op.method, op.bind(*args, **kwargs))

    lines = [op.doc, "", f"RPC: {op.usage()}"]
    documented = [p for p in op.params if p.doc]
    if documented:
        lines.append("")
        lines.append("Args:")
        lines.extend(f"    {p.name}: {p.doc}" for p in documented)

    operation.__name__ = op.name
    operation.__qualname__ = f"{BitcoinClient.__name__}.{op.name}"
    operation.__doc__ = "\n".join(lines)
    operation.__signature__ = op.signature()  # type: ignore[attr-defined]
    return operation


for _op in CATALOG:
    if hasattr(BitcoinClient, _op.name):
        raise RuntimeError(f"Operation name clashes with BitcoinClient attribute: {_op.name}")
    setattr(BitcoinClient, _op.name, _bind_operation(_op))
del _op


__all__ = ["BitcoinClient", "SENSITIVE_METHODS"]
