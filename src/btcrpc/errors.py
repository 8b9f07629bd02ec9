"""
Error taxonomy for btcrpc.

Every failed call surfaces as exactly one of three kinds:

- TransportError: the request was not delivered or no usable reply came back
- ProtocolError:  the reply could not be parsed as a JSON-RPC envelope
- RemoteError:    the node answered with a non-null ``error`` member

``exit_code`` is used by the CLI to map a failure to a process exit status.
"""

from __future__ import annotations

from typing import Any, Optional


class RpcError(RuntimeError):
    exit_code: int = 1


class TransportError(RpcError):
    exit_code = 2

    def __init__(
        self,
        message: str,
        url: str = "",
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body


class ProtocolError(RpcError):
    exit_code = 3

    def __init__(self, message: str, payload: bytes = b"") -> None:
        super().__init__(message)
        self.payload = payload


class RemoteError(RpcError):
    exit_code = 4

    def __init__(
        self,
        code: Optional[int],
        message: str,
        data: Any = None,
        method: str = "",
    ) -> None:
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message
        self.data = data
        self.method = method


__all__ = [
    "RpcError",
    "TransportError",
    "ProtocolError",
    "RemoteError",
]
