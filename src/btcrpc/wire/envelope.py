"""
JSON-RPC 1.0 request encoding and response classification.
"""

from __future__ import annotations

import json
from typing import Any, Union

from ..errors import ProtocolError, RemoteError

JSONRPC_VERSION = "1.0"
DEFAULT_REQUEST_ID = "btcrpc"

# null, bool, int, float, str, list of Value, dict of str -> Value
Value = Union[None, bool, int, float, str, list, dict]


def build_request(
    method: str,
    params: list,
    request_id: str = DEFAULT_REQUEST_ID,
    version: str = JSONRPC_VERSION,
) -> dict[str, Any]:
    if not method:
        raise ValueError("RPC method name must not be empty")
    return {
        "jsonrpc": version,
        "id": request_id,
        "method": method,
        "params": list(params),
    }


def encode_request(
    method: str,
    params: list,
    request_id: str = DEFAULT_REQUEST_ID,
    version: str = JSONRPC_VERSION,
) -> bytes:
    """
    Serialize a request envelope to UTF-8 JSON.

    Key order is fixed (jsonrpc, id, method, params) and no whitespace is
    emitted, so equal inputs always produce identical bytes.

    Raises:
        ValueError: If the method name is empty or params hold NaN/Infinity
    """
    envelope = build_request(method, params, request_id=request_id, version=version)
    text = json.dumps(envelope, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    return text.encode("utf-8")


def parse_envelope(payload: bytes) -> dict[str, Any]:
    """Parse raw response bytes into an envelope dict."""
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ProtocolError(f"Malformed payload: invalid UTF-8 ({exc})", payload=payload) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Malformed payload: {exc}", payload=payload) from exc

    if not isinstance(data, dict):
        raise ProtocolError(
            f"Malformed payload: expected a JSON object, got {type(data).__name__}",
            payload=payload,
        )
    return data


def classify(envelope: dict[str, Any], method: str = "", payload: bytes = b"") -> Value:
    """
    Turn a parsed envelope into the call outcome.

    A non-null ``error`` wins over any ``result``. Absent and null ``result``
    both succeed with None.
    """
    error = envelope.get("error")
    if error is not None:
        if not isinstance(error, dict):
            raise ProtocolError(
                f"Malformed payload: 'error' must be an object, got {type(error).__name__}",
                payload=payload,
            )
        message = error.get("message")
        raise RemoteError(
            code=error.get("code"),
            message="" if message is None else str(message),
            data=error.get("data"),
            method=method,
        )
    return envelope.get("result")


def decode_response(payload: bytes, method: str = "") -> Value:
    """
    Decode and classify raw response bytes.

    Raises:
        ProtocolError: If the bytes are not a JSON-RPC envelope
        RemoteError: If the envelope carries a non-null error
    """
    return classify(parse_envelope(payload), method=method, payload=payload)


__all__ = [
    "DEFAULT_REQUEST_ID",
    "JSONRPC_VERSION",
    "Value",
    "build_request",
    "classify",
    "decode_response",
    "encode_request",
    "parse_envelope",
]
