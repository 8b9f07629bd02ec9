"""Unit tests for request encoding and response classification."""

from __future__ import annotations

import json

import pytest

from btcrpc.errors import ProtocolError, RemoteError
from btcrpc.wire.envelope import decode_response, encode_request


class TestEncodeRequest:
    """Request envelopes are deterministic UTF-8 JSON."""

    def test_getblockcount_envelope(self) -> None:
        body = encode_request("getblockcount", [], request_id="tok")
        assert body == b'{"jsonrpc":"1.0","id":"tok","method":"getblockcount","params":[]}'

    def test_key_order(self) -> None:
        data = json.loads(encode_request("getblock", ["00ab", 1]))
        assert list(data) == ["jsonrpc", "id", "method", "params"]

    def test_deterministic(self) -> None:
        params = [{"b": 1, "a": [1.5, None, True]}, "x"]
        assert encode_request("m", params) == encode_request("m", params)

    def test_numbers_not_coerced(self) -> None:
        data = json.loads(encode_request("m", [1, 1.0, 0.1, "1"]))
        assert data["params"] == [1, 1.0, 0.1, "1"]
        assert isinstance(data["params"][0], int)
        assert isinstance(data["params"][1], float)
        assert isinstance(data["params"][3], str)

    def test_unicode_is_utf8(self) -> None:
        body = encode_request("setlabel", ["bc1q", "café"])
        assert "café".encode("utf-8") in body

    def test_empty_method_rejected(self) -> None:
        with pytest.raises(ValueError):
            encode_request("", [])

    def test_nan_rejected(self) -> None:
        with pytest.raises(ValueError):
            encode_request("settxfee", [float("nan")])


class TestDecodeResponse:
    """Replies are classified before their result is handed out."""

    def test_success(self) -> None:
        assert decode_response(b'{"result": 812345, "error": null, "id": "tok"}') == 812345

    def test_null_result(self) -> None:
        assert decode_response(b'{"result": null, "error": null}') is None

    def test_absent_result_and_error(self) -> None:
        assert decode_response(b"{}") is None

    def test_remote_error(self) -> None:
        payload = b'{"result": null, "error": {"code": -5, "message": "Block not found"}}'
        with pytest.raises(RemoteError) as info:
            decode_response(payload, method="getblock")
        assert info.value.code == -5
        assert info.value.message == "Block not found"
        assert info.value.method == "getblock"
        assert info.value.data is None

    def test_error_wins_over_result(self) -> None:
        payload = b'{"result": 42, "error": {"code": -1, "message": "boom", "data": {"x": 1}}}'
        with pytest.raises(RemoteError) as info:
            decode_response(payload)
        assert info.value.code == -1
        assert info.value.data == {"x": 1}

    @pytest.mark.parametrize(
        "payload",
        [
            b"",
            b"not json",
            b'{"result": 1',
            b"[1, 2, 3]",
            b'"just a string"',
            b"\xff\xfe\x00",
        ],
    )
    def test_malformed_payload(self, payload: bytes) -> None:
        with pytest.raises(ProtocolError) as info:
            decode_response(payload)
        assert "Malformed payload" in str(info.value)
        assert info.value.payload == payload

    def test_non_object_error_is_protocol_error(self) -> None:
        with pytest.raises(ProtocolError):
            decode_response(b'{"result": null, "error": "nope"}')


class TestRoundTrip:
    """A value echoed back as result decodes to itself."""

    @pytest.mark.parametrize(
        "value",
        [None, True, False, 0, -7, 2**62, 3.14159265358979, "text", [], [1, "a", None], {"k": {"n": [1.5]}}],
    )
    def test_echo(self, value: object) -> None:
        sent = json.loads(encode_request("echo", [value]))
        reply = json.dumps({"result": sent["params"][0], "error": None}).encode("utf-8")
        assert decode_response(reply) == value
