"""
Call pipeline tests for BitcoinClient.

The node is faked with httpx.MockTransport, so every test exercises the real
encoder, transport and classifier without network access.
"""

from __future__ import annotations

import inspect
import json
import logging
from typing import Any, Callable

import httpx
import pytest

from btcrpc import BitcoinClient
from btcrpc.errors import ProtocolError, RemoteError, TransportError
from btcrpc.wire.transport import HttpTransport

URL = "http://127.0.0.1:8332/"


class FakeNode:
    """Records requests and answers them from a canned reply."""

    def __init__(self, reply: Callable[[dict], httpx.Response]) -> None:
        self.reply = reply
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.reply(json.loads(request.content))

    @property
    def last(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


def ok(result: Any) -> Callable[[dict], httpx.Response]:
    return lambda envelope: httpx.Response(200, json={"result": result, "error": None, "id": envelope["id"]})


def make_client(node: FakeNode, **kwargs: Any) -> BitcoinClient:
    transport = HttpTransport(transport=httpx.MockTransport(node))
    return BitcoinClient("user", "pass", url=URL, request_id="tok", transport=transport, **kwargs)


class TestInvoke:
    """invoke composes encode, transport and classify."""

    def test_getblockcount_scenario(self) -> None:
        node = FakeNode(ok(812345))
        client = make_client(node)

        assert client.get_block_count() == 812345
        assert node.requests[-1].content == (
            b'{"jsonrpc":"1.0","id":"tok","method":"getblockcount","params":[]}'
        )

    def test_getblock_not_found_scenario(self) -> None:
        def reply(envelope: dict) -> httpx.Response:
            return httpx.Response(200, json={"result": None, "error": {"code": -5, "message": "Block not found"}})

        node = FakeNode(reply)
        client = make_client(node)

        with pytest.raises(RemoteError) as info:
            client.get_block("00" * 32, verbose=False)
        assert node.last["params"] == ["00" * 32, 1]
        assert info.value.code == -5
        assert info.value.message == "Block not found"
        assert info.value.method == "getblock"

    def test_connection_refused_never_decodes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        calls: list = []
        monkeypatch.setattr("btcrpc.client.decode_response", lambda *a, **k: calls.append(a))
        client = BitcoinClient("u", "p", transport=HttpTransport(transport=httpx.MockTransport(handler)))

        with pytest.raises(TransportError):
            client.get_block_count()
        assert calls == []

    def test_invoke_defaults_to_empty_params(self) -> None:
        node = FakeNode(ok("pong"))
        assert make_client(node).invoke("uptime") == "pong"
        assert node.last["params"] == []

    def test_null_result_is_success(self) -> None:
        node = FakeNode(ok(None))
        assert make_client(node).invoke("getmempoolentry", ["ab"]) is None

    def test_malformed_reply(self) -> None:
        node = FakeNode(lambda envelope: httpx.Response(200, content=b"<html>oops</html>"))
        with pytest.raises(ProtocolError):
            make_client(node).get_block_count()

    def test_error_with_result_is_remote_error(self) -> None:
        node = FakeNode(
            lambda envelope: httpx.Response(200, json={"result": 1, "error": {"code": -32601, "message": "Method not found"}})
        )
        with pytest.raises(RemoteError) as info:
            make_client(node).invoke("nosuchmethod")
        assert info.value.code == -32601

    def test_http_500_with_error_envelope_is_remote_error(self) -> None:
        body = {"result": None, "error": {"code": -8, "message": "Block height out of range"}, "id": "tok"}
        node = FakeNode(lambda envelope: httpx.Response(500, json=body))

        with pytest.raises(RemoteError) as info:
            make_client(node).get_block_hash(10_000_000)
        assert info.value.code == -8
        assert info.value.message == "Block height out of range"
        assert isinstance(info.value.__cause__, TransportError)

    def test_http_500_without_envelope_is_transport_error(self) -> None:
        node = FakeNode(lambda envelope: httpx.Response(500, content=b"Internal Server Error"))
        with pytest.raises(TransportError) as info:
            make_client(node).get_block_count()
        assert info.value.status_code == 500

    def test_http_500_with_null_error_stays_transport_error(self) -> None:
        node = FakeNode(lambda envelope: httpx.Response(500, json={"result": 1, "error": None}))
        with pytest.raises(TransportError):
            make_client(node).get_block_count()

    def test_auth_rejection_is_transport_error(self) -> None:
        node = FakeNode(lambda envelope: httpx.Response(401))
        with pytest.raises(TransportError) as info:
            make_client(node).get_block_count()
        assert info.value.status_code == 401


class TestNamedOperations:
    """Bound catalog methods marshal their documented argument lists."""

    @pytest.mark.parametrize(
        "call,expected_method,expected_params",
        [
            (lambda c: c.get_best_block_hash(), "getbestblockhash", []),
            (lambda c: c.get_block("aa"), "getblock", ["aa"]),
            (lambda c: c.get_block("aa", True), "getblock", ["aa", 2]),
            (lambda c: c.get_block_header("aa"), "getblockheader", ["aa"]),
            (lambda c: c.get_chain_tx_stats(), "getchaintxstats", []),
            (lambda c: c.get_chain_tx_stats(blockhash="aa"), "getchaintxstats", [None, "aa"]),
            (lambda c: c.get_tx_out("tx", 0), "gettxout", ["tx", 0]),
            (lambda c: c.get_tx_out_proof(["t1", "t2"]), "gettxoutproof", [["t1", "t2"]]),
            (lambda c: c.help(), "help", []),
            (lambda c: c.help("getblock"), "help", ["getblock"]),
            (lambda c: c.verify_chain(), "verifychain", []),
            (lambda c: c.verify_chain(nblocks=10), "verifychain", [3, 10]),
            (lambda c: c.get_network_hash_ps(), "getnetworkhashps", []),
            (lambda c: c.set_ban("10.0.0.0/8", "add"), "setban", ["10.0.0.0/8", "add"]),
            (lambda c: c.submit_block("00"), "submitblock", ["00"]),
            (lambda c: c.fund_raw_transaction("00"), "fundrawtransaction", ["00"]),
            (lambda c: c.fund_raw_transaction("00", {"feeRate": 0.0002}), "fundrawtransaction", ["00", {"feeRate": 0.0002}]),
            (lambda c: c.estimate_smart_fee(6), "estimatesmartfee", [6]),
            (lambda c: c.send_raw_transaction("00"), "sendrawtransaction", ["00"]),
            (lambda c: c.send_raw_transaction("00", 0.1), "sendrawtransaction", ["00", 0.1]),
            (lambda c: c.test_mempool_accept(["00"]), "testmempoolaccept", [["00"]]),
            (lambda c: c.get_new_address(), "getnewaddress", []),
            (lambda c: c.get_new_address(address_type="bech32"), "getnewaddress", ["", "bech32"]),
            (lambda c: c.import_address("bc1q"), "importaddress", ["bc1q"]),
            (lambda c: c.import_address("bc1q", rescan=False), "importaddress", ["bc1q", "", False]),
            (lambda c: c.list_unspent(), "listunspent", []),
            (lambda c: c.list_unspent(0), "listunspent", [0]),
            (lambda c: c.list_unspent(addresses=["bc1q"]), "listunspent", [1, 9999999, ["bc1q"]]),
            (lambda c: c.rescan_blockchain(), "rescanblockchain", []),
            (lambda c: c.rescan_blockchain(0), "rescanblockchain", [0]),
            (lambda c: c.rescan_blockchain(stop_height=100), "rescanblockchain", [0, 100]),
            (lambda c: c.send_to_address("bc1q", 0.1), "sendtoaddress", ["bc1q", 0.1]),
            (
                lambda c: c.send_to_address("bc1q", 0.1, subtract_fee_from_amount=True),
                "sendtoaddress",
                ["bc1q", 0.1, "", "", True],
            ),
            (
                lambda c: c.send_many("", {"bc1qa": 0.1, "bc1qb": 0.2}),
                "sendmany",
                ["", {"bc1qa": 0.1, "bc1qb": 0.2}],
            ),
            (
                lambda c: c.create_raw_transaction([{"txid": "t", "vout": 0}], {"bc1q": 0.5}),
                "createrawtransaction",
                [[{"txid": "t", "vout": 0}], {"bc1q": 0.5}],
            ),
            (lambda c: c.wallet_passphrase("pw", 60), "walletpassphrase", ["pw", 60]),
            (lambda c: c.logging(["net"]), "logging", [["net"]]),
        ],
    )
    def test_marshaled_params(self, call, expected_method: str, expected_params: list) -> None:
        node = FakeNode(ok(None))
        call(make_client(node))
        assert node.last["method"] == expected_method
        assert node.last["params"] == expected_params

    def test_call_by_rpc_name(self) -> None:
        node = FakeNode(ok("hash"))
        assert make_client(node).call("getblockhash", 100) == "hash"
        assert node.last == {"jsonrpc": "1.0", "id": "tok", "method": "getblockhash", "params": [100]}

    def test_call_by_python_name(self) -> None:
        node = FakeNode(ok(3))
        assert make_client(node).call("get_connection_count") == 3

    def test_call_unknown_operation(self) -> None:
        node = FakeNode(ok(None))
        with pytest.raises(ValueError, match="Unknown operation"):
            make_client(node).call("frobnicate")
        assert node.requests == []

    def test_bad_arguments_raise_before_sending(self) -> None:
        node = FakeNode(ok(None))
        client = make_client(node)
        with pytest.raises(TypeError):
            client.get_block()
        with pytest.raises(TypeError):
            client.get_block_count(1)
        assert node.requests == []

    def test_bound_method_metadata(self) -> None:
        method = BitcoinClient.get_block
        assert method.__name__ == "get_block"
        assert "getblock blockhash [verbose]" in method.__doc__
        assert list(inspect.signature(method).parameters) == ["self", "blockhash", "verbose"]

    def test_failures_pass_through_unwrapped(self) -> None:
        node = FakeNode(lambda envelope: httpx.Response(200, json={"result": None, "error": {"code": -4, "message": "Insufficient funds"}}))
        with pytest.raises(RemoteError) as info:
            make_client(node).send_to_address("bc1q", 21.0)
        assert type(info.value) is RemoteError
        assert info.value.code == -4


class TestClientConfiguration:
    """Client construction and derived clients."""

    def test_no_io_at_construction(self) -> None:
        node = FakeNode(ok(None))
        make_client(node)
        assert node.requests == []

    def test_default_url(self) -> None:
        client = BitcoinClient("u", "p")
        assert client.config.url == "http://127.0.0.1:8332/"

    def test_for_wallet_url(self) -> None:
        node = FakeNode(ok(1.5))
        client = make_client(node).for_wallet("hot wallet")

        assert client.get_balance() == 1.5
        assert str(node.requests[-1].url) == "http://127.0.0.1:8332/wallet/hot%20wallet"
        assert client.config.username == "user"

    def test_for_wallet_twice_switches_wallet(self) -> None:
        node = FakeNode(ok(0))
        client = make_client(node).for_wallet("a").for_wallet("b")

        client.get_balance()
        assert str(node.requests[-1].url) == "http://127.0.0.1:8332/wallet/b"

    def test_repr_hides_password(self) -> None:
        client = BitcoinClient("u", "hunter2")
        assert "hunter2" not in repr(client)
        assert "hunter2" not in repr(client.config)


class TestLogging:
    """Requests are logged at DEBUG without key material."""

    def test_request_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        node = FakeNode(ok(5))
        with caplog.at_level(logging.DEBUG, logger="btcrpc"):
            make_client(node).get_block_hash(5)
        assert "getblockhash" in caplog.text

    def test_sensitive_params_redacted(self, caplog: pytest.LogCaptureFixture) -> None:
        node = FakeNode(ok(None))
        with caplog.at_level(logging.DEBUG, logger="btcrpc"):
            make_client(node).wallet_passphrase("correct horse", 30)
        assert "correct horse" not in caplog.text
        assert "<redacted>" in caplog.text

    @pytest.mark.parametrize(
        "call",
        [
            lambda c: c.import_multi([{"scriptPubKey": {"address": "bc1q"}, "timestamp": "now", "keys": ["L1SECRETWIF"]}]),
            lambda c: c.import_descriptors([{"desc": "wpkh(L1SECRETWIF)", "timestamp": "now"}]),
        ],
    )
    def test_key_import_params_redacted(self, call, caplog: pytest.LogCaptureFixture) -> None:
        node = FakeNode(ok([{"success": True}]))
        with caplog.at_level(logging.DEBUG, logger="btcrpc"):
            call(make_client(node))
        assert node.requests
        assert "L1SECRETWIF" not in caplog.text
        assert "<redacted>" in caplog.text

    def test_response_not_logged_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        node = FakeNode(ok("blockbody"))
        with caplog.at_level(logging.INFO, logger="btcrpc"):
            make_client(node).get_block_hash(5)
        assert "blockbody" not in caplog.text

    def test_failure_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        node = FakeNode(lambda envelope: httpx.Response(200, content=b"garbage"))
        with caplog.at_level(logging.WARNING, logger="btcrpc"):
            with pytest.raises(ProtocolError):
                make_client(node).get_block_count()
        assert any(record.levelno == logging.WARNING for record in caplog.records)
