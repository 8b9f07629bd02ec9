"""Raw transaction and PSBT RPCs."""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param, amounts, array

_op = partial(Operation, category="rawtransactions")

OPERATIONS = (
    _op("analyze_psbt", "analyzepsbt", (Param("psbt"),), doc="Analyze a PSBT and report the next role and fees."),
    _op("combine_psbt", "combinepsbt", (Param("txs", encode=array),), doc="Combine multiple PSBTs into one."),
    _op(
        "combine_raw_transaction",
        "combinerawtransaction",
        (Param("txs", encode=array),),
        doc="Combine partially signed raw transactions into one.",
    ),
    _op(
        "convert_to_psbt",
        "converttopsbt",
        (Param("hexstring"), Param("permitsigdata", False), Param("iswitness", True)),
        doc="Convert a network serialized transaction to a PSBT.",
    ),
    _op(
        "create_psbt",
        "createpsbt",
        (Param("inputs", encode=array), Param("outputs", encode=amounts)),
        doc="Create an unsigned PSBT spending the inputs to the outputs.",
    ),
    _op(
        "create_raw_transaction",
        "createrawtransaction",
        (Param("inputs", encode=array), Param("outputs", encode=amounts)),
        doc="Create an unsigned raw transaction spending the inputs to the outputs.",
    ),
    _op("decode_psbt", "decodepsbt", (Param("psbt"),), doc="Decode a base64 PSBT."),
    _op(
        "decode_raw_transaction",
        "decoderawtransaction",
        (Param("hexstring"), Param("iswitness", True)),
        doc="Decode a hex-encoded transaction.",
    ),
    _op("decode_script", "decodescript", (Param("hexstring"),), doc="Decode a hex-encoded script."),
    _op(
        "finalize_psbt",
        "finalizepsbt",
        (Param("psbt"), Param("extract", True)),
        doc="Finalize the inputs of a PSBT and optionally extract the transaction.",
    ),
    _op(
        "fund_raw_transaction",
        "fundrawtransaction",
        (Param("hexstring"), Param("options", None)),
        doc="Add inputs to a transaction until it has enough value to pay its outputs.",
    ),
    _op(
        "get_raw_transaction",
        "getrawtransaction",
        (Param("txid"), Param("verbose", False)),
        doc="Return a raw transaction, hex-encoded or decoded.",
    ),
    _op("join_psbts", "joinpsbts", (Param("txs", encode=array),), doc="Join the inputs and outputs of several PSBTs."),
    _op(
        "send_raw_transaction",
        "sendrawtransaction",
        (Param("hexstring"), Param("maxfeerate", None)),
        doc="Submit a raw transaction to the node and network.",
    ),
    _op(
        "sign_raw_transaction_with_key",
        "signrawtransactionwithkey",
        (Param("hexstring"), Param("privkeys", encode=array), Param("prevtxs", None)),
        doc="Sign the inputs of a raw transaction with the given private keys.",
    ),
    _op(
        "test_mempool_accept",
        "testmempoolaccept",
        (Param("rawtxs", encode=array), Param("maxfeerate", None)),
        doc="Check whether raw transactions would be accepted by the mempool.",
    ),
    _op(
        "utxo_update_psbt",
        "utxoupdatepsbt",
        (Param("psbt"), Param("descriptors", None)),
        doc="Update a PSBT with data from output descriptors and the UTXO set.",
    ),
)
