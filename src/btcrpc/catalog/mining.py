"""Generating and mining RPCs."""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param, array

_gen = partial(Operation, category="generating")
_op = partial(Operation, category="mining")

OPERATIONS = (
    _gen(
        "generate_block",
        "generateblock",
        (Param("output"), Param("transactions", encode=array)),
        doc="Mine a block with a set of ordered transactions to an address or descriptor.",
    ),
    _gen(
        "generate_to_address",
        "generatetoaddress",
        (Param("nblocks"), Param("address"), Param("maxtries", None)),
        doc="Mine blocks immediately to an address.",
    ),
    _gen(
        "generate_to_descriptor",
        "generatetodescriptor",
        (Param("num_blocks"), Param("descriptor"), Param("maxtries", None)),
        doc="Mine blocks immediately to a descriptor.",
    ),
    _op(
        "get_block_template",
        "getblocktemplate",
        (Param("template_request", None),),
        doc="Return data needed to construct a block to work on.",
    ),
    _op("get_mining_info", "getmininginfo", doc="Return mining-related information."),
    _op(
        "get_network_hash_ps",
        "getnetworkhashps",
        (Param("nblocks", 120), Param("height", -1)),
        doc="Return the estimated network hashes per second.",
    ),
    _op(
        "prioritise_transaction",
        "prioritisetransaction",
        (Param("txid"), Param("fee_delta")),
        doc="Accept a transaction into mined blocks at a higher or lower priority.",
    ),
    _op(
        "submit_block",
        "submitblock",
        (Param("hexdata"), Param("dummy", "")),
        doc="Attempt to submit a new block to the network.",
    ),
    _op("submit_header", "submitheader", (Param("hexdata"),), doc="Decode a block header and submit it as a candidate chain tip."),
)
