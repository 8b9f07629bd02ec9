"""Utility RPCs."""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param, array

_op = partial(Operation, category="util")

OPERATIONS = (
    _op(
        "create_multisig",
        "createmultisig",
        (Param("nrequired"), Param("keys", encode=array)),
        doc="Create a multi-signature address requiring n of the given keys.",
    ),
    _op(
        "derive_addresses",
        "deriveaddresses",
        (Param("descriptor"), Param("derive_range", None)),
        doc="Derive addresses from an output descriptor.",
    ),
    _op(
        "estimate_smart_fee",
        "estimatesmartfee",
        (Param("conf_target"), Param("estimate_mode", "CONSERVATIVE")),
        doc="Estimate the fee per kilobyte for confirmation within conf_target blocks.",
    ),
    _op("get_descriptor_info", "getdescriptorinfo", (Param("descriptor"),), doc="Analyze an output descriptor."),
    _op("get_index_info", "getindexinfo", doc="Return the status of the optional indexes."),
    _op(
        "sign_message_with_priv_key",
        "signmessagewithprivkey",
        (Param("privkey"), Param("message")),
        doc="Sign a message with a private key.",
    ),
    _op("validate_address", "validateaddress", (Param("address"),), doc="Return information about an address."),
    _op(
        "verify_message",
        "verifymessage",
        (Param("address"), Param("signature"), Param("message")),
        doc="Verify a signed message.",
    ),
)
