"""
Catalog - the table of named node operations.

Each entry is an ``Operation``: the Python name, the RPC method name and the
ordered parameter descriptors. ``BitcoinClient`` binds one method per entry.
"""

from __future__ import annotations

from typing import Optional

from ..wire.params import Operation
from . import blockchain, control, mining, network, rawtransactions, util, wallet

CATALOG: tuple[Operation, ...] = (
    *blockchain.OPERATIONS,
    *control.OPERATIONS,
    *mining.OPERATIONS,
    *network.OPERATIONS,
    *rawtransactions.OPERATIONS,
    *util.OPERATIONS,
    *wallet.OPERATIONS,
)

_BY_NAME = {op.name: op for op in CATALOG}
_BY_METHOD = {op.method: op for op in CATALOG}


def get_operation(name: str) -> Optional[Operation]:
    """Look up an operation by Python name or RPC method name."""
    return _BY_NAME.get(name) or _BY_METHOD.get(name.lower())


def by_category() -> dict[str, list[Operation]]:
    groups: dict[str, list[Operation]] = {}
    for op in CATALOG:
        groups.setdefault(op.category, []).append(op)
    return groups


__all__ = ["CATALOG", "by_category", "get_operation"]
