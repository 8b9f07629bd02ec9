"""Control RPCs."""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param, array

_op = partial(Operation, category="control")

OPERATIONS = (
    _op("get_memory_info", "getmemoryinfo", doc="Return information about memory usage."),
    _op("get_rpc_info", "getrpcinfo", doc="Return details of the RPC server."),
    _op("help", "help", (Param("command", ""),), doc="List all commands, or get help for one."),
    _op(
        "logging",
        "logging",
        (Param("include", (), encode=array), Param("exclude", (), encode=array)),
        doc="Get or set the logging categories of the node.",
    ),
    _op("stop", "stop", doc="Request a graceful shutdown of the node."),
    _op("uptime", "uptime", doc="Return the number of seconds the node has been running."),
)
