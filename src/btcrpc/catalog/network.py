"""Network RPCs: peers, bans and connection state."""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param

_op = partial(Operation, category="network")

OPERATIONS = (
    _op("add_node", "addnode", (Param("node"), Param("command")), doc="Add, remove or try a connection to a node once."),
    _op("clear_banned", "clearbanned", doc="Clear all banned IPs."),
    _op("disconnect_node", "disconnectnode", (Param("address"),), doc="Disconnect from a peer."),
    _op(
        "get_added_node_info",
        "getaddednodeinfo",
        (Param("node", ""),),
        doc="Return information about added nodes.",
    ),
    _op("get_connection_count", "getconnectioncount", doc="Return the number of peer connections."),
    _op("get_net_totals", "getnettotals", doc="Return network traffic statistics."),
    _op("get_network_info", "getnetworkinfo", doc="Return P2P networking state."),
    _op("get_node_addresses", "getnodeaddresses", (Param("count", 1),), doc="Return known addresses for finding new nodes."),
    _op("get_peer_info", "getpeerinfo", doc="Return data about each connected peer."),
    _op("list_banned", "listbanned", doc="List all manually banned IPs and subnets."),
    _op("ping", "ping", doc="Request a ping to all peers."),
    _op(
        "set_ban",
        "setban",
        (Param("subnet"), Param("command"), Param("bantime", 0), Param("absolute", False)),
        doc="Add or remove an IP or subnet from the ban list.",
    ),
    _op("set_network_active", "setnetworkactive", (Param("state"),), doc="Enable or disable all P2P network activity."),
)
