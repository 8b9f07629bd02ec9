"""Blockchain RPCs: blocks, chain state, mempool and the UTXO set."""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param, array, verbosity

_op = partial(Operation, category="blockchain")

OPERATIONS = (
    _op("get_best_block_hash", "getbestblockhash", doc="Return the hash of the best (tip) block."),
    _op(
        "get_block",
        "getblock",
        (
            Param("blockhash"),
            Param("verbose", True, encode=verbosity, doc="True for decoded transactions, False for the block summary"),
        ),
        doc="Return information about a block.",
    ),
    _op("get_blockchain_info", "getblockchaininfo", doc="Return the state of blockchain processing."),
    _op("get_block_count", "getblockcount", doc="Return the height of the most-work fully-validated chain."),
    _op(
        "get_block_filter",
        "getblockfilter",
        (Param("blockhash"), Param("filtertype", "basic")),
        doc="Return a BIP 157 content filter for a block.",
    ),
    _op("get_block_hash", "getblockhash", (Param("height"),), doc="Return the hash of the block at a height."),
    _op(
        "get_block_header",
        "getblockheader",
        (Param("blockhash"), Param("verbose", True)),
        doc="Return a block header, decoded or hex-encoded.",
    ),
    _op(
        "get_block_stats",
        "getblockstats",
        (Param("hash_or_height"), Param("stats", (), encode=array)),
        doc="Compute per-block statistics, optionally limited to the named fields.",
    ),
    _op("get_chain_tips", "getchaintips", doc="Return all known tips in the block tree."),
    _op(
        "get_chain_tx_stats",
        "getchaintxstats",
        (Param("nblocks", None), Param("blockhash", None)),
        doc="Compute statistics about the total number and rate of transactions.",
    ),
    _op("get_difficulty", "getdifficulty", doc="Return the proof-of-work difficulty."),
    _op(
        "get_mempool_ancestors",
        "getmempoolancestors",
        (Param("txid"), Param("verbose", False)),
        doc="Return all in-mempool ancestors of a transaction.",
    ),
    _op(
        "get_mempool_descendants",
        "getmempooldescendants",
        (Param("txid"), Param("verbose", False)),
        doc="Return all in-mempool descendants of a transaction.",
    ),
    _op("get_mempool_entry", "getmempoolentry", (Param("txid"),), doc="Return mempool data for a transaction."),
    _op("get_mempool_info", "getmempoolinfo", doc="Return details on the active mempool."),
    _op("get_raw_mempool", "getrawmempool", (Param("verbose", False),), doc="Return all transaction ids in the mempool."),
    _op(
        "get_tx_out",
        "gettxout",
        (Param("txid"), Param("n"), Param("include_mempool", True)),
        doc="Return details about an unspent transaction output.",
    ),
    _op(
        "get_tx_out_proof",
        "gettxoutproof",
        (Param("txids", encode=array), Param("blockhash", None)),
        doc="Return a hex-encoded proof that the transactions were included in a block.",
    ),
    _op("get_tx_out_set_info", "gettxoutsetinfo", doc="Return statistics about the unspent output set."),
    _op("precious_block", "preciousblock", (Param("blockhash"),), doc="Treat a block as if it were received first."),
    _op("prune_blockchain", "pruneblockchain", (Param("height"),), doc="Prune the block store up to a height."),
    _op("save_mempool", "savemempool", doc="Dump the mempool to disk."),
    _op(
        "scan_tx_out_set",
        "scantxoutset",
        (Param("action"), Param("scanobjects", None, encode=array)),
        doc="Scan the UTXO set for outputs matching output descriptors.",
    ),
    _op(
        "verify_chain",
        "verifychain",
        (Param("checklevel", 3), Param("nblocks", 6)),
        doc="Verify the blockchain database.",
    ),
    _op("verify_tx_out_proof", "verifytxoutproof", (Param("proof"),), doc="Verify a proof and return the txids it commits to."),
)
