"""
Wallet RPCs.

Most wallet calls take several optional trailing arguments. An unset tail is
left to the node's own defaults, while setting a later argument encodes the
earlier ones with their declared fill values.
"""

from __future__ import annotations

from functools import partial

from ..wire.params import Operation, Param, amounts, array

_op = partial(Operation, category="wallet")

OPERATIONS = (
    _op("abandon_transaction", "abandontransaction", (Param("txid"),), doc="Mark an in-wallet transaction as abandoned."),
    _op("abort_rescan", "abortrescan", doc="Stop the current wallet rescan."),
    _op(
        "add_multisig_address",
        "addmultisigaddress",
        (Param("nrequired"), Param("keys", encode=array), Param("label", "")),
        doc="Add an n-of-m multisig address to the wallet.",
    ),
    _op("backup_wallet", "backupwallet", (Param("destination"),), doc="Copy the wallet file to a destination."),
    _op(
        "bump_fee",
        "bumpfee",
        (Param("txid"), Param("options", None)),
        doc="Replace a wallet transaction with a higher-fee version.",
    ),
    _op(
        "create_wallet",
        "createwallet",
        (Param("wallet_name"), Param("disable_private_keys", False), Param("blank", False)),
        doc="Create and load a new wallet.",
    ),
    _op("dump_priv_key", "dumpprivkey", (Param("address"),), doc="Reveal the private key of an address."),
    _op("dump_wallet", "dumpwallet", (Param("filename"),), doc="Dump all wallet keys to a file."),
    _op("encrypt_wallet", "encryptwallet", (Param("passphrase"),), doc="Encrypt the wallet with a passphrase."),
    _op("get_addresses_by_label", "getaddressesbylabel", (Param("label"),), doc="Return the addresses assigned a label."),
    _op("get_address_info", "getaddressinfo", (Param("address"),), doc="Return information about an address."),
    _op(
        "get_balance",
        "getbalance",
        (Param("dummy", "*"), Param("minconf", 0), Param("include_watchonly", False)),
        doc="Return the total available balance.",
    ),
    _op("get_balances", "getbalances", doc="Return all balances in BTC units."),
    _op(
        "get_new_address",
        "getnewaddress",
        (Param("label", ""), Param("address_type", None)),
        doc="Return a new address for receiving payments.",
    ),
    _op(
        "get_raw_change_address",
        "getrawchangeaddress",
        (Param("address_type", None),),
        doc="Return a new address for receiving change.",
    ),
    _op(
        "get_received_by_address",
        "getreceivedbyaddress",
        (Param("address"), Param("minconf", 1)),
        doc="Return the total amount received by an address.",
    ),
    _op(
        "get_received_by_label",
        "getreceivedbylabel",
        (Param("label"), Param("minconf", 1)),
        doc="Return the total amount received by addresses with a label.",
    ),
    _op(
        "get_transaction",
        "gettransaction",
        (Param("txid"), Param("include_watchonly", False)),
        doc="Return detailed information about an in-wallet transaction.",
    ),
    _op("get_unconfirmed_balance", "getunconfirmedbalance", doc="Return the unconfirmed balance."),
    _op("get_wallet_info", "getwalletinfo", doc="Return wallet state information."),
    _op(
        "import_address",
        "importaddress",
        (Param("address"), Param("label", ""), Param("rescan", True)),
        doc="Watch an address or script without its private key.",
    ),
    _op("import_descriptors", "importdescriptors", (Param("requests"),), doc="Import descriptors into a descriptor wallet."),
    _op(
        "import_multi",
        "importmulti",
        (Param("requests"), Param("options", None)),
        doc="Import addresses, scripts or keys in one call.",
    ),
    _op(
        "import_priv_key",
        "importprivkey",
        (Param("privkey"), Param("label", ""), Param("rescan", True)),
        doc="Add a private key to the wallet.",
    ),
    _op(
        "import_pruned_funds",
        "importprunedfunds",
        (Param("rawtransaction"), Param("txoutproof")),
        doc="Import funds without a rescan.",
    ),
    _op(
        "import_pub_key",
        "importpubkey",
        (Param("pubkey"), Param("label", ""), Param("rescan", True)),
        doc="Watch a public key without its private key.",
    ),
    _op("import_wallet", "importwallet", (Param("filename"),), doc="Import keys from a wallet dump file."),
    _op("key_pool_refill", "keypoolrefill", (Param("newsize", 100),), doc="Fill the keypool."),
    _op("list_address_groupings", "listaddressgroupings", doc="List groups of addresses with common ownership."),
    _op("list_labels", "listlabels", doc="Return the list of all labels."),
    _op("list_lock_unspent", "listlockunspent", doc="Return the list of temporarily unspendable outputs."),
    _op(
        "list_received_by_address",
        "listreceivedbyaddress",
        (
            Param("minconf", 1),
            Param("include_empty", False),
            Param("include_watchonly", False),
        ),
        doc="List balances by receiving address.",
    ),
    _op(
        "list_received_by_label",
        "listreceivedbylabel",
        (
            Param("minconf", 1),
            Param("include_empty", False),
            Param("include_watchonly", False),
        ),
        doc="List received transactions by label.",
    ),
    _op(
        "list_since_block",
        "listsinceblock",
        (
            Param("blockhash", ""),
            Param("target_confirmations", 1),
            Param("include_watchonly", False),
        ),
        doc="Return transactions in blocks since a block, or all transactions.",
    ),
    _op(
        "list_transactions",
        "listtransactions",
        (
            Param("label", "*"),
            Param("count", 10),
            Param("skip", 0),
            Param("include_watchonly", False),
        ),
        doc="Return the most recent wallet transactions.",
    ),
    _op(
        "list_unspent",
        "listunspent",
        (
            Param("minconf", 1),
            Param("maxconf", 9999999),
            Param("addresses", (), encode=array),
            Param("include_unsafe", True),
        ),
        doc="Return unspent outputs with between minconf and maxconf confirmations.",
    ),
    _op("list_wallet_dir", "listwalletdir", doc="Return the wallets in the wallet directory."),
    _op("list_wallets", "listwallets", doc="Return the currently loaded wallets."),
    _op("load_wallet", "loadwallet", (Param("filename"),), doc="Load a wallet from a file or directory."),
    _op(
        "lock_unspent",
        "lockunspent",
        (Param("unlock"), Param("transactions", None)),
        doc="Lock or unlock unspent outputs.",
    ),
    _op(
        "psbt_bump_fee",
        "psbtbumpfee",
        (Param("txid"), Param("options", None)),
        doc="Bump the fee of a wallet transaction and return a PSBT.",
    ),
    _op("remove_pruned_funds", "removeprunedfunds", (Param("txid"),), doc="Delete a transaction from the wallet."),
    _op(
        "rescan_blockchain",
        "rescanblockchain",
        (Param("start_height", 0), Param("stop_height", None)),
        doc="Rescan the local blockchain for wallet transactions.",
    ),
    _op(
        "send",
        "send",
        (
            Param("outputs"),
            Param("conf_target", None),
            Param("estimate_mode", "unset"),
            Param("fee_rate", None),
            Param("options", None),
        ),
        doc="Send a transaction to the given outputs.",
    ),
    _op(
        "send_many",
        "sendmany",
        (
            Param("dummy"),
            Param("amounts", encode=amounts),
            Param("minconf", 1),
            Param("comment", ""),
            Param("subtract_fee_from", (), encode=array),
        ),
        doc="Send to multiple addresses in one transaction.",
    ),
    _op(
        "send_to_address",
        "sendtoaddress",
        (
            Param("address"),
            Param("amount"),
            Param("comment", ""),
            Param("comment_to", ""),
            Param("subtract_fee_from_amount", False),
        ),
        doc="Send an amount to an address.",
    ),
    _op(
        "set_hd_seed",
        "sethdseed",
        (Param("newkeypool", True), Param("seed", None)),
        doc="Set or generate a new HD wallet seed.",
    ),
    _op("set_label", "setlabel", (Param("address"), Param("label")), doc="Set the label of an address."),
    _op("set_tx_fee", "settxfee", (Param("amount"),), doc="Set the transaction fee rate per kvB."),
    _op(
        "set_wallet_flag",
        "setwalletflag",
        (Param("flag"), Param("value", True)),
        doc="Change the state of a wallet flag.",
    ),
    _op("sign_message", "signmessage", (Param("address"), Param("message")), doc="Sign a message with an address key."),
    _op(
        "sign_raw_transaction_with_wallet",
        "signrawtransactionwithwallet",
        (Param("hexstring"), Param("prevtxs", None)),
        doc="Sign the inputs of a raw transaction with wallet keys.",
    ),
    _op("unload_wallet", "unloadwallet", (Param("wallet_name", ""),), doc="Unload a wallet."),
    _op("upgrade_wallet", "upgradewallet", (Param("version", None),), doc="Upgrade the wallet version."),
    _op(
        "wallet_create_funded_psbt",
        "walletcreatefundedpsbt",
        (
            Param("inputs", encode=array),
            Param("outputs", encode=amounts),
            Param("locktime", 0),
            Param("options", None),
        ),
        doc="Create and fund a PSBT using wallet inputs.",
    ),
    _op("wallet_lock", "walletlock", doc="Remove the wallet encryption key from memory."),
    _op(
        "wallet_passphrase",
        "walletpassphrase",
        (Param("passphrase"), Param("timeout")),
        doc="Unlock the wallet for a number of seconds.",
    ),
    _op(
        "wallet_passphrase_change",
        "walletpassphrasechange",
        (Param("oldpassphrase"), Param("newpassphrase")),
        doc="Change the wallet passphrase.",
    ),
    _op(
        "wallet_process_psbt",
        "walletprocesspsbt",
        (
            Param("psbt"),
            Param("sign", True),
            Param("sighashtype", "DEFAULT"),
            Param("bip32derivs", True),
        ),
        doc="Update a PSBT with wallet data and optionally sign it.",
    ),
)
