"""
btcrpc CLI

Command-line access to a Bitcoin node's JSON-RPC interface.

Commands:
  call     - Invoke any RPC method with positional params
  info     - Show a blockchain summary
  methods  - List the known operations
"""

from __future__ import annotations

import json
import logging
import math
import sys
from typing import Any, Optional

import click

from .catalog import by_category
from .client import BitcoinClient
from .config import load_config, parse_timeout
from .errors import ProtocolError, RpcError


# ============ Constants ============

VERSION = "0.3.0"


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="btcrpc")
@click.option("--url", envvar="BITCOIN_RPC_URL", default=None, help="Node RPC URL")
@click.option("--user", envvar="BITCOIN_RPC_USER", default=None, help="RPC username")
@click.option("--password", envvar="BITCOIN_RPC_PASSWORD", default=None, help="RPC password")
@click.option("--timeout", default=None, help="Request timeout in seconds")
@click.option("--wallet", default=None, help="Send wallet calls to this loaded wallet")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses")
@click.pass_context
def cli(
    ctx: click.Context,
    url: Optional[str],
    user: Optional[str],
    password: Optional[str],
    timeout: Optional[str],
    wallet: Optional[str],
    verbose: bool,
) -> None:
    """btcrpc - Bitcoin node JSON-RPC client."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["overrides"] = {
        "url": url,
        "username": user,
        "password": password,
        "timeout": timeout,
        "wallet": wallet,
    }


def _client(ctx: click.Context) -> BitcoinClient:
    """Build the client lazily so that `methods` works without credentials."""
    overrides = ctx.obj["overrides"]
    try:
        config = load_config()
        client = BitcoinClient(
            username=overrides["username"] if overrides["username"] is not None else config.username,
            password=overrides["password"] if overrides["password"] is not None else config.password,
            url=overrides["url"] or config.url,
            timeout=parse_timeout(overrides["timeout"]) if overrides["timeout"] else config.timeout,
            request_id=config.request_id,
            transport=ctx.obj.get("transport"),
        )
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    if overrides["wallet"]:
        client = client.for_wallet(overrides["wallet"])
    return client


def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Out of range float: {text}")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Not a JSON value: {name}")


def _parse_param(raw: str) -> Any:
    """Interpret a command-line param as JSON, falling back to a plain string."""
    try:
        return json.loads(raw, parse_float=_finite_float, parse_constant=_reject_constant)
    except ValueError:
        return raw


def _echo_result(result: Any) -> None:
    if isinstance(result, str):
        click.echo(result)
    elif result is None:
        click.echo("null")
    else:
        click.echo(json.dumps(result, indent=2, ensure_ascii=False))


def _fail(exc: RpcError) -> None:
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    sys.exit(exc.exit_code)


# ============ Commands ============


@cli.command()
@click.argument("method")
@click.argument("params", nargs=-1)
@click.pass_context
def call(ctx: click.Context, method: str, params: tuple[str, ...]) -> None:
    """
    Invoke METHOD with positional PARAMS.

    Each param is parsed as JSON when possible (numbers, true/false, null,
    arrays, objects); anything else is sent as a string.
    """
    client = _client(ctx)
    try:
        result = client.invoke(method, [_parse_param(p) for p in params])
    except RpcError as exc:
        _fail(exc)
        return
    except ValueError as exc:
        click.secho(f"ERROR: {exc}", fg="red", err=True)
        sys.exit(1)
    _echo_result(result)


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show a blockchain summary."""
    client = _client(ctx)
    try:
        chain = client.get_blockchain_info()
    except RpcError as exc:
        click.secho("Failed to fetch blockchain information.", fg="red", err=True)
        _fail(exc)
        return
    if not isinstance(chain, dict):
        click.secho("Failed to fetch blockchain information.", fg="red", err=True)
        _fail(ProtocolError(f"getblockchaininfo returned {type(chain).__name__}, expected an object"))
        return

    rows = [
        ("Chain", chain.get("chain")),
        ("Blocks", chain.get("blocks")),
        ("Headers", chain.get("headers")),
        ("Best Block Hash", chain.get("bestblockhash")),
        ("Difficulty", chain.get("difficulty")),
        ("Verification Progress", chain.get("verificationprogress")),
    ]
    click.secho("Blockchain Information:", fg="cyan")
    for label, value in rows:
        click.echo(click.style(f"  {label + ':':<23}", dim=True) + f"{value}")


@cli.command()
@click.option("--category", "-c", default=None, help="Only list this category")
def methods(category: Optional[str]) -> None:
    """List the known operations."""
    groups = by_category()
    if category is not None:
        if category not in groups:
            click.secho(f"Unknown category: {category}", fg="red")
            click.echo(f"Categories: {', '.join(groups)}")
            sys.exit(1)
        groups = {category: groups[category]}

    for name, operations in groups.items():
        click.secho(f"== {name.capitalize()} ==", fg="cyan")
        for op in operations:
            click.echo(f"  {op.usage()}")
        click.echo()


# ============ Entry Points ============


def main() -> None:
    """btcrpc CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
