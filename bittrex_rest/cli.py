"""Command line interface for read-only Bittrex REST queries."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from .config import load_options
from .errors import BittrexError
from .log_setup import setup_logging
from .rest_client import RestClient

LOGGER = logging.getLogger(__name__)


def _print_json(payload: Any) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


async def cmd_markets(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_markets()


async def cmd_currencies(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_currencies()


async def cmd_ticker(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_ticker(args.ticker_a, args.ticker_b)


async def cmd_summaries(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_market_summaries()


async def cmd_summary(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_market_summary(args.ticker_a, args.ticker_b)


async def cmd_orderbook(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_order_book(args.ticker_a, args.ticker_b, args.type)


async def cmd_history(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_market_history(args.ticker_a, args.ticker_b)


async def cmd_balances(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_balances()


async def cmd_balance(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_balance(args.currency)


async def cmd_orders(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_order_history(args.ticker_a, args.ticker_b)


async def cmd_open_orders(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_open_orders(args.ticker_a, args.ticker_b)


async def cmd_order(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_order(args.uuid)


async def cmd_deposits(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_deposit_history(args.currency)


async def cmd_withdrawals(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_withdrawal_history(args.currency)


async def cmd_deposit_address(client: RestClient, args: argparse.Namespace) -> Any:
    return await client.get_deposit_address(args.currency)


def _add_market(p: argparse.ArgumentParser, optional: bool = False) -> None:
    nargs = "?" if optional else None
    p.add_argument("ticker_a", nargs=nargs, help='Left hand ticker, e.g "BTC" in "BTC-LTC"')
    p.add_argument("ticker_b", nargs=nargs, help='Right hand ticker, e.g "LTC" in "BTC-LTC"')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bittrex-rest", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logs")
    parser.add_argument("--env-file", default=None, help="Load BITTREX_* variables from this file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("markets", help="List markets").set_defaults(func=cmd_markets)
    sub.add_parser("currencies", help="List currencies").set_defaults(func=cmd_currencies)
    sub.add_parser("summaries", help="24h summaries of all markets").set_defaults(func=cmd_summaries)
    sub.add_parser("balances", help="All account balances").set_defaults(func=cmd_balances)

    p_ticker = sub.add_parser("ticker", help="Current tick values for a market")
    _add_market(p_ticker)
    p_ticker.set_defaults(func=cmd_ticker)

    p_summary = sub.add_parser("summary", help="24h summary of a market")
    _add_market(p_summary)
    p_summary.set_defaults(func=cmd_summary)

    p_book = sub.add_parser("orderbook", help="Order book for a market")
    _add_market(p_book)
    p_book.add_argument("--type", default="BOTH", choices=["BUY", "SELL", "BOTH"])
    p_book.set_defaults(func=cmd_orderbook)

    p_history = sub.add_parser("history", help="Latest trades for a market")
    _add_market(p_history)
    p_history.set_defaults(func=cmd_history)

    p_balance = sub.add_parser("balance", help="Balance for one currency")
    p_balance.add_argument("currency")
    p_balance.set_defaults(func=cmd_balance)

    p_orders = sub.add_parser("orders", help="Order history")
    _add_market(p_orders, optional=True)
    p_orders.set_defaults(func=cmd_orders)

    p_open = sub.add_parser("open-orders", help="Currently open orders")
    _add_market(p_open, optional=True)
    p_open.set_defaults(func=cmd_open_orders)

    p_order = sub.add_parser("order", help="Single order by uuid")
    p_order.add_argument("uuid")
    p_order.set_defaults(func=cmd_order)

    p_deposits = sub.add_parser("deposits", help="Deposit history")
    p_deposits.add_argument("currency", nargs="?")
    p_deposits.set_defaults(func=cmd_deposits)

    p_withdrawals = sub.add_parser("withdrawals", help="Withdrawal history")
    p_withdrawals.add_argument("currency", nargs="?")
    p_withdrawals.set_defaults(func=cmd_withdrawals)

    p_address = sub.add_parser("deposit-address", help="Deposit address for a currency")
    p_address.add_argument("currency")
    p_address.set_defaults(func=cmd_deposit_address)

    return parser


async def _run(args: argparse.Namespace) -> Any:
    async with RestClient(load_options(args.env_file)) as client:
        return await args.func(client, args)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    try:
        result = asyncio.run(_run(args))
    except (BittrexError, RuntimeError) as exc:
        LOGGER.error("Command failed: %s", exc)
        return 1
    _print_json(result)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
