"""Signed REST client for the Bittrex v1.1 API.

Every request is a GET with all parameters in the query string. The full
URL (including ``apikey`` and ``nonce``) is signed with HMAC-SHA512 and the
digest is sent in the ``apisign`` header. Bittrex reports most failures
inside a ``{success, message, result}`` envelope rather than through status
codes, so status handling happens here and never in the transport.

Secrets must never be logged.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional, cast

import requests
from requests.adapters import HTTPAdapter

from . import models
from .config import DEFAULT_API_VERSION, TRANSPORT_DEFAULTS, BittrexApiOptions
from .errors import BittrexApiError, BittrexHttpError
from .utils import (
    build_query,
    get_hmac,
    get_nonce,
    join_url,
    market_name,
    merge_transport_options,
)

logger = logging.getLogger(__name__)

# Owned by the executor; dropped from transport options.
_RESERVED_OPTIONS = ("url", "params", "data", "json", "method")

# Endpoints that answer with a one element array wrapping a single object.
SINGLE_ENTRY_ENDPOINTS = frozenset({"/public/getmarketsummary"})


def _new_session() -> requests.Session:
    session = requests.Session()
    # fire-once: no transport level retries
    session.mount("https://", HTTPAdapter(max_retries=0))
    return session


class RestClient:
    """Async client; blocking transport calls run in a worker thread."""

    def __init__(self, options: BittrexApiOptions, session: Optional[requests.Session] = None) -> None:
        self.options = options
        self._transport_options = merge_transport_options(TRANSPORT_DEFAULTS, options.transport_options)
        self._session = session or _new_session()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await asyncio.to_thread(self._session.close)

    async def http(
        self,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
    ) -> models.RestResponse:
        """
        Perform a signed GET against ``path`` (relative to the API version).

        Args:
            path: Endpoint path, e.g. ``"/public/getticker"``.
            params: Extra query parameters. ``apikey`` and ``nonce`` are
                always injected and cannot be overridden.
            options: Transport options for this call only, e.g.
                ``{"timeout": 5000}`` (milliseconds).

        Returns:
            The successful envelope with transport metadata.

        Raises:
            BittrexHttpError: transport failure or status code other than 200.
            BittrexApiError: the envelope reported ``success: false``.
        """
        # The query string is built by hand so that the signed URL is the
        # one actually sent.
        query = build_query(
            {**(params or {}), "apikey": self.options.api_key, "nonce": get_nonce()}
        )
        full_url = join_url(
            self.options.base_url,
            self.options.api_version or DEFAULT_API_VERSION,
            path,
            query=query,
        )

        request_options = merge_transport_options(self._transport_options, options)
        for key in _RESERVED_OPTIONS:
            request_options.pop(key, None)
        timeout_ms = request_options.pop("timeout", None)
        headers: Dict[str, str] = dict(request_options.pop("headers", None) or {})
        headers["apisign"] = get_hmac(full_url, self.options.api_secret)

        logger.debug("making request with url %s", full_url)
        try:
            resp = await asyncio.to_thread(
                self._session.get,
                full_url,
                headers=headers,
                timeout=timeout_ms / 1000.0 if timeout_ms is not None else None,
                **request_options,
            )
        except requests.Timeout as exc:
            raise BittrexHttpError(f"timeout of {timeout_ms}ms exceeded", cause=exc) from exc
        except requests.RequestException as exc:
            raise BittrexHttpError(str(exc), cause=exc) from exc

        logger.debug(
            "received %s response for request to %s. response data %s",
            resp.status_code,
            full_url,
            resp.text,
        )

        # No raise_for_status(): every status code is inspected here.
        if resp.status_code != 200:
            raise BittrexHttpError.from_status(resp.status_code, resp.reason)

        try:
            body = resp.json()
        except ValueError as exc:
            raise BittrexHttpError(
                f"received invalid JSON from bittrex: {exc}",
                resp.reason,
                resp.status_code,
                cause=exc,
            ) from exc

        if not isinstance(body, dict):
            raise BittrexApiError(None)
        if not body.get("success"):
            raise BittrexApiError(body.get("message"))

        return models.RestResponse(
            status_code=resp.status_code,
            status_text=resp.reason,
            url=full_url,
            data=cast(models.ApiResponse, body),
            headers=dict(resp.headers or {}),
        )

    async def _result(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        ret = await self.http(path, params)
        result = ret.result
        if path in SINGLE_ENTRY_ENDPOINTS:
            return result[0] if result else None
        return result

    # --- public ------------------------------------------------------------

    async def get_markets(self) -> List[models.Market]:
        """Open and available trading markets along with other meta data."""
        return cast(List[models.Market], await self._result("/public/getmarkets"))

    async def get_currencies(self) -> List[models.Currency]:
        """All supported currencies along with other meta data."""
        return cast(List[models.Currency], await self._result("/public/getcurrencies"))

    async def get_ticker(self, ticker_a: str, ticker_b: str) -> models.Ticker:
        """
        Current tick values for a market.

        Args:
            ticker_a: Left hand ticker, e.g. "BTC" in "BTC-LTC"
            ticker_b: Right hand ticker, e.g. "LTC" in "BTC-LTC"
        """
        result = await self._result("/public/getticker", {"market": market_name(ticker_a, ticker_b)})
        return cast(models.Ticker, result)

    async def get_market_summaries(self) -> List[models.MarketSummaryEntry]:
        """Last 24 hour summary of all active markets."""
        return cast(List[models.MarketSummaryEntry], await self._result("/public/getmarketsummaries"))

    async def get_market_summary(self, ticker_a: str, ticker_b: str) -> models.MarketSummaryEntry:
        """
        Last 24 hour summary of a single market.

        Bittrex answers with an array; the sole object it contains is
        returned instead.
        """
        result = await self._result(
            "/public/getmarketsummary", {"market": market_name(ticker_a, ticker_b)}
        )
        return cast(models.MarketSummaryEntry, result)

    async def get_order_book(self, ticker_a: str, ticker_b: str, book_type: str = "BOTH") -> models.OrderBook:
        """
        Order book for a market.

        Args:
            book_type: "BUY", "SELL" or "BOTH"
        """
        result = await self._result(
            "/public/getorderbook",
            {"market": market_name(ticker_a, ticker_b), "type": book_type.lower()},
        )
        return cast(models.OrderBook, result)

    async def get_market_history(self, ticker_a: str, ticker_b: str) -> List[models.MarketHistoryEntry]:
        """Latest trades for a market."""
        result = await self._result(
            "/public/getmarkethistory", {"market": market_name(ticker_a, ticker_b)}
        )
        return cast(List[models.MarketHistoryEntry], result)

    # --- account -----------------------------------------------------------

    async def get_balances(self) -> List[models.AccountBalanceEntry]:
        return cast(List[models.AccountBalanceEntry], await self._result("/account/getbalances"))

    async def get_balance(self, currency: str) -> models.AccountBalanceEntry:
        result = await self._result("/account/getbalance", {"currency": currency})
        return cast(models.AccountBalanceEntry, result)

    async def get_order_history(
        self, ticker_a: Optional[str] = None, ticker_b: Optional[str] = None
    ) -> List[models.AccountOrderEntry]:
        """Order history, optionally limited to one market (both tickers required)."""
        params = None
        if ticker_a and ticker_b:
            params = {"market": market_name(ticker_a, ticker_b)}
        result = await self._result("/account/getorderhistory", params)
        return cast(List[models.AccountOrderEntry], result)

    async def get_deposit_history(self, currency: Optional[str] = None) -> List[models.DepositHistoryEntry]:
        result = await self._result("/account/getdeposithistory", {"currency": currency})
        return cast(List[models.DepositHistoryEntry], result)

    async def get_deposit_address(self, currency: str) -> models.AccountDepositAddress:
        """
        Deposit address for a currency.

        Fails with ``ADDRESS_GENERATING`` until Bittrex has one available.
        """
        result = await self._result("/account/getdepositaddress", {"currency": currency})
        return cast(models.AccountDepositAddress, result)

    async def get_order(self, uuid: str) -> models.AccountOrderEntry:
        result = await self._result("/account/getorder", {"uuid": uuid})
        return cast(models.AccountOrderEntry, result)

    async def withdraw(
        self,
        currency: str,
        quantity: str,
        address: str,
        paymentid: Optional[str] = None,
    ) -> models.WithdrawalResult:
        """Withdraw funds. ``quantity`` does not include the transaction fee."""
        params = {
            "currency": currency,
            "quantity": quantity,
            "address": address,
            "paymentid": paymentid,
        }
        result = await self._result("/account/withdraw", params)
        return cast(models.WithdrawalResult, result)

    async def get_withdrawal_history(self, currency: Optional[str] = None) -> List[models.WithdrawalHistoryEntry]:
        result = await self._result("/account/getwithdrawalhistory", {"currency": currency})
        return cast(List[models.WithdrawalHistoryEntry], result)

    # --- market ------------------------------------------------------------

    async def buy_limit(self, ticker_a: str, ticker_b: str, quantity: str, rate: str) -> models.OrderResult:
        """Place a limit buy order. Requires trade permission on the key."""
        params = {"market": market_name(ticker_a, ticker_b), "quantity": quantity, "rate": rate}
        return cast(models.OrderResult, await self._result("/market/buylimit", params))

    async def sell_limit(self, ticker_a: str, ticker_b: str, quantity: str, rate: str) -> models.OrderResult:
        """Place a limit sell order. Requires trade permission on the key."""
        params = {"market": market_name(ticker_a, ticker_b), "quantity": quantity, "rate": rate}
        return cast(models.OrderResult, await self._result("/market/selllimit", params))

    async def cancel_order(self, uuid: str) -> None:
        await self.http("/market/cancel", {"uuid": uuid})

    async def get_open_orders(
        self, ticker_a: Optional[str] = None, ticker_b: Optional[str] = None
    ) -> List[models.OpenOrder]:
        params = None
        if ticker_a and ticker_b:
            params = {"market": market_name(ticker_a, ticker_b)}
        result = await self._result("/market/getopenorders", params)
        return cast(List[models.OpenOrder], result)
