from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import os
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

NONCE_BYTES = 16


def get_nonce() -> str:
    """Return a fresh nonce: 16 random bytes, base64 encoded (24 chars)."""
    n = base64.b64encode(os.urandom(NONCE_BYTES)).decode("ascii")
    logger.debug('generated nonce value of "%s"', n)
    return n


def get_hmac(uri: str, api_secret: str) -> str:
    """Return the lowercase hex HMAC-SHA512 of ``uri`` keyed with ``api_secret``."""
    sig = hmac.new(api_secret.encode(), uri.encode(), hashlib.sha512).hexdigest()
    logger.debug('generated hmac of "%s" for request url "%s"', sig, uri)
    return sig


def build_query(params: Mapping[str, Any]) -> str:
    """Serialize ``params`` into a query string.

    ``None`` values are treated as omitted. The returned string is the one
    that gets signed, so it must be sent verbatim.
    """
    return urlencode({k: v for k, v in params.items() if v is not None}, doseq=True)


def join_url(*parts: str, query: Optional[str] = None) -> str:
    """Join URL segments with exactly one ``/`` between them."""
    head, *rest = [p for p in parts if p]
    url = head.rstrip("/")
    for part in rest:
        part = part.strip("/")
        if part:
            url = f"{url}/{part}"
    if query:
        url = f"{url}?{query}"
    return url


def market_name(ticker_a: str, ticker_b: str) -> str:
    """``("BTC", "LTC") -> "BTC-LTC"``"""
    return f"{ticker_a}-{ticker_b}"


def merge_transport_options(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shallow merge, later layers win per key."""
    merged: Dict[str, Any] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged
