"""Client configuration and the environment loader used by the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

API_BASE = "https://bittrex.com/api"
DEFAULT_API_VERSION = "v1.1"

# Transport settings applied to every request unless overridden.
# ``timeout`` is in milliseconds.
TRANSPORT_DEFAULTS: Mapping[str, Any] = {"timeout": 15000}


@dataclass(frozen=True)
class BittrexApiOptions:
    api_key: str
    api_secret: str = field(repr=False)
    api_version: str = DEFAULT_API_VERSION
    transport_options: Mapping[str, Any] = field(default_factory=dict)
    base_url: str = API_BASE


def load_options(env_file: Optional[str] = None) -> BittrexApiOptions:
    """Build :class:`BittrexApiOptions` from ``BITTREX_*`` environment variables.

    ``env_file`` (or ``.env`` in the working directory) is loaded first;
    variables already present in the environment take precedence.
    """
    load_dotenv(dotenv_path=env_file)

    key = os.getenv("BITTREX_API_KEY")
    sec = os.getenv("BITTREX_API_SECRET")
    if not key or not sec:
        raise RuntimeError("BITTREX_API_KEY/BITTREX_API_SECRET are not set")

    transport: dict = {}
    timeout = os.getenv("BITTREX_TIMEOUT_MS")
    if timeout:
        transport["timeout"] = int(timeout)

    return BittrexApiOptions(
        api_key=key,
        api_secret=sec,
        api_version=os.getenv("BITTREX_API_VERSION", DEFAULT_API_VERSION),
        transport_options=transport,
        base_url=os.getenv("BITTREX_BASE_URL", API_BASE),
    )
