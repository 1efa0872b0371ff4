"""
Bittrex REST client: explicit imports only.
"""

from .config import BittrexApiOptions, load_options
from .errors import BittrexApiError, BittrexError, BittrexHttpError, classify
from .log_setup import setup_logging
from .rest_client import RestClient

__all__ = [
    "BittrexApiOptions",
    "BittrexApiError",
    "BittrexError",
    "BittrexHttpError",
    "RestClient",
    "classify",
    "load_options",
    "setup_logging",
]
