from __future__ import annotations

from typing import Optional


class BittrexError(Exception):
    """Base class for errors raised by the REST client.

    ``kind`` tells the two failure variants apart: ``"http"`` for transport
    and status code failures, ``"api"`` for envelopes with ``success`` false.
    """

    kind = "other"


class BittrexHttpError(BittrexError):
    """Transport failure or a status code other than 200."""

    kind = "http"

    def __init__(
        self,
        message: str,
        status_text: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.status_text = status_text
        self.status_code = status_code
        self.cause = cause

    @classmethod
    def from_status(cls, status_code: int, status_text: Optional[str]) -> "BittrexHttpError":
        text = "null" if status_text is None else status_text
        return cls(
            f'received status code {status_code} and text "{text}"',
            status_text,
            status_code,
        )


class BittrexApiError(BittrexError):
    """HTTP 200 but the envelope reported ``success: false``."""

    kind = "api"

    def __init__(self, bittrex_message: Optional[str]) -> None:
        super().__init__(f'body.success was false with message "{bittrex_message}"')
        self.bittrex_message = bittrex_message


def classify(exc: BaseException) -> str:
    """
    Return one of: "http" | "api" | "other".
    """
    if isinstance(exc, BittrexError):
        return exc.kind
    return "other"
