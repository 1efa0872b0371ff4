"""Response shapes returned by the Bittrex v1.1 REST endpoints."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, TypedDict

OrderBookType = Literal["BUY", "SELL"]
OrderType = Literal["LIMIT_BUY", "LIMIT_SELL"]


class ApiResponse(TypedDict):
    success: bool
    message: str
    result: Any


@dataclass
class RestResponse:
    """Successful envelope plus transport metadata."""

    status_code: int
    status_text: Optional[str]
    url: str
    data: ApiResponse
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def result(self) -> Any:
        return self.data.get("result")


class Market(TypedDict):
    """Returned from ``/public/getmarkets``."""

    MarketCurrency: str
    BaseCurrency: str
    MarketCurrencyLong: str
    BaseCurrencyLong: str
    MinTradeSize: float
    MarketName: str
    IsActive: bool
    Created: str


class Currency(TypedDict):
    """Returned from ``/public/getcurrencies``."""

    Currency: str
    CurrencyLong: str
    MinConfirmation: int
    TxFee: float
    IsActive: bool
    CoinType: str
    BaseAddress: Optional[str]


class Ticker(TypedDict):
    Bid: float
    Ask: float
    Last: float


class MarketSummaryEntry(TypedDict, total=False):
    MarketName: str
    High: float
    Low: float
    Volume: float
    Last: float
    BaseVolume: float
    TimeStamp: str
    Bid: float
    Ask: float
    OpenBuyOrders: int
    OpenSellOrders: int
    PrevDay: float
    Created: str
    DisplayMarketName: Optional[str]


class OrderBookEntry(TypedDict):
    Quantity: float
    Rate: float


class OrderBook(TypedDict, total=False):
    buy: List[OrderBookEntry]
    sell: List[OrderBookEntry]


class MarketHistoryEntry(TypedDict):
    Id: int
    TimeStamp: str
    Quantity: float
    Price: float
    Total: float
    FillType: str
    OrderType: OrderBookType


class OpenOrder(TypedDict):
    Uuid: Optional[str]
    OrderUuid: str
    Exchange: str
    OrderType: OrderType
    Quantity: float
    QuantityRemaining: float
    Limit: float
    CommissionPaid: float
    Price: float
    PricePerUnit: Optional[float]
    Opened: str
    Closed: Optional[str]
    CancelInitiated: bool
    ImmediateOrCancel: bool
    IsConditional: bool
    Condition: Optional[str]
    ConditionTarget: Optional[str]


class AccountOrderEntry(TypedDict, total=False):
    OrderUuid: str
    Exchange: str
    TimeStamp: str
    OrderType: OrderType
    Limit: float
    Quantity: float
    QuantityRemaining: float
    Commission: float
    Price: float
    PricePerUnit: Optional[float]
    IsConditional: bool
    Condition: Optional[str]
    ConditionTarget: Optional[str]
    ImmediateOrCancel: bool


class AccountBalanceEntry(TypedDict, total=False):
    Currency: str
    Balance: float
    Available: float
    Pending: float
    CryptoAddress: Optional[str]
    Requested: bool
    Uuid: Optional[str]


class AccountDepositAddress(TypedDict):
    Currency: str
    Address: str


class DepositHistoryEntry(TypedDict):
    PaymentUuid: str
    Currency: str
    Amount: float
    Address: str
    Opened: str
    Authorized: bool
    PendingPayment: bool
    TxCost: float
    TxId: str
    Canceled: bool
    InvalidAddress: bool


class WithdrawalHistoryEntry(DepositHistoryEntry):
    pass


class WithdrawalResult(TypedDict):
    uuid: str


class OrderResult(TypedDict):
    """``/market/buylimit`` and ``/market/selllimit``."""

    uuid: str
