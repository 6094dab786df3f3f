"""
Market-related models for the Bitvavo client.

Immutable data structures for assets, markets, order books, trades,
candles and tickers. Prices and amounts are kept as the decimal strings
sent by the exchange.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..codec import WireEnum, positional


class AssetStatus(WireEnum):
    """Deposit or withdrawal status of an asset."""
    OK = "OK"
    MAINTENANCE = "MAINTENANCE"
    DELISTED = "DELISTED"


class MarketStatus(WireEnum):
    """Trading status of a market."""
    TRADING = "trading"
    HALTED = "halted"
    AUCTION = "auction"


class TradeSide(WireEnum):
    """Side of a trade or order."""
    BUY = "buy"
    SELL = "sell"


class CandleInterval(WireEnum):
    """Time interval covered by each candlestick."""
    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    TWO_HOURS = "2h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    EIGHT_HOURS = "8h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1d"


@dataclass(frozen=True)
class ServerTime:
    """Response of the time endpoint."""
    time: int


@dataclass(frozen=True)
class Asset:
    """Asset supported by the exchange."""
    symbol: str
    name: str
    decimals: int
    deposit_fee: str
    deposit_confirmations: int
    deposit_status: AssetStatus
    withdrawal_fee: str
    withdrawal_min_amount: str
    withdrawal_status: AssetStatus
    networks: List[str]
    message: Optional[str] = None


@dataclass(frozen=True)
class Market:
    """Trading rules of a market."""
    pair: str = field(metadata={"wire": "market"})
    status: MarketStatus
    base: str
    quote: str
    price_precision: int
    min_order_in_base_asset: str
    min_order_in_quote_asset: str
    max_order_in_base_asset: str
    max_order_in_quote_asset: str
    order_types: List[str]


@positional
@dataclass(frozen=True)
class Quote:
    """Price level in an order book, sent as ``[price, amount]``."""
    price: str
    amount: str


@dataclass(frozen=True)
class OrderBook:
    """Order book snapshot; bids and asks are ordered best first."""
    market: str
    nonce: int
    bids: List[Quote]
    asks: List[Quote]


@dataclass(frozen=True)
class Trade:
    """Public trade on a market."""
    id: str
    timestamp: int
    amount: str
    price: str
    side: TradeSide


@positional
@dataclass(frozen=True)
class OHLCV:
    """Candlestick, sent as ``[time, open, high, low, close, volume]``."""
    time: int
    open: str
    high: str
    low: str
    close: str
    volume: str


@dataclass(frozen=True)
class TickerPrice:
    """Last traded price of a market."""
    market: str
    price: Optional[str] = None


@dataclass(frozen=True)
class TickerBook:
    """Best bid and ask currently available for a market."""
    market: Optional[str] = None
    bid: Optional[str] = None
    bid_size: Optional[str] = None
    ask: Optional[str] = None
    ask_size: Optional[str] = None


@dataclass(frozen=True)
class Ticker24h:
    """Open, high, low, last and volume over the previous 24 hours.

    Every field but ``market`` is optional: the exchange leaves them out
    for markets without recent activity.
    """
    market: str
    start_timestamp: Optional[int] = None
    timestamp: Optional[int] = None
    open: Optional[str] = None
    open_timestamp: Optional[int] = None
    high: Optional[str] = None
    low: Optional[str] = None
    last: Optional[str] = None
    close_timestamp: Optional[int] = None
    bid: Optional[str] = None
    bid_size: Optional[str] = None
    ask: Optional[str] = None
    ask_size: Optional[str] = None
    volume: Optional[str] = None
    volume_quote: Optional[str] = None
