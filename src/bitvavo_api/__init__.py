"""
Bitvavo API - Python client for the Bitvavo REST API.

This package provides a typed async client for the public market data
and private account endpoints of the Bitvavo exchange.
"""

from .client import BitvavoClient, create_bitvavo_client
from .auth import ApiCredentials, BitvavoSigner
from .errors import (
    BitvavoError,
    CodecError,
    ExchangeError,
    InvalidCredentials,
    InvalidType,
    InvalidValue,
    MissingField,
    TransportError,
    UnknownSymbolError,
)
from .models import (
    # Configuration
    ConnectionConfig,
    # Market
    Asset,
    AssetStatus,
    CandleInterval,
    Market,
    MarketStatus,
    OHLCV,
    OrderBook,
    Quote,
    Ticker24h,
    TickerBook,
    TickerPrice,
    Trade,
    TradeSide,
    # Account
    Account,
    AccountFees,
    Balance,
    Deposit,
    DepositInfo,
    DepositStatus,
    Fees,
    Withdrawal,
    WithdrawalOrderResponse,
    WithdrawalStatus,
    WithdrawOrder,
    # Orders
    Order,
    OrderResponse,
    OrderType,
    SelfTradePrevention,
    TimeInForce,
    TriggerReference,
    TriggerType,
)

__all__ = [
    # Main Client
    "BitvavoClient",
    "create_bitvavo_client",
    "ApiCredentials",
    "BitvavoSigner",
    "ConnectionConfig",
    # Errors
    "BitvavoError",
    "CodecError",
    "ExchangeError",
    "InvalidCredentials",
    "InvalidType",
    "InvalidValue",
    "MissingField",
    "TransportError",
    "UnknownSymbolError",
    # Market
    "Asset",
    "AssetStatus",
    "CandleInterval",
    "Market",
    "MarketStatus",
    "OHLCV",
    "OrderBook",
    "Quote",
    "Ticker24h",
    "TickerBook",
    "TickerPrice",
    "Trade",
    "TradeSide",
    # Account
    "Account",
    "AccountFees",
    "Balance",
    "Deposit",
    "DepositInfo",
    "DepositStatus",
    "Fees",
    "Withdrawal",
    "WithdrawalOrderResponse",
    "WithdrawalStatus",
    "WithdrawOrder",
    # Orders
    "Order",
    "OrderResponse",
    "OrderType",
    "SelfTradePrevention",
    "TimeInForce",
    "TriggerReference",
    "TriggerType",
]
