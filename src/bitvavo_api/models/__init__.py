"""
Data models for the Bitvavo client.

This package contains all data structures used throughout the client,
as immutable dataclasses and closed wire enumerations.
"""

from .config import ConnectionConfig
from .market import (
    Asset, AssetStatus, CandleInterval, Market, MarketStatus, OHLCV,
    OrderBook, Quote, ServerTime, Ticker24h, TickerBook, TickerPrice,
    Trade, TradeSide,
)
from .account import (
    Account, AccountFees, Balance, Deposit, DepositInfo, DepositStatus,
    Fees, Withdrawal, WithdrawalOrderResponse, WithdrawalStatus, WithdrawOrder,
)
from .orders import (
    Order, OrderResponse, OrderType, SelfTradePrevention, TimeInForce,
    TriggerReference, TriggerType,
)

__all__ = [
    # Configuration
    "ConnectionConfig",
    # Market
    "Asset",
    "AssetStatus",
    "CandleInterval",
    "Market",
    "MarketStatus",
    "OHLCV",
    "OrderBook",
    "Quote",
    "ServerTime",
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
