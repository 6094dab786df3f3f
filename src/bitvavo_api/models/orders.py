"""
Order-related models for the Bitvavo client.

Immutable data structures for order placement.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from ..codec import WireEnum
from .market import TradeSide


class OrderType(WireEnum):
    """Order type enumeration."""
    MARKET = "market"
    LIMIT = "limit"
    STOP_LOSS = "stopLoss"
    STOP_LOSS_LIMIT = "stopLossLimit"
    TAKE_PROFIT = "takeProfit"
    TAKE_PROFIT_LIMIT = "takeProfitLimit"


class TriggerType(WireEnum):
    """What kind of condition triggers a conditional order."""
    PRICE = "price"


class TriggerReference(WireEnum):
    """Price basis used to decide when a conditional order activates."""
    LAST_TRADE = "lastTrade"
    BEST_BID = "bestBid"
    BEST_ASK = "bestAsk"
    MID_PRICE = "midPrice"


class TimeInForce(WireEnum):
    """How long an order remains active."""
    GOOD_TILL_CANCELLED = "GTC"
    FILL_OR_KILL = "FOK"
    IMMEDIATE_OR_CANCEL = "IOC"


class SelfTradePrevention(WireEnum):
    """Which side of a self-trade is cancelled or decremented."""
    DECREMENT_AND_CANCEL = "decrementAndCancel"
    CANCEL_BOTH = "cancelBoth"
    CANCEL_NEWEST = "cancelNewest"
    CANCEL_OLDEST = "cancelOldest"


@dataclass(frozen=True)
class Order:
    """Order request data structure.

    Either ``amount`` (base units) or ``amount_quote`` (quote units) is set.
    Trigger fields only apply to stop-loss and take-profit order types.
    """
    market: str
    side: TradeSide
    order_type: OrderType
    client_order_id: Optional[UUID] = None
    amount: Optional[str] = None
    amount_quote: Optional[str] = None
    price: Optional[str] = None
    trigger_amount: Optional[str] = None
    trigger_type: Optional[TriggerType] = None
    trigger_reference: Optional[TriggerReference] = None
    time_in_force: Optional[TimeInForce] = None
    post_only: Optional[bool] = None
    self_trade_prevention: Optional[SelfTradePrevention] = None
    disable_market_protection: bool = False
    response_required: bool = True


@dataclass(frozen=True)
class OrderResponse:
    """Order acknowledgement returned by the exchange."""
    market: str
    order_id: UUID
    created: int
    updated: int
    client_order_id: Optional[UUID] = None
