"""
API method implementations for the Bitvavo client.

Each method assembles the endpoint path and its ordered query parameters,
executes a single request and decodes the payload into model objects.
Optional parameters left as None never reach the query string.
"""

import logging
from typing import List, Optional

from aiohttp import ClientSession

from .codec import decode, encode
from .errors import UnknownSymbolError
from .http_client import HttpClient
from .models.account import (
    Account, Balance, Deposit, DepositInfo, Fees, Withdrawal,
    WithdrawalOrderResponse, WithdrawOrder,
)
from .models.market import (
    OHLCV, Asset, CandleInterval, Market, OrderBook, ServerTime,
    Ticker24h, TickerBook, TickerPrice, Trade,
)
from .models.orders import Order, OrderResponse

logger = logging.getLogger(__name__)


class APIMethods:
    """Container for all API method implementations."""

    def __init__(self, http_client: HttpClient):
        """Initialize API methods with HTTP client."""
        self._http_client = http_client

    async def _get(self, session: ClientSession, endpoint: str, params=None):
        return await self._http_client.request(session, "GET", endpoint, params)

    async def _post(self, session: ClientSession, endpoint: str, body):
        return await self._http_client.request(session, "POST", endpoint, body=body)

    # Public market data

    async def get_time(self, session: ClientSession) -> int:
        """Get the exchange time in epoch milliseconds."""
        response = await self._get(session, "time")
        return decode(ServerTime, response).time

    async def get_assets(self, session: ClientSession) -> List[Asset]:
        response = await self._get(session, "assets")
        return decode(List[Asset], response)

    async def get_asset(self, session: ClientSession, symbol: str) -> Asset:
        response = await self._get(session, "assets", [("symbol", symbol)])
        return decode(Asset, response)

    async def get_markets(self, session: ClientSession) -> List[Market]:
        response = await self._get(session, "markets")
        return decode(List[Market], response)

    async def get_market(self, session: ClientSession, market: str) -> Market:
        response = await self._get(session, "markets", [("market", market)])
        return decode(Market, response)

    async def get_order_book(
        self, session: ClientSession, market: str, depth: Optional[int] = None
    ) -> OrderBook:
        response = await self._get(session, f"{market}/book", [("depth", depth)])
        return decode(OrderBook, response)

    async def get_trades(
        self,
        session: ClientSession,
        market: str,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
        trade_id_from: Optional[str] = None,
        trade_id_to: Optional[str] = None,
    ) -> List[Trade]:
        params = [
            ("limit", limit),
            ("start", start),
            ("end", end),
            ("tradeIdFrom", trade_id_from),
            ("tradeIdTo", trade_id_to),
        ]
        response = await self._get(session, f"{market}/trades", params)
        return decode(List[Trade], response)

    async def get_candles(
        self,
        session: ClientSession,
        market: str,
        interval: CandleInterval,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[OHLCV]:
        params = [
            ("interval", interval),
            ("limit", limit),
            ("start", start),
            ("end", end),
        ]
        response = await self._get(session, f"{market}/candles", params)
        return decode(List[OHLCV], response)

    async def get_ticker_prices(self, session: ClientSession) -> List[TickerPrice]:
        response = await self._get(session, "ticker/price")
        return decode(List[TickerPrice], response)

    async def get_ticker_price(self, session: ClientSession, market: str) -> TickerPrice:
        response = await self._get(session, "ticker/price", [("market", market)])
        return decode(TickerPrice, response)

    async def get_ticker_books(self, session: ClientSession) -> List[TickerBook]:
        response = await self._get(session, "ticker/book")
        return decode(List[TickerBook], response)

    async def get_ticker_book(self, session: ClientSession, market: str) -> TickerBook:
        response = await self._get(session, "ticker/book", [("market", market)])
        return decode(TickerBook, response)

    async def get_tickers_24h(self, session: ClientSession) -> List[Ticker24h]:
        response = await self._get(session, "ticker/24h")
        return decode(List[Ticker24h], response)

    async def get_ticker_24h(self, session: ClientSession, market: str) -> Ticker24h:
        response = await self._get(session, "ticker/24h", [("market", market)])
        return decode(Ticker24h, response)

    # Account

    async def get_account(self, session: ClientSession) -> Account:
        response = await self._get(session, "account")
        return decode(Account, response)

    async def get_fees(
        self,
        session: ClientSession,
        market: Optional[str] = None,
        quote: Optional[str] = None,
    ) -> Fees:
        response = await self._get(
            session, "account/fees", [("market", market), ("quote", quote)]
        )
        return decode(Fees, response)

    async def get_balances(self, session: ClientSession) -> List[Balance]:
        response = await self._get(session, "balance")
        return decode(List[Balance], response)

    async def get_balance(self, session: ClientSession, symbol: str) -> Balance:
        """Get the balance of one asset.

        The exchange only offers a symbol-filtered list; an empty list means
        it does not know the symbol.
        """
        response = await self._get(session, "balance", [("symbol", symbol)])
        balances = decode(List[Balance], response)
        if not balances:
            raise UnknownSymbolError(symbol)
        return balances[0]

    async def get_deposit_info(self, session: ClientSession, symbol: str) -> DepositInfo:
        response = await self._get(session, "deposit", [("symbol", symbol)])
        return decode(DepositInfo, response)

    async def get_deposit_history(
        self,
        session: ClientSession,
        symbol: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Deposit]:
        params = [("symbol", symbol), ("limit", limit), ("start", start), ("end", end)]
        response = await self._get(session, "depositHistory", params)
        return decode(List[Deposit], response)

    async def get_withdrawal_history(
        self,
        session: ClientSession,
        symbol: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Withdrawal]:
        params = [("symbol", symbol), ("limit", limit), ("start", start), ("end", end)]
        response = await self._get(session, "withdrawalHistory", params)
        return decode(List[Withdrawal], response)

    # Trading and transfers

    async def place_order(self, session: ClientSession, order: Order) -> OrderResponse:
        """Place a new order."""
        logger.info(
            f"Placing {order.order_type} {order.side} order on {order.market}"
        )
        response = await self._post(session, "order", encode(order))
        return decode(OrderResponse, response)

    async def withdraw(
        self, session: ClientSession, request: WithdrawOrder
    ) -> WithdrawalOrderResponse:
        """Request a withdrawal."""
        logger.info(f"Requesting withdrawal of {request.amount} {request.symbol}")
        response = await self._post(session, "withdrawal", encode(request))
        return decode(WithdrawalOrderResponse, response)
