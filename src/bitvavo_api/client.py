"""
Bitvavo Client - Main orchestration module.

This module provides the BitvavoClient class that coordinates the
client's collaborators:
- Data models are immutable structures in models/
- Wire decoding lives in codec.py
- HTTP operations are handled by http_client.py
- Session management is handled by session_manager.py
- API methods are implemented in api_methods.py
- Request metrics are recorded by monitoring.py
"""

import asyncio
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

from .api_methods import APIMethods
from .auth import ApiCredentials, BitvavoSigner
from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ERROR_STATUS_CODE, SUCCESS_STATUS_CODE
from .http_client import HttpClient
from .models import (
    Account, Asset, Balance, CandleInterval, ConnectionConfig, Deposit,
    DepositInfo, Fees, Market, OHLCV, Order, OrderBook, OrderResponse,
    Ticker24h, TickerBook, TickerPrice, Trade, Withdrawal,
    WithdrawalOrderResponse, WithdrawOrder,
)
from .monitoring import PerformanceMonitor, Statistics
from .session_manager import SessionManager

logger = logging.getLogger(__name__)


class BitvavoClient:
    """
    Main Bitvavo client orchestrator.

    Without credentials every request is sent unsigned, including the ones to
    private endpoints; the exchange is the one to reject those.
    """

    def __init__(
        self,
        config: Optional[ConnectionConfig] = None,
        credentials: Optional[ApiCredentials] = None,
    ):
        """Initialize Bitvavo client with configuration and optional credentials."""
        self._config = config or ConnectionConfig()
        self._credentials = credentials
        signer = None
        if credentials is not None:
            signer = BitvavoSigner(credentials, access_window=self._config.access_window)
        self._session_manager = SessionManager(self._config)
        self._http_client = HttpClient(self._config, signer)
        self._api_methods = APIMethods(self._http_client)
        self._monitor = PerformanceMonitor()
        self._closed = False

        mode = "authenticated" if signer else "public"
        logger.info(f"BitvavoClient initialized ({mode}) for {self._config.base_url}")

    @classmethod
    def from_env(cls) -> "BitvavoClient":
        """Create client from environment variables (a .env file is honoured).

        Reads BITVAVO_API_KEY, BITVAVO_API_SECRET and optionally
        BITVAVO_BASE_URL. Without key and secret the client is public only.
        """
        load_dotenv()
        api_key = os.getenv("BITVAVO_API_KEY", "")
        api_secret = os.getenv("BITVAVO_API_SECRET", "")
        base_url = os.getenv("BITVAVO_BASE_URL", DEFAULT_BASE_URL)

        credentials = None
        if api_key or api_secret:
            credentials = ApiCredentials(api_key, api_secret)

        return cls(ConnectionConfig(base_url=base_url), credentials)

    @property
    def authenticated(self) -> bool:
        return self._credentials is not None

    # Public market data
    async def get_time(self) -> int:
        """Get the exchange time in epoch milliseconds."""
        return await self._execute_with_monitoring(
            self._api_methods.get_time, "GET", "time"
        )

    async def get_assets(self) -> List[Asset]:
        """Get all assets."""
        return await self._execute_with_monitoring(
            self._api_methods.get_assets, "GET", "assets"
        )

    async def get_asset(self, symbol: str) -> Asset:
        """Get one asset, e.g. ``"BTC"``."""
        return await self._execute_with_monitoring(
            self._api_methods.get_asset, "GET", "assets", symbol
        )

    async def get_markets(self) -> List[Market]:
        """Get all markets."""
        return await self._execute_with_monitoring(
            self._api_methods.get_markets, "GET", "markets"
        )

    async def get_market(self, market: str) -> Market:
        """Get one market, e.g. ``"BTC-EUR"``."""
        return await self._execute_with_monitoring(
            self._api_methods.get_market, "GET", "markets", market
        )

    async def get_order_book(self, market: str, depth: Optional[int] = None) -> OrderBook:
        """Get the order book of a market, optionally limited to ``depth`` levels."""
        return await self._execute_with_monitoring(
            self._api_methods.get_order_book, "GET", "{market}/book", market, depth
        )

    async def get_trades(
        self,
        market: str,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
        trade_id_from: Optional[str] = None,
        trade_id_to: Optional[str] = None,
    ) -> List[Trade]:
        """
        Get public trades of a market.

        Args:
            market: Market pair (e.g., "BTC-EUR")
            limit: Maximum number of trades
            start: Earliest timestamp in epoch milliseconds
            end: Latest timestamp in epoch milliseconds
            trade_id_from: Return trades after this trade id
            trade_id_to: Return trades before this trade id

        Returns:
            List of trades
        """
        return await self._execute_with_monitoring(
            self._api_methods.get_trades, "GET", "{market}/trades",
            market, limit, start, end, trade_id_from, trade_id_to,
        )

    async def get_candles(
        self,
        market: str,
        interval: CandleInterval,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[OHLCV]:
        """
        Get candlesticks of a market.

        Args:
            market: Market pair (e.g., "BTC-EUR")
            interval: Candle interval
            limit: Maximum number of candles
            start: Earliest timestamp in epoch milliseconds
            end: Latest timestamp in epoch milliseconds

        Returns:
            List of candles, newest first
        """
        return await self._execute_with_monitoring(
            self._api_methods.get_candles, "GET", "{market}/candles",
            market, interval, limit, start, end,
        )

    async def get_ticker_prices(self) -> List[TickerPrice]:
        """Get the last price of every market."""
        return await self._execute_with_monitoring(
            self._api_methods.get_ticker_prices, "GET", "ticker/price"
        )

    async def get_ticker_price(self, market: str) -> TickerPrice:
        """Get the last price of one market."""
        return await self._execute_with_monitoring(
            self._api_methods.get_ticker_price, "GET", "ticker/price", market
        )

    async def get_ticker_books(self) -> List[TickerBook]:
        """Get the best bid and ask of every market."""
        return await self._execute_with_monitoring(
            self._api_methods.get_ticker_books, "GET", "ticker/book"
        )

    async def get_ticker_book(self, market: str) -> TickerBook:
        """Get the best bid and ask of one market."""
        return await self._execute_with_monitoring(
            self._api_methods.get_ticker_book, "GET", "ticker/book", market
        )

    async def get_tickers_24h(self) -> List[Ticker24h]:
        """Get 24h statistics of every market."""
        return await self._execute_with_monitoring(
            self._api_methods.get_tickers_24h, "GET", "ticker/24h"
        )

    async def get_ticker_24h(self, market: str) -> Ticker24h:
        """Get 24h statistics of one market."""
        return await self._execute_with_monitoring(
            self._api_methods.get_ticker_24h, "GET", "ticker/24h", market
        )

    # Account methods
    async def get_account(self) -> Account:
        """Get account information."""
        return await self._execute_with_monitoring(
            self._api_methods.get_account, "GET", "account"
        )

    async def get_fees(self, market: Optional[str] = None, quote: Optional[str] = None) -> Fees:
        """Get the fee tier, optionally for one market or quote currency."""
        return await self._execute_with_monitoring(
            self._api_methods.get_fees, "GET", "account/fees", market, quote
        )

    async def get_balances(self) -> List[Balance]:
        """Get account balances."""
        return await self._execute_with_monitoring(
            self._api_methods.get_balances, "GET", "balance"
        )

    async def get_balance(self, symbol: str) -> Balance:
        """Get the balance of one asset.

        Raises:
            UnknownSymbolError: If the exchange returns no balance for ``symbol``
        """
        return await self._execute_with_monitoring(
            self._api_methods.get_balance, "GET", "balance", symbol
        )

    async def get_deposit_info(self, symbol: str) -> DepositInfo:
        """Get the deposit address of an asset."""
        return await self._execute_with_monitoring(
            self._api_methods.get_deposit_info, "GET", "deposit", symbol
        )

    async def get_deposit_history(
        self,
        symbol: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Deposit]:
        """Get past deposits."""
        return await self._execute_with_monitoring(
            self._api_methods.get_deposit_history, "GET", "depositHistory",
            symbol, limit, start, end,
        )

    async def get_withdrawal_history(
        self,
        symbol: Optional[str] = None,
        limit: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ) -> List[Withdrawal]:
        """Get past withdrawals."""
        return await self._execute_with_monitoring(
            self._api_methods.get_withdrawal_history, "GET", "withdrawalHistory",
            symbol, limit, start, end,
        )

    # Order and transfer methods
    async def place_order(self, order: Order) -> OrderResponse:
        """Place a new order."""
        return await self._execute_with_monitoring(
            self._api_methods.place_order, "POST", "order", order
        )

    async def withdraw(self, request: WithdrawOrder) -> WithdrawalOrderResponse:
        """Withdraw funds to an external address."""
        return await self._execute_with_monitoring(
            self._api_methods.withdraw, "POST", "withdrawal", request
        )

    # Monitoring
    def get_statistics(self) -> Statistics:
        """Get performance statistics."""
        return self._monitor.statistics

    def get_endpoint_stats(self, endpoint: str, method: str = "GET"):
        """Get statistics for one endpoint, e.g. ``"ticker/price"``."""
        return self._monitor.get_endpoint_stats(endpoint, method)

    async def close(self) -> None:
        """Close the session and wipe the credentials."""
        if not self._closed:
            await self._session_manager.close_session()
            self._wipe_credentials()
            self._closed = True
            logger.info("Bitvavo client closed")

    def _wipe_credentials(self) -> None:
        if self._credentials is not None and not self._credentials.wiped:
            self._credentials.wipe()

    async def _execute_with_monitoring(
        self, api_method, method: str, endpoint: str, *args, **kwargs
    ):
        """Execute API method with performance monitoring."""
        if self._closed:
            raise RuntimeError("Client is closed")

        loop = asyncio.get_running_loop()
        start_time = loop.time()
        session = await self._session_manager.create_session()

        try:
            result = await api_method(session, *args, **kwargs)
        except Exception as e:
            duration_ms = (loop.time() - start_time) * 1000
            status_code = getattr(e, "status_code", None) or ERROR_STATUS_CODE
            error_code = getattr(e, "code", None)
            self._monitor.record_request(endpoint, method, status_code, duration_ms, error_code)
            raise

        duration_ms = (loop.time() - start_time) * 1000
        self._monitor.record_request(endpoint, method, SUCCESS_STATUS_CODE, duration_ms)
        return result

    # Context manager support
    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __del__(self):
        """Wipe credentials even when close() was never awaited."""
        if hasattr(self, "_closed") and not self._closed:
            self._wipe_credentials()
            logger.warning("BitvavoClient not properly closed - call close() explicitly")


def create_bitvavo_client(
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    access_window: Optional[int] = None,
) -> BitvavoClient:
    """
    Factory function to create a Bitvavo client with common configuration.

    Args:
        api_key: API key; omit together with api_secret for a public client
        api_secret: API secret
        base_url: Base URL for API endpoints
        timeout: Request timeout in seconds
        access_window: Optional access window in milliseconds for signed requests

    Returns:
        Configured BitvavoClient instance

    Raises:
        InvalidCredentials: If only one of key and secret is given, or either is unusable
    """
    config = ConnectionConfig(
        base_url=base_url,
        timeout=timeout,
        access_window=access_window,
    )

    credentials = None
    if api_key is not None or api_secret is not None:
        credentials = ApiCredentials(api_key or "", api_secret or "")

    return BitvavoClient(config, credentials)
