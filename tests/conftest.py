# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing the Bitvavo client.
"""

import json
from typing import Any, Dict, List
from unittest.mock import AsyncMock, Mock, patch

import pytest

from bitvavo_api.auth import ApiCredentials
from bitvavo_api.client import BitvavoClient
from bitvavo_api.models import ConnectionConfig

TEST_BASE_URL = "https://api.bitvavo.test"
TEST_API_KEY = "a" * 64
TEST_API_SECRET = "b" * 128


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int, body: Any):
        self.status = status
        if isinstance(body, bytes):
            self._body = body
        else:
            self._body = json.dumps(body).encode()

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


def make_session(status: int = 200, body: Any = None) -> Mock:
    """Mock aiohttp ClientSession answering every request with one response."""
    session = Mock()
    session.closed = False
    session.request = Mock(return_value=FakeResponse(status, body))
    return session


# Client fixtures
@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(base_url=TEST_BASE_URL, timeout=5.0)


@pytest.fixture
def credentials() -> ApiCredentials:
    return ApiCredentials(TEST_API_KEY, TEST_API_SECRET)


@pytest.fixture
async def public_client(connection_config):
    """Client without credentials."""
    client = BitvavoClient(connection_config)
    yield client
    await client.close()


@pytest.fixture
async def private_client(connection_config, credentials):
    """Client with credentials."""
    client = BitvavoClient(connection_config, credentials)
    yield client
    await client.close()


@pytest.fixture
def serve():
    """Route a client's requests to a mocked session answering ``body``."""
    patches = []

    def _serve(client: BitvavoClient, body: Any, status: int = 200) -> Mock:
        session = make_session(status, body)
        patcher = patch.object(
            client._session_manager, "create_session", AsyncMock(return_value=session)
        )
        patcher.start()
        patches.append(patcher)
        return session

    yield _serve
    for patcher in patches:
        patcher.stop()


# Mock data fixtures
@pytest.fixture
def asset_data() -> Dict[str, Any]:
    return {
        "symbol": "BTC",
        "name": "Bitcoin",
        "decimals": 8,
        "depositFee": "0",
        "depositConfirmations": 10,
        "depositStatus": "OK",
        "withdrawalFee": "0.2",
        "withdrawalMinAmount": "0.2",
        "withdrawalStatus": "MAINTENANCE",
        "networks": ["Mainnet"],
        "message": "",
    }


@pytest.fixture
def market_data() -> Dict[str, Any]:
    return {
        "market": "BTC-EUR",
        "status": "trading",
        "base": "BTC",
        "quote": "EUR",
        "pricePrecision": 5,
        "minOrderInBaseAsset": "0.0001",
        "minOrderInQuoteAsset": "5.00",
        "maxOrderInBaseAsset": "1000000000.000000",
        "maxOrderInQuoteAsset": "1000000000.00",
        "quantityDecimals": 8,
        "orderTypes": ["market", "limit", "stopLoss", "stopLossLimit", "takeProfit", "takeProfitLimit"],
    }


@pytest.fixture
def order_book_data() -> Dict[str, Any]:
    return {
        "market": "BTC-EUR",
        "nonce": 438524,
        "bids": [["21000.5", "0.01"], ["21000", "0.5"]],
        "asks": [["21001", "0.2"]],
    }


@pytest.fixture
def trades_data() -> List[Dict[str, Any]]:
    return [
        {
            "id": "57b1159b-6bf5-4cde-9e2c-6bd6a5678baf",
            "timestamp": 1542967486256,
            "amount": "0.1",
            "price": "5012",
            "side": "sell",
        },
        {
            "id": "4e2ab2c2-3a5a-4f6b-9b38-3d1a6f2c0e11",
            "timestamp": 1542967486300,
            "amount": "0.05",
            "price": "5013",
            "side": "buy",
        },
    ]


@pytest.fixture
def candles_data() -> List[List[Any]]:
    return [
        [1640804400000, "41937", "41955", "41449", "41540", "23.64498292"],
        [1640800800000, "41813", "42009", "41727", "41955", "17.07618262"],
    ]


@pytest.fixture
def ticker_24h_data() -> Dict[str, Any]:
    return {
        "market": "BTC-EUR",
        "startTimestamp": 1640717550000,
        "timestamp": 1640803950000,
        "open": "41800",
        "openTimestamp": 1640717551000,
        "high": "42500",
        "low": "41200",
        "last": "41540",
        "closeTimestamp": 1640803949000,
        "bid": "41539",
        "bidSize": "0.12",
        "ask": "41541",
        "askSize": "0.3",
        "volume": "312.5",
        "volumeQuote": "12998765.12",
    }


@pytest.fixture
def account_data() -> Dict[str, Any]:
    return {"fees": {"taker": "0.0025", "maker": "0.0015", "volume": "10000.00"}}


@pytest.fixture
def balances_data() -> List[Dict[str, Any]]:
    return [
        {"symbol": "BTC", "available": "1.57593193", "inOrder": "0.74832374"},
        {"symbol": "EUR", "available": "250.00", "inOrder": "0"},
    ]


@pytest.fixture
def order_response_data() -> Dict[str, Any]:
    return {
        "orderId": "1be6d0df-d5dc-4b53-a250-3376f3b393e6",
        "market": "BTC-EUR",
        "created": 1542621155181,
        "updated": 1542621155181,
        "status": "new",
        "side": "buy",
        "orderType": "limit",
        "clientOrderId": "2be7d0df-d8dc-7b93-a550-8876f3b393e9",
    }


@pytest.fixture
def session_factory():
    """Factory for mocked sessions, see ``make_session``."""
    return make_session
