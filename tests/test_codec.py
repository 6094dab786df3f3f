# -*- coding: utf-8 -*-
"""
Tests for the wire codec: positional records, enumerations and keyed objects.
"""

from typing import List
from uuid import UUID

import pytest

from bitvavo_api.codec import WireEnum, decode, encode
from bitvavo_api.errors import CodecError, InvalidType, InvalidValue, MissingField
from bitvavo_api.models import (
    Account, Asset, AssetStatus, CandleInterval, DepositStatus, Market,
    MarketStatus, OHLCV, Order, OrderBook, OrderResponse, OrderType, Quote,
    SelfTradePrevention, ServerTime, Ticker24h, TickerPrice, TimeInForce,
    TradeSide, TriggerReference, TriggerType, WithdrawalStatus, WithdrawOrder,
)

ALL_ENUMS = [
    AssetStatus,
    MarketStatus,
    TradeSide,
    CandleInterval,
    DepositStatus,
    WithdrawalStatus,
    OrderType,
    TriggerType,
    TriggerReference,
    TimeInForce,
    SelfTradePrevention,
]


class TestPositionalRecords:
    """Test records sent as fixed-order arrays."""

    def test_decode_quote(self):
        """Test a two-element array decodes into a Quote."""
        quote = decode(Quote, ["21000.5", "0.01"])
        assert quote == Quote(price="21000.5", amount="0.01")

    def test_decode_quote_missing_amount(self):
        """Test a short array names the first missing field."""
        with pytest.raises(MissingField) as exc_info:
            decode(Quote, ["21000.5"])
        assert exc_info.value.field == "amount"
        assert "amount" in str(exc_info.value)

    def test_decode_empty_array(self):
        """Test an empty array is missing the first field."""
        with pytest.raises(MissingField) as exc_info:
            decode(Quote, [])
        assert exc_info.value.field == "price"

    def test_trailing_elements_ignored(self):
        """Test extra trailing elements are accepted and dropped."""
        quote = decode(Quote, ["1", "2", "3"])
        assert quote == Quote(price="1", amount="2")

    def test_decode_ohlcv(self, candles_data):
        """Test a six-element array decodes into a candle."""
        candle = decode(OHLCV, candles_data[0])
        assert candle.time == 1640804400000
        assert candle.open == "41937"
        assert candle.high == "41955"
        assert candle.low == "41449"
        assert candle.close == "41540"
        assert candle.volume == "23.64498292"

    def test_decode_ohlcv_missing_volume(self):
        """Test a five-element candle is missing its volume."""
        with pytest.raises(MissingField) as exc_info:
            decode(OHLCV, [1640804400000, "1", "2", "0.5", "1.5"])
        assert exc_info.value.field == "volume"

    def test_element_type_checked(self):
        """Test each position is parsed as its declared type."""
        with pytest.raises(InvalidType) as exc_info:
            decode(OHLCV, ["1640804400000", "1", "2", "0.5", "1.5", "10"])
        assert exc_info.value.field == "time"

        with pytest.raises(InvalidType):
            decode(Quote, [21000.5, "0.01"])

    def test_object_instead_of_array(self):
        """Test a keyed object is rejected for a positional record."""
        with pytest.raises(InvalidType):
            decode(Quote, {"price": "1", "amount": "2"})

    def test_encode_positional(self):
        """Test positional records encode in field order."""
        assert encode(Quote(price="21000.5", amount="0.01")) == ["21000.5", "0.01"]
        candle = OHLCV(time=1, open="2", high="3", low="4", close="5", volume="6")
        assert encode(candle) == [1, "2", "3", "4", "5", "6"]

    @pytest.mark.parametrize("record", [
        Quote(price="0.00000001", amount="123456789.5"),
        OHLCV(time=1700000000000, open="1.1", high="1.5", low="0.9", close="1.2", volume="0"),
    ])
    def test_round_trip(self, record):
        """Test decode(encode(x)) == x."""
        assert decode(type(record), encode(record)) == record


class TestWireEnums:
    """Test closed string sets."""

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_every_token_round_trips(self, enum_cls):
        """Test encode(decode(s)) == s for every token of every enum."""
        for member in enum_cls:
            token = member.value
            assert enum_cls.from_wire(token).to_wire() == token

    @pytest.mark.parametrize("enum_cls", ALL_ENUMS)
    def test_unknown_token_rejected(self, enum_cls):
        """Test tokens outside the set raise InvalidValue."""
        with pytest.raises(InvalidValue):
            enum_cls.from_wire("not-a-token")

    def test_case_sensitive(self):
        """Test tokens are matched case-sensitively."""
        assert OrderType.from_wire("stopLossLimit") is OrderType.STOP_LOSS_LIMIT
        with pytest.raises(InvalidValue):
            OrderType.from_wire("stoplosslimit")
        with pytest.raises(InvalidValue):
            TimeInForce.from_wire("gtc")

    def test_invalid_value_lists_expected(self):
        """Test the error names the value and the accepted set."""
        with pytest.raises(InvalidValue) as exc_info:
            MarketStatus.from_wire("bogus")
        error = exc_info.value
        assert error.value == "bogus"
        assert error.expected == ("trading", "halted", "auction")
        assert "bogus" in str(error)
        assert "trading, halted, auction" in str(error)

    def test_non_string_token(self):
        """Test non-string tokens are a type error."""
        with pytest.raises(InvalidType):
            TradeSide.from_wire(1)

    def test_wire_tokens(self):
        """Test a sample of exact wire tokens."""
        assert CandleInterval.ONE_MINUTE.to_wire() == "1m"
        assert CandleInterval.TWELVE_HOURS.to_wire() == "12h"
        assert TimeInForce.FILL_OR_KILL.to_wire() == "FOK"
        assert SelfTradePrevention.DECREMENT_AND_CANCEL.to_wire() == "decrementAndCancel"
        assert WithdrawalStatus.AWAITING_BITVAVO_INSPECTION.to_wire() == "awaiting_bitvavo_inspection"
        assert len(CandleInterval) == 11
        assert len(WithdrawalStatus) == 9

    def test_str_is_token(self):
        assert str(CandleInterval.ONE_DAY) == "1d"
        assert isinstance(CandleInterval.ONE_DAY, WireEnum)


class TestKeyedObjects:
    """Test records sent as JSON objects."""

    def test_server_time(self):
        """Test the time response shape decodes to its integer."""
        assert decode(ServerTime, {"time": 1700000000000}).time == 1700000000000

    def test_market_status_trading(self, market_data):
        """Test camelCase keys and the market status."""
        market = decode(Market, market_data)
        assert market.pair == "BTC-EUR"
        assert market.status is MarketStatus.TRADING
        assert market.price_precision == 5
        assert market.min_order_in_quote_asset == "5.00"
        assert "stopLossLimit" in market.order_types

    def test_market_status_bogus(self, market_data):
        """Test an unknown status is a codec error naming the value."""
        market_data["status"] = "bogus"
        with pytest.raises(CodecError) as exc_info:
            decode(List[Market], [market_data])
        assert isinstance(exc_info.value, InvalidValue)
        assert exc_info.value.value == "bogus"
        assert exc_info.value.field == "status"

    def test_asset(self, asset_data):
        asset = decode(Asset, asset_data)
        assert asset.deposit_status is AssetStatus.OK
        assert asset.withdrawal_status is AssetStatus.MAINTENANCE
        assert asset.networks == ["Mainnet"]
        assert asset.decimals == 8

    def test_asset_unknown_status(self, asset_data):
        asset_data["depositStatus"] = "ok"
        with pytest.raises(InvalidValue) as exc_info:
            decode(Asset, asset_data)
        assert exc_info.value.expected == ("OK", "MAINTENANCE", "DELISTED")

    def test_missing_required_field(self, market_data):
        """Test a missing required key is named in the error."""
        del market_data["pricePrecision"]
        with pytest.raises(MissingField) as exc_info:
            decode(Market, market_data)
        assert exc_info.value.field == "pricePrecision"

    def test_null_required_field(self, market_data):
        market_data["base"] = None
        with pytest.raises(InvalidType):
            decode(Market, market_data)

    def test_optional_fields_absent_or_null(self):
        """Test optional fields accept missing keys and nulls."""
        ticker = decode(Ticker24h, {"market": "XYZ-EUR", "open": None})
        assert ticker.market == "XYZ-EUR"
        assert ticker.open is None
        assert ticker.volume_quote is None

        price = decode(TickerPrice, {"market": "BTC-EUR"})
        assert price.price is None

    def test_ticker_24h_full(self, ticker_24h_data):
        ticker = decode(Ticker24h, ticker_24h_data)
        assert ticker.start_timestamp == 1640717550000
        assert ticker.close_timestamp == 1640803949000
        assert ticker.bid_size == "0.12"
        assert ticker.volume_quote == "12998765.12"

    def test_nested_records(self, order_book_data, account_data):
        """Test nested objects and arrays of positional records."""
        book = decode(OrderBook, order_book_data)
        assert book.nonce == 438524
        assert book.bids[0] == Quote(price="21000.5", amount="0.01")
        assert len(book.asks) == 1

        account = decode(Account, account_data)
        assert account.fees.taker == "0.0025"
        assert account.fees.volume == "10000.00"

    def test_error_envelope_as_success_shape(self):
        """Test an error-shaped body does not decode as a success payload."""
        with pytest.raises(CodecError):
            decode(TickerPrice, {"errorCode": 205, "error": "Invalid market"})

    def test_list_expected(self, market_data):
        with pytest.raises(InvalidType):
            decode(List[Market], market_data)

    def test_uuid_fields(self, order_response_data):
        response = decode(OrderResponse, order_response_data)
        assert response.order_id == UUID("1be6d0df-d5dc-4b53-a250-3376f3b393e6")
        assert isinstance(response.client_order_id, UUID)
        assert response.created == 1542621155181

    def test_invalid_uuid(self, order_response_data):
        order_response_data["orderId"] = "not-a-uuid"
        with pytest.raises(CodecError) as exc_info:
            decode(OrderResponse, order_response_data)
        assert exc_info.value.field == "orderId"

    def test_boolean_not_integer(self):
        with pytest.raises(InvalidType):
            decode(ServerTime, {"time": True})


class TestEncodeOutbound:
    """Test encoding of outbound requests."""

    def test_order_omits_unset_fields(self):
        """Test unset optionals are left out and enums use wire tokens."""
        order = Order(
            market="BTC-EUR",
            side=TradeSide.BUY,
            order_type=OrderType.STOP_LOSS_LIMIT,
            amount="0.1",
            price="20000",
            trigger_amount="20500",
            trigger_type=TriggerType.PRICE,
            trigger_reference=TriggerReference.LAST_TRADE,
            time_in_force=TimeInForce.GOOD_TILL_CANCELLED,
            self_trade_prevention=SelfTradePrevention.CANCEL_OLDEST,
        )
        assert encode(order) == {
            "market": "BTC-EUR",
            "side": "buy",
            "orderType": "stopLossLimit",
            "amount": "0.1",
            "price": "20000",
            "triggerAmount": "20500",
            "triggerType": "price",
            "triggerReference": "lastTrade",
            "timeInForce": "GTC",
            "selfTradePrevention": "cancelOldest",
            "disableMarketProtection": False,
            "responseRequired": True,
        }

    def test_order_client_id(self):
        client_id = UUID("2be7d0df-d8dc-7b93-a550-8876f3b393e9")
        order = Order(
            market="ETH-EUR",
            side=TradeSide.SELL,
            order_type=OrderType.MARKET,
            client_order_id=client_id,
            amount_quote="50",
        )
        encoded = encode(order)
        assert encoded["clientOrderId"] == str(client_id)
        assert encoded["amountQuote"] == "50"
        assert "amount" not in encoded
        assert "price" not in encoded

    def test_withdraw_order(self):
        request = WithdrawOrder(symbol="BTC", amount="0.5", address="bc1qexample")
        assert encode(request) == {
            "symbol": "BTC",
            "amount": "0.5",
            "address": "bc1qexample",
            "internal": False,
            "addWithdrawalFee": False,
        }
