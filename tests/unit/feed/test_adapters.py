"""Unit tests for feed response adapters."""

from decimal import Decimal

import pytest

from marketview.stats.core import FeedError, InvalidDecimal
from marketview.stats.feed import MarketsAdapter, OrdersAdapter, TradesAdapter

MARKETS_RESPONSE = {
    "results": [
        {
            "id": 1,
            "currency1": {"id": 1, "code": "BTC", "image": "https://cdn.example.com/btc.svg"},
            "currency2": {"id": 2, "code": "USDT", "image": "https://cdn.example.com/usdt.svg"},
            "code": "BTC_USDT",
            "price": "64250.12",
            "price_info": {"change": 2.31},
        },
        {
            "id": 2,
            "currency1": {"id": 1, "code": "BTC"},
            "currency2": {"id": 3, "code": "IRT"},
            "code": "BTC_IRT",
            "price": "5400000000",
            "price_info": {"change": None},
        },
    ]
}

ORDERS_RESPONSE = {
    "orders": [
        {"amount": "0.5", "remain": "0.4", "price": "64250", "value": "25700"},
        {"amount": "1.0", "remain": "1.0", "price": "64240", "value": "64240"},
    ]
}

TRADES_RESPONSE = [
    {
        "time": 1700000100,
        "price": "64250",
        "value": "642.5",
        "match_amount": "0.01",
        "type": "buy",
        "match_id": "m-2",
    },
    {
        "time": 1700000000,
        "price": "64200",
        "value": "1284",
        "match_amount": "0.02",
        "type": "sell",
        "match_id": "m-1",
    },
]


def test_markets_adapter():
    markets = MarketsAdapter().parse(MARKETS_RESPONSE)
    assert [m.code for m in markets] == ["BTC_USDT", "BTC_IRT"]
    assert markets[0].price_change == Decimal("2.31")
    assert markets[1].price_change is None
    assert markets[1].quote_code == "IRT"


def test_orders_adapter_preserves_feed_order():
    orders = OrdersAdapter().parse(ORDERS_RESPONSE, {"market_id": 1, "side": "sell"})
    assert [o.price for o in orders] == [Decimal("64250"), Decimal("64240")]
    assert orders[0].remain == Decimal("0.4")


def test_trades_adapter():
    trades = TradesAdapter().parse(TRADES_RESPONSE)
    assert [t.match_id for t in trades] == ["m-2", "m-1"]
    assert trades[1].match_amount == Decimal("0.02")


def test_empty_rows():
    assert OrdersAdapter().parse({"orders": []}) == []
    assert TradesAdapter().parse([]) == []


@pytest.mark.parametrize(
    "adapter,response",
    [
        (MarketsAdapter(), []),
        (MarketsAdapter(), {"markets": []}),
        (OrdersAdapter(), {"orders": None}),
        (OrdersAdapter(), "not json"),
        (TradesAdapter(), {"results": []}),
    ],
)
def test_malformed_envelope_raises_feed_error(adapter, response):
    with pytest.raises(FeedError):
        adapter.parse(response)


def test_missing_field_raises_feed_error():
    response = {"orders": [{"amount": "1", "remain": "1", "price": "1"}]}
    with pytest.raises(FeedError) as exc_info:
        OrdersAdapter().parse(response)
    assert "index 0" in str(exc_info.value)


def test_malformed_number_raises_invalid_decimal():
    response = {"orders": [{"amount": "1", "remain": "lots", "price": "1", "value": "1"}]}
    with pytest.raises(InvalidDecimal):
        OrdersAdapter().parse(response)
