"""Unit tests for the MarketStatsEngine facade."""

from __future__ import annotations

import asyncio
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from marketview.stats import MarketStatsEngine, MarketTab, StatsConfig
from marketview.stats.feed import RestFeed
from marketview.stats.models import Order, Trade
from marketview.stats.utils import HTTPClient


def make_orders(pairs):
    return [
        Order(amount=remain, remain=remain, price=price, value=str(Decimal(remain) * Decimal(price)))
        for remain, price in pairs
    ]


@pytest.fixture
def engine():
    return MarketStatsEngine()


def test_engine_wires_config():
    config = StatsConfig(depth_size=2, tape_size=1, precision=6, debounce_delay=0.01)
    engine = MarketStatsEngine(config)
    assert engine.config is config
    assert engine.decimal.precision == 6

    stats = engine.summarize_depth(make_orders([("1", "1"), ("2", "2"), ("50", "3")]))
    assert len(stats.orders) == 2
    assert stats.total_remain == Decimal("3")


def test_summarize_depth_and_estimate(engine):
    stats = engine.summarize_depth(make_orders([("2", "10"), ("3", "20")]))
    assert engine.to_plain(stats.total_remain) == "5"
    assert engine.to_plain(stats.total_value) == "80"
    assert engine.to_plain(stats.weighted_average_price) == "16"

    estimate = engine.estimate("50", stats)
    assert engine.to_plain(estimate.estimated_remain) == "2.5"
    assert engine.to_plain(estimate.estimated_payable) == "8"


def test_undefined_is_distinct_from_zero(engine):
    stats = engine.summarize_depth([])
    assert engine.to_plain(stats.total_remain) is None
    assert engine.to_plain(Decimal("0")) == "0"


def test_summarize_trades(engine):
    trades = [
        Trade(time=2, price="100", value="100", match_amount="1", type="buy", match_id="b"),
        Trade(time=1, price="200", value="600", match_amount="3", type="sell", match_id="a"),
    ]
    stats = engine.summarize_trades(trades)
    assert stats.weighted_average_price == Decimal("175")


def test_formatting_shortcuts(engine):
    assert engine.format_price("1234.567", "IRT") == "1234"
    assert engine.format_price("1234.567", "USDT") == "1234.56"
    assert engine.format_price_change(None) == "±0%"
    assert engine.formatter.format_number(Decimal("1234.5")) == "1,234.5"


@pytest.mark.asyncio
async def test_new_session_uses_configured_delay():
    engine = MarketStatsEngine(StatsConfig(debounce_delay=0.02))
    received = []
    session = engine.new_session(tab=MarketTab.SELL, on_estimate=received.append)
    session.update_depth(engine.summarize_depth(make_orders([("2", "10"), ("3", "20")])))

    session.set_percentage("5")
    session.set_percentage("50")
    await asyncio.sleep(0.1)

    assert session.tab is MarketTab.SELL
    assert [e.estimated_payable for e in received] == [Decimal("8")]


@pytest.mark.asyncio
async def test_feed_to_listing_end_to_end(engine):
    http = AsyncMock(spec=HTTPClient)
    http.get.return_value = {
        "results": [
            {
                "id": 1,
                "currency1": {"code": "BTC"},
                "currency2": {"code": "IRT"},
                "code": "BTC_IRT",
                "price": "5400000000.75",
                "price_info": {"change": 0.125},
            },
            {
                "id": 2,
                "currency1": {"code": "BTC"},
                "currency2": {"code": "USDT"},
                "code": "BTC_USDT",
                "price": "64250.129",
                "price_info": {"change": -1.0},
            },
        ]
    }
    markets = await RestFeed(http).get_markets()
    rows = engine.select_markets(markets, "IRT")

    assert len(rows) == 1
    assert rows[0].display_code == "BTC/IRT"
    assert rows[0].price == "5400000000"
    assert rows[0].price_change == "+0.12%"
