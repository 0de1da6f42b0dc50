"""Unit tests for DisplayFormatter."""

from decimal import Decimal

import pytest

from marketview.stats.core import StatsConfig
from marketview.stats.formatting import DisplayFormatter
from marketview.stats.models import Market


@pytest.fixture
def formatter():
    return DisplayFormatter()


def make_market(market_id, base, quote, price, change=None):
    return Market.model_validate(
        {
            "id": market_id,
            "currency1": {"code": base},
            "currency2": {"code": quote},
            "code": f"{base}_{quote}",
            "price": price,
            "price_info": {"change": change},
        }
    )


@pytest.mark.parametrize(
    "price,quote,expected",
    [
        ("1234.567", "IRT", "1234"),
        ("1234.567", "USDT", "1234.56"),
        ("1234.567", "BTC", "1234.56"),
        ("1234.5", "USDT", "1234.5"),
        ("1234", "USDT", "1234"),
        ("0.999", "USDT", "0.99"),
        ("-1.239", "USDT", "-1.23"),
        ("99999.9", "IRT", "99999"),
    ],
)
def test_round_price_truncates(formatter, price, quote, expected):
    assert formatter.round_price(price, quote) == expected


@pytest.mark.parametrize(
    "change,expected",
    [
        ("1.239", "+1.23%"),
        ("2.50", "+2.5%"),
        (0, "±0%"),
        (None, "±0%"),
        ("-0.5", "-0.5%"),
        ("-12.349", "-12.34%"),
        ("-0.001", "±0%"),
        (0.004, "±0%"),
    ],
)
def test_format_price_change(formatter, change, expected):
    assert formatter.format_price_change(change) == expected


def test_price_change_places_ignore_quote_table():
    formatter = DisplayFormatter(config=StatsConfig(rounding_places_by_quote={"USDT": 6}))
    assert formatter.format_price_change("1.23456") == "+1.23%"


def test_custom_zero_glyph():
    formatter = DisplayFormatter(config=StatsConfig(zero_change_glyph="="))
    assert formatter.format_price_change(None) == "=0%"


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1234567.891"), "1,234,567.891"),
        (Decimal("-1234.5"), "-1,234.5"),
        (Decimal("999"), "999"),
        (Decimal("0"), "0"),
        (Decimal("1.6E+3"), "1,600"),
        (None, ""),
    ],
)
def test_format_number(formatter, value, expected):
    assert formatter.format_number(value) == expected


def test_format_market(formatter):
    quote = formatter.format_market(make_market(7, "ETH", "IRT", "123456789.987", -3.219))
    assert quote.market_id == 7
    assert quote.display_code == "ETH/IRT"
    assert quote.quote_code == "IRT"
    assert quote.price == "123456789"
    assert quote.price_change == "-3.21%"


def test_select_markets_filters_by_quote_in_feed_order(formatter):
    markets = [
        make_market(1, "BTC", "USDT", "64000.129", 1.5),
        make_market(2, "BTC", "IRT", "5400000000.9", 0),
        make_market(3, "ETH", "USDT", "3100.5"),
        make_market(4, "ETH", "IRT", "260000000.5", -2),
    ]
    usdt = formatter.select_markets(markets, "USDT")
    assert [q.market_id for q in usdt] == [1, 3]
    assert [q.price for q in usdt] == ["64000.12", "3100.5"]
    assert [q.price_change for q in usdt] == ["+1.5%", "±0%"]

    irt = formatter.select_markets(markets, "irt")
    assert [q.market_id for q in irt] == [2, 4]
    assert [q.price for q in irt] == ["5400000000", "260000000"]


def test_places_for(formatter):
    assert formatter.places_for("IRT") == 0
    assert formatter.places_for("USDT") == 2
    assert formatter.places_for("DOGE") == 2


def test_round_price_keeps_every_integer_digit(formatter):
    price = "123456789012345678901234567.5"
    assert formatter.round_price(price, "USDT") == "123456789012345678901234567.5"
    assert formatter.round_price(price, "IRT") == "123456789012345678901234567"
    assert formatter.format_price_change("-98765432109876543210987654321.129") == (
        "-98765432109876543210987654321.12%"
    )
