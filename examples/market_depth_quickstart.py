#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from marketview.stats import BookSide, MarketStatsEngine, MarketTab, RestFeed, StatsConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Depth statistics and a partial-fill estimate for one market")
    p.add_argument("market_id", type=int)
    p.add_argument("side", nargs="?", default="buy", choices=["buy", "sell"])
    p.add_argument("percentage", nargs="?", default="25")
    p.add_argument("depth", nargs="?", type=int, default=10, help="Levels to aggregate")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    engine = MarketStatsEngine(StatsConfig(depth_size=args.depth))
    fmt = engine.formatter

    async with RestFeed(config=engine.config) as feed:
        markets = {m.id: m for m in await feed.get_markets()}
        orders = await feed.get_orders(args.market_id, BookSide(args.side))
        trades = await feed.get_trades(args.market_id)

    market = markets.get(args.market_id)
    if market is not None:
        price = engine.format_price(market.price, market.quote_code)
        print(f"{market.display_code}  {price} {market.quote_code}  {engine.format_price_change(market.price_change)}")

    depth = engine.summarize_depth(orders)
    print(f"Top {len(depth.orders)} {args.side} levels:")
    for order in depth.orders:
        print(f"  {fmt.format_number(order.remain):>16} @ {fmt.format_number(order.price):>16} = {fmt.format_number(order.value):>18}")
    print(f"Total remain:       {fmt.format_number(depth.total_remain)}")
    print(f"Weighted avg price: {fmt.format_number(depth.weighted_average_price)}")
    print(f"Total value:        {fmt.format_number(depth.total_value)}")

    tape = engine.summarize_trades(trades)
    print(f"Trades VWAP ({len(tape.trades)}): {fmt.format_number(tape.weighted_average_price)}")

    session = engine.new_session(
        tab=MarketTab(args.side),
        on_estimate=lambda e: print(
            f"{args.percentage}% -> remain {fmt.format_number(e.estimated_remain)}, "
            f"payable {fmt.format_number(e.estimated_payable)}"
        ),
    )
    session.update_depth(depth)
    session.set_percentage(args.percentage)
    await session.flush()


if __name__ == "__main__":
    asyncio.run(main())
