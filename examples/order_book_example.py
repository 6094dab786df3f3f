"""
Order Book Example

This example demonstrates:
- Fetching the order book of a market with a depth limit
- Displaying best bid/ask prices and amounts
- Computing spread and mid price

No API keys required.
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path to import bitvavo_api
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bitvavo_api import BitvavoError, Quote, create_bitvavo_client


def format_level(quote: Quote) -> str:
    """Format a single order book level for display."""
    return f"   Price: {Decimal(quote.price):>14,.2f}  |  Amount: {Decimal(quote.amount):>12,.8f}"


async def display_order_book(market: str, depth: int = 5):
    """Fetch and display the order book of a market."""
    print(f"\nFetching order book for {market} (depth={depth})...\n")

    async with create_bitvavo_client() as client:
        try:
            book = await client.get_order_book(market, depth=depth)
        except BitvavoError as e:
            print(f"Failed to fetch order book for {market}: {e}")
            return

        if not book.bids or not book.asks:
            print("Order book is empty")
            return

        best_bid = Decimal(book.bids[0].price)
        best_ask = Decimal(book.asks[0].price)
        spread = best_ask - best_bid

        print("=" * 70)
        print(f"{market}  nonce={book.nonce}")
        print("=" * 70)
        print("Asks:")
        for quote in reversed(book.asks):
            print(format_level(quote))
        print("-" * 70)
        print("Bids:")
        for quote in book.bids:
            print(format_level(quote))
        print("=" * 70)
        print(f"Spread: {spread:,.2f} ({spread / best_bid * 100:.4f}%)")
        print(f"Mid price: {(best_bid + best_ask) / 2:,.2f}")


async def main():
    market = sys.argv[1] if len(sys.argv) > 1 else "BTC-EUR"
    await display_order_book(market)


if __name__ == "__main__":
    asyncio.run(main())
