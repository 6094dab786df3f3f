#!/usr/bin/env python3
"""
Example: Fetch and display account information.

This example demonstrates how to:
1. Create an authenticated client from environment variables
2. Fetch the account fee schedule
3. Show non-zero balances
4. Display request statistics

Prerequisites:
- Set BITVAVO_API_KEY and BITVAVO_API_SECRET (a .env file works too)
- Install the package in development mode: pip install -e .

Usage:
    python examples/account_info.py
"""

import asyncio
import logging
from decimal import Decimal

from bitvavo_api import BitvavoClient, BitvavoError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main():
    client = BitvavoClient.from_env()
    if not client.authenticated:
        logger.error("BITVAVO_API_KEY and BITVAVO_API_SECRET must be set")
        await client.close()
        return

    async with client:
        try:
            account = await client.get_account()
            balances = await client.get_balances()
        except BitvavoError as e:
            logger.error(f"Failed to fetch account information: {e}")
            return

        print("\nFees")
        print(f"   Taker: {account.fees.taker}")
        print(f"   Maker: {account.fees.maker}")
        print(f"   30d volume: {account.fees.volume}")

        print("\nBalances")
        for balance in balances:
            if Decimal(balance.available) or Decimal(balance.in_order):
                print(f"   {balance.symbol:<8} available={balance.available:<20} in order={balance.in_order}")

        stats = client.get_statistics()
        print(f"\n{stats.total_requests} requests, avg {stats.avg_duration_ms:.1f} ms")


if __name__ == "__main__":
    asyncio.run(main())
