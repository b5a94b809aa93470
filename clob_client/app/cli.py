"""
Command-line entry point for quick market-data lookups.

Examples:
    clob-client book --token-id 1234
    clob-client market-price --token-id 1234 --side BUY --amount 100
"""

import argparse
import asyncio
import json
import logging
import sys
from decimal import Decimal, InvalidOperation

from ..clients.clob_client import ClobClient
from ..clients.errors import ApiError, ClobError
from ..config import ClientConfig
from ..models.order_book import Side

logger = logging.getLogger(__name__)


def _decimal_arg(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {value!r}") from None


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="CLOB client - order book and market order pricing"
    )

    parser.add_argument(
        '--url',
        type=str,
        default=None,
        help='CLOB API URL (default: $CLOB_API_URL or https://clob.polymarket.com)'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    book_parser = subparsers.add_parser('book', help='Print the order book for a token')
    book_parser.add_argument('--token-id', required=True, help='Outcome token id')

    price_parser = subparsers.add_parser(
        'market-price',
        help='Price a market order against the current book'
    )
    price_parser.add_argument('--token-id', required=True, help='Outcome token id')
    price_parser.add_argument(
        '--side',
        type=Side.parse,
        default=Side.BUY,
        help='BUY or SELL (default: BUY)'
    )
    price_parser.add_argument(
        '--amount',
        type=_decimal_arg,
        required=True,
        help='Notional amount to fill'
    )

    return parser.parse_args(argv)


async def run(args, config: ClientConfig) -> int:
    """Execute the selected command and print its result."""
    async with ClobClient(config) as client:
        if args.command == 'book':
            book = await client.get_order_book(args.token_id)
            print(json.dumps(book.to_dict(), indent=2))
        elif args.command == 'market-price':
            price = await client.get_market_price(args.token_id, args.side, args.amount)
            print(price)
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = ClientConfig.from_env()
    if args.url:
        config.clob_url = args.url

    try:
        return asyncio.run(run(args, config))
    except ApiError as e:
        logger.error(f"Server returned {e.status}: {e.message}")
        return 2
    except ClobError as e:
        logger.error(str(e))
        return 1


if __name__ == '__main__':
    sys.exit(main())
