# main.py
# Command-line checkout: price a basket of single-character product codes.
#
#   supermarket-checkout ABBACBBAB        -> 240
#   echo "BBBBB B" | supermarket-checkout -> 200

import argparse
import logging
import sys

from models.basket import Basket
from services.checkout_service import Supermarket
from utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="supermarket-checkout",
        description="Print the total price of a basket of product codes.",
    )
    parser.add_argument(
        "items",
        nargs="?",
        help="product codes, one character per item (read from stdin if omitted)",
    )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="show what each pricing rule charged before the total",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="log to the console only",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def read_items(args, stdin=None) -> str:
    if args.items is not None:
        return args.items
    stdin = stdin or sys.stdin
    # keep spaces; only the line ending is not part of the basket
    return stdin.read().rstrip("\r\n")


def main(argv=None, stdin=None, stdout=None) -> int:
    args = build_parser().parse_args(argv)
    stdout = stdout or sys.stdout

    logger = setup_logger(
        level=logging.DEBUG if args.verbose else logging.INFO,
        file_logging=not args.no_log_file,
    )

    basket = Basket(read_items(args, stdin))
    market = Supermarket()

    if args.breakdown:
        for rule, amount in market.breakdown(basket.items):
            print(f"{rule}: {amount}", file=stdout)

    total = market.checkout(basket.items)
    logger.info("Checkout: %d items, total=%d", len(basket), total)
    print(total, file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
