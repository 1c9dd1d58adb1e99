"""
Shopify Store Cloner

Copies smart collections, custom collections, products (with images,
options and variants) and pages from one Shopify store into another.

Usage:
    shop-clone <fromShopName> <fromAccessToken> <toShopName> <toAccessToken>

    # Debug output (page fetches, image remaps) on stderr
    shop-clone source-store shpat_aaa target-store shpat_bbb --verbose
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .cloning import ShopCloner
from .common.config_loader import CloneSettings, load_clone_settings
from .common.log_config import setup_logging
from .shopify import ShopifyAPIClient, ShopifyAPIError, TokenBucket

logger = logging.getLogger(__name__)

PROG = "shop-clone"
USAGE = f"{PROG} <fromShopName> <fromAccessToken> <toShopName> <toAccessToken>"


def build_client(shop: str, access_token: str, settings: CloneSettings) -> ShopifyAPIClient:
    """Client for one store with its own rate-limit bucket."""
    bucket = TokenBucket(
        interval=settings.rate_limit_interval,
        bucket_size=settings.rate_limit_bucket_size,
        calls=settings.rate_limit_calls,
    )
    return ShopifyAPIClient(shop, access_token, bucket=bucket)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Clone collections, products and pages from one Shopify store to another"
    )
    parser.add_argument(
        "stores",
        nargs="*",
        metavar="ARG",
        help="fromShopName fromAccessToken toShopName toAccessToken"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress info messages, show only warnings and errors"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if len(args.stores) < 4:
        print(f"Fatal: 4 arguments required, but only {len(args.stores)} provided. Run '{USAGE}'")
        return

    from_shop, from_token, to_shop, to_token = args.stores[:4]

    load_dotenv()
    setup_logging(verbose=args.verbose, quiet=args.quiet)
    settings = load_clone_settings()

    with build_client(from_shop, from_token, settings) as source, \
            build_client(to_shop, to_token, settings) as target:
        logger.info("Cloning %s -> %s", source.shop, target.shop)
        try:
            ShopCloner(source, target, settings).run()
        except ShopifyAPIError as e:
            logger.error("Clone aborted: %s", e)
            sys.exit(1)


if __name__ == "__main__":
    main()
