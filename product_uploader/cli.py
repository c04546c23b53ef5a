"""
Shopify CSV Product Uploader

Creates a Shopify product for each row of a CSV file and attaches the
declared custom metafields to it.

Usage:
    # Upload products.csv using SHOPIFY_STORE / ACCESS_TOKEN from .env
    python3 upload_products.py

    # Another file, explicit credentials
    python3 upload_products.py --csv watches.csv --store my-store.myshopify.com --token shpat_xxx

    # Build payloads without sending anything
    python3 upload_products.py --dry-run --verbose

Configuration (flags take precedence):
    SHOPIFY_STORE   store hostname (required)
    ACCESS_TOKEN    Admin API access token (required)
    API_VERSION     Admin API version (default: 2025-01)
    UPLOAD_TIMEOUT  request timeout in seconds (default: none)
"""

import argparse
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .common.csv_utils import load_rows
from .common.log_config import setup_logging
from .common.settings import DEFAULT_CSV_PATH, MissingConfigError, load_settings
from .shopify.api_client import ShopifyAPIClient
from .uploader import ProductUploader, UploadSummary


EXIT_CONFIG_ERROR = 1
EXIT_UPLOAD_FAILURES = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Upload products from a CSV file to Shopify with custom metafields"
    )
    parser.add_argument(
        "--csv", "-f",
        dest="csv_path",
        default=DEFAULT_CSV_PATH,
        help=f"Input CSV file (default: {DEFAULT_CSV_PATH})"
    )
    parser.add_argument(
        "--store", "-s",
        help="Store hostname, e.g. 'my-store.myshopify.com' (default: SHOPIFY_STORE env var)"
    )
    parser.add_argument(
        "--token", "-t",
        help="Shopify Admin API access token (default: ACCESS_TOKEN env var)"
    )
    parser.add_argument(
        "--api-version",
        help="Admin API version (default: API_VERSION env var or 2025-01)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        metavar="SECONDS",
        help="Request timeout (default: UPLOAD_TIMEOUT env var, otherwise none)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Build request payloads without sending them"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_UPLOAD_FAILURES} if any product failed to be created"
    )
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--quiet", action="store_true")
    return parser


def print_summary(summary: UploadSummary, dry_run: bool = False) -> None:
    """Print the run summary to stdout."""
    print("\n" + "=" * 60)
    print("PRODUCT UPLOAD SUMMARY")
    print("=" * 60)

    if dry_run:
        print("  DRY RUN - No products were actually created")
        print(f"  Would create: {summary.skipped} of {summary.total} products")
    else:
        print(f"  {summary.summary_line()}")

    failed = [r for r in summary.results if r.error]
    if failed:
        print("\n  Failed products:")
        for result in failed[:10]:
            print(f"    - {result.handle or '(no handle)'}")
        if len(failed) > 10:
            print(f"    ... and {len(failed) - 10} more")

    print("=" * 60)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    load_dotenv()

    try:
        settings = load_settings(
            store=args.store,
            access_token=args.token,
            api_version=args.api_version,
            csv_path=args.csv_path,
            timeout=args.timeout,
            dry_run=args.dry_run,
        )
    except MissingConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print("Use --store / --token or set SHOPIFY_STORE / ACCESS_TOKEN.", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except ValueError as e:
        # bad UPLOAD_TIMEOUT
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    try:
        rows = load_rows(settings.csv_path)
    except OSError as e:
        print(f"ERROR: Could not read {settings.csv_path}: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    with ShopifyAPIClient(
        settings.store,
        settings.access_token,
        api_version=settings.api_version,
        timeout=settings.timeout,
    ) as client:
        summary = ProductUploader(settings, client).upload_all(rows)

    print_summary(summary, dry_run=settings.dry_run)

    if args.strict and summary.failed:
        return EXIT_UPLOAD_FAILURES
    return 0


if __name__ == "__main__":
    sys.exit(main())
