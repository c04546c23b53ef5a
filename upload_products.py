#!/usr/bin/env python3
"""
Shopify CSV Product Uploader

Reads products.csv and creates each product, with its custom metafields,
through the Shopify Admin REST API.

Requirements:
    pip install requests python-dotenv

Usage:
    python3 upload_products.py
    python3 upload_products.py --csv products.csv --dry-run
"""

import os
import sys

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from product_uploader.cli import main


if __name__ == "__main__":
    sys.exit(main())
