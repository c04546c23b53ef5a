"""
Shopify integration modules.

Modules:
    api_client - REST client for the Shopify Admin API
    product_builder - CSV row to product creation request
    metafields - Declared custom metafields and value formatting
"""

from .api_client import ApiResponse, ShopifyAPIClient, normalize_store
from .metafields import (
    METAFIELD_TYPES,
    build_metafields,
    format_metafield_value,
)
from .product_builder import build_product

__all__ = [
    # API Client
    'ApiResponse',
    'ShopifyAPIClient',
    'normalize_store',
    # Payload builders
    'METAFIELD_TYPES',
    'build_metafields',
    'build_product',
    'format_metafield_value',
]
