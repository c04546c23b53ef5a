"""
Data models for product upload requests.

This module contains pure data classes with no business logic.
"""

from .product import (
    METAFIELD_NAMESPACE,
    ImageRequest,
    MetafieldRequest,
    ProductRequest,
    VariantRequest,
)

__all__ = [
    'METAFIELD_NAMESPACE',
    'ImageRequest',
    'MetafieldRequest',
    'ProductRequest',
    'VariantRequest',
]
