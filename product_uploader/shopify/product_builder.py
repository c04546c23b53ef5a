"""
Product Request Builder

Maps a Shopify-export style CSV row onto a product creation request
with one variant and at most one image.
"""

import logging
import math
import re
from typing import Dict, Optional

from ..models import ImageRequest, ProductRequest, VariantRequest
from ..models.product import Number

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "draft"
DEFAULT_PRICE = "0.00"
DEFAULT_WEIGHT_UNIT = "g"

LEADING_INT_RE = re.compile(r'^\s*([+-]?\d+)')


def parse_number(raw: Optional[str], column: str = "") -> Optional[Number]:
    """
    Parse a numeric cell. Empty or blank cells count as 0.

    Returns None (sent as null) when the cell is not a number.
    """
    if not raw or not raw.strip():
        return 0
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Not a number in %s: %r", column or "cell", raw)
        return None
    if not math.isfinite(value):
        logger.warning("Not a finite number in %s: %r", column or "cell", raw)
        return None
    return int(value) if value.is_integer() else value


def parse_int(raw: Optional[str], column: str = "") -> Optional[int]:
    """
    Parse the leading integer of a cell ("12.7" -> 12). Empty cells count as 0.

    Returns None (sent as null) when the cell does not start with digits.
    """
    if not raw:
        return 0
    match = LEADING_INT_RE.match(raw)
    if not match:
        logger.warning("Not an integer in %s: %r", column or "cell", raw)
        return None
    return int(match.group(1))


def build_variant(row: Dict[str, str]) -> VariantRequest:
    """Build the product's single variant; the Handle doubles as SKU."""
    return VariantRequest(
        sku=row.get("Handle"),
        price=row.get("Variant Price") or DEFAULT_PRICE,
        grams=parse_number(row.get("Variant Grams"), "Variant Grams"),
        weight_unit=row.get("Variant Weight Unit") or DEFAULT_WEIGHT_UNIT,
        inventory_quantity=parse_int(row.get("Variant Inventory Qty"), "Variant Inventory Qty"),
    )


def build_product(row: Dict[str, str]) -> ProductRequest:
    """
    Build a product creation request from a CSV row.

    Args:
        row: CSV row keyed by header column names

    Returns:
        ProductRequest. Required fields are not validated; a missing
        Title is sent as null and rejected by the API if it must be.
    """
    image_src = row.get("Image Src")

    return ProductRequest(
        title=row.get("Title"),
        body_html=row.get("Body (HTML)"),
        vendor=row.get("Vendor"),
        product_type=row.get("Type"),
        tags=row.get("Tags"),
        status=row.get("Status") or DEFAULT_STATUS,
        variants=[build_variant(row)],
        images=[ImageRequest(src=image_src)] if image_src else [],
    )
