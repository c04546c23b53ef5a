"""
Product Metafields

Declared custom metafields and the conversion of CSV cells into
metafield creation requests.

Values for list types are sent as a JSON array of strings, including
list.number_decimal (no numeric coercion).
"""

import json
import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from ..models import MetafieldRequest

logger = logging.getLogger(__name__)

LIST_PREFIX = "list."
COLUMN_PREFIX = "product.metafields.custom."

TEXT_LIST = "list.single_line_text_field"
DECIMAL_LIST = "list.number_decimal"

# Declaration order is the order requests are sent in
METAFIELD_TYPES: Mapping[str, str] = MappingProxyType({
    "band": TEXT_LIST,
    "web_water_resistance": TEXT_LIST,
    "web_strap": TEXT_LIST,
    "case_cross_reference": TEXT_LIST,
    "web_case_material": TEXT_LIST,
    "case_thickness_mm": DECIMAL_LIST,
    "case_length_mm": DECIMAL_LIST,
    "movement_value_1": TEXT_LIST,
    "movement_value_2": TEXT_LIST,
    "movement_value_3": TEXT_LIST,
    "feature_1": TEXT_LIST,
    "feature_2": TEXT_LIST,
    "feature_3": TEXT_LIST,
    "feature_4": TEXT_LIST,
    "feature_5": TEXT_LIST,
})


def format_metafield_value(value: Optional[str], metafield_type: str) -> Optional[str]:
    """
    Format a raw CSV cell for the given metafield type.

    Args:
        value: Raw cell value
        metafield_type: Shopify metafield type (e.g. "list.single_line_text_field")

    Returns:
        None for an empty value or an empty list; a JSON array of the
        trimmed comma-separated segments for list types; otherwise the
        trimmed string

    Example:
        >>> format_metafield_value("steel, leather", "list.single_line_text_field")
        '["steel","leather"]'
    """
    if not value:
        return None

    if metafield_type.startswith(LIST_PREFIX):
        items = [part.strip() for part in value.split(",")]
        items = [item for item in items if item]
        if not items:
            return None
        return json.dumps(items, separators=(",", ":"), ensure_ascii=False)

    return value.strip()


def lookup_metafield_value(row: Dict[str, str], key: str) -> Optional[str]:
    """Prefer the product.metafields.custom.<key> column, fall back to <key>."""
    return row.get(f"{COLUMN_PREFIX}{key}") or row.get(key)


def build_metafields(
    row: Dict[str, str],
    metafield_types: Mapping[str, str] = METAFIELD_TYPES,
) -> List[MetafieldRequest]:
    """
    Build metafield requests for every declared key with a usable value.

    Args:
        row: CSV row
        metafield_types: Mapping of metafield key to type, in send order

    Returns:
        MetafieldRequest list; keys with empty values are omitted
    """
    metafields = []
    for key, metafield_type in metafield_types.items():
        raw = lookup_metafield_value(row, key)
        if not raw:
            continue

        formatted = format_metafield_value(raw, metafield_type)
        if not formatted:
            logger.debug("Skipping metafield %s: nothing left after formatting %r", key, raw)
            continue

        metafields.append(MetafieldRequest(key=key, type=metafield_type, value=formatted))

    return metafields
