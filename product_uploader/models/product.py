"""
Request data models.

Pure data classes for the JSON bodies sent to the Shopify Admin API.
No business logic - only data structure definitions and serialization.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

METAFIELD_NAMESPACE = "custom"

Number = Union[int, float]


@dataclass
class ImageRequest:
    """Product image referenced by URL."""
    src: str


@dataclass
class VariantRequest:
    """The single variant created alongside each product."""
    sku: Optional[str]
    price: str = "0.00"
    grams: Optional[Number] = 0
    weight_unit: str = "g"
    inventory_quantity: Optional[int] = 0


@dataclass
class ProductRequest:
    """
    Body of a product creation request.

    Text fields are passed through from the CSV as-is; a missing column
    is sent as null and left to the API to accept or reject.
    """
    title: Optional[str]
    body_html: Optional[str] = None
    vendor: Optional[str] = None
    product_type: Optional[str] = None
    tags: Optional[str] = None
    status: str = "draft"
    variants: List[VariantRequest] = field(default_factory=list)
    images: List[ImageRequest] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_payload(self) -> Dict[str, Any]:
        """Wrap as {"product": {...}} for products.json."""
        return {"product": self.to_dict()}


@dataclass
class MetafieldRequest:
    """Body of a metafield creation request (always in the custom namespace)."""
    key: str
    type: str
    value: str
    namespace: str = METAFIELD_NAMESPACE

    def __post_init__(self):
        if not self.value:
            raise ValueError(f"Metafield {self.key} requires a non-empty value")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "namespace": self.namespace,
            "key": self.key,
            "type": self.type,
            "value": self.value,
        }

    def to_payload(self) -> Dict[str, Any]:
        """Wrap as {"metafield": {...}} for products/<id>/metafields.json."""
        return {"metafield": self.to_dict()}
