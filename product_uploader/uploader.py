"""
Product Uploader

Creates one Shopify product per CSV row and attaches its custom metafields.

Rows are processed strictly in order, one at a time. A failed product
creation abandons that row; a failed metafield is logged and the
remaining metafields of the row are still sent.
"""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .common.settings import UploaderSettings
from .shopify.api_client import ShopifyAPIClient
from .shopify.metafields import build_metafields
from .shopify.product_builder import build_product

logger = logging.getLogger(__name__)


class RowState(Enum):
    PENDING_CREATE = "pending_create"
    CREATED = "created"
    METAFIELDS_IN_FLIGHT = "metafields_in_flight"
    DONE = "done"
    CREATE_FAILED = "create_failed"
    SKIPPED = "skipped"     # dry run


@dataclass
class RowResult:
    """Outcome of uploading a single row."""
    handle: Optional[str]
    state: RowState = RowState.PENDING_CREATE
    product_id: Optional[int] = None
    metafields_added: List[str] = field(default_factory=list)
    metafields_failed: List[str] = field(default_factory=list)
    error: str = ""


@dataclass
class UploadSummary:
    """Totals for a whole run."""
    total: int = 0
    results: List[RowResult] = field(default_factory=list)

    @property
    def created(self) -> int:
        return sum(1 for r in self.results if r.state == RowState.DONE)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.state == RowState.CREATE_FAILED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.state == RowState.SKIPPED)

    @property
    def metafields_added(self) -> int:
        return sum(len(r.metafields_added) for r in self.results)

    @property
    def metafields_failed(self) -> int:
        return sum(len(r.metafields_failed) for r in self.results)

    def summary_line(self) -> str:
        return (
            f"Uploaded {self.created} of {self.total} products "
            f"({self.failed} failed); metafields: "
            f"{self.metafields_added} added, {self.metafields_failed} failed"
        )


class ProductUploader:
    """
    Uploads CSV rows to Shopify as products with custom metafields.

    Usage:
        settings = load_settings()
        with ShopifyAPIClient(settings.store, settings.access_token,
                              settings.api_version, settings.timeout) as client:
            uploader = ProductUploader(settings, client)
            summary = uploader.upload_all(load_rows(settings.csv_path))
    """

    def __init__(self, settings: UploaderSettings, client: Optional[ShopifyAPIClient] = None):
        """
        Initialize the uploader.

        Args:
            settings: Store, credentials and run options
            client: API client (built from settings if not given)
        """
        self.settings = settings
        self.dry_run = settings.dry_run
        self.client = client or ShopifyAPIClient(
            settings.store,
            settings.access_token,
            api_version=settings.api_version,
            timeout=settings.timeout,
        )

    def upload_row(self, row: Dict[str, str]) -> RowResult:
        """
        Create the product for one row, then add its metafields.

        Args:
            row: CSV row

        Returns:
            RowResult in a terminal state (DONE, CREATE_FAILED or SKIPPED)
        """
        handle = row.get("Handle")
        result = RowResult(handle=handle)

        product = build_product(row)
        metafields = build_metafields(row)

        if self.dry_run:
            logger.info("[DRY RUN] Would create product: %s with %d metafields",
                        handle, len(metafields))
            logger.debug("Product payload: %s", json.dumps(product.to_payload(), ensure_ascii=False))
            for metafield in metafields:
                logger.debug("Metafield payload: %s", json.dumps(metafield.to_payload(), ensure_ascii=False))
            result.state = RowState.SKIPPED
            return result

        logger.debug("Product payload: %s", json.dumps(product.to_payload(), ensure_ascii=False))
        response = self.client.post("products.json", product.to_payload())

        product_id = None
        if response.ok and isinstance(response.data, dict):
            created = response.data.get("product")
            if isinstance(created, dict):
                product_id = created.get("id")

        if product_id is None:
            result.state = RowState.CREATE_FAILED
            result.error = response.text
            logger.error("Error creating product %s: %s", handle, response.text)
            return result

        result.state = RowState.CREATED
        result.product_id = product_id
        logger.info("Created product: %s ID: %s", handle, product_id)

        result.state = RowState.METAFIELDS_IN_FLIGHT
        endpoint = f"products/{product_id}/metafields.json"
        for metafield in metafields:
            meta_response = self.client.post(endpoint, metafield.to_payload())
            if meta_response.ok:
                result.metafields_added.append(metafield.key)
                logger.info("  Metafield added: %s = %s", metafield.key, metafield.value)
            else:
                result.metafields_failed.append(metafield.key)
                logger.error("  Error adding metafield %s: %s", metafield.key, meta_response.text)

        result.state = RowState.DONE
        return result

    def upload_all(self, rows: Iterable[Dict[str, str]]) -> UploadSummary:
        """
        Upload every row, sequentially and in order.

        Args:
            rows: CSV rows (materialized before any request is sent)

        Returns:
            UploadSummary
        """
        rows = list(rows)
        summary = UploadSummary(total=len(rows))
        logger.info("Found %d products in CSV...", summary.total)

        for i, row in enumerate(rows, 1):
            logger.debug("[%d/%d] %s", i, summary.total, row.get("Handle"))
            summary.results.append(self.upload_row(row))

        logger.info(summary.summary_line())
        return summary
