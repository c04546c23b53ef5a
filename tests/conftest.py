"""Shared test fixtures."""

import csv
from unittest.mock import MagicMock

import pytest

from product_uploader.common.settings import UploaderSettings
from product_uploader.shopify.api_client import ShopifyAPIClient


def _make_response(status_code=200, json_data=None, text=""):
    """Build a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data if json_data is not None else {}
    response.text = text
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture
def settings():
    return UploaderSettings(store="test-store.myshopify.com", access_token="shpat_test")


@pytest.fixture
def client(settings):
    return ShopifyAPIClient(settings.store, settings.access_token)


@pytest.fixture
def watch_row():
    """A row with two of the declared metafields set."""
    return {
        "Title": "Watch A",
        "Handle": "WA1",
        "band": "steel, leather",
        "case_thickness_mm": "5.2",
    }


@pytest.fixture
def full_row():
    """Row with every product column populated."""
    return {
        "Handle": "diver-200",
        "Title": "Diver 200",
        "Body (HTML)": "<p>Automatic dive watch</p>",
        "Vendor": "Acme Watches",
        "Type": "Watch",
        "Tags": "dive, automatic",
        "Status": "active",
        "Variant Price": "349.00",
        "Variant Grams": "155",
        "Variant Weight Unit": "kg",
        "Variant Inventory Qty": "7",
        "Image Src": "https://cdn.example.com/diver-200.jpg",
    }


@pytest.fixture
def write_csv(tmp_path):
    """Write rows (list of dicts) to a CSV file and return its path."""
    def _write(rows, fieldnames=None, name="products.csv"):
        path = tmp_path / name
        if fieldnames is None:
            fieldnames = list(rows[0].keys()) if rows else ["Handle", "Title"]
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(rows)
        return path
    return _write
