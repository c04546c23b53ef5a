"""Tests for product_uploader/shopify/product_builder.py"""

import pytest

from product_uploader.shopify.product_builder import build_product, parse_int, parse_number


class TestBuildProduct:
    def test_maps_columns(self, full_row):
        body = build_product(full_row).to_dict()
        assert body["title"] == "Diver 200"
        assert body["body_html"] == "<p>Automatic dive watch</p>"
        assert body["vendor"] == "Acme Watches"
        assert body["product_type"] == "Watch"
        assert body["tags"] == "dive, automatic"
        assert body["status"] == "active"

    def test_variant(self, full_row):
        variant = build_product(full_row).variants[0]
        assert variant.sku == "diver-200"
        assert variant.price == "349.00"
        assert variant.grams == 155
        assert variant.weight_unit == "kg"
        assert variant.inventory_quantity == 7

    def test_image(self, full_row):
        images = build_product(full_row).images
        assert [i.src for i in images] == ["https://cdn.example.com/diver-200.jpg"]

    def test_watch_row(self, watch_row):
        product = build_product(watch_row)
        assert product.title == "Watch A"
        assert len(product.variants) == 1
        assert product.variants[0].sku == "WA1"

    def test_defaults(self):
        product = build_product({"Title": "Bare", "Handle": "bare"})
        variant = product.variants[0]
        assert product.status == "draft"
        assert variant.price == "0.00"
        assert variant.grams == 0
        assert variant.weight_unit == "g"
        assert variant.inventory_quantity == 0
        assert product.images == []

    def test_empty_cells_use_defaults(self):
        row = {"Title": "Bare", "Status": "", "Variant Price": "", "Image Src": ""}
        product = build_product(row)
        assert product.status == "draft"
        assert product.variants[0].price == "0.00"
        assert product.images == []

    def test_missing_title_passed_through(self):
        product = build_product({"Handle": "no-title"})
        assert product.title is None
        assert product.to_dict()["vendor"] is None


class TestParseNumber:
    @pytest.mark.parametrize("raw,expected", [
        (None, 0), ("", 0), (" ", 0), ("155", 155), (" 12 ", 12), ("12.5", 12.5), ("1e3", 1000),
    ])
    def test_values(self, raw, expected):
        assert parse_number(raw) == expected

    def test_integral_float_is_int(self):
        assert isinstance(parse_number("10.0"), int)

    @pytest.mark.parametrize("raw", ["abc", "12g", "nan", "inf"])
    def test_invalid_is_none(self, raw):
        assert parse_number(raw) is None


class TestParseInt:
    @pytest.mark.parametrize("raw,expected", [
        (None, 0), ("", 0), ("7", 7), ("-3", -3), ("12.7", 12), (" 42 units", 42),
    ])
    def test_values(self, raw, expected):
        assert parse_int(raw) == expected

    def test_invalid_is_none(self):
        assert parse_int("many") is None


class TestBlankNumericCells:
    def test_blank_grams_is_zero(self):
        product = build_product({"Handle": "x", "Variant Grams": " "})
        assert product.variants[0].grams == 0

    def test_blank_inventory_is_null(self):
        # leading-integer parse finds no digits in a blank cell
        product = build_product({"Handle": "x", "Variant Inventory Qty": " "})
        assert product.variants[0].inventory_quantity is None
