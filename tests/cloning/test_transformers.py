"""Tests for shopclone/cloning/transformers.py"""

import pytest

from shopclone.cloning.transformers import (
    custom_collection_payload,
    page_payload,
    product_payload,
    smart_collection_payload,
)


class TestSmartCollectionPayload:
    def test_sale_collection(self, smart_collection_record):
        assert smart_collection_payload(smart_collection_record) == {
            "title": "Sale",
            "rules": [{"column": "title", "relation": "contains", "condition": "sale"}],
            "disjunctive": False,
            "published_status": "published",
            "image": {"src": "http://x/img.png"},
        }

    def test_without_image_has_no_image_key(self, smart_collection_record):
        del smart_collection_record["image"]
        assert "image" not in smart_collection_payload(smart_collection_record)

    def test_null_image_has_no_image_key(self, smart_collection_record):
        smart_collection_record["image"] = None
        assert "image" not in smart_collection_payload(smart_collection_record)

    def test_drops_source_only_fields(self, smart_collection_record):
        payload = smart_collection_payload(smart_collection_record)
        assert "id" not in payload
        assert "handle" not in payload
        assert "published_at" not in payload


class TestCustomCollectionPayload:
    @pytest.mark.parametrize("source_status", ["published", "unpublished", None])
    def test_always_published(self, source_status):
        record = {"id": 1, "title": "Summer", "published_status": source_status}
        assert custom_collection_payload(record)["published_status"] == "published"

    def test_title_and_image(self):
        record = {"id": 1, "title": "Summer", "body_html": "<p>x</p>", "image": {"src": "http://x/s.png"}}
        assert custom_collection_payload(record) == {
            "title": "Summer",
            "published_status": "published",
            "image": {"src": "http://x/s.png"},
        }

    def test_without_image(self):
        assert custom_collection_payload({"title": "Summer"}) == {
            "title": "Summer",
            "published_status": "published",
        }


class TestProductPayload:
    def test_copies_base_fields_only(self, product_record):
        assert product_payload(product_record) == {
            "title": "T-Shirt",
            "body_html": "<p>Cotton</p>",
            "vendor": "Acme",
            "tags": "summer, cotton",
        }

    def test_no_forced_visibility(self, product_record):
        assert "published_status" not in product_payload(product_record)


class TestPagePayload:
    def test_copies_allowed_fields(self):
        record = {
            "id": 3,
            "title": "About",
            "body_html": "<p>Us</p>",
            "template_suffix": "contact",
            "author": "Admin",
        }
        assert page_payload(record) == {
            "title": "About",
            "body_html": "<p>Us</p>",
            "template_suffix": "contact",
        }
