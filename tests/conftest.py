"""Shared test fixtures."""

from collections import defaultdict

import pytest


class FakeStore:
    """
    In-memory stand-in for ShopifyAPIClient.

    Listings are served from `pages` (type name -> list of record batches);
    the cursor for batch N is {"limit": "250", "page_info": "N"}.
    """

    def __init__(self, pages=None, counts=None, fail_on=None):
        self.pages = pages or {}
        self.counts = counts or {}
        self.fail_on = fail_on  # (operation, type name) that raises
        self.calls = []
        self.created = defaultdict(list)
        self.updated = []
        self._next_id = 9000

    def _maybe_fail(self, operation, resource):
        if self.fail_on == (operation, resource.name):
            from shopclone.shopify.api_client import ShopifyAPIError
            raise ShopifyAPIError(f"HTTP 422 on {operation} {resource.name}", status_code=422)

    def list(self, resource, params=None, parent_id=None):
        params = dict(params or {})
        self.calls.append(("list", resource.name, params))
        self._maybe_fail("list", resource)

        batches = self.pages.get(resource.name, [[]])
        index = int(params.get("page_info", 0))
        next_params = None
        if index + 1 < len(batches):
            next_params = {"limit": "250", "page_info": str(index + 1)}
        return list(batches[index]), next_params

    def create(self, resource, payload, parent_id=None):
        self.calls.append(("create", resource.name, payload))
        self._maybe_fail("create", resource)

        self._next_id += 1
        self.created[resource.name].append({"payload": payload, "parent_id": parent_id, "id": self._next_id})
        return dict(payload, id=self._next_id)

    def update(self, resource, record_id, payload, parent_id=None):
        self.calls.append(("update", resource.name, payload))
        self._maybe_fail("update", resource)

        self.updated.append({"resource": resource.name, "id": record_id, "payload": payload})
        return dict(payload, id=record_id)

    def count(self, resource, params=None, parent_id=None):
        self.calls.append(("count", resource.name, dict(params or {})))
        self._maybe_fail("count", resource)

        if resource.name in self.counts:
            return self.counts[resource.name]
        return sum(len(batch) for batch in self.pages.get(resource.name, []))


@pytest.fixture
def make_store():
    """Factory for in-memory stores."""
    return FakeStore


@pytest.fixture
def target_store():
    """Empty target store."""
    return FakeStore()


@pytest.fixture
def smart_collection_record():
    """Source smart collection with an image."""
    return {
        "id": 111,
        "handle": "sale",
        "title": "Sale",
        "rules": [{"column": "title", "relation": "contains", "condition": "sale"}],
        "disjunctive": False,
        "published_at": None,
        "image": {"src": "http://x/img.png", "width": 100, "height": 100},
    }


@pytest.fixture
def product_record():
    """Source product with two images and two variants, only the first linked to an image."""
    return {
        "id": 500,
        "title": "T-Shirt",
        "body_html": "<p>Cotton</p>",
        "vendor": "Acme",
        "tags": "summer, cotton",
        "handle": "t-shirt",
        "images": [
            {"id": 701, "product_id": 500, "src": "http://x/front.png", "position": 1},
            {"id": 702, "product_id": 500, "src": "http://x/back.png", "position": 2},
        ],
        "options": [
            {"id": 1, "product_id": 500, "name": "Size", "position": 1, "values": ["S", "M"]},
        ],
        "variants": [
            {
                "id": 801, "product_id": 500, "option1": "S", "option2": None, "option3": None,
                "price": "10.00", "compare_at_price": "12.00", "position": 1,
                "image_id": 701, "inventory_management": "shopify", "sku": "TS-S",
            },
            {
                "id": 802, "product_id": 500, "option1": "M", "option2": None, "option3": None,
                "price": "11.00", "compare_at_price": None, "position": 2,
                "image_id": None, "inventory_management": "shopify", "sku": "TS-M",
            },
        ],
    }
