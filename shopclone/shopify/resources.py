"""
Shopify REST resource descriptors.

Maps each cloned resource type to its Admin REST endpoint and JSON envelope keys.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ResourceType:
    """A Shopify REST resource and the keys wrapping it on the wire."""
    name: str           # Display name used in progress lines
    singular: str       # Envelope key for one record, e.g. "smart_collection"
    plural: str         # Envelope key for a list, e.g. "smart_collections"
    parent: Optional[str] = None  # Parent collection path for nested resources

    def collection_path(self, parent_id: Optional[int] = None) -> str:
        """Endpoint for list/create, e.g. 'products/42/images.json'."""
        if self.parent is None:
            return f"{self.plural}.json"
        if parent_id is None:
            raise ValueError(f"{self.name} requires a parent {self.parent} id")
        return f"{self.parent}/{parent_id}/{self.plural}.json"

    def record_path(self, record_id: int, parent_id: Optional[int] = None) -> str:
        """Endpoint for a single record, e.g. 'products/42.json'."""
        return self.collection_path(parent_id)[:-len(".json")] + f"/{record_id}.json"

    def count_path(self, parent_id: Optional[int] = None) -> str:
        """Endpoint for the record count, e.g. 'products/count.json'."""
        return self.collection_path(parent_id)[:-len(".json")] + "/count.json"


SMART_COLLECTION = ResourceType("SmartCollection", "smart_collection", "smart_collections")
CUSTOM_COLLECTION = ResourceType("CustomCollection", "custom_collection", "custom_collections")
PRODUCT = ResourceType("Product", "product", "products")
PAGE = ResourceType("Page", "page", "pages")
PRODUCT_IMAGE = ResourceType("ProductImage", "image", "images", parent="products")
