"""
Shop Cloner

Copies smart collections, custom collections, products and pages from one
store to another, one resource type at a time.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from ..common.config_loader import CloneSettings
from ..shopify.api_client import ShopifyAPIClient
from ..shopify.resources import (
    CUSTOM_COLLECTION,
    PAGE,
    PRODUCT,
    SMART_COLLECTION,
    ResourceType,
)
from .progress import drive
from .remapper import remap_product
from .transformers import (
    custom_collection_payload,
    page_payload,
    product_payload,
    smart_collection_payload,
)

logger = logging.getLogger(__name__)

# Types are cloned strictly one after another, in this order
CLONE_ORDER = (SMART_COLLECTION, CUSTOM_COLLECTION, PRODUCT, PAGE)


class RunState(Enum):
    IDLE = "idle"
    CLONING = "cloning"
    DONE = "done"


class ShopCloner:
    """
    Clones a store's catalog into another store.

    Usage:
        cloner = ShopCloner(source=source_client, target=target_client)
        cloned = cloner.run()  # {"SmartCollection": 12, ...}
    """

    def __init__(
        self,
        source: ShopifyAPIClient,
        target: ShopifyAPIClient,
        settings: Optional[CloneSettings] = None
    ):
        """
        Initialize the cloner.

        Args:
            source: Client for the store being read
            target: Client for the store being written
            settings: Listing defaults (default: 250 per page, published only)
        """
        self.source = source
        self.target = target
        self.settings = settings or CloneSettings()

        self.state = RunState.IDLE
        self.current: Optional[ResourceType] = None

    def clone_smart_collection(self, record: Dict) -> str:
        return self.target.create(SMART_COLLECTION, smart_collection_payload(record))["title"]

    def clone_custom_collection(self, record: Dict) -> str:
        return self.target.create(CUSTOM_COLLECTION, custom_collection_payload(record))["title"]

    def clone_product(self, record: Dict) -> str:
        """Create the product, then its images, options and variants."""
        created = self.target.create(PRODUCT, product_payload(record))
        remap_product(self.target, created["id"], record)
        return created["title"]

    def clone_page(self, record: Dict) -> str:
        return self.target.create(PAGE, page_payload(record))["title"]

    def _clone_function(self, resource: ResourceType) -> Callable[[Dict], str]:
        return {
            SMART_COLLECTION: self.clone_smart_collection,
            CUSTOM_COLLECTION: self.clone_custom_collection,
            PRODUCT: self.clone_product,
            PAGE: self.clone_page,
        }[resource]

    def count_all(self) -> Dict[str, int]:
        """Count the source records of every cloned type."""
        return {
            resource.name: self.source.count(resource, self.settings.count_params())
            for resource in CLONE_ORDER
        }

    def clone_resource(self, resource: ResourceType, total: int) -> int:
        """Clone every record of one type; returns how many were created."""
        self.state = RunState.CLONING
        self.current = resource
        logger.info("Cloning %s records (%d in source)...", resource.name, total)

        cloned = drive(
            self.source,
            resource,
            self._clone_function(resource),
            total,
            self.settings.list_params(),
        )

        self.state = RunState.IDLE
        self.current = None
        return cloned

    def run(self) -> Dict[str, int]:
        """
        Clone all resource types in order.

        Counts are taken for every type before the first record is cloned.
        Any API failure propagates and stops the run; records already
        created in the target store stay there.

        Returns:
            Number of cloned records per type name
        """
        counts = self.count_all()
        logger.info("Source counts: %s", ", ".join(f"{k}={v}" for k, v in counts.items()))

        cloned = {}
        for resource in CLONE_ORDER:
            cloned[resource.name] = self.clone_resource(resource, counts[resource.name])

        self.state = RunState.DONE
        logger.info("Clone complete: %s", ", ".join(f"{k}={v}" for k, v in cloned.items()))
        return cloned
