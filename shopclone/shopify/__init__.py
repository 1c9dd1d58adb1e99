"""
Shopify integration modules.

Modules:
    api_client - REST client for the Shopify Admin API
    rate_limiter - Token bucket guarding each store's call budget
    resources - Resource type descriptors (endpoints, envelope keys)
"""

from .api_client import ShopifyAPIClient, ShopifyAPIError
from .rate_limiter import TokenBucket
from .resources import (
    CUSTOM_COLLECTION,
    PAGE,
    PRODUCT,
    PRODUCT_IMAGE,
    SMART_COLLECTION,
    ResourceType,
)

__all__ = [
    # API Client
    'ShopifyAPIClient',
    'ShopifyAPIError',
    # Rate limiting
    'TokenBucket',
    # Resources
    'ResourceType',
    'SMART_COLLECTION',
    'CUSTOM_COLLECTION',
    'PRODUCT',
    'PAGE',
    'PRODUCT_IMAGE',
]
