"""
Shared constants for the cloner.
"""

# Publication state forced onto cloned collections and used to filter the source
PUBLISHED = "published"

# Shopify REST maximum page size
DEFAULT_PAGE_SIZE = 250

# Admin API version, overridable via SHOPIFY_API_VERSION
DEFAULT_API_VERSION = "2025-01"

# Auto-limit budget: `calls` tokens refill every `interval` seconds, burst up to `bucket_size`
DEFAULT_RATE_LIMIT_INTERVAL = 1.5
DEFAULT_RATE_LIMIT_BUCKET_SIZE = 40
DEFAULT_RATE_LIMIT_CALLS = 1
