"""
Shopify Store Cloner

Modules:
    common   - Shared utilities (config loader, logging, constants)
    shopify  - Admin REST API client and rate limiting
    cloning  - Pagination, record transformation and clone orchestration
    cli      - Command-line entry point
"""
