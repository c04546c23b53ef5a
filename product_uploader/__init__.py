"""
Shopify CSV Product Uploader

Modules:
    models      - Request data models (ProductRequest, MetafieldRequest, ...)
    common      - Shared utilities (settings, CSV reading, logging)
    shopify     - Admin API client and request builders
    uploader    - Sequential per-row upload
    cli         - Command-line entry point
"""
