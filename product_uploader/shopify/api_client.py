"""
Shopify API Client

Thin client for the Shopify Admin REST API.
Handles authentication and error reporting; every call is a single attempt.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


@dataclass
class ApiResponse:
    """Outcome of one REST call. `ok` is False for HTTP and transport errors alike."""
    ok: bool
    status_code: Optional[int] = None
    data: Optional[Dict[str, Any]] = None
    text: str = ""


def normalize_store(store: str) -> str:
    """
    Reduce a store setting to a bare hostname.

    Accepts "my-store", "my-store.myshopify.com" or a full URL.
    """
    host = store.strip().replace("https://", "").replace("http://", "")
    host = host.split("/")[0]
    if "." not in host:
        host = f"{host}.myshopify.com"
    return host


class ShopifyAPIClient:
    """
    Client for the Shopify Admin REST API.

    Handles:
    - Authentication (X-Shopify-Access-Token header)
    - Error handling (failures are logged and returned, never raised)

    There is no retry and no rate limiting: each request is sent once.

    Usage:
        with ShopifyAPIClient(store="my-store.myshopify.com", access_token="shpat_xxx") as client:
            result = client.rest_request("POST", "products.json", {"product": {...}})
            if result.ok:
                product_id = result.data["product"]["id"]
    """

    def __init__(
        self,
        store: str,
        access_token: str,
        api_version: str = "2025-01",
        timeout: Optional[float] = None,
    ):
        """
        Initialize the API client.

        Args:
            store: Store hostname, shop name or URL
            access_token: Shopify Admin API access token
            api_version: Admin API version segment (e.g. "2025-01")
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.store = normalize_store(store)
        self.api_version = api_version
        self.timeout = timeout
        self.base_url = f"https://{self.store}/admin/api/{self.api_version}"

        self.session = requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        })

        self.requests_made = 0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def rest_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
    ) -> ApiResponse:
        """
        Make a single REST API request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint relative to the versioned base (e.g., "products.json")
            data: Request body for POST/PUT

        Returns:
            ApiResponse; on failure `ok` is False and `text` holds the
            response body or the transport error message
        """
        url = self.url_for(endpoint)
        self.requests_made += 1

        try:
            if method == "GET":
                response = self.session.get(url, timeout=self.timeout)
            elif method == "POST":
                response = self.session.post(url, json=data, timeout=self.timeout)
            elif method == "PUT":
                response = self.session.put(url, json=data, timeout=self.timeout)
            elif method == "DELETE":
                response = self.session.delete(url, timeout=self.timeout)
            else:
                raise ValueError(f"Unsupported method: {method}")
        except requests.exceptions.Timeout:
            logger.error("Request timeout: %s %s", method, endpoint)
            return ApiResponse(ok=False, text="Request timed out")
        except requests.exceptions.RequestException as e:
            logger.error("Request failed: %s %s: %s", method, endpoint, e)
            return ApiResponse(ok=False, text=str(e))

        if response.status_code >= 400:
            logger.debug("API Error %d on %s %s", response.status_code, method, endpoint)
            return ApiResponse(ok=False, status_code=response.status_code, text=response.text)

        try:
            payload = response.json()
        except ValueError:
            logger.error("Invalid JSON in response to %s %s", method, endpoint)
            return ApiResponse(ok=False, status_code=response.status_code, text=response.text)

        return ApiResponse(ok=True, status_code=response.status_code, data=payload, text=response.text)

    def post(self, endpoint: str, data: Dict) -> ApiResponse:
        return self.rest_request("POST", endpoint, data)
