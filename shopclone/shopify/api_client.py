"""
Shopify API Client

Client for the Shopify Admin REST API used on both ends of a clone.
Handles authentication, token-bucket rate limiting, cursor pagination
and error handling.
"""

import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urljoin, urlparse

import requests

from ..common.constants import DEFAULT_API_VERSION
from .rate_limiter import TokenBucket
from .resources import ResourceType

logger = logging.getLogger(__name__)


class ShopifyAPIError(Exception):
    """A Shopify Admin API call failed."""

    def __init__(self, message: str, method: str = "", endpoint: str = "",
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.method = method
        self.endpoint = endpoint
        self.status_code = status_code


class ShopifyAPIClient:
    """
    Client for one store's Admin REST API.

    Handles:
    - Authentication
    - Rate limiting (token bucket, 40 call burst, 1 call / 1.5s refill)
    - Retries on 429, and on gateway errors for reads
    - Cursor pagination via the Link header

    Every failure is raised as ShopifyAPIError.

    Usage:
        client = ShopifyAPIClient(shop="my-store", access_token="shpat_xxx")

        records, next_params = client.list(PRODUCT, {"limit": 250})
        created = client.create(PAGE, {"title": "About"})
    """

    MAX_RETRIES = 5
    RETRYABLE_STATUS_CODES = {429, 502, 503, 504}

    def __init__(
        self,
        shop: str,
        access_token: str,
        bucket: Optional[TokenBucket] = None,
        api_version: Optional[str] = None,
    ):
        """
        Initialize the API client.

        Args:
            shop: Shop name (without .myshopify.com) or full domain
            access_token: Shopify Admin API access token
            bucket: Rate limiter for this store (default: 40 burst, 1 call / 1.5s)
            api_version: Admin API version (default: SHOPIFY_API_VERSION or 2025-01)
        """
        # Normalize shop name
        if ".myshopify.com" in shop:
            self.shop = shop.replace("https://", "").replace("http://", "").split(".myshopify.com")[0]
        else:
            self.shop = shop

        self.access_token = access_token
        self.api_version = api_version or os.environ.get("SHOPIFY_API_VERSION", DEFAULT_API_VERSION)
        self.base_url = f"https://{self.shop}.myshopify.com/admin/api/{self.api_version}"

        self.session = requests.Session()
        self.session.headers.update({
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
        })

        self.bucket = bucket or TokenBucket()
        self.requests_made = 0

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def _rate_limit(self):
        """Block until the bucket admits one more call."""
        self.bucket.acquire()
        self.requests_made += 1

    def _send(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        timeout: int = 30
    ) -> requests.Response:
        """
        Make REST API request with rate limiting and retries.

        Args:
            method: HTTP method (GET, POST, PUT)
            endpoint: API endpoint (e.g., "products.json")
            data: Request body for POST/PUT
            params: Query string parameters
            timeout: Request timeout in seconds

        Returns:
            The successful response

        Raises:
            ShopifyAPIError: On HTTP errors, transport errors or exhausted retries
        """
        url = urljoin(self.base_url + "/", endpoint)

        for attempt in range(self.MAX_RETRIES):
            self._rate_limit()

            try:
                if method == "GET":
                    response = self.session.get(url, params=params, timeout=timeout)
                elif method == "POST":
                    response = self.session.post(url, json=data, timeout=timeout)
                elif method == "PUT":
                    response = self.session.put(url, json=data, timeout=timeout)
                else:
                    raise ValueError(f"Unsupported method: {method}")
            except requests.exceptions.RequestException as e:
                logger.error("Request failed: %s %s: %s", method, endpoint, e)
                raise ShopifyAPIError(f"Request failed: {e}", method, endpoint) from e

            # Writes are resent on 429 only
            retryable = self.RETRYABLE_STATUS_CODES if method == "GET" else {429}
            if response.status_code in retryable:
                retry_after = float(response.headers.get("Retry-After", 2 ** attempt))
                logger.warning("HTTP %d on %s, retry %d/%d in %.1fs...",
                               response.status_code, endpoint, attempt + 1,
                               self.MAX_RETRIES, retry_after)
                time.sleep(retry_after)
                continue

            if response.status_code >= 400:
                error_msg = response.text[:200]
                logger.error("API Error %d on %s %s: %s", response.status_code, method, endpoint, error_msg)
                raise ShopifyAPIError(
                    f"HTTP {response.status_code} on {method} {endpoint}: {error_msg}",
                    method, endpoint, response.status_code,
                )

            return response

        logger.error("Max retries (%d) exceeded for %s %s", self.MAX_RETRIES, method, endpoint)
        raise ShopifyAPIError(
            f"Max retries ({self.MAX_RETRIES}) exceeded for {method} {endpoint}",
            method, endpoint, response.status_code,
        )

    def rest_request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        timeout: int = 30
    ) -> Dict:
        """Make a REST API request and return the decoded JSON body."""
        response = self._send(method, endpoint, data=data, params=params, timeout=timeout)
        return self._decode(response, method, endpoint)

    @staticmethod
    def _decode(response: requests.Response, method: str, endpoint: str) -> Dict:
        """JSON body of a successful response; a non-JSON body is an API failure."""
        try:
            return response.json()
        except ValueError as e:
            logger.error("Non-JSON response on %s %s: %s", method, endpoint, response.text[:200])
            raise ShopifyAPIError(
                f"Invalid JSON in response to {method} {endpoint}",
                method, endpoint, response.status_code,
            ) from e

    @staticmethod
    def _next_page_params(response: requests.Response) -> Optional[Dict[str, str]]:
        """Query parameters of the Link header's rel="next" URL, or None on the last page."""
        next_link = response.links.get("next")
        if not next_link:
            return None
        return dict(parse_qsl(urlparse(next_link["url"]).query))

    def list(
        self,
        resource: ResourceType,
        params: Optional[Dict[str, Any]] = None,
        parent_id: Optional[int] = None
    ) -> Tuple[List[Dict], Optional[Dict[str, str]]]:
        """
        Fetch one page of records.

        Args:
            resource: Resource type to list
            params: Query parameters (filters, limit, or a page_info cursor)
            parent_id: Parent record id for nested resources

        Returns:
            (records in server order, params for the next page or None)
        """
        endpoint = resource.collection_path(parent_id)
        response = self._send("GET", endpoint, params=params)
        records = self._decode(response, "GET", endpoint).get(resource.plural, [])
        return records, self._next_page_params(response)

    def create(
        self,
        resource: ResourceType,
        payload: Dict[str, Any],
        parent_id: Optional[int] = None
    ) -> Dict:
        """Create a record and return it as stored by Shopify."""
        endpoint = resource.collection_path(parent_id)
        result = self.rest_request("POST", endpoint, {resource.singular: payload})
        return result[resource.singular]

    def update(
        self,
        resource: ResourceType,
        record_id: int,
        payload: Dict[str, Any],
        parent_id: Optional[int] = None
    ) -> Dict:
        """Update a record and return it as stored by Shopify."""
        endpoint = resource.record_path(record_id, parent_id)
        body = {resource.singular: dict(payload, id=record_id)}
        result = self.rest_request("PUT", endpoint, body)
        return result[resource.singular]

    def count(
        self,
        resource: ResourceType,
        params: Optional[Dict[str, Any]] = None,
        parent_id: Optional[int] = None
    ) -> int:
        """Number of records matching the filter parameters."""
        result = self.rest_request("GET", resource.count_path(parent_id), params=params)
        return int(result["count"])
