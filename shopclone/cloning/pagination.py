"""
Pagination Driver

Walks a Shopify listing page by page. Each page carries the parameters
for the next request, or nothing once the listing is exhausted.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from ..common.constants import DEFAULT_PAGE_SIZE, PUBLISHED
from ..shopify.api_client import ShopifyAPIClient
from ..shopify.resources import ResourceType

logger = logging.getLogger(__name__)


class Exhausted:
    """Marker: the listing has no further pages."""

    def __repr__(self):
        return "EXHAUSTED"


EXHAUSTED = Exhausted()


@dataclass(frozen=True)
class Page:
    """One listing response: its records and the cursor to the next one."""
    records: List[Dict] = field(default_factory=list)
    next_params: Optional[Dict[str, Any]] = None

    @property
    def continuation(self) -> Union[Dict[str, Any], Exhausted]:
        """Parameters for the following request, or EXHAUSTED on the last page."""
        if self.next_params is None:
            return EXHAUSTED
        return self.next_params


def default_list_params() -> Dict[str, Any]:
    """Initial listing parameters: full pages of published records."""
    return {"limit": DEFAULT_PAGE_SIZE, "published_status": PUBLISHED}


def fetch_page(client: ShopifyAPIClient, resource: ResourceType, params: Dict[str, Any]) -> Page:
    """Issue one list call and wrap its result."""
    records, next_params = client.list(resource, params)
    return Page(records=list(records), next_params=next_params)


def paginate(
    client: ShopifyAPIClient,
    resource: ResourceType,
    params: Optional[Dict[str, Any]] = None
) -> Iterator[Page]:
    """
    Yield every page of a listing in server order.

    The parameters parsed from a page's next link replace the previous ones:
    Shopify cursors already encode the original filters and reject them
    when resent alongside page_info.

    Args:
        client: Store to read from
        resource: Resource type to list
        params: Initial parameters (default: limit=250, published_status=published)

    Yields:
        Page objects, ending with the first page that has no continuation
    """
    cursor: Union[Dict[str, Any], Exhausted] = default_list_params() if params is None else dict(params)
    page_number = 0

    while not isinstance(cursor, Exhausted):
        page_number += 1
        page = fetch_page(client, resource, cursor)
        logger.debug("%s page %d: %d records%s", resource.name, page_number,
                     len(page.records), "" if page.next_params else " (last)")
        yield page
        cursor = page.continuation


def iter_records(
    client: ShopifyAPIClient,
    resource: ResourceType,
    params: Optional[Dict[str, Any]] = None
) -> Iterator[Dict]:
    """Yield every record of a listing, across pages, in server order."""
    for page in paginate(client, resource, params):
        yield from page.records
