"""
Progress Driver

Runs one resource type's clone from the first page to the last and prints
a progress line for every record created in the target store.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Union

from ..shopify.api_client import ShopifyAPIClient
from ..shopify.resources import ResourceType
from .pagination import paginate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Item:
    """A record was cloned; carries the title the target store returned."""
    title: str


@dataclass(frozen=True)
class More:
    """The page is done and another one follows with these parameters."""
    next_params: Dict[str, Any]


CloneResult = Union[Item, More]


def clone_pages(
    source: ShopifyAPIClient,
    resource: ResourceType,
    clone_record: Callable[[Dict], str],
    params: Optional[Dict[str, Any]] = None
) -> Iterator[CloneResult]:
    """
    Clone every record of a listing, in source order.

    Yields:
        Item(title) per cloned record, and More(next_params) after each
        page that is followed by another
    """
    for page in paginate(source, resource, params):
        for record in page.records:
            yield Item(clone_record(record))
        if page.next_params is not None:
            yield More(page.next_params)


def format_progress(count: int, total: int, type_name: str, title: str) -> str:
    return f">> {count} / {total} {type_name}s cloned -- title: {title}"


def drive(
    source: ShopifyAPIClient,
    resource: ResourceType,
    clone_record: Callable[[Dict], str],
    total: int,
    params: Optional[Dict[str, Any]] = None
) -> int:
    """
    Clone one resource type to exhaustion, printing progress to stdout.

    The total is only displayed: traversal stops when the listing runs out,
    so the counter may end above or below it if the source changed.

    Args:
        source: Source store client
        resource: Resource type being cloned
        clone_record: Creates one record in the target, returns its title
        total: Count taken before traversal began
        params: Initial listing parameters

    Returns:
        Number of records cloned
    """
    cloned = 0
    pages = 1

    for result in clone_pages(source, resource, clone_record, params):
        if isinstance(result, Item):
            cloned += 1
            print(format_progress(cloned, total, resource.name, result.title))
        elif isinstance(result, More):
            pages += 1
            logger.debug("%s: continuing with page %d", resource.name, pages)

    if cloned != total:
        logger.debug("%s: cloned %d, count reported %d", resource.name, cloned, total)
    return cloned
