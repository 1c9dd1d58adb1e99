"""
Product Sub-Resource Remapper

After a product is created in the target store, copies its images and then
rewrites its options and variants so that variant image references point to
the newly created target images.
"""

import logging
from typing import Dict, List

from ..shopify.api_client import ShopifyAPIClient
from ..shopify.resources import PRODUCT, PRODUCT_IMAGE

logger = logging.getLogger(__name__)

VARIANT_FIELDS = ("option1", "option2", "option3", "price", "compare_at_price", "position")


def option_payload(option: Dict) -> Dict:
    return {
        "name": option.get("name"),
        "position": option.get("position"),
        "values": option.get("values"),
    }


def variant_payload(variant: Dict, image_ids: Dict[int, int]) -> Dict:
    """
    Build a target variant.

    Inventory tracking is not cloned. A source image reference is replaced
    by the matching target image id.

    Args:
        variant: Source variant record
        image_ids: Source image id -> target image id for this product

    Returns:
        Variant payload for the product update
    """
    payload = {name: variant.get(name) for name in VARIANT_FIELDS}
    payload["inventory_management"] = None

    source_image_id = variant.get("image_id")
    if source_image_id:
        if source_image_id in image_ids:
            payload["image_id"] = image_ids[source_image_id]
        else:
            logger.warning("Variant %s references unknown image %s, leaving it unlinked",
                           variant.get("id"), source_image_id)
    return payload


def copy_images(target: ShopifyAPIClient, target_product_id: int, images: List[Dict]) -> Dict[int, int]:
    """
    Create every source image under the target product, in position order.

    Returns:
        Source image id -> target image id
    """
    image_ids: Dict[int, int] = {}
    for image in sorted(images, key=lambda i: (i.get("position") is None, i.get("position") or 0)):
        created = target.create(
            PRODUCT_IMAGE,
            {"src": image.get("src"), "position": image.get("position")},
            parent_id=target_product_id,
        )
        image_ids[image.get("id")] = created["id"]
        logger.debug("Image %s -> %s (product %s)", image.get("id"), created["id"], target_product_id)
    return image_ids


def remap_product(target: ShopifyAPIClient, target_product_id: int, source_product: Dict) -> Dict:
    """
    Reconcile images, options and variants of a freshly created product.

    All images are created before any variant is built. The id map lives
    only for the duration of this call.

    Args:
        target: Target store client
        target_product_id: Id of the product just created in the target store
        source_product: The full source product record

    Returns:
        The updated target product
    """
    image_ids = copy_images(target, target_product_id, source_product.get("images") or [])

    options = [option_payload(o) for o in source_product.get("options") or []]
    variants = [variant_payload(v, image_ids) for v in source_product.get("variants") or []]

    return target.update(PRODUCT, target_product_id, {"options": options, "variants": variants})
