"""
Resource Transformers

Pure mappings from a source store record to the creation payload sent to
the target store. Each keeps a fixed allow-list of fields; everything else
(ids, handles, timestamps, admin GraphQL ids) is left behind.
"""

from typing import Dict

from ..common.constants import PUBLISHED


def _copy_fields(record: Dict, fields) -> Dict:
    return {name: record.get(name) for name in fields}


def _attach_image(payload: Dict, record: Dict) -> Dict:
    """Add {"image": {"src": ...}} only when the source record has an image."""
    image = record.get("image")
    if image and image.get("src"):
        payload["image"] = {"src": image["src"]}
    return payload


def smart_collection_payload(record: Dict) -> Dict:
    """Rule-based collection: title, rules, disjunctive; always published."""
    payload = _copy_fields(record, ("title", "rules", "disjunctive"))
    payload["published_status"] = PUBLISHED
    return _attach_image(payload, record)


def custom_collection_payload(record: Dict) -> Dict:
    """Manual collection: title only; always published."""
    payload = _copy_fields(record, ("title",))
    payload["published_status"] = PUBLISHED
    return _attach_image(payload, record)


def product_payload(record: Dict) -> Dict:
    """
    Base product fields.

    Images, options and variants are reconciled after creation by
    remapper.remap_product, since variant image ids only exist once the
    target images are created.
    """
    return _copy_fields(record, ("title", "body_html", "vendor", "tags"))


def page_payload(record: Dict) -> Dict:
    return _copy_fields(record, ("title", "body_html", "template_suffix"))
