"""
Cloning pipeline.

Modules:
    pagination - Page-by-page traversal of a source listing
    transformers - Source record -> target creation payload
    remapper - Product images, options and variants reconciliation
    progress - Per-type clone loop with progress output
    cloner - Run orchestration across resource types
"""

from .cloner import CLONE_ORDER, RunState, ShopCloner
from .pagination import EXHAUSTED, Exhausted, Page, iter_records, paginate
from .progress import Item, More, clone_pages, drive, format_progress
from .remapper import remap_product

__all__ = [
    'ShopCloner',
    'RunState',
    'CLONE_ORDER',
    'Page',
    'Exhausted',
    'EXHAUSTED',
    'paginate',
    'iter_records',
    'Item',
    'More',
    'clone_pages',
    'drive',
    'format_progress',
    'remap_product',
]
