"""tagpages: per-tag index pages with optional pagination."""

from tagpages.core.generator import PageSetGenerator
from tagpages.core.types import Item, PageDescriptor, PaginationInfo

__version__ = "0.1.0"
__all__ = [
    "Item",
    "PageDescriptor",
    "PageSetGenerator",
    "PaginationInfo",
]
