"""Builds the page descriptors of every tag index.

A run reads the configuration once and then works in one of two modes:

- flat: one ``index.html`` per tag holding all of its items;
- paginated: ``index.html``, ``page2.html``, ... per tag, each with a
  paginator block carrying its slice and previous/next links.

The generator never mutates shared state. It returns the full, ordered
descriptor list and leaves rendering and registration to the caller.
"""

from __future__ import annotations

import logging
import posixpath
from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum

from tagpages.core.collector import TagSource, tag_groups
from tagpages.core.config import TagPagesConfig
from tagpages.core.links import INDEX_FILE, build_links
from tagpages.core.pagination import page_count, slice_items, validate_per_page
from tagpages.core.types import PageDescriptor, PaginationInfo, TagGroup

logger = logging.getLogger(__name__)


class GenerationMode(str, Enum):
    FLAT = "flat"
    PAGINATED = "paginated"


class PageSetGenerator:
    """Lays out tag index pages according to a :class:`TagPagesConfig`."""

    def __init__(self, config: TagPagesConfig | None = None, max_workers: int | None = None) -> None:
        """Initialize the generator.

        Args:
            config: Site configuration. Defaults to ``TagPagesConfig()``.
            max_workers: Lay out tags in a thread pool of this size. ``None``
                or ``1`` keeps everything on the calling thread.

        """
        self.config = config if config is not None else TagPagesConfig()
        self.max_workers = max_workers

    def mode(self) -> GenerationMode:
        """Pick the mode for this run, failing fast on a bad page size."""
        if not self.config.pagination_enabled:
            return GenerationMode.FLAT
        validate_per_page(self.config.per_page)
        return GenerationMode.PAGINATED

    def generate(self, source: TagSource) -> list[PageDescriptor]:
        """Return one descriptor per (tag, page), tags sorted, pages ascending.

        Raises:
            InvalidConfigurationError: If pagination is enabled without a
                positive per-page size. Nothing is produced in that case.

        """
        mode = self.mode()
        groups = tag_groups(source)

        if mode is GenerationMode.PAGINATED:
            layout = self._paginated_pages
        else:
            layout = self._flat_pages

        if self.max_workers and self.max_workers > 1 and len(groups) > 1:
            pages_by_tag = self._layout_concurrently(groups, layout)
            descriptors = [page for group in groups for page in pages_by_tag[group.tag]]
        else:
            descriptors = [page for group in groups for page in layout(group)]

        if mode is GenerationMode.PAGINATED:
            logger.debug("Processed %d paginated tag index pages", len(groups))
        else:
            logger.debug("Processed %d tag index pages", len(groups))
        return descriptors

    def _layout_concurrently(self, groups, layout) -> dict[str, list[PageDescriptor]]:
        pages_by_tag: dict[str, list[PageDescriptor]] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_tag = {executor.submit(layout, group): group.tag for group in groups}
            for future in as_completed(future_to_tag):
                pages_by_tag[future_to_tag[future]] = future.result()
        return pages_by_tag

    def _tag_dir(self, tag: str) -> str:
        return posixpath.join(self.config.tags.path, tag)

    def _flat_pages(self, group: TagGroup) -> list[PageDescriptor]:
        return [
            PageDescriptor(
                tag=group.tag,
                page=1,
                name=INDEX_FILE,
                tag_dir=self._tag_dir(group.tag),
                layout=self.config.tags.layout,
                posts=group.items,
                items=group.items,
            )
        ]

    def _paginated_pages(self, group: TagGroup) -> list[PageDescriptor]:
        per_page = self.config.per_page
        total_pages = page_count(group.total_posts, per_page)
        tag_dir = self._tag_dir(group.tag)

        pages = []
        for link in build_links(total_pages):
            posts = tuple(slice_items(group.items, per_page, link.page))
            paginator = PaginationInfo(
                page=link.page,
                per_page=per_page,
                total_pages=total_pages,
                total_posts=group.total_posts,
                posts=posts,
                previous_page=link.previous_page,
                next_page=link.next_page,
                previous_page_path=link.previous_page_path,
                next_page_path=link.next_page_path,
            )
            pages.append(
                PageDescriptor(
                    tag=group.tag,
                    page=link.page,
                    name=link.path,
                    tag_dir=tag_dir,
                    layout=self.config.tags.layout,
                    posts=group.items,
                    items=posts,
                    paginator=paginator,
                )
            )
        return pages
