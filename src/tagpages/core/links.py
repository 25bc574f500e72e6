"""Navigation links between the pages of one tag index."""

from tagpages.core.types import PageLink

INDEX_FILE = "index.html"


def page_path(page: int) -> str:
    """Output file name of a page.

    The first page is the tag's index; there is no ``page1.html``.
    """
    if page < 1:
        msg = f"Page numbers start at 1, got {page}"
        raise ValueError(msg)
    return INDEX_FILE if page == 1 else f"page{page}.html"


def build_links(total_pages: int) -> list[PageLink]:
    """Build previous/next numbers and paths for pages ``1..total_pages``."""
    if total_pages < 1:
        msg = f"A tag index has at least one page, got {total_pages}"
        raise ValueError(msg)

    paths = [page_path(page) for page in range(1, total_pages + 1)]

    links = []
    for page in range(1, total_pages + 1):
        has_previous = page > 1
        has_next = page < total_pages
        links.append(
            PageLink(
                page=page,
                path=paths[page - 1],
                previous_page=page - 1 if has_previous else None,
                next_page=page + 1 if has_next else None,
                # paths is 0-indexed: page n sits at n - 1
                previous_page_path=paths[page - 2] if has_previous else None,
                next_page_path=paths[page] if has_next else None,
            )
        )
    return links
