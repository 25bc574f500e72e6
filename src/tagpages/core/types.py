"""Core data types for tag index pages."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Item(BaseModel):
    """A content unit as supplied by the content collaborator.

    Only ``title`` and ``tags`` matter to the page layout. The remaining
    fields are carried through untouched for templates.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    tags: tuple[str, ...] = ()
    url: str | None = None
    date: datetime | None = None
    content: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(value.split())
        return tuple(value)


class TagGroup(BaseModel):
    """A tag and the items carrying it, in collaborator order."""

    model_config = ConfigDict(frozen=True)

    tag: str
    items: tuple[Item, ...] = ()

    @property
    def total_posts(self) -> int:
        return len(self.items)


class PageLink(BaseModel):
    """Navigation data for one page of a tag index."""

    model_config = ConfigDict(frozen=True)

    page: int
    path: str
    previous_page: int | None = None
    next_page: int | None = None
    previous_page_path: str | None = None
    next_page_path: str | None = None


class PaginationInfo(BaseModel):
    """Paginator block attached to a page when pagination is active."""

    model_config = ConfigDict(frozen=True)

    page: int
    per_page: int
    total_pages: int
    total_posts: int
    posts: tuple[Item, ...] = ()
    previous_page: int | None = None
    next_page: int | None = None
    previous_page_path: str | None = None
    next_page_path: str | None = None

    def to_template(self) -> dict[str, Any]:
        """Mapping consumed by the template engine as ``paginator``."""
        return {
            "page": self.page,
            "per_page": self.per_page,
            "posts": list(self.posts),
            "total_posts": self.total_posts,
            "total_pages": self.total_pages,
            "previous_page": self.previous_page,
            "previous_page_path": self.previous_page_path,
            "next_page": self.next_page,
            "next_page_path": self.next_page_path,
        }


class PageDescriptor(BaseModel):
    """A fully resolved tag index page, ready for rendering.

    ``posts`` always holds the complete item sequence of the tag, while
    ``items`` holds the slice shown on this page. Without pagination the
    two are identical and ``paginator`` is ``None``.
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    page: int = 1
    name: str
    tag_dir: str
    layout: str
    posts: tuple[Item, ...] = ()
    items: tuple[Item, ...] = ()
    paginator: PaginationInfo | None = None

    @property
    def title(self) -> str:
        return self.tag

    @property
    def total_posts(self) -> int:
        return len(self.posts)

    @property
    def is_paginated(self) -> bool:
        return self.paginator is not None

    def to_template(self) -> dict[str, Any]:
        """Mapping consumed by the template engine as ``page``."""
        return {
            "tag": self.tag,
            "title": self.title,
            "paginator": self.paginator.to_template() if self.paginator else None,
            "posts": list(self.posts),
            "total_posts": self.total_posts,
            "dir": self.tag_dir,
            "name": self.name,
            "page": self.page,
            "layout": self.layout,
        }
