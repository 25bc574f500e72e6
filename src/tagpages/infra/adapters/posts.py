"""Reads Markdown posts with YAML front matter into Items."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from tagpages.core.exceptions import PostParsingError
from tagpages.core.types import Item

logger = logging.getLogger(__name__)

_DATED_NAME = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})-(?P<slug>.+)$")


class MarkdownPostsAdapter:
    """Loads every ``*.md`` / ``*.markdown`` post below a directory.

    Items come back newest first, the order in which a blog lists them.
    """

    patterns = ("*.md", "*.markdown")

    def __init__(self, posts_dir: Path) -> None:
        self.posts_dir = Path(posts_dir)

    def load(self) -> list[Item]:
        if not self.posts_dir.is_dir():
            logger.warning("Posts directory %s does not exist, no items loaded", self.posts_dir)
            return []

        paths = sorted({p for pattern in self.patterns for p in self.posts_dir.rglob(pattern)})
        items = [self._parse(path) for path in paths]
        items.sort(key=lambda item: (item.date or datetime.min, item.metadata.get("slug", "")), reverse=True)
        logger.info("Loaded %d posts from %s", len(items), self.posts_dir)
        return items

    def _parse(self, path: Path) -> Item:
        try:
            post = frontmatter.load(str(path))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise PostParsingError(str(path), str(e)) from e

        metadata: dict[str, Any] = dict(post.metadata)
        match = _DATED_NAME.match(path.stem)
        slug = match.group("slug") if match else path.stem

        return Item(
            title=str(metadata.pop("title", slug)),
            tags=self._tags(metadata),
            url=metadata.pop("permalink", None),
            date=self._date(metadata.pop("date", None), match),
            content=post.content,
            metadata={**metadata, "slug": slug, "path": str(path)},
        )

    @staticmethod
    def _tags(metadata: dict[str, Any]) -> tuple[str, ...]:
        raw = metadata.pop("tags", None)
        if raw is None:
            raw = metadata.pop("tag", None)
        if raw is None:
            return ()
        if isinstance(raw, str):
            return tuple(raw.split())
        return tuple(str(tag) for tag in raw if tag is not None and str(tag).strip())

    @staticmethod
    def _date(value: Any, match: re.Match[str] | None) -> datetime | None:
        if isinstance(value, datetime):
            return value.replace(tzinfo=None)
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        if isinstance(value, str):
            try:
                return datetime.fromisoformat(value).replace(tzinfo=None)
            except ValueError:
                logger.warning("Ignoring unparseable post date %r", value)
        if match:
            return datetime.fromisoformat(match.group("date"))
        return None
