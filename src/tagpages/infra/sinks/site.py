"""Renders tag page descriptors with Jinja2 and writes them into the site."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import frontmatter
import yaml
from jinja2 import Environment, FileSystemLoader, TemplateError
from markdown_it import MarkdownIt
from markupsafe import Markup

from tagpages.core.exceptions import TemplateRenderError
from tagpages.core.types import PageDescriptor
from tagpages.infra.paths import escape_tag, output_path, page_url

logger = logging.getLogger(__name__)

_md = MarkdownIt("commonmark", {"html": True})


def markdownify(content: str | None) -> Markup:
    """Render Markdown content to HTML for use inside a layout."""
    if not content:
        return Markup("")
    return Markup(_md.render(content).strip())


class FrontMatterLoader(FileSystemLoader):
    """FileSystemLoader that strips a leading YAML front matter block.

    The stripped metadata is kept per template name in ``metadata``.
    """

    def __init__(self, searchpath: str | Path) -> None:
        super().__init__(str(searchpath))
        self.metadata: dict[str, dict[str, Any]] = {}

    def get_source(self, environment: Environment, template: str):
        source, filename, uptodate = super().get_source(environment, template)
        layout = frontmatter.loads(source)
        self.metadata[template] = dict(layout.metadata)
        return layout.content, filename, uptodate


class TagPageRenderer:
    """Renders a tag layout for one page descriptor.

    The layout sees ``page`` (the layout's own front matter, overlaid with
    tag, title, posts, total_posts, paginator, dir, name, path and url),
    ``paginator`` as a top-level shortcut and ``site``.
    """

    def __init__(
        self, layouts_dir: Path, site: Mapping[str, Any] | None = None, tag_path: str = "tag"
    ) -> None:
        self.layouts_dir = Path(layouts_dir)
        self.site = dict(site or {})
        self.tag_path = tag_path
        self.loader = FrontMatterLoader(self.layouts_dir)
        self.env = Environment(
            loader=self.loader,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._register_filters()

    def _register_filters(self) -> None:
        self.env.filters["markdownify"] = markdownify
        self.env.filters["escape_tag"] = escape_tag

    def page_data(self, descriptor: PageDescriptor) -> dict[str, Any]:
        """Template mapping for ``page``; the layout's front matter fills gaps only."""
        return {
            **self.loader.metadata.get(descriptor.layout, {}),
            **descriptor.to_template(),
            "path": str(output_path(descriptor, self.tag_path)),
            "url": page_url(descriptor, self.tag_path),
        }

    def render(self, descriptor: PageDescriptor) -> str:
        try:
            template = self.env.get_template(descriptor.layout)
            page = self.page_data(descriptor)
            return template.render(page=page, paginator=page["paginator"], site=self.site)
        except (TemplateError, yaml.YAMLError) as e:
            raise TemplateRenderError(descriptor.layout, str(e)) from e


class SiteOutputSink:
    """Writes rendered tag pages below the site output directory."""

    def __init__(self, output_dir: Path, renderer: TagPageRenderer) -> None:
        """Initialize the site output sink.

        Args:
            output_dir: Root of the generated site
            renderer: Renders each descriptor to text; its ``tag_path`` places the pages

        """
        self.output_dir = Path(output_dir)
        self.renderer = renderer

    def publish(self, descriptors: Iterable[PageDescriptor]) -> list[Path]:
        """Render and write every descriptor, returning the written files."""
        written = []
        for descriptor in descriptors:
            target = self.output_dir / output_path(descriptor, self.renderer.tag_path)
            content = self.renderer.render(descriptor)
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
            logger.debug("Wrote %s", target)
            written.append(target)

        logger.info("Wrote %d tag index pages to %s", len(written), self.output_dir)
        return written
