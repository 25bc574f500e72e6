"""Output locations of tag index pages."""

from pathlib import PurePosixPath
from urllib.parse import quote_plus

from tagpages.core.types import PageDescriptor


def escape_tag(tag: str) -> str:
    """Form-encode a tag for use as a directory name.

    Spaces become ``+`` and non-ASCII text is percent-encoded as UTF-8,
    so ``"Tag Pages Plugin"`` maps to ``"Tag+Pages+Plugin"``.
    """
    return quote_plus(tag, safe="")


def output_path(descriptor: PageDescriptor, tag_path: str) -> PurePosixPath:
    """Relative site path ``{tag_path}/{escaped tag}/{page name}``."""
    return PurePosixPath(tag_path, escape_tag(descriptor.tag), descriptor.name)


def page_url(descriptor: PageDescriptor, tag_path: str) -> str:
    """Site-absolute URL of a page, with ``index.html`` folded into its directory."""
    path = output_path(descriptor, tag_path)
    if path.name == "index.html":
        return f"/{path.parent}/"
    return f"/{path}"
