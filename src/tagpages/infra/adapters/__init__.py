"""Input adapters producing Items."""

from tagpages.infra.adapters.posts import MarkdownPostsAdapter

__all__ = ["MarkdownPostsAdapter"]
