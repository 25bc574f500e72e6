"""Tests for MarkdownPostsAdapter."""

from datetime import datetime
from pathlib import Path

import pytest

from tagpages.core.exceptions import PostParsingError
from tagpages.infra.adapters.posts import MarkdownPostsAdapter


def test_loads_fixture_posts_newest_first(site_dir: Path, jekyll_titles):
    items = MarkdownPostsAdapter(site_dir / "_posts").load()

    assert [item.title for item in items] == jekyll_titles


def test_reads_tags_and_dates(site_dir: Path):
    items = {item.title: item for item in MarkdownPostsAdapter(site_dir / "_posts").load()}

    plugin_post = items["Welcome to the plugin"]
    assert plugin_post.tags == ("jekyll", "Tag Pages Plugin", "好的主意")
    assert plugin_post.date == datetime(2017, 3, 2)
    assert plugin_post.metadata["slug"] == "welcome-to-the-plugin"
    assert "one index page per tag" in plugin_post.content

    assert items["Welcome to Jekyll!"].tags == ("jekyll",)


def test_front_matter_date_wins_over_file_name(tmp_path: Path):
    post = "---\ntitle: Dated\ndate: 2021-06-15\ntags: [a]\n---\nbody\n"
    (tmp_path / "2020-01-01-post.md").write_text(post)

    (item,) = MarkdownPostsAdapter(tmp_path).load()

    assert item.date == datetime(2021, 6, 15)


def test_missing_title_falls_back_to_slug(tmp_path: Path):
    (tmp_path / "notes.md").write_text("---\ntags: a b\n---\n")

    (item,) = MarkdownPostsAdapter(tmp_path).load()

    assert item.title == "notes"
    assert item.tags == ("a", "b")
    assert item.date is None


def test_missing_directory_yields_nothing(tmp_path: Path):
    assert MarkdownPostsAdapter(tmp_path / "missing").load() == []


def test_bad_front_matter_raises(tmp_path: Path):
    (tmp_path / "broken.md").write_text("---\ntitle: [unclosed\n---\nbody\n")

    with pytest.raises(PostParsingError, match="broken.md"):
        MarkdownPostsAdapter(tmp_path).load()
