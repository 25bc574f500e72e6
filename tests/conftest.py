"""Shared fixtures for tagpages tests."""

import os
import shutil
from pathlib import Path

import pytest

from tagpages.core.config import TagPagesConfig
from tagpages.core.types import Item

FIXTURE_SITE = Path(__file__).parent / "fixtures" / "site"


@pytest.fixture
def jekyll_titles() -> list[str]:
    """Titles tagged "jekyll", in the order the content source returns them."""
    return [
        "More about Jekyll",
        "Everything you always wanted to know about Jekyll",
        "About the plugin",
        "Welcome to the plugin",
        "Welcome to Jekyll!",
    ]


@pytest.fixture
def clean_env(monkeypatch):
    """Keep TAGPAGES_* variables from the outer environment out of a test."""
    for key in list(os.environ):
        if key.startswith("TAGPAGES_"):
            monkeypatch.delenv(key)


@pytest.fixture
def site_items() -> list[Item]:
    """The five posts of the fixture site, newest first."""
    return [
        Item(title="More about Jekyll", tags=["jekyll"]),
        Item(title="Everything you always wanted to know about Jekyll", tags=["jekyll"]),
        Item(title="About the plugin", tags=["jekyll", "Tag Pages Plugin"]),
        Item(title="Welcome to the plugin", tags=["jekyll", "Tag Pages Plugin", "好的主意"]),
        Item(title="Welcome to Jekyll!", tags=["jekyll"]),
    ]


@pytest.fixture
def paginated_config() -> TagPagesConfig:
    return TagPagesConfig(pagination={"enabled": True, "per_page": 2})


@pytest.fixture
def flat_config() -> TagPagesConfig:
    return TagPagesConfig()


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A writable copy of the fixture site."""
    target = tmp_path / "site"
    shutil.copytree(FIXTURE_SITE, target)
    return target
