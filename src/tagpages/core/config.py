from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseModel):
    """Pagination of tag index pages."""

    enabled: bool = Field(default=False, description="Split tag indexes across several pages")
    per_page: int | None = Field(default=None, description="Maximum items on one page")


class TagSettings(BaseModel):
    """Where tag pages go and which layout renders them."""

    path: str = Field(default="tag", description="Base path of all tag index roots")
    layout: str = Field(default="tag_index.html", description="Layout file inside the layouts directory")


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )

    layouts_dir: Path = Field(default=Path("_layouts"), description="Layouts directory")
    posts_dir: Path = Field(default=Path("_posts"), description="Posts directory")
    output_dir: Path = Field(default=Path("_site"), description="Generated site directory")

    @property
    def abs_layouts_dir(self) -> Path:
        return self._resolve(self.layouts_dir)

    @property
    def abs_posts_dir(self) -> Path:
        return self._resolve(self.posts_dir)

    @property
    def abs_output_dir(self) -> Path:
        return self._resolve(self.output_dir)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class TagPagesConfig(BaseSettings):
    """Root configuration for tagpages.

    Supports environment variable overrides with the pattern:
    TAGPAGES_SECTION__KEY (e.g., TAGPAGES_PAGINATION__PER_PAGE)
    """

    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    tags: TagSettings = Field(default_factory=TagSettings)
    paths: PathsSettings = Field(default_factory=PathsSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="TAGPAGES_",
        env_nested_delimiter="__",
    )

    @property
    def pagination_enabled(self) -> bool:
        return self.pagination.enabled

    @property
    def per_page(self) -> int | None:
        return self.pagination.per_page
