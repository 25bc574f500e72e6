from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml

from tagpages.core.config import TagPagesConfig
from tagpages.core.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

CONFIG_FILE = "_config.yml"

_SECTIONS = ("pagination", "tags", "paths")

# Flat site keys understood for compatibility with existing sites.
_FLAT_KEYS: dict[str, tuple[str, str]] = {
    "tag_path": ("tags", "path"),
    "tag_layout": ("tags", "layout"),
}


def env_defined_fields() -> set[tuple[str, ...]]:
    """Field paths of TagPagesConfig that are set through the environment.

    ``TAGPAGES_PAGINATION__PER_PAGE`` yields ``("pagination", "per_page")``.
    """
    prefix = TagPagesConfig.model_config["env_prefix"]
    delimiter = TagPagesConfig.model_config["env_nested_delimiter"]
    return {
        tuple(part.lower() for part in name[len(prefix) :].split(delimiter) if part)
        for name in os.environ
        if name.upper().startswith(prefix) and len(name) > len(prefix)
    }


def overlay(base: dict[str, Any], override: dict[str, Any], skip: set[tuple[str, ...]]) -> dict[str, Any]:
    """Copy of ``base`` updated with ``override``, section by section.

    Keys whose path is in ``skip`` keep the value from ``base``.
    """
    result = deepcopy(base)
    pending = [((), result, override)]
    while pending:
        prefix, target, source = pending.pop()
        for key, value in source.items():
            path = (*prefix, str(key).lower())
            if path in skip:
                continue
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                pending.append((path, target[key], value))
            else:
                target[key] = deepcopy(value)
    return result


class ConfigLoader:
    """Loads and validates tagpages configuration.

    Handles YAML file loading and works with TagPagesConfig (BaseSettings)
    to automatically apply environment variable overrides.
    """

    def __init__(self, site_root: Path | None = None):
        """Initialize config loader.

        Args:
            site_root: Root directory of the site. If None, uses current working directory.

        """
        self.site_root = site_root if site_root is not None else Path.cwd()
        self._file_data: dict[str, Any] | None = None

    @property
    def config_path(self) -> Path:
        return self.site_root / CONFIG_FILE

    def site_data(self) -> dict[str, Any]:
        """The raw ``_config.yml`` mapping, as layouts see it under ``site``."""
        return deepcopy(self._read_file())

    def load(self) -> TagPagesConfig:
        """Loads configuration with environment-variable precedence.

        Priority (highest to lowest):
        1. Environment variables (TAGPAGES_SECTION__KEY)
        2. Config file (_config.yml relative to site_root)
        3. Defaults
        """
        merged = overlay(
            TagPagesConfig().model_dump(mode="json"),
            self._sections(self._read_file()),
            skip=env_defined_fields(),
        )

        try:
            return TagPagesConfig.model_validate(merged)
        except ValueError as e:
            raise ConfigLoadError(str(self.config_path), str(e)) from e

    def _sections(self, data: dict[str, Any]) -> dict[str, Any]:
        """Fold flat site keys into their sections and pin paths.site_root."""
        sections: dict[str, dict[str, Any]] = {}
        for section in _SECTIONS:
            value = data.get(section) or {}
            if not isinstance(value, dict):
                reason = f"'{section}' must be a dictionary, got {type(value).__name__}"
                raise ConfigLoadError(str(self.config_path), reason)
            sections[section] = deepcopy(value)

        for key, (section, field) in _FLAT_KEYS.items():
            if key in data:
                sections[section][field] = data[key]

        if "paginate" in data:
            per_page = data["paginate"]
            # paginate: false or null means a flat site; 0 still enables and fails later
            if per_page is False:
                per_page = None
            sections["pagination"].setdefault("enabled", per_page is not None)
            sections["pagination"]["per_page"] = per_page

        sections["paths"]["site_root"] = self.site_root
        return sections

    def _read_file(self) -> dict[str, Any]:
        if self._file_data is None:
            self._file_data = self._load_from_file()
        return self._file_data

    def _load_from_file(self) -> dict[str, Any]:
        """Loads configuration from _config.yml."""
        config_path = self.config_path
        if not config_path.exists():
            logger.debug("No %s in %s, using defaults", CONFIG_FILE, self.site_root)
            return {}

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigLoadError(str(config_path), f"invalid YAML: {e}") from e

        if not isinstance(data, dict):
            reason = f"configuration root must be a mapping, got {type(data).__name__}"
            raise ConfigLoadError(str(config_path), reason)
        return data
