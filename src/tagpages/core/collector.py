"""Tag enumeration and grouping."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeAlias

from tagpages.core.types import Item, TagGroup

TagSource: TypeAlias = Iterable[Item] | Mapping[str, Sequence[Item]]


def group_by_tag(items: Iterable[Item]) -> dict[str, list[Item]]:
    """Map every tag to the items carrying it, keeping input order.

    An item that lists the same tag twice appears once in that tag's group.
    """
    groups: dict[str, list[Item]] = {}
    for item in items:
        for tag in dict.fromkeys(item.tags):
            groups.setdefault(tag, []).append(item)
    return groups


def _as_mapping(source: TagSource) -> Mapping[str, Sequence[Item]]:
    if isinstance(source, Mapping):
        return source
    return group_by_tag(source)


def collect(source: TagSource) -> list[str]:
    """Return every distinct tag once, in code-point order.

    ``source`` is either an iterable of items or an already grouped
    ``tag -> items`` mapping.
    """
    return sorted(set(_as_mapping(source)))


def tag_groups(source: TagSource) -> list[TagGroup]:
    """Return one group per tag, ordered like :func:`collect`."""
    mapping = _as_mapping(source)
    return [TagGroup(tag=tag, items=tuple(mapping[tag])) for tag in collect(mapping)]
