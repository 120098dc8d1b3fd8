from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterable, List

from .accessor import DEFAULT_ACCESSOR, GroupKey, ViewAccessor, tag_group_key, type_group_key

logger = logging.getLogger(__name__)


def is_relative_sibling(view: Any, of: Any, accessor: ViewAccessor = DEFAULT_ACCESSOR) -> bool:
    if view is of:
        return False
    parent = accessor.parent_of(view)
    if parent is None:
        return False
    return parent is accessor.parent_of(of)


def group_siblings(
    start: Any,
    group_key: GroupKey,
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[Hashable, List[Any]]:
    parent = accessor.parent_of(start)
    if parent is None:
        return {}

    groups: Dict[Hashable, List[Any]] = {}
    for sibling in accessor.children_of(parent):
        if sibling is start:
            continue
        key = group_key(sibling)
        if key is not None:
            groups.setdefault(key, []).append(sibling)
    return groups


def group_siblings_by_types(
    start: Any,
    view_types: Iterable[Any],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[str, List[Any]]:
    wanted = list(view_types)
    if not wanted:
        logger.debug("group_siblings_by_types: no view types given")
        return {}
    return group_siblings(start, type_group_key(accessor, wanted), accessor)


def group_siblings_by_tags(
    start: Any,
    tags: Iterable[int],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[int, List[Any]]:
    wanted = set(tags)
    if not wanted:
        logger.debug("group_siblings_by_tags: no tags given")
        return {}
    return group_siblings(start, tag_group_key(accessor, wanted), accessor)


__all__ = [
    "is_relative_sibling",
    "group_siblings",
    "group_siblings_by_types",
    "group_siblings_by_tags",
]
