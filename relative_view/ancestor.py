from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, List, Optional

from .accessor import DEFAULT_ACCESSOR, GroupKey, ViewAccessor, matches_tags, matches_types, tag_group_key, type_group_key

logger = logging.getLogger(__name__)


def iter_ancestors(start: Any, accessor: ViewAccessor = DEFAULT_ACCESSOR) -> Iterator[Any]:
    ancestor = accessor.parent_of(start)
    while ancestor is not None:
        yield ancestor
        ancestor = accessor.parent_of(ancestor)


def find_first_ancestor(
    start: Any,
    matches: Callable[[Any], bool],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Optional[Any]:
    """Return the nearest ancestor of ``start`` accepted by ``matches``, or None.

    ``start`` itself is never offered to ``matches``.
    """
    for ancestor in iter_ancestors(start, accessor):
        if matches(ancestor):
            return ancestor
    return None


def find_first_ancestor_by_types(
    start: Any,
    view_types: Iterable[Any],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Optional[Any]:
    wanted = list(view_types)
    if not wanted:
        logger.debug("find_first_ancestor_by_types: no view types given")
        return None
    return find_first_ancestor(start, lambda ancestor: matches_types(accessor, ancestor, wanted), accessor)


def find_first_ancestor_by_tags(
    start: Any,
    tags: Iterable[int],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Optional[Any]:
    wanted = set(tags)
    if not wanted:
        logger.debug("find_first_ancestor_by_tags: no tags given")
        return None
    return find_first_ancestor(start, lambda ancestor: matches_tags(accessor, ancestor, wanted), accessor)


def is_relative_ancestor(view: Any, of: Any, accessor: ViewAccessor = DEFAULT_ACCESSOR) -> bool:
    # A view is never its own ancestor.
    if view is of:
        return False
    return find_first_ancestor(of, lambda ancestor: ancestor is view, accessor) is not None


def group_ancestors(
    start: Any,
    group_key: GroupKey,
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[Hashable, List[Any]]:
    groups: Dict[Hashable, List[Any]] = {}
    for ancestor in iter_ancestors(start, accessor):
        key = group_key(ancestor)
        if key is not None:
            groups.setdefault(key, []).append(ancestor)
    return groups


def group_ancestors_by_types(
    start: Any,
    view_types: Iterable[Any],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[str, List[Any]]:
    wanted = list(view_types)
    if not wanted:
        logger.debug("group_ancestors_by_types: no view types given")
        return {}
    return group_ancestors(start, type_group_key(accessor, wanted), accessor)


def group_ancestors_by_tags(
    start: Any,
    tags: Iterable[int],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[int, List[Any]]:
    wanted = set(tags)
    if not wanted:
        logger.debug("group_ancestors_by_tags: no tags given")
        return {}
    return group_ancestors(start, tag_group_key(accessor, wanted), accessor)


__all__ = [
    "iter_ancestors",
    "find_first_ancestor",
    "find_first_ancestor_by_types",
    "find_first_ancestor_by_tags",
    "is_relative_ancestor",
    "group_ancestors",
    "group_ancestors_by_types",
    "group_ancestors_by_tags",
]
