from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Hashable, Iterable, List

from .accessor import DEFAULT_ACCESSOR, GroupKey, ViewAccessor, tag_group_key, type_group_key

logger = logging.getLogger(__name__)


class TraversalResult(Enum):
    COMPLETED = "completed"
    STOPPED = "stopped"

    def __bool__(self) -> bool:
        return self is TraversalResult.COMPLETED


def depth_first_traverse(
    root: Any,
    visit: Callable[[Any], bool],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> TraversalResult:
    """Visit the descendants of ``root`` in pre-order, ``root`` excluded.

    Returns ``TraversalResult.STOPPED`` as soon as ``visit`` returns a false
    value; nothing after that node (its own children included) is visited.
    """
    # Children are pushed in reverse so the first child is popped first.
    stack: List[Any] = list(reversed(accessor.children_of(root)))
    while stack:
        node = stack.pop()
        if not visit(node):
            return TraversalResult.STOPPED
        stack.extend(reversed(accessor.children_of(node)))
    return TraversalResult.COMPLETED


def is_relative_descendant(view: Any, of: Any, accessor: ViewAccessor = DEFAULT_ACCESSOR) -> bool:
    if view is of:
        return False
    # Only finding ``view`` stops the walk.
    result = depth_first_traverse(of, lambda descendant: descendant is not view, accessor)
    return result is TraversalResult.STOPPED


def group_descendants(
    start: Any,
    group_key: GroupKey,
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[Hashable, List[Any]]:
    groups: Dict[Hashable, List[Any]] = {}

    def collect(descendant: Any) -> bool:
        key = group_key(descendant)
        if key is not None:
            groups.setdefault(key, []).append(descendant)
        return True

    depth_first_traverse(start, collect, accessor)
    return groups


def group_descendants_by_types(
    start: Any,
    view_types: Iterable[Any],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[str, List[Any]]:
    wanted = list(view_types)
    if not wanted:
        logger.debug("group_descendants_by_types: no view types given")
        return {}
    return group_descendants(start, type_group_key(accessor, wanted), accessor)


def group_descendants_by_tags(
    start: Any,
    tags: Iterable[int],
    accessor: ViewAccessor = DEFAULT_ACCESSOR,
) -> Dict[int, List[Any]]:
    wanted = set(tags)
    if not wanted:
        logger.debug("group_descendants_by_tags: no tags given")
        return {}
    return group_descendants(start, tag_group_key(accessor, wanted), accessor)


__all__ = [
    "TraversalResult",
    "depth_first_traverse",
    "is_relative_descendant",
    "group_descendants",
    "group_descendants_by_types",
    "group_descendants_by_tags",
]
