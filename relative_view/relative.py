from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

from . import ancestor, descendant, sibling
from .accessor import DEFAULT_ACCESSOR, GroupKey, ViewAccessor
from .descendant import TraversalResult


def _unwrap(view: Any) -> Any:
    return view.node if isinstance(view, RelativeView) else view


class RelativeView:
    """Relative queries bound to one host node.

    Results are always the host's own nodes, never ``RelativeView`` wrappers.
    """

    def __init__(self, node: Any, accessor: ViewAccessor = DEFAULT_ACCESSOR):
        self.node = _unwrap(node)
        self.accessor = accessor

    def __repr__(self) -> str:
        return f"RelativeView({self.node!r})"

    # Ancestors

    def find_first_ancestor(self, matches: Callable[[Any], bool]) -> Optional[Any]:
        return ancestor.find_first_ancestor(self.node, matches, self.accessor)

    def find_first_ancestor_by_types(self, view_types: Iterable[Any]) -> Optional[Any]:
        return ancestor.find_first_ancestor_by_types(self.node, view_types, self.accessor)

    def find_first_ancestor_by_tags(self, tags: Iterable[int]) -> Optional[Any]:
        return ancestor.find_first_ancestor_by_tags(self.node, tags, self.accessor)

    def is_ancestor_of(self, other: Any) -> bool:
        return ancestor.is_relative_ancestor(self.node, _unwrap(other), self.accessor)

    def group_ancestors(self, group_key: GroupKey) -> Dict[Hashable, List[Any]]:
        return ancestor.group_ancestors(self.node, group_key, self.accessor)

    def group_ancestors_by_types(self, view_types: Iterable[Any]) -> Dict[str, List[Any]]:
        return ancestor.group_ancestors_by_types(self.node, view_types, self.accessor)

    def group_ancestors_by_tags(self, tags: Iterable[int]) -> Dict[int, List[Any]]:
        return ancestor.group_ancestors_by_tags(self.node, tags, self.accessor)

    # Descendants

    def depth_first_traverse(self, visit: Callable[[Any], bool]) -> TraversalResult:
        return descendant.depth_first_traverse(self.node, visit, self.accessor)

    def is_descendant_of(self, other: Any) -> bool:
        return descendant.is_relative_descendant(self.node, _unwrap(other), self.accessor)

    def group_descendants(self, group_key: GroupKey) -> Dict[Hashable, List[Any]]:
        return descendant.group_descendants(self.node, group_key, self.accessor)

    def group_descendants_by_types(self, view_types: Iterable[Any]) -> Dict[str, List[Any]]:
        return descendant.group_descendants_by_types(self.node, view_types, self.accessor)

    def group_descendants_by_tags(self, tags: Iterable[int]) -> Dict[int, List[Any]]:
        return descendant.group_descendants_by_tags(self.node, tags, self.accessor)

    # Siblings

    def is_sibling_of(self, other: Any) -> bool:
        return sibling.is_relative_sibling(self.node, _unwrap(other), self.accessor)

    def group_siblings(self, group_key: GroupKey) -> Dict[Hashable, List[Any]]:
        return sibling.group_siblings(self.node, group_key, self.accessor)

    def group_siblings_by_types(self, view_types: Iterable[Any]) -> Dict[str, List[Any]]:
        return sibling.group_siblings_by_types(self.node, view_types, self.accessor)

    def group_siblings_by_tags(self, tags: Iterable[int]) -> Dict[int, List[Any]]:
        return sibling.group_siblings_by_tags(self.node, tags, self.accessor)


__all__ = ["RelativeView"]
