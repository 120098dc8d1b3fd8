from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Optional, Sequence

GroupKey = Callable[[Any], Optional[Hashable]]


def _attr_parent(node: Any) -> Any:
    return getattr(node, "parent", None)


def _attr_children(node: Any) -> Sequence[Any]:
    return getattr(node, "children", None) or ()


def _attr_tag(node: Any) -> int:
    return getattr(node, "tag", 0)


def _class_name(view_type: Any) -> str:
    return getattr(view_type, "__name__", str(view_type))


@dataclass(frozen=True)
class ViewAccessor:
    """How the traversal functions read a host view tree.

    ``type_of`` returns the value compared against requested view types and
    ``type_name`` turns it into the key used when grouping by type.
    """

    parent_of: Callable[[Any], Any] = _attr_parent
    children_of: Callable[[Any], Sequence[Any]] = _attr_children
    tag_of: Callable[[Any], int] = _attr_tag
    type_of: Callable[[Any], Any] = type
    type_name: Callable[[Any], str] = _class_name


DEFAULT_ACCESSOR = ViewAccessor()

# tkinter widgets carry no integer tag; hosts set a ``tag`` attribute on the widgets they care about.
TK_ACCESSOR = ViewAccessor(
    parent_of=lambda widget: getattr(widget, "master", None),
    children_of=lambda widget: widget.winfo_children(),
)


def matches_types(accessor: ViewAccessor, node: Any, view_types: Iterable[Any]) -> bool:
    node_type = accessor.type_of(node)
    for view_type in view_types:
        if view_type == node_type:
            return True
    return False


def matches_tags(accessor: ViewAccessor, node: Any, tags: Iterable[int]) -> bool:
    return accessor.tag_of(node) in set(tags)


def type_group_key(accessor: ViewAccessor, view_types: Iterable[Any]) -> GroupKey:
    wanted = list(view_types)

    def key(node: Any) -> Optional[str]:
        if matches_types(accessor, node, wanted):
            return accessor.type_name(accessor.type_of(node))
        return None

    return key


def tag_group_key(accessor: ViewAccessor, tags: Iterable[int]) -> GroupKey:
    wanted = set(tags)

    def key(node: Any) -> Optional[int]:
        tag = accessor.tag_of(node)
        return tag if tag in wanted else None

    return key


__all__ = [
    "GroupKey",
    "ViewAccessor",
    "DEFAULT_ACCESSOR",
    "TK_ACCESSOR",
    "matches_types",
    "matches_tags",
    "type_group_key",
    "tag_group_key",
]
