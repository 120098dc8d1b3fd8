from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .accessor import ViewAccessor

logger = logging.getLogger(__name__)


class WindowDumpError(ValueError):
    pass


@dataclass(eq=False)
class WindowNode:
    hwnd: int
    parent_hwnd: int
    class_name: str = ""
    text: str = ""
    tag: int = 0
    children: List[int] = field(default_factory=list)


class WindowGraph:
    """Read-only snapshot of a window tree, keyed by hwnd. ``0`` means no parent."""

    def __init__(self):
        self.nodes: Dict[int, WindowNode] = {}

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, hwnd: object) -> bool:
        return hwnd in self.nodes

    def get(self, hwnd: int) -> Optional[WindowNode]:
        return self.nodes.get(hwnd)

    def add_node(self, hwnd: int, parent_hwnd: int = 0, class_name: str = "", text: str = "", tag: int = 0) -> WindowNode:
        node = self.nodes.get(hwnd)
        if node is None:
            node = WindowNode(hwnd=hwnd, parent_hwnd=0)
            self.nodes[hwnd] = node
        node.class_name = class_name
        node.text = text
        node.tag = tag
        if parent_hwnd:
            self.add_edge(parent_hwnd, hwnd)
        return node

    def add_edge(self, parent: int, child: int) -> None:
        if parent not in self.nodes:
            self.nodes[parent] = WindowNode(hwnd=parent, parent_hwnd=0)
        if child not in self.nodes:
            self.nodes[child] = WindowNode(hwnd=child, parent_hwnd=parent)
        previous = self.nodes.get(self.nodes[child].parent_hwnd)
        if previous is not None and previous.hwnd != parent and child in previous.children:
            previous.children.remove(child)
        if child not in self.nodes[parent].children:
            self.nodes[parent].children.append(child)
        self.nodes[child].parent_hwnd = parent

    def roots(self) -> List[WindowNode]:
        return [node for node in self.nodes.values() if node.parent_hwnd == 0]

    def parent_of(self, node: WindowNode) -> Optional[WindowNode]:
        if not node.parent_hwnd:
            return None
        return self.nodes.get(node.parent_hwnd)

    def children_of(self, node: WindowNode) -> List[WindowNode]:
        return [self.nodes[hwnd] for hwnd in node.children if hwnd in self.nodes]

    def accessor(self) -> ViewAccessor:
        # Window class names play the role of view types.
        return ViewAccessor(
            parent_of=self.parent_of,
            children_of=self.children_of,
            tag_of=lambda node: node.tag,
            type_of=lambda node: node.class_name,
            type_name=str,
        )

    @classmethod
    def from_dump(cls, data: Dict[str, Any], type_field: str = "class", tag_field: str = "ctrl_id") -> "WindowGraph":
        """Build a graph from a window-tree dump (``{"windows": [{"hwnd", "class", "children"}]}``).

        Plain window-tree dumps carry no tag field. Tags come from ``tag_field`` only when the
        dump producer adds it (for example the control id); otherwise every tag reads as ``0``.
        """
        graph = cls()
        windows = data.get("windows")
        if not isinstance(windows, list):
            raise WindowDumpError("window dump has no 'windows' list")

        # (parent hwnd, raw entry) pairs, walked with an explicit stack.
        stack = [(0, entry) for entry in reversed(windows)]
        while stack:
            parent_hwnd, entry = stack.pop()
            if not isinstance(entry, dict):
                logger.warning("window dump: skipping non-object entry under hwnd=%s", parent_hwnd)
                continue
            hwnd = entry.get("hwnd")
            if isinstance(hwnd, bool) or not isinstance(hwnd, int) or hwnd == 0:
                logger.warning("window dump: skipping entry without hwnd under hwnd=%s", parent_hwnd)
                continue
            if hwnd in graph.nodes:
                logger.warning("window dump: duplicate hwnd=%s skipped with its subtree", hwnd)
                continue

            class_name = entry.get(type_field)
            text = entry.get("text")
            tag = entry.get(tag_field)
            graph.add_node(
                hwnd,
                parent_hwnd=parent_hwnd,
                class_name=class_name if isinstance(class_name, str) else "",
                text=text if isinstance(text, str) else "",
                tag=tag if isinstance(tag, int) and not isinstance(tag, bool) else 0,
            )
            children = entry.get("children")
            if isinstance(children, list):
                stack.extend((hwnd, child) for child in reversed(children))
        logger.debug("window dump: loaded %d windows", len(graph))
        return graph

    @classmethod
    def load(cls, path: str, type_field: str = "class", tag_field: str = "ctrl_id") -> "WindowGraph":
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError, RecursionError) as exc:
            raise WindowDumpError(f"cannot read window dump {path} ({exc.__class__.__name__})") from exc
        if not isinstance(raw, dict):
            raise WindowDumpError(f"window dump {path} is not a JSON object")
        return cls.from_dump(raw, type_field=type_field, tag_field=tag_field)


__all__ = ["WindowDumpError", "WindowGraph", "WindowNode"]
