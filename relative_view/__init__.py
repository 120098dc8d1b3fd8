from __future__ import annotations

from importlib import import_module
from typing import Dict, Tuple

_MODULE_EXPORTS = {
    "app": "relative_view.app",
    "ancestor": "relative_view.ancestor",
    "descendant": "relative_view.descendant",
    "sibling": "relative_view.sibling",
}

_ATTR_EXPORTS: Dict[str, Tuple[str, str]] = {
    "main": ("relative_view.app", "main"),
    "VERSION": ("relative_view.config", "VERSION"),
    "APP_NAME": ("relative_view.config", "APP_NAME"),
    "SETTINGS_FILE": ("relative_view.config", "SETTINGS_FILE"),
    "LOG_FILE": ("relative_view.config", "LOG_FILE"),
    "RelativeViewSettings": ("relative_view.config", "RelativeViewSettings"),
    "consume_load_warnings": ("relative_view.config", "consume_load_warnings"),
    "ViewAccessor": ("relative_view.accessor", "ViewAccessor"),
    "DEFAULT_ACCESSOR": ("relative_view.accessor", "DEFAULT_ACCESSOR"),
    "TK_ACCESSOR": ("relative_view.accessor", "TK_ACCESSOR"),
    "find_first_ancestor": ("relative_view.ancestor", "find_first_ancestor"),
    "find_first_ancestor_by_types": ("relative_view.ancestor", "find_first_ancestor_by_types"),
    "find_first_ancestor_by_tags": ("relative_view.ancestor", "find_first_ancestor_by_tags"),
    "is_relative_ancestor": ("relative_view.ancestor", "is_relative_ancestor"),
    "group_ancestors": ("relative_view.ancestor", "group_ancestors"),
    "group_ancestors_by_types": ("relative_view.ancestor", "group_ancestors_by_types"),
    "group_ancestors_by_tags": ("relative_view.ancestor", "group_ancestors_by_tags"),
    "TraversalResult": ("relative_view.descendant", "TraversalResult"),
    "depth_first_traverse": ("relative_view.descendant", "depth_first_traverse"),
    "is_relative_descendant": ("relative_view.descendant", "is_relative_descendant"),
    "group_descendants": ("relative_view.descendant", "group_descendants"),
    "group_descendants_by_types": ("relative_view.descendant", "group_descendants_by_types"),
    "group_descendants_by_tags": ("relative_view.descendant", "group_descendants_by_tags"),
    "is_relative_sibling": ("relative_view.sibling", "is_relative_sibling"),
    "group_siblings": ("relative_view.sibling", "group_siblings"),
    "group_siblings_by_types": ("relative_view.sibling", "group_siblings_by_types"),
    "group_siblings_by_tags": ("relative_view.sibling", "group_siblings_by_tags"),
    "RelativeView": ("relative_view.relative", "RelativeView"),
    "WindowGraph": ("relative_view.window_graph", "WindowGraph"),
    "WindowNode": ("relative_view.window_graph", "WindowNode"),
    "WindowDumpError": ("relative_view.window_graph", "WindowDumpError"),
    "setup_logging": ("relative_view.logging_setup", "setup_logging"),
}

__all__ = sorted(set(_MODULE_EXPORTS) | set(_ATTR_EXPORTS))


def __getattr__(name: str):
    module_name = _MODULE_EXPORTS.get(name)
    if module_name is not None:
        module = import_module(module_name)
        globals()[name] = module
        return module

    target = _ATTR_EXPORTS.get(name)
    if target is not None:
        source_module_name, source_attr_name = target
        source_module = import_module(source_module_name)
        value = getattr(source_module, source_attr_name)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(set(globals().keys()) | set(__all__))
