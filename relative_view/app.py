from __future__ import annotations

import argparse
import json
import sys
from typing import Dict, List, Optional

from .config import LOG_FILE, SETTINGS_FILE, VERSION, RelativeViewSettings, consume_load_warnings
from .logging_setup import setup_logging
from .relative import RelativeView
from .window_graph import WindowDumpError, WindowGraph, WindowNode

_GROUP_COMMANDS = ("ancestors", "descendants", "siblings")


def _hwnd(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid hwnd: {value!r}") from None


def _add_match_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--classes", nargs="+", metavar="CLASS", help="Match exact window class names")
    group.add_argument("--tags", nargs="+", type=int, metavar="TAG", help="Match window tags (read from the dump's tag_field, 0 when absent)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="relative-view", description=f"Relative window-tree queries v{VERSION}")
    parser.add_argument("--settings", type=str, default=SETTINGS_FILE, help="Settings JSON path")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")
    parser.add_argument("--log-file", type=str, default=None, help="Also write a debug log to this file (settings log_to_file uses the default log file)")
    sub = parser.add_subparsers(dest="command", required=True)

    for command in _GROUP_COMMANDS:
        cmd = sub.add_parser(command, help=f"Group the {command} of a window")
        cmd.add_argument("dump", help="Window tree dump (JSON)")
        cmd.add_argument("hwnd", type=_hwnd)
        _add_match_options(cmd)

    find = sub.add_parser("find-ancestor", help="Print the nearest matching ancestor of a window")
    find.add_argument("dump", help="Window tree dump (JSON)")
    find.add_argument("hwnd", type=_hwnd)
    _add_match_options(find)

    relation = sub.add_parser("relation", help="Print how window A relates to window B")
    relation.add_argument("dump", help="Window tree dump (JSON)")
    relation.add_argument("a", type=_hwnd)
    relation.add_argument("b", type=_hwnd)
    return parser


def _group(view: RelativeView, command: str, args: argparse.Namespace) -> Dict[object, List[WindowNode]]:
    if args.classes:
        return getattr(view, f"group_{command}_by_types")(args.classes)
    return getattr(view, f"group_{command}_by_tags")(args.tags)


def _relation(a: RelativeView, b: WindowNode) -> str:
    if a.is_ancestor_of(b):
        return "ancestor"
    if a.is_descendant_of(b):
        return "descendant"
    if a.is_sibling_of(b):
        return "sibling"
    return "none"


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])
    settings = RelativeViewSettings.load(args.settings)
    log_file = args.log_file or (LOG_FILE if settings.log_to_file else None)
    logger = setup_logging(args.log_level or settings.log_level, log_file=log_file)
    for warning in consume_load_warnings():
        logger.warning(warning)

    try:
        graph = WindowGraph.load(args.dump, type_field=settings.type_field, tag_field=settings.tag_field)
    except WindowDumpError as exc:
        logger.error("%s", exc)
        return 2
    accessor = graph.accessor()

    if args.command == "relation":
        a = graph.get(args.a)
        b = graph.get(args.b)
        if a is None or b is None:
            logger.error("unknown hwnd: %s", args.a if a is None else args.b)
            return 1
        answer = _relation(RelativeView(a, accessor), b)
        print(answer)
        return 0 if answer != "none" else 1

    node = graph.get(args.hwnd)
    if node is None:
        logger.error("unknown hwnd: %s", args.hwnd)
        return 1
    view = RelativeView(node, accessor)

    if args.command == "find-ancestor":
        if args.classes:
            found = view.find_first_ancestor_by_types(args.classes)
        else:
            found = view.find_first_ancestor_by_tags(args.tags)
        if found is None:
            logger.info("no matching ancestor for hwnd=%s", args.hwnd)
            return 1
        print(found.hwnd)
        return 0

    groups = _group(view, args.command, args)
    logger.debug("%s of hwnd=%s: %d group(s)", args.command, args.hwnd, len(groups))
    out = {str(key): [member.hwnd for member in members] for key, members in groups.items()}
    print(json.dumps(out, indent=settings.json_indent or None, ensure_ascii=False))
    return 0 if groups else 1


__all__ = ["main", "build_parser", "VERSION"]
