from __future__ import annotations

import json
import os
import threading
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, List

VERSION = "1.0.0"
APP_NAME = "relative-view"
HOME_ENV = "RELATIVE_VIEW_HOME"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_LOAD_WARNINGS: List[str] = []
_LOAD_WARNINGS_LOCK = threading.Lock()


def _push_load_warning(message: str) -> None:
    with _LOAD_WARNINGS_LOCK:
        _LOAD_WARNINGS.append(message)


def consume_load_warnings() -> List[str]:
    with _LOAD_WARNINGS_LOCK:
        out = list(_LOAD_WARNINGS)
        _LOAD_WARNINGS.clear()
        return out


def get_config_dir() -> str:
    override = os.environ.get(HOME_ENV)
    if override:
        return override
    base = os.environ.get("XDG_CONFIG_HOME") or os.environ.get("APPDATA")
    if not base:
        base = str(Path.home() / ".config")
    return str(Path(base) / APP_NAME)


CONFIG_DIR = get_config_dir()
SETTINGS_FILE = os.path.join(CONFIG_DIR, "settings.json")
LOG_FILE = os.path.join(CONFIG_DIR, "relative_view.log")


def _coerce_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _coerce_int(value: Any, default: int, minimum: int | None = None, maximum: int | None = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        out = default
    else:
        out = value
    if minimum is not None:
        out = max(out, minimum)
    if maximum is not None:
        out = min(out, maximum)
    return out


def _coerce_str(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value.strip() else default


def _coerce_level(value: Any, default: str) -> str:
    level = _coerce_str(value, default).upper()
    if level not in _LOG_LEVELS:
        _push_load_warning(f"settings.json: unknown log_level {value!r}, using {default}")
        return default
    return level


def _load_json_object(path: str, label: str) -> dict[str, Any] | None:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        return None
    except Exception as exc:
        _push_load_warning(f"{label}: JSON parse failed ({exc.__class__.__name__}), using defaults")
        return None
    if not isinstance(raw, dict):
        _push_load_warning(f"{label}: top-level value is not an object, using defaults")
        return None
    return raw


@dataclass
class RelativeViewSettings:
    log_level: str = "INFO"
    type_field: str = "class"
    tag_field: str = "ctrl_id"
    json_indent: int = 2
    log_to_file: bool = False

    @classmethod
    def load(cls, path: str = SETTINGS_FILE) -> "RelativeViewSettings":
        defaults = cls()
        raw = _load_json_object(path, os.path.basename(path))
        if raw is None:
            return defaults
        return cls(
            log_level=_coerce_level(raw.get("log_level"), defaults.log_level),
            type_field=_coerce_str(raw.get("type_field"), defaults.type_field),
            tag_field=_coerce_str(raw.get("tag_field"), defaults.tag_field),
            json_indent=_coerce_int(raw.get("json_indent"), defaults.json_indent, minimum=0, maximum=8),
            log_to_file=_coerce_bool(raw.get("log_to_file"), defaults.log_to_file),
        )

    def save(self, path: str = SETTINGS_FILE) -> None:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2, ensure_ascii=False)

    @classmethod
    def default_json(cls) -> str:
        return json.dumps(asdict(cls()), indent=2, ensure_ascii=False)


__all__ = [
    "VERSION",
    "APP_NAME",
    "HOME_ENV",
    "CONFIG_DIR",
    "SETTINGS_FILE",
    "LOG_FILE",
    "RelativeViewSettings",
    "get_config_dir",
    "consume_load_warnings",
]
