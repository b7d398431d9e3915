#===============================================================================
#  Yeet | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Load the user's config.toml on top of built-in defaults. A missing file
#  means defaults; a broken one is reported and ignored.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .constants import DEFAULT_MAX_RESULTS, DEFAULT_TERMINAL, DEFAULT_WINDOW_WIDTH, MAX_HISTORY_LINES
from .errors import ConfigError
from .models import CustomApp
from .paths import config_path

log = logging.getLogger(__name__)


@dataclass
class GeneralConfig:
    max_results: int = DEFAULT_MAX_RESULTS
    terminal: str = DEFAULT_TERMINAL


@dataclass
class AppearanceConfig:
    width: int = DEFAULT_WINDOW_WIDTH


@dataclass
class AppsConfig:
    extra_dirs: List[Path] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    favorites: List[str] = field(default_factory=list)
    custom: List[CustomApp] = field(default_factory=list)


@dataclass
class HistoryConfig:
    max_lines: int = MAX_HISTORY_LINES


@dataclass
class Config:
    general: GeneralConfig = field(default_factory=GeneralConfig)
    appearance: AppearanceConfig = field(default_factory=AppearanceConfig)
    apps: AppsConfig = field(default_factory=AppsConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)


def _table(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table")
    return value


def _value(table: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    if key not in table:
        return default
    value = table[key]
    # bool is an int subclass; `max_results = true` is still a type error
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{key!r} must be of type {kind.__name__}, got {value!r}")
    return value


def _positive(table: Dict[str, Any], key: str, default: int) -> int:
    value = _value(table, key, int, default)
    if value < 1:
        raise ConfigError(f"{key!r} must be at least 1, got {value!r}")
    return value


def _str_list(table: Dict[str, Any], key: str) -> List[str]:
    values = _value(table, key, list, [])
    for v in values:
        if not isinstance(v, str):
            raise ConfigError(f"{key!r} must be a list of strings, got {v!r}")
    return list(values)


def _custom_app(raw: Any) -> CustomApp:
    if not isinstance(raw, dict):
        raise ConfigError("[[apps.custom]] entries must be tables")
    for required in ("name", "exec"):
        if required not in raw:
            raise ConfigError(f"[[apps.custom]] entry is missing {required!r}")
    return CustomApp(
        name=_value(raw, "name", str, ""),
        exec=_value(raw, "exec", str, ""),
        icon=_value(raw, "icon", str, None),
        keywords=tuple(_str_list(raw, "keywords")),
    )


def parse_config(text: str) -> Config:
    """Parse config.toml text. Missing keys take defaults, unknown keys are ignored."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}") from e

    general = _table(data, "general")
    appearance = _table(data, "appearance")
    apps = _table(data, "apps")
    history = _table(data, "history")
    defaults = Config()

    custom = _value(apps, "custom", list, [])

    return Config(
        general=GeneralConfig(
            max_results=_positive(general, "max_results", defaults.general.max_results),
            terminal=_value(general, "terminal", str, defaults.general.terminal),
        ),
        appearance=AppearanceConfig(
            width=_positive(appearance, "width", defaults.appearance.width),
        ),
        apps=AppsConfig(
            extra_dirs=[Path(p).expanduser() for p in _str_list(apps, "extra_dirs")],
            exclude=_str_list(apps, "exclude"),
            favorites=_str_list(apps, "favorites"),
            custom=[_custom_app(raw) for raw in custom],
        ),
        history=HistoryConfig(
            max_lines=_positive(history, "max_lines", defaults.history.max_lines),
        ),
    )


def load_config(path: Optional[Path] = None) -> Config:
    """Load config from disk (or return defaults)."""
    path = path or config_path()
    if not path.exists():
        return Config()
    try:
        return parse_config(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ConfigError) as e:
        log.warning("Failed to load config at %s: %s. Using default configuration.", path, e)
        return Config()
