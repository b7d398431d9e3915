#===============================================================================
#  Yeet | fs_discovery.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Filesystem discovery of .desktop files and assembly of the app catalog
#  (exclusions, custom apps, favorites-first ordering).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, Iterator, List, Sequence

from PySide6.QtCore import QStandardPaths

from .config import Config
from .constants import DESKTOP_FILE_SUFFIX, FLATPAK_SYSTEM_EXPORTS, FLATPAK_USER_EXPORTS
from .desktop_entry import read_desktop_entry
from .models import App, CustomApp
from .normalizer import app_from_custom, app_from_desktop_entry

log = logging.getLogger(__name__)


def application_dirs() -> List[Path]:
    """Standard application directories: per-user first, then system-wide, then flatpak exports."""
    dirs = [Path(p) for p in QStandardPaths.standardLocations(QStandardPaths.StandardLocation.ApplicationsLocation)]

    data_home = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
    if data_home:
        dirs.append(Path(data_home) / FLATPAK_USER_EXPORTS)
    dirs.append(FLATPAK_SYSTEM_EXPORTS)

    # de-dup while preserving order
    seen = set()
    unique: List[Path] = []
    for d in dirs:
        if d not in seen:
            seen.add(d)
            unique.append(d)
    return unique


def iter_desktop_files(dirs: Iterable[Path]) -> Iterator[Path]:
    """Yield every .desktop file below each directory. Missing or unreadable dirs are skipped."""
    for d in dirs:
        if not d.is_dir():
            continue
        try:
            found = sorted(p for p in d.rglob(f"*{DESKTOP_FILE_SUFFIX}") if p.is_file())
        except OSError as e:
            log.debug("Skipping %s: %s", d, e)
            continue
        yield from found


def sort_apps(apps: List[App], favorite_names: AbstractSet[str]) -> List[App]:
    """Favorites first, then everything else; case-insensitive by name within each group."""
    return sorted(apps, key=lambda a: (a.name not in favorite_names, a.name.lower()))


def build(
    search_dirs: Sequence[Path],
    extra_dirs: Sequence[Path] = (),
    exclude_names: AbstractSet[str] = frozenset(),
    favorite_names: AbstractSet[str] = frozenset(),
    custom_apps: Sequence[CustomApp] = (),
) -> List[App]:
    """Discover, normalize, filter and order all launchable apps."""
    apps: List[App] = []

    for path in iter_desktop_files([*search_dirs, *extra_dirs]):
        entry = read_desktop_entry(path)
        if entry is None:
            continue
        app = app_from_desktop_entry(entry)
        if app is None:
            continue
        # Exclude by display name (same key as favorites)
        if app.name in exclude_names:
            continue
        apps.append(app)

    for custom in custom_apps:
        apps.append(app_from_custom(custom))

    log.debug("Catalog built: %d apps (%d custom)", len(apps), len(custom_apps))
    return sort_apps(apps, favorite_names)


def discover_apps(config: Config) -> List[App]:
    return build(
        application_dirs(),
        extra_dirs=config.apps.extra_dirs,
        exclude_names=set(config.apps.exclude),
        favorite_names=set(config.apps.favorites),
        custom_apps=config.apps.custom,
    )
