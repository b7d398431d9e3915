#===============================================================================
#  Yeet | normalizer.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Converts desktop entries and custom config entries into App records and
#  picks their launch strategy. Discovered entries always run as a direct
#  argv; only custom (user-authored) entries go through a shell.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from typing import Optional

from .constants import FIELD_CODES
from .desktop_entry import DesktopEntry, split_exec
from .models import App, CustomApp, Direct, ShellLine

log = logging.getLogger(__name__)


def clean_exec(exec_line: str) -> str:
    """Strip field codes from an Exec value for display.

    ``%%`` collapses to ``%``, unknown ``%x`` sequences stay as they are and a
    trailing lone ``%`` is dropped. Not used to build argv.
    """
    out = []
    chars = iter(exec_line)
    for c in chars:
        if c != "%":
            out.append(c)
            continue
        nxt = next(chars, None)
        if nxt is None:
            break
        if nxt == "%":
            out.append("%")
        elif nxt not in FIELD_CODES:
            out.append("%" + nxt)
    return "".join(out).strip()


def app_from_desktop_entry(entry: DesktopEntry) -> Optional[App]:
    """Build an App from a parsed desktop entry, or None if it must not be listed."""
    if entry.no_display or entry.hidden:
        return None
    if not entry.name or not entry.exec:
        log.debug("Rejecting %s: missing Name or Exec", entry.path)
        return None

    try:
        argv = split_exec(entry.exec)
    except ValueError as e:
        log.debug("Rejecting %s: bad Exec %r (%s)", entry.path, entry.exec, e)
        return None
    if not argv:
        log.debug("Rejecting %s: Exec has no command", entry.path)
        return None

    return App(
        name=entry.name,
        exec=clean_exec(entry.exec),
        launch_strategy=Direct(tuple(argv)),
        icon=entry.icon,
        description=entry.description,
        keywords=entry.keywords,
        runs_in_terminal=entry.terminal,
    )


def app_from_custom(custom: CustomApp) -> App:
    return App(
        name=custom.name,
        exec=custom.exec,
        launch_strategy=ShellLine(custom.exec),
        icon=custom.icon,
        keywords=tuple(custom.keywords),
    )
