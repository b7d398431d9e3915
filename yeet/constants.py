#===============================================================================
#  Yeet | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Central place for file/folder naming conventions and launcher defaults.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from pathlib import Path

APP_NAME = "yeet"
APP_TITLE = "Yeet"
CONFIG_FILE_NAME = "config.toml"
HISTORY_FILE_NAME = "history.txt"
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "yeet.log"

# --- Desktop entries ---
DESKTOP_ENTRY_GROUP = "Desktop Entry"
DESKTOP_FILE_SUFFIX = ".desktop"
FALLBACK_LOCALE = "en"

# Exec field codes of the freedesktop Desktop Entry standard; dropped, never expanded.
FIELD_CODES = frozenset("fFuUdDnNickvm")

FLATPAK_USER_EXPORTS = Path("flatpak") / "exports" / "share" / "applications"
FLATPAK_SYSTEM_EXPORTS = Path("/var/lib/flatpak/exports/share/applications")

# --- Launching ---
DEFAULT_TERMINAL = "alacritty"
SHELL = "sh"

# --- History ledger ---
MAX_HISTORY_LINES = 200
# File size that triggers compaction is MAX lines * this many bytes.
HISTORY_BYTES_PER_LINE = 100
HISTORY_FILE_MODE = 0o600

# --- Picker window ---
DEFAULT_MAX_RESULTS = 8
DEFAULT_WINDOW_WIDTH = 500
