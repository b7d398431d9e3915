#===============================================================================
#  Yeet | paths.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Per-user locations for config, history and logs, resolved through Qt's
#  QStandardPaths (XDG on Linux).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QStandardPaths

from .constants import APP_NAME, CONFIG_FILE_NAME, HISTORY_FILE_NAME, LOG_DIR_NAME, LOG_FILE_NAME


def _writable(location) -> Optional[Path]:
    found = QStandardPaths.writableLocation(location)
    return Path(found) if found else None


def _home_fallback(*parts: str) -> Path:
    try:
        return Path.home().joinpath(*parts)
    except RuntimeError:
        return Path(tempfile.gettempdir())


def data_dir() -> Path:
    base = _writable(QStandardPaths.StandardLocation.GenericDataLocation)
    return (base or _home_fallback(".local", "share")) / APP_NAME


def config_dir() -> Path:
    base = _writable(QStandardPaths.StandardLocation.GenericConfigLocation)
    return (base or _home_fallback(".config")) / APP_NAME


def config_path() -> Path:
    return config_dir() / CONFIG_FILE_NAME


def history_path() -> Path:
    return data_dir() / HISTORY_FILE_NAME


def log_path() -> Path:
    return data_dir() / LOG_DIR_NAME / LOG_FILE_NAME
