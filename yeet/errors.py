#===============================================================================
#  Yeet | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Exception types raised by the launcher core.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional


class YeetError(Exception):
    """Base class for launcher errors."""


class ConfigError(YeetError):
    """Configuration file could not be parsed or has values of the wrong type."""


class LaunchError(YeetError):
    """An application could not be started."""

    def __init__(self, message: str, app_name: Optional[str] = None):
        super().__init__(message)
        self.app_name = app_name


class InvalidInput(LaunchError, ValueError):
    """Launch request that can never succeed (e.g. an empty argv)."""
