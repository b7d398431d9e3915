#===============================================================================
#  Yeet | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Launches apps with the strategy chosen when the catalog was built, detached
#  from the launcher, and records successful launches in the history ledger.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import subprocess
from typing import Optional

from .constants import DEFAULT_TERMINAL
from .errors import LaunchError
from .history import HistoryLedger
from .models import App

log = logging.getLogger(__name__)


def launch_app(
    app: App,
    terminal: Optional[str] = None,
    history: Optional[HistoryLedger] = None,
) -> subprocess.Popen:
    """Start `app` and return the child process without waiting for it.

    Terminal apps are wrapped as ``<terminal> -e <command>``. Raises
    InvalidInput for an empty argv and LaunchError if the spawn fails; in
    both cases nothing is recorded.
    """
    wrapper = None
    if app.runs_in_terminal:
        wrapper = terminal or DEFAULT_TERMINAL

    argv = app.launch_strategy.spawn_argv(wrapper)

    log.info("Launching %r: %s", app.name, argv)
    try:
        proc = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise LaunchError(f"Failed to launch {app.name}: {e}", app_name=app.name) from e

    if history is not None:
        try:
            history.record(app.name)
        except OSError as e:
            log.warning("Launch of %r not recorded in history: %s", app.name, e)

    return proc
