#===============================================================================
#  Yeet  |  Application Launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  A keyboard-driven launcher for installed desktop applications. It indexes
#  the freedesktop .desktop files of the system and the user, lets you search
#  and pick one, launches it detached, and remembers launches so recently
#  used apps come first.
#  Supports:
#    - .desktop discovery in XDG and flatpak application folders
#    - Extra folders, exclusions, favorites and custom shell commands
#      from ~/.config/yeet/config.toml
#    - Terminal apps wrapped in the configured terminal
#    - Crash-safe launch history in ~/.local/share/yeet/history.txt
#
#  Usage
#  -----
#    yeet                   -> open the picker window
#    yeet --list            -> print the catalog
#    yeet --launch NAME     -> launch an app by its display name
#    yeet --history         -> print launch history, newest first
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses PySide6, which is licensed separately by its authors.
#  Ensure compliance with its license terms when distributing this software.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from yeet.config import load_config
from yeet.constants import APP_TITLE
from yeet.errors import LaunchError
from yeet.fs_discovery import discover_apps
from yeet.history import HistoryLedger
from yeet.launcher import launch_app
from yeet.paths import log_path

log = logging.getLogger("yeet")


def setup_logging(verbose: bool) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(console)

    log_file = log_path()
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        log.warning("File logging disabled (%s): %s", log_file, e)
        return
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    root.addHandler(file_handler)


def format_timestamp(ts: int) -> str:
    try:
        return f"{datetime.fromtimestamp(ts):%Y-%m-%d %H:%M:%S}"
    except (OverflowError, OSError, ValueError):
        return str(ts)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="yeet", description=f"{APP_TITLE} application launcher")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--list", action="store_true", help="print the app catalog and exit")
    mode.add_argument("--launch", metavar="NAME", help="launch the app with this display name")
    mode.add_argument("--history", action="store_true", help="print launch history, newest first")
    p.add_argument("--config", type=Path, help="use this config file instead of the default")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return p


def run_gui(config, apps, history) -> int:
    from PySide6.QtWidgets import QApplication

    from yeet.main_window import MainWindow

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    w = MainWindow(config, apps, history)
    w.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    config = load_config(args.config)
    history = HistoryLedger(max_lines=config.history.max_lines)

    if args.history:
        for name, ts in sorted(history.load().items(), key=lambda kv: kv[1], reverse=True):
            print(f"{format_timestamp(ts)}\t{name}")
        return 0

    apps = discover_apps(config)

    if args.list:
        for app in apps:
            print(f"{app.name}\t{app.exec}")
        return 0

    if args.launch is not None:
        app = next((a for a in apps if a.name == args.launch), None)
        if app is None:
            print(f"No application named {args.launch!r}", file=sys.stderr)
            return 1
        try:
            launch_app(app, config.general.terminal, history)
        except LaunchError as e:
            print(e, file=sys.stderr)
            return 1
        return 0

    return run_gui(config, apps, history)


if __name__ == "__main__":
    sys.exit(main())
